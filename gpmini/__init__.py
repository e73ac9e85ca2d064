# gpmini/__init__.py

from . import config
from . import num
from . import kernel
from . import core
from . import misc
from .core import Model
from .config import __version__

__all__ = ["num", "kernel", "core", "misc", "Model", "__version__"]
