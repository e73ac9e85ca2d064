# gpmini/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel wrapper binding a covariance function to its hyperparameters.
"""
import gpmini.num as gnp


class Kernel:
    """Covariance function with fixed hyperparameters.

    Attributes
    ----------
    name : str
        Registry identifier of the kernel.
    function : callable
        Called as ``function(a, b, param)``, evaluated element-wise.
    param : KernelParams
        Frozen hyperparameter structure.
    stationary : bool
        True if the kernel depends on ``a - b`` only.

    Examples
    --------
    >>> import gpmini as gm
    >>> k = gm.kernel.get_kernel("squared_exp", length_scale=0.5)
    >>> k(0.0, 0.0)
    2.0
    """

    __slots__ = ("name", "function", "param", "stationary")

    def __init__(self, name, function, param, stationary=True):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "function", function)
        object.__setattr__(self, "param", param)
        object.__setattr__(self, "stationary", stationary)

    def __setattr__(self, key, value):
        raise AttributeError("Kernel objects are immutable, use with_params()")

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.param.asdict().items())
        return f"Kernel('{self.name}', {args})"

    def __eq__(self, other):
        if not isinstance(other, Kernel):
            return NotImplemented
        return (
            self.name == other.name
            and self.function is other.function
            and self.param == other.param
        )

    def __hash__(self):
        return hash((self.name, self.param))

    def evaluate(self, a, b):
        """Evaluate k(a, b) element-wise.

        Scalars in, scalar out; arrays are broadcast against each other.
        """
        value = self.function(a, b, self.param)
        if gnp.isscalar(value) or (gnp.isarray(value) and value.ndim == 0):
            return float(value)
        return value

    __call__ = evaluate

    def with_params(self, **overrides):
        """Return a new kernel with some hyperparameters replaced."""
        return Kernel(
            self.name, self.function, self.param.replace(**overrides), self.stationary
        )
