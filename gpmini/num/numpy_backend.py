# gpmini/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for GPmini.

This module defines the NumPy implementation of the gpmini.num API:
array constructors in the configured dtype, the linear algebra used by
the posterior engine and the sampler, and the package random generator.
"""

from typing import Any
from gpmini.config import get_config

ArrayLike = Any

_config = get_config()


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy

# dtype is read from the config once, at import
_np_dtype = numpy.dtype(_config.dtype).type
_config.dtype_resolved = _np_dtype

from numpy import (
    isscalar,
    isnan,
    isfinite,
    allclose,
    concatenate,
    diag,
    arange,
    abs,
    sqrt,
    exp,
    sin,
    cos,
    sum,
    min,
    max,
    maximum,
    clip,
    matmul,
    all,
)
from numpy.linalg import LinAlgError, cond, cholesky, eigh
from numpy import pi
from numpy import finfo, float64
from scipy.linalg import solve_triangular

# ..................................................

eps = finfo(_np_dtype).eps


def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    out = numpy.asarray(x)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)


def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )


def isarray(x):
    return isinstance(x, numpy.ndarray)


def symmetrize(A):
    """Symmetric part (A + A^T) / 2, removes rounding asymmetries."""
    return 0.5 * (A + A.T)


# ..................................................

# One global generator, reseeded with set_seed
_np_rng = numpy.random.default_rng(seed=_config.seed)


def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed (also recorded in the config)."""
    global _np_rng
    _config.seed = seed
    _np_rng = numpy.random.default_rng(seed=seed)


def rand(*shape: int) -> ArrayLike:
    return _np_rng.random(shape, dtype=_np_dtype)


def randn(*shape: int) -> ArrayLike:
    return _np_rng.normal(loc=0, scale=1, size=shape).astype(_np_dtype, copy=False)
