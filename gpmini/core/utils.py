# gpmini/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpmini.core` modules.

This file hosts:
- Numerical error types raised by the posterior engine and the sampler
- Shape/type validation & conversion helpers for (xi, zi, xt)
- Validation of the regularization settings
"""
import gpmini.num as gnp
from gpmini.kernel import Kernel, get_kernel


class SingularCovarianceError(gnp.LinAlgError):
    """The regularized training covariance cannot be factorized reliably."""


class NotPositiveSemidefiniteError(gnp.LinAlgError):
    """A covariance matrix has eigenvalues below the accepted tolerance."""


def as_coordinates(x, name="x"):
    """Convert a coordinate sequence to a 1D float array.

    Parameters
    ----------
    x : array_like
        Sequence of scalars, a 1D array, or a single-column 2D array.
    name : str
        Name used in error messages.

    Returns
    -------
    gnp.array, shape (n,)
    """
    x_ = gnp.asarray(x, dtype=gnp.float64)
    if x_.ndim == 0:
        x_ = x_.reshape(1)
    elif x_.ndim == 2:
        if x_.shape[1] != 1:
            raise ValueError(f"{name} should only have one column if it's a 2D array")
        x_ = x_.reshape(-1)
    elif x_.ndim != 1:
        raise ValueError(f"{name} should be 1D or a 2D column array")
    return x_


def ensure_shapes_and_type(*, xi=None, zi=None, xt=None):
    """Validate and convert (xi, zi, xt) to 1D float arrays.

    Returns
    -------
    tuple
        (xi, zi, xt); entries given as None stay None.

    Notes
    -----
    - Column arrays (n, 1) are reshaped to (n,).
    - xi.shape[0] == zi.shape[0] is enforced when both are given.
    """
    if xi is not None:
        xi = as_coordinates(xi, "xi")
    if zi is not None:
        zi = as_coordinates(zi, "zi")
    if xt is not None:
        xt = as_coordinates(xt, "xt")
    if xi is not None and zi is not None and xi.shape[0] != zi.shape[0]:
        raise ValueError(
            f"xi and zi must have the same length, got {xi.shape[0]} and {zi.shape[0]}"
        )
    return xi, zi, xt


def validate_regularization(noise_variance, jitter):
    """Check that noise variance and jitter are finite non-negative scalars."""
    for name, value in (("noise_variance", noise_variance), ("jitter", jitter)):
        value = float(value)
        if not gnp.isfinite(value) or value < 0.0:
            raise ValueError(f"{name} must be a finite non-negative number, got {value}")
    return float(noise_variance), float(jitter)


def resolve_kernel(kernel):
    """Accept a Kernel or a registered kernel name."""
    if isinstance(kernel, Kernel):
        return kernel
    if isinstance(kernel, str):
        return get_kernel(kernel)
    raise TypeError(f"kernel must be a Kernel or a kernel name, got {type(kernel)!r}")
