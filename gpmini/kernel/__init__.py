# gpmini/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process kernels for scalar inputs.

This subpackage provides six covariance functions, their hyperparameter
structures, and a registry mapping stable string identifiers to kernels.

Modules
-------
stationary
    Squared-exponential, rational quadratic, periodic, locally periodic
    and cosine kernels.
dotproduct
    Linear kernel.
params
    Frozen hyperparameter dataclasses with documented defaults.
base
    The Kernel wrapper class.

Public API
-----------
- Registry:
    KERNELS, kernel_names, get_kernel
- Kernel functions:
    squared_exp_kernel, rational_quadratic_kernel, periodic_kernel,
    locally_periodic_kernel, linear_kernel, cos_kernel
"""

from .base import Kernel
from .params import (
    KernelParams,
    SquaredExpParams,
    RationalQuadraticParams,
    PeriodicParams,
    LocallyPeriodicParams,
    LinearParams,
    CosineParams,
)
from .stationary import (
    squared_exp_kernel,
    rational_quadratic_kernel,
    periodic_kernel,
    locally_periodic_kernel,
    cos_kernel,
)
from .dotproduct import linear_kernel

# name -> (function, parameter class, stationary)
KERNELS = {
    "squared_exp": (squared_exp_kernel, SquaredExpParams, True),
    "rational_quadratic": (rational_quadratic_kernel, RationalQuadraticParams, True),
    "periodic": (periodic_kernel, PeriodicParams, True),
    "locally_periodic": (locally_periodic_kernel, LocallyPeriodicParams, True),
    "linear": (linear_kernel, LinearParams, False),
    "cos": (cos_kernel, CosineParams, True),
}


def kernel_names():
    """Return the registered kernel identifiers, in registry order."""
    return list(KERNELS)


def get_kernel(name, **overrides):
    """Build a registered kernel.

    Parameters
    ----------
    name : str
        One of ``kernel_names()``.
    **overrides
        Hyperparameters replacing the defaults of the kernel.

    Returns
    -------
    Kernel

    Raises
    ------
    ValueError
        If ``name`` is not registered, or a hyperparameter is invalid.
    TypeError
        If a hyperparameter does not belong to this kernel.
    """
    try:
        function, param_class, stationary = KERNELS[name]
    except (KeyError, TypeError):
        raise ValueError(
            f"Unknown kernel {name!r}. Supported kernels are {kernel_names()}."
        ) from None
    param = param_class().replace(**overrides)
    return Kernel(name, function, param, stationary)


__all__ = [
    "Kernel",
    "KERNELS",
    "kernel_names",
    "get_kernel",
    # Hyperparameters
    "KernelParams",
    "SquaredExpParams",
    "RationalQuadraticParams",
    "PeriodicParams",
    "LocallyPeriodicParams",
    "LinearParams",
    "CosineParams",
    # Kernel functions
    "squared_exp_kernel",
    "rational_quadratic_kernel",
    "periodic_kernel",
    "locally_periodic_kernel",
    "linear_kernel",
    "cos_kernel",
]
