# gpmini/kernel/stationary.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Stationary kernels, functions of the lag :math:`h = a - b` only.

All functions are evaluated element-wise and broadcast over their
inputs, so that ``k(x[:, None], y[None, :], param)`` is a Gram matrix.
"""
import gpmini.num as gnp


def squared_exp_kernel(a, b, param):
    """Squared-exponential kernel.

    .. math::
        k(a, b) = \\sigma^2 \\exp\\left(-\\frac{1}{2}\\frac{(a-b)^2}{\\ell^2}\\right)

    Parameters
    ----------
    a, b : gnp.array or float
        Inputs, broadcast against each other.
    param : SquaredExpParams
        ``length_scale`` (:math:`\\ell`) and ``variance_out`` (:math:`\\sigma^2`).

    Returns
    -------
    gnp.array
        Kernel values.
    """
    h = (a - b) / param.length_scale
    return param.variance_out * gnp.exp(-0.5 * h**2)


def rational_quadratic_kernel(a, b, param):
    """Rational quadratic kernel.

    .. math::
        k(a, b) = \\sigma^2 \\left(1 + \\frac{(a-b)^2}{2\\alpha\\ell^2}\\right)^{-\\alpha}

    A scale mixture of squared-exponential kernels; tends to the
    squared-exponential kernel as :math:`\\alpha \\to \\infty`.
    """
    alpha = param.alpha_weighting
    h2 = (a - b) ** 2
    return param.variance_out * (1.0 + h2 / (2.0 * alpha * param.length_scale**2)) ** (
        -alpha
    )


def periodic_kernel(a, b, param):
    """Periodic (exp-sine-squared) kernel.

    .. math::
        k(a, b) = \\sigma^2 \\exp\\left(-\\frac{2\\sin^2(\\pi (a-b) / p)}{\\ell^2}\\right)

    Parameters
    ----------
    a, b : gnp.array or float
    param : PeriodicParams
        ``length_scale``, ``variance_out`` and ``period`` (:math:`p`).
    """
    s = gnp.sin(gnp.pi * (a - b) / param.period)
    return param.variance_out * gnp.exp(-2.0 * s**2 / param.length_scale**2)


def locally_periodic_kernel(a, b, param):
    """Locally periodic kernel: periodic kernel times a squared-exponential envelope.

    .. math::
        k(a, b) = \\sigma^2 \\exp\\left(-\\frac{2\\sin^2(\\pi (a-b) / p)}{\\ell^2}\\right)
                  \\exp\\left(-\\frac{1}{2}\\frac{(a-b)^2}{\\ell^2}\\right)
    """
    h = (a - b) / param.length_scale
    return periodic_kernel(a, b, param) * gnp.exp(-0.5 * h**2)


def cos_kernel(a, b, param):
    """Cosine kernel, no variance scaling.

    .. math::
        k(a, b) = \\cos\\left(\\frac{2\\pi (a-b)}{p}\\right)
    """
    return gnp.cos(2.0 * gnp.pi * (a - b) / param.period)
