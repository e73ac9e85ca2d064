# gpmini/kernel/dotproduct.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------


def linear_kernel(a, b, param):
    """Linear (dot-product) kernel.

    .. math::
        k(a, b) = c^2 + \\sigma^2 (a - o)(b - o)

    where :math:`c` is ``constant_variance_out``, :math:`\\sigma` is
    ``variance_out`` and :math:`o` is ``offset``. Gram matrices of this
    kernel have rank at most 2.

    Parameters
    ----------
    a, b : gnp.array or float
    param : LinearParams

    Returns
    -------
    gnp.array
        Kernel values.
    """
    return param.constant_variance_out**2 + param.variance_out**2 * (
        (a - param.offset) * (b - param.offset)
    )
