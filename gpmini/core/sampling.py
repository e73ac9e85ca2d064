# gpmini/core/sampling.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Sampling routines for Gaussian vectors and GP sample paths.

This module provides:
- Draws from N(mean, covariance) through a Cholesky or eigen factor.
- Unconditional sampling of GP paths on a grid `xt`.
- Conditioning-by-kriging of unconditional paths given observations.

Sample batches have shape (count, m): one row per path, aligned
index-for-index with the prediction points.
"""
import operator

import gpmini.num as gnp
from gpmini.config import get_logger
from .kriging import prior
from .utils import NotPositiveSemidefiniteError, as_coordinates

_logger = get_logger()


def sample(mean, covariance, count, method: str = "eigh", tol=None):
    """Draw ``count`` independent vectors from N(mean, covariance).

    Parameters
    ----------
    mean : array_like, shape (m,)
        Mean vector.
    covariance : array_like, shape (m, m)
        Symmetric positive semi-definite covariance matrix.
    count : int
        Number of draws.
    method : {'eigh', 'chol'}, optional (default: 'eigh')
        Factorization used to draw samples.
    tol : float, optional
        Only used with 'eigh'. Eigenvalues in [-tol, 0) are considered
        rounding noise and set to zero; smaller eigenvalues are an error.
        The default is ``sqrt(eps) * max|eigenvalue|``, which absorbs the
        cancellation error of a posterior covariance K** - V^T V.

    Returns
    -------
    gnp.array, shape (count, m)

    Raises
    ------
    NotPositiveSemidefiniteError
        If the covariance is not positive semi-definite (up to ``tol``), or
        if the Cholesky factorization fails with method 'chol'.

    Notes
    -----
    - 'chol': K = C Cᵀ, draw as mean + C @ N(0, I).
    - 'eigh': K = U diag(s) Uᵀ, draw as mean + (U sqrt(diag(s))) @ N(0, I).
    """
    mean_ = as_coordinates(mean, "mean")
    m = mean_.shape[0]
    K = _check_covariance(covariance, m)
    count = operator.index(count)
    if count < 0:
        raise ValueError("count must be a non-negative integer")

    if m == 0:
        return gnp.zeros((count, 0))

    C = covariance_factor(K, method=method, tol=tol)
    zsim = gnp.matmul(C, gnp.randn(m, count))
    return (mean_.reshape(-1, 1) + zsim).T


def covariance_factor(K, method: str = "eigh", tol=None):
    """Return C such that K = C Cᵀ (up to rounding noise).

    Parameters
    ----------
    K : gnp.array, shape (m, m)
        Symmetric covariance matrix.
    method : {'eigh', 'chol'}
    tol : float, optional
        See `sample`.

    Returns
    -------
    C : gnp.array, shape (m, m)
    """
    if method == "chol":
        try:
            C = gnp.cholesky(K)
        except gnp.LinAlgError as exc:
            msg = (
                "Cholesky factorization of the covariance failed. "
                "Consider using method='eigh'."
            )
            _logger.debug(msg)
            raise NotPositiveSemidefiniteError(msg) from exc
        if gnp.isnan(C).any():
            msg = "Cholesky factorization failed (NaNs). Consider using method='eigh'."
            _logger.debug(msg)
            raise NotPositiveSemidefiniteError(msg)
        return C

    if method == "eigh":
        s, U = gnp.eigh(gnp.symmetrize(K))
        if tol is None:
            tol = gnp.sqrt(gnp.eps) * gnp.max(gnp.abs(s))
        elif tol < 0.0:
            raise ValueError("tol must be non-negative")
        smin = gnp.min(s)
        if smin < -tol:
            msg = (
                f"Covariance matrix is not positive semi-definite: smallest "
                f"eigenvalue {smin:.3e} is below -tol = {-tol:.3e}."
            )
            _logger.debug(msg)
            raise NotPositiveSemidefiniteError(msg)
        s = gnp.clip(s, 0.0, None)
        return U * gnp.sqrt(s)

    raise ValueError("method must be 'chol' or 'eigh'")


def sample_paths(kernel, xt, count, method: str = "eigh", tol=None):
    """Generates ``count`` sample paths on ``xt`` from the zero-mean GP GP(0, k).

    Parameters
    ----------
    kernel : Kernel or str
    xt : array_like, shape (m,)
        Points where the sample paths are generated.
    count : int
        Number of sample paths.
    method, tol
        See `sample`.

    Returns
    -------
    gnp.array, shape (count, m)
    """
    zt_mean, zt_covariance = prior(kernel, xt)
    return sample(zt_mean, zt_covariance, count, method=method, tol=tol)


def conditional_sample_paths(
    ztsim, xi_ind, zi, xt_ind, lambda_t, noise_variance=0.0
):
    """Generates conditional sample paths from unconditional sample paths ``ztsim``,
    using the matrix of kriging weights ``lambda_t`` (see `kriging_weights`).

    Conditioning is done with respect to ``n`` observations, located at
    indices ``xi_ind`` in ``ztsim``, with observed values ``zi``. ``xt_ind``
    specifies the indices in ``ztsim`` of the conditional simulation points.

    Parameters
    ----------
    ztsim : array_like, shape (count, N)
        Unconditional sample paths.
    xi_ind : array_like of int, shape (n,)
        Indices of observed points in ztsim.
    zi : array_like, shape (n,)
        Observed values.
    xt_ind : array_like of int, shape (m,)
        Indices of prediction points in ztsim.
    lambda_t : array_like, shape (n, m)
        Kriging weights.
    noise_variance : float, optional
        Variance of the noise added to the simulated observations. Must
        match the regularization (noise variance plus jitter) used for
        ``lambda_t``.

    Returns
    -------
    ztsimc : gnp.array, shape (count, m)
        Conditional sample paths at the prediction points.

    Notes
    -----
    Implements "conditioning by kriging"; see Chiles & Delfiner (1999).
    """
    ztsim_ = gnp.asarray(ztsim)
    zi_ = as_coordinates(zi, "zi")
    xi_ind = gnp.asarray(xi_ind, dtype=int).reshape(-1)
    xt_ind = gnp.asarray(xt_ind, dtype=int).reshape(-1)
    lambda_t = gnp.asarray(lambda_t)

    if lambda_t.shape != (xi_ind.shape[0], xt_ind.shape[0]):
        raise ValueError("lambda_t must have shape (len(xi_ind), len(xt_ind))")

    zisim = ztsim_[:, xi_ind]
    if noise_variance > 0.0:
        zisim = zisim + gnp.sqrt(noise_variance) * gnp.randn(*zisim.shape)

    # Innovation at observed indices
    delta = zi_.reshape(1, -1) - zisim  # (count, n)

    return ztsim_[:, xt_ind] + gnp.matmul(delta, lambda_t)


# --------------------------------------------------------------------------
# Internal helpers
# --------------------------------------------------------------------------
def _check_covariance(covariance, m):
    K = gnp.asarray(covariance, dtype=gnp.float64)
    if K.ndim != 2 or K.shape[0] != K.shape[1]:
        raise ValueError("covariance must be a square 2D matrix")
    if K.shape[0] != m:
        raise ValueError(
            f"covariance has shape {K.shape}, incompatible with a mean of length {m}"
        )
    if m > 0:
        scale = gnp.max(gnp.abs(K))
        if not gnp.allclose(K, K.T, rtol=1e-8, atol=1e-8 * scale):
            raise ValueError("covariance must be symmetric")
    return K
