# gpmini/core/kriging.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
GP prior and posterior distributions at prediction points.

With training data (xi, zi), prediction points xt, a kernel k, a noise
variance s2 and a jitter eps, the zero-mean GP posterior is

    mean = K(xt, xi) (K(xi, xi) + (s2 + eps) I)^{-1} zi
    cov  = K(xt, xt) - K(xt, xi) (K(xi, xi) + (s2 + eps) I)^{-1} K(xi, xt)

All solves go through a Cholesky factor of the regularized training
covariance. Without training data the posterior is the prior.

Functions
---------
prior(kernel, xt, return_type=1)
    Prior mean (zero) and covariance at xt.

posterior(kernel, xi, zi, xt, noise_variance=0.0, jitter=0.0, return_type=1)
    Posterior mean and covariance at xt.

kriging_weights(kernel, xi, xt, noise_variance=0.0, jitter=0.0)
    Matrix of weights (n, m) such that mean = weights.T @ zi.

regularized_cholesky(K, regularization)
    Lower Cholesky factor of K + regularization * I, with conditioning checks.
"""
import gpmini.num as gnp
from gpmini.config import get_config, get_logger
from .covariance import covariance_matrix
from .utils import (
    SingularCovarianceError,
    ensure_shapes_and_type,
    resolve_kernel,
    validate_regularization,
)

_logger = get_logger()


# --------------------------------------------------------------------------
# Public entry points
# --------------------------------------------------------------------------
def prior(kernel, xt, return_type=1):
    """Prior distribution of the zero-mean GP at xt.

    Parameters
    ----------
    kernel : Kernel or str
    xt : array_like, shape (m,)
        Prediction points.
    return_type : int, optional
        -1: no covariance, 0: variances, 1: full covariance (default).

    Returns
    -------
    zt_prior_mean : gnp.array, shape (m,)
        Zero vector.
    zt_prior_covariance : gnp.array or None
        (m, m) matrix, (m,) vector or None depending on return_type.
    """
    kernel = resolve_kernel(kernel)
    _, _, xt_ = ensure_shapes_and_type(xt=xt)
    _check_return_type(return_type)

    zt_prior_mean = gnp.zeros((xt_.shape[0],))
    if return_type == -1:
        return zt_prior_mean, None
    pairwise = return_type == 0
    return zt_prior_mean, covariance_matrix(kernel, xt_, xt_, pairwise=pairwise)


def posterior(kernel, xi, zi, xt, noise_variance=0.0, jitter=0.0, return_type=1):
    """Posterior distribution of the zero-mean GP at xt given (xi, zi).

    Parameters
    ----------
    kernel : Kernel or str
        Covariance function.
    xi : array_like, shape (n,)
        Observation points. May be empty, in which case the prior is returned.
    zi : array_like, shape (n,)
        Observed values.
    xt : array_like, shape (m,)
        Prediction points.
    noise_variance : float, optional
        Variance of the observation noise (0 for noiseless data).
    jitter : float, optional
        Extra diagonal term added to the training covariance to make it
        numerically invertible. Nothing is added by default.
    return_type : int, optional
        -1: no covariance, 0: posterior variances, 1: full covariance (default).

    Returns
    -------
    zt_posterior_mean : gnp.array, shape (m,)
    zt_posterior_covariance : gnp.array or None
        (m, m) matrix, (m,) vector or None depending on return_type.

    Raises
    ------
    SingularCovarianceError
        If the regularized training covariance cannot be factorized or is
        too ill-conditioned. Increasing ``jitter`` is the usual remedy.
    """
    kernel = resolve_kernel(kernel)
    xi_, zi_, xt_ = ensure_shapes_and_type(xi=xi, zi=zi, xt=xt)
    noise_variance, jitter = validate_regularization(noise_variance, jitter)
    _check_return_type(return_type)

    if xi_.shape[0] == 0:
        return prior(kernel, xt_, return_type)

    _logger.debug(
        "Posterior with kernel %s: n=%d, m=%d, noise_variance=%g, jitter=%g",
        kernel.name,
        xi_.shape[0],
        xt_.shape[0],
        noise_variance,
        jitter,
    )
    Kii = covariance_matrix(kernel, xi_, xi_)
    Kit = covariance_matrix(kernel, xi_, xt_)

    C = regularized_cholesky(Kii, noise_variance + jitter)
    alpha = gnp.solve_triangular(
        C.T, gnp.solve_triangular(C, zi_, lower=True), lower=False
    )
    zt_posterior_mean = gnp.matmul(Kit.T, alpha)

    if return_type == -1:
        return zt_posterior_mean, None

    # V = C^{-1} K(xi, xt), so that K(xt, xi) Kreg^{-1} K(xi, xt) = V^T V
    V = gnp.solve_triangular(C, Kit, lower=True)
    if return_type == 0:
        zt_prior_variance = covariance_matrix(kernel, xt_, xt_, pairwise=True)
        return zt_posterior_mean, zt_prior_variance - gnp.sum(V * V, axis=0)

    zt_prior_covariance = covariance_matrix(kernel, xt_, xt_)
    return zt_posterior_mean, zt_prior_covariance - gnp.matmul(V.T, V)


def kriging_weights(kernel, xi, xt, noise_variance=0.0, jitter=0.0):
    """Kriging weights lambda_t = (K(xi, xi) + (s2 + eps) I)^{-1} K(xi, xt).

    Parameters
    ----------
    kernel : Kernel or str
    xi : array_like, shape (n,)
    xt : array_like, shape (m,)
    noise_variance, jitter : float, optional
        See `posterior`.

    Returns
    -------
    lambda_t : gnp.array, shape (n, m)
    """
    kernel = resolve_kernel(kernel)
    xi_, _, xt_ = ensure_shapes_and_type(xi=xi, xt=xt)
    noise_variance, jitter = validate_regularization(noise_variance, jitter)
    if xi_.shape[0] == 0:
        return gnp.zeros((0, xt_.shape[0]))

    Kii = covariance_matrix(kernel, xi_, xi_)
    Kit = covariance_matrix(kernel, xi_, xt_)
    C = regularized_cholesky(Kii, noise_variance + jitter)
    return gnp.solve_triangular(
        C.T, gnp.solve_triangular(C, Kit, lower=True), lower=False
    )


def regularized_cholesky(K, regularization):
    """Lower Cholesky factor of K + regularization * I.

    Parameters
    ----------
    K : gnp.array, shape (n, n)
        Training covariance.
    regularization : float
        Non-negative diagonal term (noise variance plus jitter).

    Returns
    -------
    C : gnp.array, shape (n, n)
        Lower-triangular factor, K + regularization * I = C C^T.

    Raises
    ------
    SingularCovarianceError
        If the factorization fails, or if the condition number of the
        regularized matrix exceeds ``config.max_condition_number``.
    """
    n = K.shape[0]
    Kreg = K + regularization * gnp.eye(n)
    max_cond = get_config().max_condition_number

    if not gnp.all(gnp.isfinite(Kreg)):
        _raise_singular("contains non-finite entries", regularization)

    condition_number = gnp.cond(Kreg)
    if not gnp.isfinite(condition_number) or condition_number > max_cond:
        _raise_singular(
            f"is ill-conditioned (condition number {condition_number:.3e} > {max_cond:.1e})",
            regularization,
        )

    try:
        C = gnp.cholesky(Kreg)
    except gnp.LinAlgError as exc:
        _raise_singular(f"is not positive definite ({exc})", regularization, exc)
    return C


# --------------------------------------------------------------------------
# Internal helpers
# --------------------------------------------------------------------------
def _check_return_type(return_type):
    if return_type not in (-1, 0, 1):
        raise ValueError("return_type must be in {-1, 0, 1}")


def _raise_singular(reason, regularization, cause=None):
    msg = (
        f"Regularized training covariance {reason}; diagonal regularization "
        f"was {regularization:g}. Consider increasing the jitter."
    )
    _logger.debug(msg)
    raise SingularCovarianceError(msg) from cause
