# gpmini/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process model class.
"""
import gpmini.num as gnp

from .kriging import (
    prior as _prior,
    posterior as _posterior,
    kriging_weights as _kriging_weights,
)
from .sampling import (
    sample_paths as _sample_paths,
    conditional_sample_paths as _conditional_sample_paths,
)
from .utils import ensure_shapes_and_type, resolve_kernel, validate_regularization


class Model:
    """Zero-mean Gaussian Process (GP) model for scalar inputs.

    Attributes
    ----------
    kernel : gpmini.kernel.Kernel
        Covariance function with its hyperparameters.
    noise_variance : float
        Variance of the observation noise (0 for noiseless observations).
    jitter : float
        Extra diagonal term added to the training covariance to make it
        numerically invertible.

    Public API (methods)
    --------------------
    prior
        Prior mean/covariance at target points.
    predict
        Posterior mean/covariance at target points.
    kriging_weights
        Matrix of kriging weights.
    sample_paths
        Unconditional GP sample paths on xt.
    posterior_sample_paths
        Sample paths from the posterior distribution on xt.

    Examples
    --------
    >>> import gpmini as gm
    >>> model = gm.Model("squared_exp", noise_variance=0.01)
    >>> xi = [-4.1, -2.2, 0.0, 2.5, 4.1]
    >>> zi = [-2.0, 2.88, -2.96, 2.22, -3.5]
    >>> xt = gm.num.linspace(-5.0, 5.0, 50)
    >>> zt_mean, zt_cov = model.predict(xi, zi, xt)
    """

    def __init__(self, kernel, noise_variance=0.0, jitter=0.0):
        """
        Parameters
        ----------
        kernel : Kernel or str
            Covariance function, or the name of a registered kernel
            (default hyperparameters).
        noise_variance : float, optional
            Observation noise variance.
        jitter : float, optional
            Diagonal regularization of the training covariance.
        """
        self.kernel = resolve_kernel(kernel)
        self.noise_variance, self.jitter = validate_regularization(
            noise_variance, jitter
        )

    def __repr__(self):
        output = str("<gpmini.core.Model object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"GP Model:\n"
            f"  Kernel: {self.kernel.name}\n"
            f"  Kernel Parameters: {self.kernel.param.asdict()}\n"
            f"  Noise Variance: {self.noise_variance}\n"
            f"  Jitter: {self.jitter}"
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def prior(self, xt, return_type=1):
        """Prior mean (zero) and covariance at xt."""
        return _prior(self.kernel, xt, return_type)

    def predict(self, xi, zi, xt, return_type=1, zero_neg_variances=False):
        """Performs a prediction at target points xt given the data (xi, zi).

        Parameters
        ----------
        xi : array_like, shape (n,)
            Observation points. May be empty.
        zi : array_like, shape (n,)
            Observed values.
        xt : array_like, shape (m,)
            Target points.
        return_type : int, optional
            -1: no covariance, 0: variances, 1: full covariance (default).
        zero_neg_variances : bool, optional
            With return_type 0, replace negative variances (rounding
            errors) with zeros. Off by default.

        Returns
        -------
        zt_posterior_mean : gnp.array, shape (m,)
        zt_posterior_covariance : gnp.array or None
        """
        zt_mean, zt_cov = _posterior(
            self.kernel,
            xi,
            zi,
            xt,
            noise_variance=self.noise_variance,
            jitter=self.jitter,
            return_type=return_type,
        )
        if zero_neg_variances and return_type == 0:
            zt_cov = gnp.maximum(zt_cov, 0.0)
        return zt_mean, zt_cov

    def kriging_weights(self, xi, xt):
        """Kriging weights (n, m) at xt for observations at xi."""
        return _kriging_weights(
            self.kernel, xi, xt, noise_variance=self.noise_variance, jitter=self.jitter
        )

    def sample_paths(self, xt, nb_paths, method="eigh", tol=None):
        """Generates ``nb_paths`` sample paths on ``xt`` from the GP prior.

        Returns
        -------
        gnp.array, shape (nb_paths, m)
        """
        return _sample_paths(self.kernel, xt, nb_paths, method, tol)

    def posterior_sample_paths(self, xi, zi, xt, nb_paths, method="eigh", tol=None):
        """Generates ``nb_paths`` sample paths on ``xt`` from the GP posterior.

        Unconditional paths are drawn jointly on (xi, xt), then
        conditioned on the data by kriging. Observation noise (and
        jitter) is simulated at xi, so that the conditioned paths follow
        the posterior distribution returned by `predict`.

        Returns
        -------
        gnp.array, shape (nb_paths, m)
        """
        xi_, zi_, xt_ = ensure_shapes_and_type(xi=xi, zi=zi, xt=xt)
        ni, nt = xi_.shape[0], xt_.shape[0]
        if ni == 0:
            return self.sample_paths(xt_, nb_paths, method, tol)

        xixt = gnp.concatenate((xi_, xt_))
        zsim = _sample_paths(self.kernel, xixt, nb_paths, method, tol)
        lambda_t = self.kriging_weights(xi_, xt_)
        return _conditional_sample_paths(
            zsim,
            gnp.arange(ni),
            zi_,
            gnp.arange(ni, ni + nt),
            lambda_t,
            noise_variance=self.noise_variance + self.jitter,
        )
