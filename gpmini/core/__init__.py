# gpmini/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpmini package.

This subpackage contains the numerical routines for Gaussian Process
regression with scalar inputs: covariance matrices, prior and posterior
distributions, and sampling.

Public API
----------
Model : class
    GP model façade combining all core routines.
covariance_matrix, covariance_matrices : functions
    Covariance matrix builder.
prior, posterior, kriging_weights : functions
    Posterior engine.
sample, sample_paths, conditional_sample_paths : functions
    Multivariate sampler.
SingularCovarianceError, NotPositiveSemidefiniteError : exceptions
"""

from .covariance import covariance_matrix, covariance_matrices
from .kriging import prior, posterior, kriging_weights, regularized_cholesky
from .sampling import (
    sample,
    sample_paths,
    conditional_sample_paths,
    covariance_factor,
)
from .utils import SingularCovarianceError, NotPositiveSemidefiniteError
from .model import Model

__all__ = [
    "Model",
    "covariance_matrix",
    "covariance_matrices",
    "prior",
    "posterior",
    "kriging_weights",
    "regularized_cholesky",
    "sample",
    "sample_paths",
    "conditional_sample_paths",
    "covariance_factor",
    "SingularCovarianceError",
    "NotPositiveSemidefiniteError",
]
