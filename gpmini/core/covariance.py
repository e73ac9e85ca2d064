# gpmini/core/covariance.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance matrices built from a kernel and coordinate sequences.

Functions
---------
covariance_matrix(kernel, x, y=None, pairwise=False)
    Dense matrix K[i, j] = k(x[i], y[j]), or the vector k(x[i], y[i]).

covariance_matrices(kernels, x, y=None, n_jobs=None)
    Same computation for several kernels, optionally on a thread pool.
"""
from concurrent.futures import ThreadPoolExecutor

from gpmini.config import get_config, get_logger
from .utils import as_coordinates, resolve_kernel

_logger = get_logger()


def covariance_matrix(kernel, x, y=None, pairwise=False):
    """Covariance between two coordinate sequences.

    Parameters
    ----------
    kernel : Kernel or str
        Covariance function (or registered kernel name).
    x : array_like, shape (nx,)
        First coordinate sequence (rows).
    y : array_like, shape (ny,), optional
        Second coordinate sequence (columns). ``None`` means ``y = x``.
    pairwise : bool
        If True, return the vector ``k(x[i], y[i])`` (requires nx == ny);
        otherwise the full (nx, ny) matrix.

    Returns
    -------
    gnp.array
        (nx, ny) matrix or (nx,) vector if pairwise.
    """
    kernel = resolve_kernel(kernel)
    x_ = as_coordinates(x, "x")
    y_ = x_ if y is None else as_coordinates(y, "y")

    if pairwise:
        if x_.shape[0] != y_.shape[0]:
            raise ValueError("pairwise covariance requires x and y of the same length")
        K = kernel.function(x_, y_, kernel.param)
    else:
        K = kernel.function(x_[:, None], y_[None, :], kernel.param)
    return K


def covariance_matrices(kernels, x, y=None, n_jobs=None):
    """Evaluate the covariance matrices of several kernels.

    Each kernel is an independent task with no shared state, so the
    computations may run concurrently.

    Parameters
    ----------
    kernels : iterable of Kernel or str
    x, y : array_like
        Coordinate sequences, see `covariance_matrix`.
    n_jobs : int, optional
        Number of worker threads; ``None`` uses ``config.n_jobs``, 1 runs
        serially.

    Returns
    -------
    dict
        Kernel name -> covariance matrix, in the order of ``kernels``.
    """
    kernels = [resolve_kernel(k) for k in kernels]
    names = [k.name for k in kernels]
    if len(set(names)) != len(names):
        raise ValueError(f"kernel names must be distinct, got {names}")

    if n_jobs is None:
        n_jobs = get_config().n_jobs
    if int(n_jobs) < 1:
        raise ValueError("n_jobs must be a positive integer")

    def task(k):
        return covariance_matrix(k, x, y)

    if n_jobs == 1 or len(kernels) <= 1:
        matrices = [task(k) for k in kernels]
    else:
        _logger.debug(
            "Evaluating %d covariance matrices on %d threads", len(kernels), n_jobs
        )
        with ThreadPoolExecutor(max_workers=int(n_jobs)) as executor:
            matrices = list(executor.map(task, kernels))

    return dict(zip(names, matrices))
