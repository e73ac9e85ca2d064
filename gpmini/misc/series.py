## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
"""
Long-format ``(x, y, series_id)`` records for plotting collaborators.
"""
import numpy as np


def to_series(x, paths, labels=None):
    """Iterate over ``(x, y, series_id)`` triples, path after path.

    Parameters
    ----------
    x : array_like, shape (m,)
        Abscissas shared by all paths.
    paths : array_like, shape (count, m) or (m,)
        Sample paths (one per row), or a single vector.
    labels : sequence, optional
        One distinct identifier per path; defaults to 0, 1, ...

    Returns
    -------
    iterator
        ``(float, float, series_id)`` triples, in path order then in x
        order. Inputs are checked before the iterator is returned.
    """
    x = np.asarray(x, dtype=float).reshape(-1)
    paths = np.asarray(paths, dtype=float)
    if paths.ndim == 1:
        paths = paths.reshape(1, -1)
    if paths.ndim != 2 or paths.shape[1] != x.shape[0]:
        raise ValueError(
            f"paths must have shape (count, {x.shape[0]}), got {paths.shape}"
        )
    if labels is None:
        labels = range(paths.shape[0])
    labels = list(labels)
    if len(labels) != paths.shape[0]:
        raise ValueError("labels must have one entry per path")
    if len(set(labels)) != len(labels):
        raise ValueError("labels must be distinct")

    return _iter_series(x, paths, labels)


def _iter_series(x, paths, labels):
    for label, path in zip(labels, paths):
        for xv, yv in zip(x, path):
            yield float(xv), float(yv), label


def from_series(triples):
    """Group ``(x, y, series_id)`` triples back into arrays.

    Returns
    -------
    dict
        series_id -> (x array, y array), in order of first appearance.
    """
    grouped = {}
    for xv, yv, series_id in triples:
        xs, ys = grouped.setdefault(series_id, ([], []))
        xs.append(xv)
        ys.append(yv)
    return {k: (np.asarray(xs), np.asarray(ys)) for k, (xs, ys) in grouped.items()}
