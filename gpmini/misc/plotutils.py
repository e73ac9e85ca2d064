## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import sys
from itertools import groupby
from operator import itemgetter

import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive

from .series import to_series


class Figure:
    """Figures manager class.

    Thin wrapper around a matplotlib figure with one or several axes.
    The current axes (``self.ax``) receive all drawing commands; use
    `subplot` to switch panels.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.nrows = nrows
        self.ncols = ncols
        self.axes = []
        for i in range(nrows * ncols):
            self.axes.append(self.fig.add_subplot(nrows, ncols, i + 1))
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None, legend_fontsize=None, xlim=None):
        if grid:
            self.grid()
        if legend and legend_fontsize is not None:
            self.legend(fontsize=legend_fontsize)
        elif legend:
            self.legend()
        if xlim is not None:
            self.xlim(xlim)
        self.fig.tight_layout()
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(x, z, "rs", markerfacecolor="none", markersize=6, label=label)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def suptitle(self, s):
        self.fig.suptitle(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(
        self,
        visible=True,
        which="major",
        linestyle=(0, (1, 5)),
        linewidth=0.5,
        **kwargs
    ):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth, **kwargs)

    def xlim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_xlim()
        else:
            self.ax.set_xlim(new_limits)
            return new_limits

    def imshow(self, K, colorbar=True, **kwargs):
        """Display a covariance matrix."""
        im = self.ax.imshow(np.asarray(K), **kwargs)
        if colorbar:
            self.fig.colorbar(im, ax=self.ax)
        return im

    def plot_sample_paths(self, x, paths, labels=None, **kwargs):
        """Draw sample paths of shape (count, m) against x of shape (m,).

        Each path is drawn from its ``(x, y, series_id)`` triples.
        """
        kwargs.setdefault("linewidth", 1)
        for series_id, points in groupby(to_series(x, paths, labels), key=itemgetter(2)):
            xs, ys, _ = zip(*points)
            label = series_id if labels is not None else None
            self.ax.plot(xs, ys, label=label, **kwargs)

    def plotgp(
        self,
        x,
        mean,
        variance,
        colorscheme="default",
        mean_label="posterior mean",
        ci=(0.95, 0.99, 0.999),
        ci_labels=("CI 95%", "CI 99%", "CI 99.9%"),
        **kwargs
    ):
        """Posterior mean and coverage intervals.

        norminv (1 - 0.05/2)  = 1.959964
        norminv (1 - 0.01/2)  = 2.575829
        norminv (1 - 0.001/2) = 3.290527

        ``variance`` is either the vector of variances or the full
        covariance matrix, in which case its diagonal is used.
        """
        mean = np.asarray(mean).flatten()
        x = np.asarray(x).flatten()
        variance = np.asarray(variance)
        if variance.ndim == 2:
            variance = np.diag(variance)
        std = np.sqrt(np.maximum(variance.flatten(), 0.0))

        delta0 = [stats.norm.ppf((1 + level) / 2) for level in ci]
        ci_labels = list(ci_labels)

        if colorscheme == "simple":
            delta0 = [delta0[0]]
            ci_labels = [ci_labels[0]]
            fillcol = ["#BFBFBF"]
        elif colorscheme == "default":
            delta0 = delta0[::-1]
            ci_labels = ci_labels[::-1]
            fillcol = ["#F2F2F2", "#D8D8D8", "#BFBFBF"]
        else:
            raise ValueError("colorscheme must be 'default' or 'simple'")
        kwargs["linewidth"] = 0.5
        kwargs["alpha"] = 0.8

        for i, delta in enumerate(delta0):
            lower = mean - delta * std
            upper = mean + delta * std
            self.ax.fill(
                np.hstack((x, x[::-1])),
                np.hstack((upper, lower[::-1])),
                color=fillcol[i],
                label=ci_labels[i],
                **kwargs
            )

        # mean
        self.ax.plot(x, mean, "#F2404C", linewidth=2.0, label=mean_label)
