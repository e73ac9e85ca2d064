"""
GP prior sample paths (no data)

For each kernel, draws sample paths from the zero-mean prior and shows
them with the prior coverage intervals.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpmini.num as gnp
import gpmini as gm
from gpmini.misc.plotutils import Figure


def main(n_samplepaths=5):
    gnp.set_seed(1234)
    xt = gnp.linspace(-5.0, 5.0, 50)

    fig = Figure(nrows=2, ncols=3, isinteractive=True, figsize=(12, 7))
    for i, name in enumerate(gm.kernel.kernel_names()):
        model = gm.Model(name)
        zpm, zpv = model.prior(xt, return_type=0)
        zsim = model.sample_paths(xt, n_samplepaths)

        fig.subplot(i + 1)
        fig.plotgp(xt, zpm, zpv, colorscheme="simple", mean_label="prior mean")
        fig.plot_sample_paths(xt, zsim)
        fig.title(name)
    fig.suptitle("Prior sample paths")
    fig.show(grid=True)
    return fig


if __name__ == "__main__":
    main()
