"""
GP posterior given noisy data

The observations of example 03 are corrupted by Gaussian noise; the
noise variance is the only regularization of the training covariance.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import math
import gpmini.num as gnp
import gpmini as gm
from gpmini.misc.plotutils import Figure


def generate_data(noise_variance):
    xi = gnp.array([-4.1, -2.2, 0.0, 2.5, 4.1])
    zi = gnp.array([-2.0, 2.88, -2.96, 2.22, -3.5])
    zi = zi + math.sqrt(noise_variance) * gnp.randn(xi.shape[0])
    xt = gnp.linspace(-5.0, 5.0, 50)
    return xi, zi, xt


def main(noise_variance=0.1, n_samplepaths=5):
    gnp.set_seed(1234)
    xi, zi, xt = generate_data(noise_variance)

    fig = Figure(nrows=2, ncols=3, isinteractive=True, figsize=(12, 7))
    for i, name in enumerate(gm.kernel.kernel_names()):
        model = gm.Model(name, noise_variance=noise_variance)
        zpm, zpv = model.predict(xi, zi, xt, return_type=0, zero_neg_variances=True)
        zpsim = model.posterior_sample_paths(xi, zi, xt, n_samplepaths)

        fig.subplot(i + 1)
        fig.plotgp(xt, zpm, zpv, colorscheme="simple")
        fig.plot_sample_paths(xt, zpsim)
        fig.plotdata(xi, zi)
        fig.title(name)
    fig.suptitle(f"Posterior sample paths, noisy data (noise variance = {noise_variance:g})")
    fig.show(grid=True)
    return fig


if __name__ == "__main__":
    main()
