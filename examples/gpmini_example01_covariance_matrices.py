"""
Covariance matrices of the six GPmini kernels

The covariance matrices are evaluated concurrently on a regular grid
and displayed side by side.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpmini.num as gnp
import gpmini as gm
from gpmini.misc.plotutils import Figure


def main(n_jobs=6):
    xt = gnp.linspace(-5.0, 5.0, 50)
    kernels = [gm.kernel.get_kernel(name) for name in gm.kernel.kernel_names()]

    matrices = gm.core.covariance_matrices(kernels, xt, n_jobs=n_jobs)

    fig = Figure(nrows=2, ncols=3, isinteractive=True, figsize=(12, 7))
    for i, (name, K) in enumerate(matrices.items()):
        fig.subplot(i + 1)
        fig.imshow(K, extent=[-5, 5, 5, -5])
        fig.title(name)
    fig.suptitle("Covariance matrices on [-5, 5]")
    fig.show()
    return fig, matrices


if __name__ == "__main__":
    main()
