"""GP Conditional Sample Paths

Draw sample paths from the standard GP prior on [-1, 1], then fit a
model on a few observations of exp(cos(x)) sin(x) and draw posterior
sample paths.

Copyright (c) 2022-2026, CentraleSupelec
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
License: GPLv3 (see LICENSE)

"""
import numpy as np
import gpreg as gp
import gpreg.plot as gplot


def main(show=True):
    rng = np.random.default_rng(1)

    # prior
    xs, zsim = gp.core.std_gprocess(nb_paths=4, resolution=100, rng=rng)
    fig_prior = gplot.Figure(isinteractive=show)
    fig_prior.plotpaths(xs, zsim)
    fig_prior.title('Standard GP prior sample paths')

    # posterior
    xi, zi, xt, zt = gp.misc.testfunctions.make_example(
        "expcos_sin", n=10, nt=200, noise_std=0.0
    )
    model = gp.GPModel(xi, zi, variance=1.0, lengthscale=1.0)
    fig = gplot.plot_posterior(model, xt, zt, nb_paths=6, rng=rng)
    fig.title('Conditional sample paths')
    if show:
        fig.legend()
        fig.show()
    return fig_prior, fig


if __name__ == "__main__":
    main()
