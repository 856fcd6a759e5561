'''GP regression in 1D, with noisy evaluations

Fit a GP with an RBF kernel on noisy observations of sin(x) and plot
the posterior mean with coverage intervals.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
'''
import numpy as np
import gpreg as gp
import gpreg.plot as gplot


def generate_data(noise_std, rng):
    '''
    Data generation
    (xt, zt): target
    (xi, zi): input dataset
    '''
    xi, zi, xt, zt = gp.misc.testfunctions.make_example(
        "sin", n=8, nt=200, noise_std=noise_std, rng=rng
    )
    return xt, zt, xi, zi


def main(show=True):
    rng = np.random.default_rng(0)
    noise_std = 1e-1
    xt, zt, xi, zi = generate_data(noise_std, rng)

    model = gp.GPModel(xi, zi, variance=1.0, lengthscale=1.0, noise=noise_std)
    print(model)

    res = model.predict(xt, zero_neg_variances=True)

    fig = gplot.Figure(isinteractive=show)
    fig.plot(xt, zt, 'C0', linestyle=(0, (5, 5)), linewidth=1)
    fig.plotdata(xi, zi)
    fig.plotgp(xt, res.mean, res.variance)
    fig.xylabels('x', 'z')
    if show:
        fig.show()
    return fig


if __name__ == "__main__":
    main()
