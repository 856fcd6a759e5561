## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import sys
import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive


class Figure:
    """Figures manager class.

    Thin wrapper around a matplotlib figure holding a grid of axes,
    with helpers to draw observations, posterior means with coverage
    intervals, and sample paths.
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

    def show(self, grid=None, legend=None, xlim=None):
        if grid:
            self.grid()
        if legend:
            self.legend()
        if xlim is not None:
            self.xlim(xlim)
        plt.show()

    def savefig(self, fname, **kwargs):
        self.fig.savefig(fname, **kwargs)

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(
            np.ravel(x), np.ravel(z), "rs", markerfacecolor="none", markersize=6, label=label
        )

    def plotpaths(self, x, zsim, color="#3A6EA5", alpha=None, **kwargs):
        """Draw sample paths, one per column of zsim."""
        x = np.ravel(x)
        nb_paths = zsim.shape[1]
        if alpha is None:
            alpha = min(1.0, 0.3 + 1.0 / max(nb_paths, 1))
        for j in range(nb_paths):
            self.ax.plot(x, zsim[:, j], color=color, alpha=alpha, linewidth=0.8, **kwargs)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

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
        self.ax.set_xlim(new_limits)
        return new_limits

    def ylim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_ylim()
        self.ax.set_ylim(new_limits)
        return new_limits

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
        """Posterior mean with Gaussian coverage intervals.

        norminv (1 - 0.05/2)  = 1.959964
        norminv (1 - 0.01/2)  = 2.575829
        norminv (1 - 0.001/2) = 3.290527
        """
        mean = np.ravel(mean)
        x = np.ravel(x)
        # rounding can leave tiny negative variances
        std = np.sqrt(np.maximum(np.ravel(variance), 0.0))

        delta0 = [stats.norm.ppf((1 + level) / 2) for level in ci]
        ci_labels = list(ci_labels)

        if colorscheme == "simple":
            mcol = "#F2404C"
            delta0 = [delta0[0]]
            ci_labels = [ci_labels[0]]
            fillcol = ["#BFBFBF"]
        elif colorscheme == "default":
            mcol = "#F2404C"
            delta0 = delta0[::-1]
            ci_labels = ci_labels[::-1]
            fillcol = ["#F2F2F2", "#D8D8D8", "#BFBFBF"]
        else:
            raise ValueError("colorscheme must be 'default' or 'simple'")
        kwargs.setdefault("linewidth", 0.5)
        kwargs.setdefault("alpha", 0.8)

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

        self.ax.plot(x, mean, mcol, linewidth=2.0, label=mean_label)


def plot_posterior(model, xt, zt=None, nb_paths=0, rng=None, fig=None):
    """Plot the posterior of a 1D model at xt.

    Parameters
    ----------
    model : gpreg.core.GPModel
        Model with one input dimension.
    xt : ndarray, shape (m, 1)
    zt : ndarray, shape (m,), optional
        True function values, drawn as a dashed line.
    nb_paths : int, optional
        Number of posterior sample paths to overlay.
    rng : numpy.random.Generator, optional
    fig : Figure, optional

    Returns
    -------
    Figure
    """
    if model.dim != 1:
        raise ValueError("plot_posterior needs a model with one input dimension")
    if fig is None:
        fig = Figure(isinteractive=False)
    res = model.predict(xt, zero_neg_variances=True)
    order = np.argsort(np.ravel(xt))
    x = np.ravel(xt)[order]
    fig.plotgp(x, res.mean[order], res.variance[order])
    if nb_paths > 0:
        zsim = model.sample_posterior(xt, nb_paths, rng=rng)
        fig.plotpaths(x, zsim[order, :])
    if zt is not None:
        fig.plot(x, np.ravel(zt)[order], "k--", linewidth=1.0, label="truth")
    fig.plotdata(model.x, model.y)
    fig.xylabels("x", "z")
    return fig


def crosssections(model, box, ind_i, ind_dim, nt=100):
    """Display "cross-section" predictions through training points
    model.x[ind_i] along dimensions specified in ind_dim.

    Parameters
    ----------
    model : gpreg.core.GPModel
    box : array_like, shape (2, d)
        Lower and upper bounds of the domain.
    ind_i : list of int
        Indices of training points the sections go through.
    ind_dim : list of int
        Dimensions along which sections are drawn.
    nt : int, optional
        Number of points per section, by default 100.

    Returns
    -------
    Figure
    """
    box = np.array(box)
    xi = np.asarray(model.x)
    num_crosssections = len(ind_i)
    num_dims = len(ind_dim)

    fig = Figure(num_dims, num_crosssections, isinteractive=False)

    for i in range(num_crosssections):
        for d in range(num_dims):
            t = np.sort(
                np.concatenate(
                    (
                        np.linspace(box[0, ind_dim[d]], box[1, ind_dim[d]], nt - 1),
                        np.array([xi[ind_i[i], ind_dim[d]]]),
                    )
                )
            )
            xt = np.tile(xi[ind_i[i], :], (nt, 1))
            xt[:, ind_dim[d]] = t
            res = model.predict(xt, zero_neg_variances=True)
            fig.subplot(num_crosssections * d + i + 1)
            fig.plotgp(t, res.mean, res.variance)
            fig.plot(xi[ind_i[i], ind_dim[d]] * np.array([1, 1]), fig.ax.get_ylim())
            fig.grid()
            if i == 0:
                fig.ax.set_ylabel("z along x_{:d}".format(ind_dim[d] + 1))
            if d == 0:
                fig.ax.set_title("cross section {:d}".format(i + 1))
    return fig
