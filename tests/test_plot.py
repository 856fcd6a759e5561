import numpy as np
import pytest
import matplotlib.pyplot as plt

import gpreg as gp
from gpreg.plot import Figure, crosssections, plot_posterior


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_figure_plotgp(tmp_path):
    x = np.linspace(0, 1, 10)
    fig = Figure(isinteractive=False)
    fig.plotgp(x, np.sin(x), 0.1 * np.ones(10))
    fig.plotdata(x[:3], np.sin(x[:3]))
    fig.xylabels("x", "z")
    fig.title("test")
    fig.legend()
    fig.grid()
    # mean line and data markers
    assert len(fig.ax.lines) == 2
    # three coverage bands
    assert len(fig.ax.patches) == 3
    fname = tmp_path / "gp.png"
    fig.savefig(fname)
    assert fname.exists()


def test_figure_plotgp_simple_and_negative_variance():
    x = np.linspace(0, 1, 5)
    fig = Figure(isinteractive=False)
    fig.plotgp(x, x, np.array([0.1, -1e-12, 0.0, 0.2, 0.1]), colorscheme="simple")
    assert len(fig.ax.patches) == 1


def test_figure_plotgp_bad_colorscheme():
    fig = Figure(isinteractive=False)
    with pytest.raises(ValueError):
        fig.plotgp([0, 1], [0, 1], [1, 1], colorscheme="nope")


def test_figure_limits_and_subplots():
    fig = Figure(2, 1, isinteractive=False)
    assert len(fig.axes) == 2
    fig.subplot(2)
    assert fig.ax is fig.axes[1]
    assert fig.xlim((0, 2)) == (0, 2)
    assert tuple(fig.xlim()) == (0, 2)
    fig.close()


def test_plot_posterior():
    xi, zi, xt, zt = gp.misc.testfunctions.make_example("sin", n=6, nt=50)
    model = gp.GPModel(xi, zi, noise=0.05)
    fig = plot_posterior(model, xt, zt, nb_paths=3, rng=np.random.default_rng(0))
    # mean, 3 paths, truth, data
    assert len(fig.ax.lines) == 6


def test_plot_posterior_requires_1d():
    model = gp.GPModel(np.zeros((1, 2)), np.zeros(1))
    with pytest.raises(ValueError):
        plot_posterior(model, np.zeros((3, 2)))


def test_crosssections():
    rng = np.random.default_rng(0)
    xi = rng.uniform(0, 1, size=(10, 2))
    zi = xi[:, 0] ** 2 - xi[:, 1]
    model = gp.GPModel(xi, zi, lengthscale=0.5, noise=0.01)
    fig = crosssections(model, [[0, 0], [1, 1]], [0, 3], [0, 1], nt=20)
    assert len(fig.axes) == 4
