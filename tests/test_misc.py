import numpy as np
import pytest

from gpreg.misc import designs, testfunctions


def test_regulargrid():
    x = designs.regulargrid(2, [3, 4], [[0.0, -1.0], [1.0, 1.0]])
    assert x.shape == (12, 2)
    assert x[0].tolist() == [0.0, -1.0]
    assert x[-1].tolist() == [1.0, 1.0]


def test_linrange():
    x = designs.linrange(-1.0, 1.0, 0.5)
    assert x.shape == (5, 1)
    assert np.allclose(x.ravel(), [-1.0, -0.5, 0.0, 0.5, 1.0])
    with pytest.raises(ValueError):
        designs.linrange(0.0, 1.0, 0.0)


def test_randunif_in_box():
    x = designs.randunif(2, 50, [[0.0, 10.0], [1.0, 20.0]], rng=np.random.default_rng(0))
    assert x.shape == (50, 2)
    assert np.all((x[:, 0] >= 0.0) & (x[:, 0] <= 1.0))
    assert np.all((x[:, 1] >= 10.0) & (x[:, 1] <= 20.0))


@pytest.mark.parametrize("name", sorted(testfunctions.EXAMPLES))
def test_make_example(name):
    xi, zi, xt, zt = testfunctions.make_example(name, n=6, nt=20)
    ex = testfunctions.EXAMPLES[name]
    assert xi.shape == (6, 1) and zi.shape == (6,)
    assert xt.shape == (20, 1) and zt.shape == (20,)
    assert xi[0, 0] == pytest.approx(ex.x_range[0])
    assert xt[-1, 0] == pytest.approx(ex.xt_range[1])
    assert np.allclose(zi, ex.fn(xi))


def test_make_example_noise_and_random_x():
    rng = np.random.default_rng(0)
    xi, zi, _, _ = testfunctions.make_example(
        "sigmoid", n=30, noise_std=0.5, random_x=True, rng=rng
    )
    assert np.all((xi >= -5.0) & (xi <= 5.0))
    assert not np.allclose(zi, testfunctions.sigmoid(xi))


def test_make_example_unknown():
    with pytest.raises(ValueError):
        testfunctions.make_example("nope")


def test_testfunctions_values():
    x = np.array([[0.0]])
    assert testfunctions.sin(x)[0] == 0.0
    assert testfunctions.sigmoid(x)[0] == 0.5
    assert testfunctions.normal_pdf(x)[0] == pytest.approx(0.3989422804014327)
    assert testfunctions.expcos_sin(x)[0] == 0.0
    assert testfunctions.identity(x).shape == (1,)
