import numpy as np
import pytest

import gpreg.num as gnp
from gpreg.kernel import rbf_kernel, rbf_covariance


def naive_rbf(a, b, v, l):
    K = np.zeros((a.shape[0], b.shape[0]))
    for i in range(a.shape[0]):
        for j in range(b.shape[0]):
            K[i, j] = v**2 * np.exp(-np.sum((a[i] - b[j]) ** 2) / (2 * l**2))
    return K


@pytest.fixture
def points():
    rng = np.random.default_rng(0)
    return rng.normal(size=(7, 3)), rng.normal(size=(5, 3))


def test_rbf_kernel_values():
    h2 = gnp.array([0.0, 1.0, 4.0])
    assert np.allclose(rbf_kernel(h2), np.exp(-0.5 * np.array([0.0, 1.0, 4.0])))


def test_matches_formula(points):
    a, b = points
    K = rbf_covariance(a, b, 1.7, 0.8)
    assert K.shape == (7, 5)
    assert np.allclose(K, naive_rbf(a, b, 1.7, 0.8), rtol=1e-12, atol=0.0)


def test_symmetric_case_is_exactly_symmetric(points):
    a, _ = points
    K = rbf_covariance(a, a, 2.0, 0.5)
    assert np.array_equal(K, K.T)
    assert np.allclose(np.diag(K), 4.0)


def test_symmetric_case_matches_cross_case(points):
    a, _ = points
    K_sym = rbf_covariance(a, None, 1.3, 0.9)
    K_cross = rbf_covariance(a, a.copy(), 1.3, 0.9)
    assert np.array_equal(K_sym, K_cross)


def test_swap_arguments(points):
    a, b = points
    K_ab = rbf_covariance(a, b, 1.0, 1.2)
    K_ba = rbf_covariance(b, a, 1.0, 1.2)
    assert np.array_equal(K_ab, K_ba.T)


def test_single_point_prior_variance():
    x = gnp.array([[1.0]])
    assert rbf_covariance(x, x.copy(), 1.0, 1.0)[0, 0] == 1.0
    assert rbf_covariance(x, x.copy(), 3.0, 0.1)[0, 0] == 9.0


@pytest.mark.parametrize("p, q", [(0, 4), (4, 0), (0, 0)])
def test_empty_inputs(p, q):
    a = np.zeros((p, 2))
    b = np.ones((q, 2))
    K = rbf_covariance(a, b, 1.0, 1.0)
    assert K.shape == (p, q)


def test_pairwise(points):
    a, b = points
    assert np.allclose(rbf_covariance(a, None, 1.5, 1.0, pairwise=True), 2.25)
    k = rbf_covariance(a[:5], b, 1.5, 1.0, pairwise=True)
    K = rbf_covariance(a[:5], b, 1.5, 1.0)
    assert np.allclose(k, np.diag(K))


def test_deterministic(points):
    a, b = points
    assert np.array_equal(rbf_covariance(a, b, 1.0, 1.0), rbf_covariance(a, b, 1.0, 1.0))
