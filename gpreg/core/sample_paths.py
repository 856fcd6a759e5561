# gpreg/core/sample_paths.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Sampling routines for Gaussian Process models.

This module provides:
- Zero-mean Gaussian draws from a given covariance matrix.
- Posterior draws from a posterior mean and covariance.
- Draws from the standard GP prior (v = 1, l = 1) on [-1, 1].
"""
import gpreg.num as gnp
from gpreg.kernel import rbf_covariance

from .errors import SingularMatrixError
from .linalg import JITTER


def sample_paths(K, nb_paths, method: str = "chol", rng=None):
    """Generates ``nb_paths`` zero-mean Gaussian vectors with covariance ``K``.

    Parameters
    ----------
    K : ndarray, shape (m, m)
        Symmetric positive semi-definite covariance matrix.
    nb_paths : int
        Number of sample paths to generate.
    method : {'chol','svd'}, optional (default: 'chol')
        Factorization used to draw samples from N(0, K).
    rng : numpy.random.Generator, optional
        Generator to use instead of the global one in gpreg.num.

    Returns
    -------
    ndarray, shape (m, nb_paths)
        Array containing the generated sample paths.

    Raises
    ------
    SingularMatrixError
        With method='chol', if K + jitter I is not positive definite.

    Notes
    -----
    - 'chol': K + jitter I = C Cᵀ, draw as C @ N(0, I).
    - 'svd' : K = U diag(s) Uᵀ, draw as (U sqrt(diag(s)) Uᵀ) @ N(0, I).
      Slightly negative eigenvalues are clipped, so semi-definite
      posterior covariances are accepted.
    """
    if nb_paths < 0:
        raise ValueError("nb_paths must be nonnegative")
    K = gnp.asarray(K)
    m = K.shape[0]
    if m == 0:
        return gnp.zeros((0, nb_paths))

    if method == "chol":
        try:
            C = gnp.cholesky_factor(K + JITTER * gnp.eye(m))
        except gnp.LinAlgError as exc:
            raise SingularMatrixError(
                "Cholesky factorization failed. Consider method='svd'."
            ) from exc
    elif method == "svd":
        C, _ = gnp.symmetric_sqrt(K)
    else:
        raise ValueError("method must be 'chol' or 'svd'")

    return gnp.matmul(C, gnp.randn(m, nb_paths, rng=rng))


def conditional_sample_paths(mean, covariance, nb_paths, method="svd", rng=None):
    """Draws ``nb_paths`` paths from N(mean, covariance).

    Parameters
    ----------
    mean : ndarray, shape (m,)
        Posterior mean.
    covariance : ndarray, shape (m, m)
        Posterior covariance.
    nb_paths : int
    method : {'chol','svd'}, optional (default: 'svd')
    rng : numpy.random.Generator, optional

    Returns
    -------
    ndarray, shape (m, nb_paths)
    """
    mean = gnp.asarray(mean).reshape(-1, 1)
    zsim = sample_paths(covariance, nb_paths, method=method, rng=rng)
    return mean + zsim


def std_gprocess(nb_paths, resolution, method="svd", rng=None):
    """Draws from the standard GP prior on a regular grid of [-1, 1].

    The prior has zero mean and an RBF covariance with v = 1, l = 1. The
    grid has ``resolution + 1`` points with spacing ``2 / resolution``.

    Returns
    -------
    xt : ndarray, shape (resolution + 1, 1)
    zsim : ndarray, shape (resolution + 1, nb_paths)
    """
    if resolution < 1:
        raise ValueError("resolution must be a positive integer")
    xt = gnp.linspace(-1.0, 1.0, resolution + 1).reshape(-1, 1)
    K = rbf_covariance(xt, xt, 1.0, 1.0)
    return xt, sample_paths(K, nb_paths, method=method, rng=rng)
