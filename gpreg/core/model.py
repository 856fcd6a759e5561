# gpreg/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process regression model with an RBF covariance.
"""
import warnings
from typing import NamedTuple, Optional

import gpreg.num as gnp
from gpreg.config import get_logger
from gpreg.kernel import rbf_covariance

from . import linalg
from . import sample_paths
from . import utils

_logger = get_logger()


class Hyperparameters(NamedTuple):
    """RBF GP hyperparameters.

    variance : signal scale v (> 0), the kernel is scaled by v².
    lengthscale : length-scale l (> 0).
    noise : observation-noise scale s, enters as s² on the diagonal.
    mean : prior mean m, or None for the sample mean of the targets.
    """

    variance: float = 1.0
    lengthscale: float = 1.0
    noise: float = 0.0
    mean: Optional[float] = None


class PosteriorResult(NamedTuple):
    """Posterior mean (m,), covariance (m, m) and variance (m,)."""

    mean: gnp.ndarray
    covariance: gnp.ndarray
    variance: gnp.ndarray


class GPModel:
    """Gaussian Process (GP) regression model.

    The model is fitted once at construction: the training covariance
    K = k(X, X) is regularized with (s² + 1e-6) I, factorized, and the
    weights alpha = (K + (s² + 1e-6) I)^{-1} (y - m) are stored. Any
    number of predictions can then be made without recomputation.

    Instances are immutable. All stored arrays are copies of the inputs
    with their write flag cleared, so a model can be shared between
    threads.

    Parameters
    ----------
    x : array_like, shape (n, d)
        Training points, n >= 1.
    y : array_like, shape (n,) or (n, 1)
        Training targets.
    variance : float, optional
        Signal scale v > 0 (default 1.0).
    lengthscale : float, optional
        Length-scale l > 0 (default 1.0).
    noise : float, optional
        Observation-noise scale s (default 0.0).
    mean : float or None, optional
        Prior mean m. If None (default), the arithmetic mean of y is used.

    Raises
    ------
    DimensionError
        If x is not 2D, has no rows, or its row count differs from len(y).
    HyperparameterError
        If v <= 0 or l <= 0, or a hyperparameter is not finite.
    SingularMatrixError
        If the regularized training covariance cannot be inverted.

    Examples
    --------
    >>> import numpy as np
    >>> import gpreg as gp
    >>> xi = np.array([[0.0], [1.0], [2.0]])
    >>> zi = np.array([0.0, 1.0, 2.0])
    >>> model = gp.GPModel(xi, zi, variance=1.0, lengthscale=1.0, noise=0.1)
    >>> res = model.predict(np.array([[1.0]]))
    >>> res.mean, res.variance
    """

    def __init__(self, x, y, variance=1.0, lengthscale=1.0, noise=0.0, mean=None):
        x, y, _ = utils.ensure_shapes_and_type(xi=x, zi=y)
        if not (gnp.all(gnp.isfinite(x)) and gnp.all(gnp.isfinite(y))):
            raise ValueError("Training data must be finite.")
        v, l, s, m = utils.validate_hyperparameters(variance, lengthscale, noise, mean)

        # Step 1: resolve the prior mean
        if m is None:
            m = float(gnp.mean(y))

        x = gnp.readonly(gnp.copy(x))
        y = gnp.readonly(gnp.copy(y))

        # Step 2: demeaned targets and training covariance
        demeaned = y - m
        K = rbf_covariance(x, x, v, l)

        # Step 3: regularize and factorize
        L = linalg.regularized_cholesky(K, s)
        Kinv = linalg.inverse_from_cholesky(L)

        # Step 4: weights
        alpha = gnp.cholesky_solve_factor(L, demeaned)

        self._x = x
        self._y = y
        self._hyperparameters = Hyperparameters(v, l, s, m)
        self._demeaned_targets = gnp.readonly(demeaned)
        self._train_covariance = gnp.readonly(K)
        self._cholesky_factor = gnp.readonly(L)
        self._regularized_inverse = gnp.readonly(Kinv)
        self._alpha = gnp.readonly(alpha)

        _logger.debug(
            "GPModel fitted: n=%d, d=%d, v=%g, l=%g, s=%g, m=%g",
            x.shape[0],
            x.shape[1],
            v,
            l,
            s,
            m,
        )

    @classmethod
    def from_hyperparameters(cls, x, y, hyperparameters):
        """Build a model from a `Hyperparameters` tuple."""
        hp = Hyperparameters(*hyperparameters)
        return cls(
            x,
            y,
            variance=hp.variance,
            lengthscale=hp.lengthscale,
            noise=hp.noise,
            mean=hp.mean,
        )

    def __repr__(self):
        output = str("<gpreg.core.GPModel object> " + hex(id(self)))
        return output

    def __str__(self):
        hp = self._hyperparameters
        return (
            f"GP Model:\n"
            f"  Covariance Function: rbf_covariance\n"
            f"  Training Points: {self.n} x {self.dim}\n"
            f"  Signal Scale (v): {hp.variance}\n"
            f"  Length-scale (l): {hp.lengthscale}\n"
            f"  Noise Scale (s): {hp.noise}\n"
            f"  Prior Mean (m): {hp.mean}"
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def n(self):
        return self._x.shape[0]

    @property
    def dim(self):
        return self._x.shape[1]

    @property
    def hyperparameters(self):
        return self._hyperparameters

    @property
    def prior_mean(self):
        return self._hyperparameters.mean

    @property
    def demeaned_targets(self):
        return self._demeaned_targets

    @property
    def train_covariance(self):
        return self._train_covariance

    @property
    def cholesky_factor(self):
        return self._cholesky_factor

    @property
    def regularized_inverse(self):
        return self._regularized_inverse

    @property
    def alpha(self):
        return self._alpha

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def kernel(self, a, b=None, pairwise=False):
        """Evaluate the model's RBF covariance between a and b."""
        hp = self._hyperparameters
        a = gnp.asarray(a)
        b = a if b is None else gnp.asarray(b)
        return rbf_covariance(a, b, hp.variance, hp.lengthscale, pairwise)

    def predict(self, xt, zero_neg_variances=False):
        """Posterior distribution at the query points xt.

        Parameters
        ----------
        xt : array_like, shape (m, d)
            Query points, same dimension d as the training points.
            m may be 0.
        zero_neg_variances : bool, optional
            Whether to replace negative posterior variances with zeros
            (in both `variance` and the covariance diagonal), by default
            False. Negative variances can occur due to numerical errors.

        Returns
        -------
        PosteriorResult
            (mean, covariance, variance) with shapes (m,), (m, m), (m,).

        Raises
        ------
        DimensionError
            If xt is not 2D or its column count differs from the model's.

        Notes
        -----
        mean = k(xt, X) alpha + m and
        covariance = k(xt, xt) - k(xt, X) (K + (s² + 1e-6) I)^{-1} k(X, xt).
        The second term is evaluated as Vᵀ V with V = L^{-1} k(X, xt) and
        the covariance is symmetrized.
        """
        # Step 1: Prepare the data.
        _, _, xt = utils.ensure_shapes_and_type(xt=xt, dim=self.dim)
        m = xt.shape[0]
        if m == 0:
            return PosteriorResult(gnp.zeros((0,)), gnp.zeros((0, 0)), gnp.zeros((0,)))

        # Step 2: Prior covariances.
        K2 = self.kernel(self._x, xt)
        K3 = K2.T
        K4 = self.kernel(xt, xt)

        # Step 3: Posterior mean.
        zt_posterior_mean = gnp.matmul(K3, self._alpha) + self.prior_mean

        # Step 4: Posterior covariance.
        V = linalg.whiten(self._cholesky_factor, K2)
        zt_posterior_cov = K4 - gnp.matmul(V.T, V)
        zt_posterior_cov = 0.5 * (zt_posterior_cov + zt_posterior_cov.T)

        # Step 5: Postprocessing: check nonnegative variances.
        zt_posterior_variance = gnp.copy(gnp.diagonal(zt_posterior_cov))
        v = self._hyperparameters.variance
        tol = gnp.sqrt(gnp.eps) * v * v
        if gnp.any(zt_posterior_variance < -tol):
            warnings.warn(
                "Negative variances detected. Consider using a larger noise.",
                RuntimeWarning,
            )
        if zero_neg_variances:
            zt_posterior_variance = gnp.maximum(zt_posterior_variance, 0.0)
            gnp.fill_diagonal(zt_posterior_cov, zt_posterior_variance)

        return PosteriorResult(
            zt_posterior_mean, zt_posterior_cov, zt_posterior_variance
        )

    def predict_mean(self, xt):
        """Posterior mean at xt, shape (m,)."""
        return self.predict(xt).mean

    def predict_variance(self, xt, zero_neg_variances=False):
        """Posterior variance at xt, shape (m,)."""
        return self.predict(xt, zero_neg_variances=zero_neg_variances).variance

    # ------------------------------------------------------------------
    # Sample paths (delegating to gpreg.core.sample_paths)
    # ------------------------------------------------------------------
    def sample_prior(self, xt, nb_paths, method="svd", rng=None):
        """Draw `nb_paths` paths of the prior GP(m, k) at xt.

        Returns
        -------
        ndarray, shape (m, nb_paths)
        """
        _, _, xt = utils.ensure_shapes_and_type(xt=xt, dim=self.dim)
        K = self.kernel(xt, xt)
        zsim = sample_paths.sample_paths(K, nb_paths, method=method, rng=rng)
        return zsim + self.prior_mean

    def sample_posterior(self, xt, nb_paths, method="svd", rng=None):
        """Draw `nb_paths` paths of the posterior GP at xt.

        Returns
        -------
        ndarray, shape (m, nb_paths)
        """
        res = self.predict(xt)
        return sample_paths.conditional_sample_paths(
            res.mean, res.covariance, nb_paths, method=method, rng=rng
        )
