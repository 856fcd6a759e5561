# gpreg/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear-algebra utilities shared across gpreg.core modules.

The training covariance is never inverted directly. It is regularized,
factorized once with a Cholesky decomposition, and every solve or
inverse is derived from the factor.
"""
import gpreg.num as gnp
from gpreg.config import get_logger

from .errors import SingularMatrixError

JITTER = 1e-6

_logger = get_logger()


def regularize(K, noise, jitter=JITTER):
    """Return K + (noise^2 + jitter) I as a new array."""
    n = K.shape[0]
    return K + (noise * noise + jitter) * gnp.eye(n)


def regularized_cholesky(K, noise, jitter=JITTER):
    """Cholesky factor of the regularized covariance K + (s^2 + jitter) I.

    Parameters
    ----------
    K : array_like, shape (n, n)
        Symmetric positive semi-definite covariance matrix.
    noise : float
        Observation-noise scale s (squared before use).
    jitter : float, optional
        Diagonal loading added unconditionally (default 1e-6).

    Returns
    -------
    L : array_like, shape (n, n)
        Lower-triangular factor, L Lᵀ = K + (s² + jitter) I.

    Raises
    ------
    SingularMatrixError
        If the regularized matrix is not finite, not numerically positive
        definite, or its reciprocal condition estimate is below machine
        epsilon.
    """
    A = regularize(K, noise, jitter)

    if not gnp.all(gnp.isfinite(A)):
        _logger.warning("Regularized covariance contains non-finite entries")
        raise SingularMatrixError(
            "Regularized covariance contains non-finite entries."
        )

    try:
        L = gnp.cholesky_factor(A)
    except gnp.LinAlgError as exc:
        _logger.warning("Cholesky factorization failed: %s", exc)
        raise SingularMatrixError(
            "Regularized covariance is not positive definite. "
            "Consider a smaller length-scale or a larger noise."
        ) from exc

    rcond = gnp.cholesky_rcond(L)
    if rcond < gnp.eps:
        _logger.warning("Regularized covariance is ill-conditioned (rcond=%g)", rcond)
        raise SingularMatrixError(
            f"Regularized covariance is singular to working precision "
            f"(rcond={rcond:.3g})."
        )
    return L


def inverse_from_cholesky(L):
    """Return (L Lᵀ)^{-1}, symmetrized."""
    Kinv = gnp.cholesky_inv_factor(L)
    return 0.5 * (Kinv + Kinv.T)


def whiten(L, B):
    """Return V = L^{-1} B, so that Bᵀ (L Lᵀ)^{-1} B = Vᵀ V."""
    return gnp.solve_triangular(L, B, lower=True)
