# gpreg/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for GPreg.

This module defines the NumPy / SciPy implementation of the gpreg.num API.
"""

from typing import Any, Optional, Tuple, Union
from gpreg.config import get_config

Scalar = Union[int, float]
ArrayLike = Any

_config = get_config()

# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy
from numpy.typing import NDArray

_np_dtype = numpy.float64

ndarray = NDArray[numpy.floating]
from numpy import (
    copy,
    any,
    all,
    isfinite,
    diagonal,
    fill_diagonal,
    sqrt,
    exp,
    sum,
    mean,
    maximum,
    matmul,
)
from numpy import finfo
from scipy.linalg import solve_triangular, cho_factor, cho_solve, LinAlgError
from scipy.spatial.distance import cdist

# ..................................................

eps = finfo(_np_dtype).eps

# ..................................................


def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    return numpy.array(x, dtype=_np_dtype)


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        return x.astype(_np_dtype, copy=False)
    elif isinstance(x, (int, float)):
        return numpy.array([x], dtype=_np_dtype)
    else:
        return numpy.asarray(x, dtype=_np_dtype)


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)


def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )


def readonly(x):
    """Return x with its write flag cleared (in place)."""
    x.setflags(write=False)
    return x


# ..................................................


def squared_scaled_distance(invrho: Scalar, x: ArrayLike, y: ArrayLike) -> ArrayLike:
    """Matrix of squared Euclidean distances between rows of x/rho and y/rho.

    Empty inputs give an empty (nx, ny) matrix.
    """
    nx, ny = x.shape[0], y.shape[0]
    if nx == 0 or ny == 0:
        return zeros((nx, ny))
    return cdist(invrho * x, invrho * y, "sqeuclidean")


def squared_scaled_distance_elementwise(
    invrho: Scalar, x: ArrayLike, y: Optional[ArrayLike]
) -> ArrayLike:
    if x is y or y is None:
        return zeros((x.shape[0],))
    return sum((invrho * (x - y)) ** 2, axis=1)


# ..................................................


def cholesky_factor(A) -> ArrayLike:
    """Lower Cholesky factor of a symmetric positive definite matrix.

    Raises
    ------
    LinAlgError
        If A is not numerically positive definite.
    """
    C, _ = cho_factor(A, lower=True, check_finite=True)
    # cho_factor leaves garbage in the unused triangle
    return numpy.tril(C)


def cholesky_solve_factor(L, b):
    """Solve (L L^T) x = b given the lower factor L."""
    return cho_solve((L, True), b, check_finite=False)


def cholesky_inv_factor(L):
    """Inverse of L L^T given the lower factor L."""
    return cholesky_solve_factor(L, eye(L.shape[0]))


def cholesky_rcond(L) -> float:
    """Cheap reciprocal condition estimate of L L^T from its factor diagonal."""
    d = numpy.abs(numpy.diagonal(L))
    if d.size == 0:
        return 1.0
    dmax = numpy.max(d)
    if dmax == 0.0:
        return 0.0
    return float((numpy.min(d) / dmax) ** 2)


def symmetric_sqrt(A) -> Tuple[ArrayLike, ArrayLike]:
    """Symmetric square root U sqrt(s) U^T of a symmetric PSD matrix.

    Negative eigenvalues (rounding noise) are clipped to zero. Returns the
    root and the eigenvalues.
    """
    s, U = numpy.linalg.eigh(A)
    s = numpy.maximum(s, 0.0)
    return matmul(U * numpy.sqrt(s), U.T), s


# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=_config.seed)


def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)


def rand(*shape: int, rng=None) -> ArrayLike:
    g = _np_rng if rng is None else rng
    return g.random(shape, dtype=_np_dtype)


def randn(*shape: int, rng=None) -> ArrayLike:
    g = _np_rng if rng is None else rng
    return g.normal(loc=0, scale=1, size=shape).astype(_np_dtype, copy=False)
