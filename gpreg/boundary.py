# gpreg/boundary.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Flat-buffer entry points.

A host runtime exchanges matrices as flat row-major float64 buffers
with explicit row and column counts. This module converts such buffers
to arrays, calls the core, and converts the results back. Errors raised
by the core propagate unchanged.
"""
from typing import NamedTuple, Optional

import numpy

import gpreg.num as gnp
from gpreg.config import get_logger
from gpreg.core import GPModel, std_gprocess

_logger = get_logger()


class MatrixBuffer(NamedTuple):
    """Flat row-major float64 data with its shape."""

    data: numpy.ndarray
    rows: int
    cols: int

    @classmethod
    def from_array(cls, a):
        """Wrap an array; 1D arrays become a single column."""
        a = gnp.asarray(a)
        if a.ndim == 1:
            a = a.reshape(-1, 1)
        elif a.ndim != 2:
            raise ValueError(f"Expected a 1D or 2D array, got shape {a.shape}")
        rows, cols = a.shape
        return cls(numpy.ascontiguousarray(a).reshape(-1).copy(), rows, cols)

    def to_array(self):
        """Return a new (rows, cols) array holding a copy of the data."""
        data = numpy.asarray(self.data, dtype=numpy.float64).reshape(-1)
        assert data.shape[0] == self.rows * self.cols, (
            f"buffer length {data.shape[0]} does not match "
            f"{self.rows} x {self.cols}"
        )
        return data.reshape(self.rows, self.cols).copy()


class GRResult(NamedTuple):
    mean: MatrixBuffer
    covariance: MatrixBuffer
    variance: MatrixBuffer


def _as_buffer(m):
    if isinstance(m, MatrixBuffer):
        return m
    return MatrixBuffer(*m)


def _fit(x, y, v, l, s, m):
    xi = _as_buffer(x).to_array()
    zi = _as_buffer(y).to_array()
    return GPModel(
        xi,
        zi,
        variance=v,
        lengthscale=l,
        noise=0.0 if s is None else s,
        mean=m,
    )


def gr(x, y, xt, v=1.0, l=1.0, s: Optional[float] = None, m: Optional[float] = None):
    """Fit on (x, y) and predict at xt, all given as flat buffers.

    Parameters
    ----------
    x : MatrixBuffer or (data, rows, cols)
        Training points, n x d.
    y : MatrixBuffer or (data, rows, cols)
        Training targets, n x 1.
    xt : MatrixBuffer or (data, rows, cols)
        Query points, m x d.
    v, l : float
        Signal scale and length-scale.
    s : float or None
        Noise scale; None means no observation noise.
    m : float or None
        Prior mean; None means the sample mean of y.

    Returns
    -------
    GRResult
        Posterior mean (m x 1), covariance (m x m) and variance (m x 1).
    """
    model = _fit(x, y, v, l, s, m)
    res = model.predict(_as_buffer(xt).to_array())
    _logger.debug("gr: %d training points, %d query points", model.n, res.mean.shape[0])
    return GRResult(
        MatrixBuffer.from_array(res.mean),
        MatrixBuffer.from_array(res.covariance),
        MatrixBuffer.from_array(res.variance),
    )


def sample_from_gr(nb_paths, x, y, xd, v=1.0, l=1.0, s=None, m=None, rng=None):
    """Posterior sample paths at xd as a (m x nb_paths) buffer."""
    model = _fit(x, y, v, l, s, m)
    zsim = model.sample_posterior(_as_buffer(xd).to_array(), nb_paths, rng=rng)
    return MatrixBuffer.from_array(zsim)


def get_std_gprocess(nb_paths, resolution, rng=None):
    """Standard GP prior draws on [-1, 1] as a ((resolution + 1) x nb_paths) buffer."""
    _, zsim = std_gprocess(nb_paths, resolution, rng=rng)
    return MatrixBuffer.from_array(zsim)
