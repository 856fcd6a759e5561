# gpreg/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpreg.core` modules.

This file hosts:
- Shape/type validation & conversion helpers for (xi, zi, xt)
- Hyperparameter validation
"""
import math
import gpreg.num as gnp

from .errors import DimensionError, HyperparameterError


def ensure_shapes_and_type(*, xi=None, zi=None, xt=None, dim=None):
    """Validate, convert and adjust shapes of input arrays.

    Parameters
    ----------
    xi : array_like, optional
        Observation points (n, d).
    zi : array_like, optional
        Observed values (n,) or (n, 1).
    xt : array_like, optional
        Prediction points (m, d).
    dim : int, optional
        Expected number of columns of `xt` when `xi` is not given.

    Returns
    -------
    tuple
        (xi, zi, xt) as float64 arrays with proper shapes.

    Raises
    ------
    DimensionError
        If shapes are inconsistent.

    Notes
    -----
    - If `zi` is provided as a 2D column (n,1), it is reshaped to (n,).
    - Checks enforced:
        * xi is 2D with at least one row
        * xt is 2D
        * zi is 1D or a single-column 2D
        * xi.shape[0] == zi.shape[0] (when both given)
        * xi.shape[1] == xt.shape[1] (when both given)
    """
    if xi is not None:
        xi = gnp.asarray(xi)
        if xi.ndim != 2:
            raise DimensionError(f"xi should be a 2D array, got shape {xi.shape}")
        if xi.shape[0] == 0:
            raise DimensionError("xi must contain at least one point")

    if zi is not None:
        zi = gnp.asarray(zi)
        if zi.ndim == 2:
            if zi.shape[1] != 1:
                raise DimensionError(
                    "zi should only have one column if it's a 2D array"
                )
            zi = zi.reshape(-1)  # (n,1) -> (n,)
        elif zi.ndim != 1:
            raise DimensionError("zi should be 1D or a 2D column array")

    if xt is not None:
        xt = gnp.asarray(xt)
        if xt.ndim != 2:
            raise DimensionError(f"xt should be a 2D array, got shape {xt.shape}")

    if xi is not None and zi is not None:
        if xi.shape[0] != zi.shape[0]:
            raise DimensionError(
                f"xi and zi must have the same number of rows "
                f"({xi.shape[0]} != {zi.shape[0]})"
            )
    if xi is not None:
        dim = xi.shape[1]
    if dim is not None and xt is not None:
        if xt.shape[1] != dim:
            raise DimensionError(
                f"xi and xt must have the same number of columns "
                f"({dim} != {xt.shape[1]})"
            )

    return xi, zi, xt


def _finite(x):
    return isinstance(x, (int, float)) and math.isfinite(x)


def validate_hyperparameters(variance, lengthscale, noise, mean):
    """Check admissibility of (v, l, s, m); return them as floats.

    `mean` may be None.
    """
    try:
        variance = float(variance)
        lengthscale = float(lengthscale)
        noise = float(noise)
        mean = None if mean is None else float(mean)
    except (TypeError, ValueError) as exc:
        raise HyperparameterError(f"Hyperparameters must be real scalars: {exc}")

    if not (_finite(variance) and variance > 0.0):
        raise HyperparameterError(f"variance must be positive, got {variance}")
    if not (_finite(lengthscale) and lengthscale > 0.0):
        raise HyperparameterError(f"lengthscale must be positive, got {lengthscale}")
    if not _finite(noise):
        raise HyperparameterError(f"noise must be finite, got {noise}")
    if mean is not None and not _finite(mean):
        raise HyperparameterError(f"mean must be finite, got {mean}")

    return variance, lengthscale, noise, mean
