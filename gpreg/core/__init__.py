# gpreg/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpreg package.

This subpackage contains the regression engine: covariance
regularization and factorization, the fitted model and its posterior
predictor, sample paths, and the error types.

Public API
----------
GPModel : class
    Fitted Gaussian Process regression model.
Hyperparameters, PosteriorResult : named tuples
DimensionError, HyperparameterError, SingularMatrixError : exceptions
"""

from .errors import GPRegError, DimensionError, HyperparameterError, SingularMatrixError
from .linalg import JITTER
from .model import GPModel, Hyperparameters, PosteriorResult
from .sample_paths import sample_paths, conditional_sample_paths, std_gprocess

__all__ = [
    "GPModel",
    "Hyperparameters",
    "PosteriorResult",
    "GPRegError",
    "DimensionError",
    "HyperparameterError",
    "SingularMatrixError",
    "JITTER",
    "sample_paths",
    "conditional_sample_paths",
    "std_gprocess",
]
