# gpreg/core/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by gpreg.core.

Every error is raised before any result is produced: a failed
construction leaves no model behind and a failed prediction returns
nothing.
"""
import numpy


class GPRegError(Exception):
    """Base class for gpreg errors."""


class DimensionError(GPRegError, ValueError):
    """Row/column counts of the inputs are inconsistent."""


class HyperparameterError(GPRegError, ValueError):
    """A hyperparameter is outside its admissible range."""


class SingularMatrixError(GPRegError, numpy.linalg.LinAlgError):
    """The regularized training covariance cannot be inverted."""
