# gpreg/plot/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
GPreg plotting utilities.
"""

from . import plotutils
from .plotutils import Figure, crosssections, plot_posterior

__all__ = ["Figure", "crosssections", "plot_posterior", "plotutils"]
