# gpreg/__init__.py

from . import config
from . import num
from . import kernel
from . import core
from . import misc
from . import boundary
from .core import (
    GPModel,
    Hyperparameters,
    PosteriorResult,
    DimensionError,
    HyperparameterError,
    SingularMatrixError,
)
from .config import __version__

__all__ = [
    "num",
    "kernel",
    "core",
    "boundary",
    "GPModel",
    "Hyperparameters",
    "PosteriorResult",
    "DimensionError",
    "HyperparameterError",
    "SingularMatrixError",
    "__version__",
]
