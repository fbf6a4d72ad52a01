# cvek/__init__.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
CVEK: kernel library and tuning parameter selection for kernel ridge
regression with fixed effects.
"""

from . import config
from . import errors
from . import num
from . import kernel
from . import core
from . import selection
from .errors import (
    DimensionMismatch,
    UnknownKernelFamily,
    UnknownCriterion,
    DomainWarning,
)
from .kernel import square_dist, generate_kernel, define_library, Kernel, KernelFamily
from .core import estimate_ridge
from .selection import tuning, select_lambda, Criterion, TuningResult

__version__ = config.__version__

__all__ = [
    "num",
    "kernel",
    "core",
    "selection",
    "square_dist",
    "generate_kernel",
    "define_library",
    "Kernel",
    "KernelFamily",
    "estimate_ridge",
    "tuning",
    "select_lambda",
    "Criterion",
    "TuningResult",
    "DimensionMismatch",
    "UnknownKernelFamily",
    "UnknownCriterion",
    "DomainWarning",
    "__version__",
]
