# cvek/core/__init__.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the cvek package.

This subpackage contains the kernel ridge estimator used to build
smoother matrices and the linear algebra helpers used by the
tuning criteria.

Public API
----------
estimate_ridge : function
    Kernel ridge fit with fixed effects.
RidgeFit, ProjectionMatrices : classes
    Estimator results.
"""

from .ridge import estimate_ridge, RidgeFit, ProjectionMatrices
from . import linalg

__all__ = ["estimate_ridge", "RidgeFit", "ProjectionMatrices", "linalg"]
