# cvek/plot/__init__.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
CVEK plotting utilities.
"""

from .plotutils import Figure, plot_criterion, plot_gram_matrix

__all__ = ["Figure", "plot_criterion", "plot_gram_matrix", "plotutils"]

from . import plotutils
