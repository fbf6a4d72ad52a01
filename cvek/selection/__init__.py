# cvek/selection/__init__.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Tuning parameter selection for kernel ridge regression.

Modules
-------
criteria
    AIC, AICc, BIC, GCV, GCVc, GMPML and leave-one-out CV scores of a
    single tuning parameter value.
search
    Grid search returning the minimizing value.
"""

from .criteria import (
    Criterion,
    criterion_function,
    aic,
    aicc,
    bic,
    gcv,
    gcvc,
    gmpml,
    loocv,
)
from .search import (
    TuningResult,
    evaluate_criterion,
    select_lambda,
    tuning,
)

__all__ = [
    "Criterion",
    "criterion_function",
    "aic",
    "aicc",
    "bic",
    "gcv",
    "gcvc",
    "gmpml",
    "loocv",
    "TuningResult",
    "evaluate_criterion",
    "select_lambda",
    "tuning",
]
