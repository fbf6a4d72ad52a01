# cvek/selection/criteria.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Tuning parameter selection criteria.

Each criterion has the signature

    score = criterion(Y, X, K_mat, lam, estimator=None)

fits the ridge model for the single value `lam`, takes the total
smoother matrix :math:`A_\\lambda` of the fit and reduces it to a
scalar. Lower is better for every criterion.

With :math:`\\mathrm{RSS}_\\lambda = y^T (I - A_\\lambda)^2 y`:

- AIC:   :math:`\\log \\mathrm{RSS} + 2 [tr(A) + 2] / n`
- AICc:  :math:`\\log \\mathrm{RSS} + 2 [tr(A) + 2] / (n - tr(A) - 3)`
- BIC:   :math:`\\log \\mathrm{RSS} + \\log(n) [tr(A) + 2] / n`
- GCV:   :math:`\\log \\mathrm{RSS} - 2 \\log(1 - tr(A)/n - 1/n)`
- GCVc:  :math:`\\log \\mathrm{RSS} - 2 \\log[1 - tr(A)/n - 2/n]_+`
- GMPML: :math:`\\log y^T (I - A) y - \\log |I - A| / (n - 1)`
- LOOCV: :math:`\\sum_i [((I - A) y)_i / (I - A)_{ii}]^2`

Scores may be NaN or infinite (the GCV log argument is not clamped,
LOOCV may divide by a zero diagonal entry). These are returned as is,
without floating point warnings, and lose the minimization.

References
----------
Philip S. Boonstra, Bhramar Mukherjee, and Jeremy M. G. Taylor. A
Small-Sample Choice of the Tuning Parameter in Ridge Regression. 2015.

Clifford M. Hurvich, Jeffrey S. Simonoff, and Chih-Ling Tsai. Smoothing
parameter selection in nonparametric regression using an improved
Akaike information criterion. 1998.
"""
import enum

import cvek.num as cnp
from cvek.errors import UnknownCriterion
from cvek.core.ridge import estimate_ridge
from cvek.core.linalg import (
    residual_operator,
    residual_quadratic_form,
    residual_inner_product,
    log_abs_det,
    effective_dof,
)


class Criterion(str, enum.Enum):
    AIC = "AIC"
    AICC = "AICc"
    BIC = "BIC"
    GCV = "GCV"
    GCVC = "GCVc"
    GMPML = "gmpml"
    LOOCV = "loocv"

    @classmethod
    def parse(cls, name):
        """Return the criterion named `name` (case insensitive)."""
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = name.strip().lower()
            for member in cls:
                if member.value.lower() == key:
                    return member
        raise UnknownCriterion(
            f"Unknown tuning criterion {name!r}; expected one of "
            f"{[m.value for m in cls]}"
        )


def total_smoother(Y, X, K_mat, lam, estimator=None):
    """Fit the ridge model at `lam` and return (Y, A) as arrays."""
    if estimator is None:
        estimator = estimate_ridge
    Y = cnp.as_response_vector(Y)
    fit = estimator(Y, X, K_mat, lam)
    A = cnp.asarray(fit.proj_matrix.total, dtype=cnp.float64)
    n = Y.shape[0]
    if A.shape != (n, n):
        raise ValueError(f"smoother matrix has shape {A.shape}, expected ({n}, {n})")
    return Y, A


def _log_rss_and_trace(Y, A):
    log_rss = cnp.log(cnp.float64(residual_quadratic_form(Y, A)))
    trace_A = cnp.float64(effective_dof(A))
    return log_rss, trace_A


def aic(Y, X, K_mat, lam, estimator=None):
    """Akaike information criterion."""
    with cnp.errstate(divide="ignore", invalid="ignore", over="ignore"):
        Y, A = total_smoother(Y, X, K_mat, lam, estimator)
        n = cnp.float64(Y.shape[0])
        log_rss, trace_A = _log_rss_and_trace(Y, A)
        return float(log_rss + 2.0 * (trace_A + 2.0) / n)


def aicc(Y, X, K_mat, lam, estimator=None):
    """Akaike information criterion, small-sample correction.

    Blows up when tr(A) approaches n - 3.
    """
    with cnp.errstate(divide="ignore", invalid="ignore", over="ignore"):
        Y, A = total_smoother(Y, X, K_mat, lam, estimator)
        n = cnp.float64(Y.shape[0])
        log_rss, trace_A = _log_rss_and_trace(Y, A)
        return float(log_rss + 2.0 * (trace_A + 2.0) / (n - trace_A - 3.0))


def bic(Y, X, K_mat, lam, estimator=None):
    """Bayesian information criterion."""
    with cnp.errstate(divide="ignore", invalid="ignore", over="ignore"):
        Y, A = total_smoother(Y, X, K_mat, lam, estimator)
        n = cnp.float64(Y.shape[0])
        log_rss, trace_A = _log_rss_and_trace(Y, A)
        return float(log_rss + cnp.log(n) * (trace_A + 2.0) / n)


def gcv(Y, X, K_mat, lam, estimator=None):
    """Generalized cross validation.

    The log argument is not clamped: it may be zero or negative, giving
    an infinite or NaN score.
    """
    with cnp.errstate(divide="ignore", invalid="ignore", over="ignore"):
        Y, A = total_smoother(Y, X, K_mat, lam, estimator)
        n = cnp.float64(Y.shape[0])
        log_rss, trace_A = _log_rss_and_trace(Y, A)
        return float(log_rss - 2.0 * cnp.log(1.0 - trace_A / n - 1.0 / n))


def gcvc(Y, X, K_mat, lam, estimator=None):
    """Generalized cross validation, small-sample correction.

    The log argument is clamped at 0, so an overfitting `lam` gets a
    score of +inf instead of NaN.
    """
    with cnp.errstate(divide="ignore", invalid="ignore", over="ignore"):
        Y, A = total_smoother(Y, X, K_mat, lam, estimator)
        n = cnp.float64(Y.shape[0])
        log_rss, trace_A = _log_rss_and_trace(Y, A)
        return float(
            log_rss - 2.0 * cnp.log(cnp.maximum(0.0, 1.0 - trace_A / n - 2.0 / n))
        )


def gmpml(Y, X, K_mat, lam, estimator=None):
    """Generalized maximum profile marginal likelihood.

    Uses the log modulus of det(I - A) on the full (n, n) matrix.
    """
    with cnp.errstate(divide="ignore", invalid="ignore", over="ignore"):
        Y, A = total_smoother(Y, X, K_mat, lam, estimator)
        n = cnp.float64(Y.shape[0])
        log_quad = cnp.log(cnp.float64(residual_inner_product(Y, A)))
        log_det = cnp.float64(log_abs_det(residual_operator(A)))
        return float(log_quad - log_det / (n - 1.0))


def loocv(Y, X, K_mat, lam, estimator=None):
    """Leave-one-out cross validation.

    The leave-one-out residuals are obtained from a single fit by
    dividing the residuals (I - A) y by the diagonal of I - A.
    """
    with cnp.errstate(divide="ignore", invalid="ignore", over="ignore"):
        Y, A = total_smoother(Y, X, K_mat, lam, estimator)
        R = residual_operator(A)
        eloo = cnp.matmul(R, Y) / cnp.diag(R)
        return float(cnp.sum(eloo**2))


_CRITERIA = {
    Criterion.AIC: aic,
    Criterion.AICC: aicc,
    Criterion.BIC: bic,
    Criterion.GCV: gcv,
    Criterion.GCVC: gcvc,
    Criterion.GMPML: gmpml,
    Criterion.LOOCV: loocv,
}


def criterion_function(name):
    """Return the criterion function for `name`.

    Raises
    ------
    cvek.errors.UnknownCriterion
    """
    return _CRITERIA[Criterion.parse(name)]
