# cvek/selection/search.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Selection of the tuning parameter over a grid of candidate values.
"""
import warnings
from dataclasses import dataclass
from typing import Any

from joblib import Parallel, delayed

import cvek.num as cnp
from cvek.config import get_logger
from cvek.errors import DomainWarning
from cvek.core.ridge import as_kernel_list
from .criteria import Criterion, criterion_function

_logger = get_logger()


@dataclass
class TuningResult:
    """Outcome of a grid search.

    Attributes
    ----------
    criterion : Criterion
        Criterion that was minimized.
    lambda_ : float
        Selected tuning parameter, the smallest grid value attaining the
        minimal score.
    score : float
        Minimal score.
    lambdas : ndarray, shape (m,)
        Grid, in the order it was supplied.
    scores : ndarray, shape (m,)
        Score of each grid value.
    n_ties : int
        Number of grid values attaining the minimal score.
    """

    criterion: Criterion
    lambda_: float
    score: float
    lambdas: Any
    scores: Any
    n_ties: int

    @property
    def tied_lambdas(self):
        if cnp.isnan(self.score):
            return cnp.sort(self.lambdas)
        return cnp.sort(self.lambdas[self.scores == self.score])

    def __float__(self):
        return self.lambda_


def check_lambda_grid(lambda_grid):
    """Return the grid as a 1D float array of finite positive values."""
    lambdas = cnp.asarray(lambda_grid, dtype=cnp.float64).reshape(-1)
    if lambdas.shape[0] == 0:
        raise ValueError("the lambda grid must contain at least one value")
    if not cnp.all(cnp.isfinite(lambdas)) or cnp.any(lambdas <= 0.0):
        raise ValueError("the lambda grid must only contain finite positive values")
    return lambdas


def _evaluate_one(func, name, Y, X, K_list, lam, estimator):
    score = func(Y, X, K_list, lam, estimator=estimator)
    _logger.debug("%s(lambda=%.6g) = %.6g", name, lam, score)
    return score


def evaluate_criterion(Y, X, K_mat, mode, lambda_grid, estimator=None, n_jobs=1):
    """Score every value of a lambda grid with one criterion.

    Parameters
    ----------
    Y : array_like, shape (n,) or (n, 1)
    X : array_like, shape (n, d)
    K_mat : sequence of array_like, shape (n, n)
    mode : str or Criterion
        One of 'AIC', 'AICc', 'BIC', 'GCV', 'GCVc', 'gmpml', 'loocv'.
    lambda_grid : array_like, shape (m,)
        Strictly positive candidate values.
    estimator : callable, optional
        Ridge estimator, defaults to `cvek.core.estimate_ridge`.
    n_jobs : int, optional
        Number of threads used to evaluate the grid (joblib semantics,
        -1 for all processors). Default 1.

    Returns
    -------
    scores : ndarray, shape (m,)
    """
    criterion = Criterion.parse(mode)
    lambdas = check_lambda_grid(lambda_grid)
    return _evaluate_grid(Y, X, K_mat, criterion, lambdas, estimator, n_jobs)


def _evaluate_grid(Y, X, K_mat, criterion, lambdas, estimator, n_jobs):
    func = criterion_function(criterion)
    Y = cnp.as_response_vector(Y)
    X = cnp.as_feature_matrix(X)
    K_list = as_kernel_list(K_mat, Y.shape[0])

    scores = Parallel(n_jobs=n_jobs, prefer="threads")(
        delayed(_evaluate_one)(func, criterion.value, Y, X, K_list, lam, estimator)
        for lam in lambdas.tolist()
    )
    return cnp.asarray(scores, dtype=cnp.float64)


def select_lambda(Y, X, K_mat, mode, lambda_grid, estimator=None, n_jobs=1):
    """Select the tuning parameter minimizing a criterion over a grid.

    The criterion is evaluated once per grid value; the grid values are
    independent and only the set of values matters. NaN scores are
    ignored, infinite scores are ordinary values. If every score is NaN,
    all grid values tie and `score` is NaN. If several values
    attain the minimal score, the smallest one is returned and the
    count is reported in `n_ties`; no warning is emitted here.

    Parameters
    ----------
    See `evaluate_criterion`.

    Returns
    -------
    TuningResult

    Raises
    ------
    cvek.errors.UnknownCriterion
        If `mode` is not a supported criterion. Raised before any fit.
    ValueError
        If the grid is empty or holds a non-positive value.
    """
    criterion = Criterion.parse(mode)
    lambdas = check_lambda_grid(lambda_grid)
    scores = _evaluate_grid(Y, X, K_mat, criterion, lambdas, estimator, n_jobs)

    comparable = cnp.logical_not(cnp.isnan(scores))
    n_nonfinite = int(cnp.sum(~cnp.isfinite(scores)))
    if n_nonfinite > 0:
        _logger.debug(
            "%s: %d of %d scores are not finite (%d NaN)",
            criterion.value,
            n_nonfinite,
            scores.shape[0],
            int(cnp.sum(~comparable)),
        )

    if cnp.any(comparable):
        best = cnp.nanmin(scores)
        tied = cnp.flatnonzero(scores == best)
    else:
        # nothing can be ranked: every value ties
        _logger.warning(
            "No comparable %s score found: all %d grid values gave NaN",
            criterion.value,
            scores.shape[0],
        )
        best = cnp.nan
        tied = cnp.arange(scores.shape[0])
    lambda_ = float(cnp.min(lambdas[tied]))
    return TuningResult(
        criterion=criterion,
        lambda_=lambda_,
        score=float(best),
        lambdas=lambdas,
        scores=scores,
        n_ties=int(tied.shape[0]),
    )


def tuning(Y, X, K_mat, mode, lambda_grid, estimator=None, n_jobs=1):
    """Calculate the tuning parameter based on a given criterion.

    Parameters
    ----------
    Y : array_like, shape (n,) or (n, 1)
        Response vector.
    X : array_like, shape (n, d)
        Fixed effect matrix.
    K_mat : sequence of array_like, shape (n, n)
        Kernel matrices, one per model term.
    mode : str or Criterion
        One of 'AIC', 'AICc', 'BIC', 'GCV', 'GCVc', 'gmpml', 'loocv'.
    lambda_grid : array_like, shape (m,)
        Candidate values, all strictly positive.
    estimator : callable, optional
        Ridge estimator, defaults to `cvek.core.estimate_ridge`.
    n_jobs : int, optional
        Threads used to evaluate the grid. Default 1.

    Returns
    -------
    lambda0 : float
        The selected tuning parameter. When several grid values tie for
        the minimal score, a `DomainWarning` is issued and the smallest
        one is returned.

    Examples
    --------
    >>> import numpy as np
    >>> import cvek
    >>> x = np.linspace(0.0, 1.0, 20).reshape(-1, 1)
    >>> y = np.sin(6.0 * x).ravel()
    >>> K = [cvek.generate_kernel("rbf", l=0.3)(x)]
    >>> lam = cvek.tuning(y, np.ones((20, 1)), K, "loocv", np.logspace(-4, 1, 20))
    """
    result = select_lambda(
        Y, X, K_mat, mode, lambda_grid, estimator=estimator, n_jobs=n_jobs
    )
    if result.n_ties > 1:
        warnings.warn(
            f"Multiple ({result.n_ties}) optimal lambda's found, "
            f"returning the smallest one.",
            DomainWarning,
            stacklevel=2,
        )
    _logger.info(
        "Selected lambda = %.6g (%s = %.6g)",
        result.lambda_,
        result.criterion.value,
        result.score,
    )
    return result.lambda_
