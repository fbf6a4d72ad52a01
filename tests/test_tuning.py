"""
Unit tests for the tuning parameter grid search (unittest version).
"""

import math
import unittest
import warnings
from unittest import mock

import numpy as np

import cvek
from cvek.core import ProjectionMatrices, RidgeFit
from cvek.errors import DomainWarning, UnknownCriterion
from cvek.kernel import define_library, kernel_matrices
from cvek.selection import search
from cvek.selection import (
    Criterion,
    TuningResult,
    evaluate_criterion,
    select_lambda,
    tuning,
)

ALL_CRITERIA = ["AIC", "AICc", "BIC", "GCV", "GCVc", "gmpml", "loocv"]


# ----------------------------------------------------------------------
# Helper
# ----------------------------------------------------------------------
def make_problem(n=20, seed=0):
    rng = np.random.default_rng(seed)
    x1 = rng.uniform(-1.0, 1.0, (n, 1))
    x2 = rng.uniform(-1.0, 1.0, (n, 1))
    y = np.sin(3.0 * x1[:, 0]) + 0.5 * x2[:, 0] + 0.1 * rng.standard_normal(n)
    library = define_library(
        [{"method": "rbf", "l": 0.5, "p": 2}, {"method": "linear", "l": 1.0, "p": 1}]
    )
    K_mat = kernel_matrices(library, [x1, x2])
    return y, np.ones((n, 1)), K_mat


def scaled_identity_estimator(scale):
    """Estimator with smoother A = scale(lam) I."""

    def estimator(Y, X, K_mat, lam):
        n = np.asarray(Y).shape[0]
        A = scale(lam) * np.eye(n)
        return RidgeFit(lam=lam, beta=None, alpha=None, proj_matrix=ProjectionMatrices(A))

    return estimator


class CountingEstimator:
    def __init__(self):
        self.calls = 0

    def __call__(self, Y, X, K_mat, lam):
        self.calls += 1
        return cvek.estimate_ridge(Y, X, K_mat, lam)


Y4 = np.array([1.0, 2.0, 3.0, 4.0])
X4 = np.ones((4, 1))
K4 = [np.eye(4)]


# ======================================================================
#                           Test cases
# ======================================================================
class TestTuning(unittest.TestCase):

    def test_single_value_grid(self):
        y, X, K_mat = make_problem()
        for name in ALL_CRITERIA:
            with warnings.catch_warnings():
                warnings.simplefilter("error", DomainWarning)
                self.assertEqual(tuning(y, X, K_mat, name, [0.3]), 0.3, msg=name)

    def test_single_value_grid_with_nan_score(self):
        est = scaled_identity_estimator(lambda lam: 0.9)
        self.assertEqual(tuning(Y4, X4, K4, "GCV", [2.0], estimator=est), 2.0)

    def test_returns_minimizer(self):
        # GCV increases with a, and a = 1 / (1 + lam)
        est = scaled_identity_estimator(lambda lam: 1.0 / (1.0 + lam))
        grid = [0.1, 1.0, 10.0]
        self.assertEqual(tuning(Y4, X4, K4, "GCV", grid, estimator=est), 10.0)
        self.assertEqual(tuning(Y4, X4, K4, "GCV", grid[::-1], estimator=est), 10.0)

    def test_nan_scores_are_ignored(self):
        table = {1.0: 0.9, 2.0: 0.2, 3.0: 0.1}
        est = scaled_identity_estimator(lambda lam: table[lam])
        result = select_lambda(Y4, X4, K4, "GCV", [1.0, 2.0, 3.0], estimator=est)
        self.assertTrue(math.isnan(result.scores[0]))
        self.assertEqual(result.lambda_, 3.0)
        self.assertEqual(result.n_ties, 1)

    def test_all_nan_scores_tie(self):
        est = scaled_identity_estimator(lambda lam: 0.9)
        result = select_lambda(Y4, X4, K4, "GCV", [3.0, 1.0, 2.0], estimator=est)
        self.assertEqual(result.lambda_, 1.0)
        self.assertEqual(result.n_ties, 3)
        self.assertTrue(math.isnan(result.score))
        self.assertTrue(np.array_equal(result.tied_lambdas, [1.0, 2.0, 3.0]))

    def test_tie_returns_smallest_with_warning(self):
        est = scaled_identity_estimator(lambda lam: 0.5)
        with self.assertWarns(DomainWarning) as cm:
            lam = tuning(Y4, X4, K4, "loocv", [0.5, 0.1, 0.3], estimator=est)
        self.assertEqual(lam, 0.1)
        self.assertIn("Multiple (3) optimal lambda's found", str(cm.warning))

    def test_infinite_scores_tie(self):
        # GCVc is +inf for A = I / 2 and n = 4
        est = scaled_identity_estimator(lambda lam: 0.5)
        with self.assertWarns(DomainWarning):
            lam = tuning(Y4, X4, K4, "GCVc", [2.0, 1.0], estimator=est)
        self.assertEqual(lam, 1.0)

    def test_no_warning_without_tie(self):
        y, X, K_mat = make_problem()
        with warnings.catch_warnings():
            warnings.simplefilter("error", DomainWarning)
            lam = tuning(y, X, K_mat, "loocv", np.logspace(-4, 1, 15))
        self.assertIsInstance(lam, float)
        self.assertTrue(1e-4 <= lam <= 10.0)

    def test_unknown_criterion_before_any_fit(self):
        y, X, K_mat = make_problem()
        est = CountingEstimator()
        with self.assertRaises(UnknownCriterion):
            tuning(y, X, K_mat, "Cp", [0.1, 1.0], estimator=est)
        with self.assertRaises(UnknownCriterion):
            tuning(y, X, K_mat, "Cp", [], estimator=est)
        self.assertEqual(est.calls, 0)

    def test_criterion_names_are_case_insensitive(self):
        y, X, K_mat = make_problem()
        grid = np.logspace(-3, 1, 9)
        self.assertEqual(
            tuning(y, X, K_mat, "GMPML", grid), tuning(y, X, K_mat, "gmpml", grid)
        )
        self.assertEqual(
            tuning(y, X, K_mat, "aicc", grid), tuning(y, X, K_mat, Criterion.AICC, grid)
        )

    def test_invalid_grid(self):
        y, X, K_mat = make_problem()
        est = CountingEstimator()
        for grid in [[], [0.1, 0.0], [-1.0], [0.1, np.nan], [np.inf]]:
            with self.assertRaises(ValueError, msg=repr(grid)):
                tuning(y, X, K_mat, "loocv", grid, estimator=est)
        self.assertEqual(est.calls, 0)

    def test_one_evaluation_per_grid_value(self):
        y, X, K_mat = make_problem()
        est = CountingEstimator()
        select_lambda(y, X, K_mat, "AIC", np.logspace(-2, 0, 7), estimator=est)
        self.assertEqual(est.calls, 7)

    def test_parallel_evaluation_matches_sequential(self):
        y, X, K_mat = make_problem()
        grid = np.logspace(-4, 1, 12)
        for name in ["GCVc", "gmpml", "loocv"]:
            seq = select_lambda(y, X, K_mat, name, grid, n_jobs=1)
            par = select_lambda(y, X, K_mat, name, grid, n_jobs=2)
            self.assertEqual(seq.lambda_, par.lambda_, msg=name)
            self.assertTrue(
                np.array_equal(seq.scores, par.scores, equal_nan=True), msg=name
            )

    def test_single_kernel_matrix_and_column_response(self):
        y, X, K_mat = make_problem()
        grid = np.logspace(-3, 0, 6)
        a = tuning(y, X, K_mat[0], "GCV", grid)
        b = tuning(y.reshape(-1, 1), X, [K_mat[0]], "GCV", grid)
        self.assertEqual(a, b)

    def test_kernel_matrix_shape_checked(self):
        y, X, K_mat = make_problem()
        with self.assertRaises(ValueError):
            tuning(y, X, [np.eye(5)], "AIC", [0.1])


class TestTuningResult(unittest.TestCase):

    def test_nonfinite_scores_are_logged(self):
        # GCVc is +inf for A = I / 2 and n = 4, GCV is NaN for A = 0.9 I
        est = scaled_identity_estimator(lambda lam: 0.5 if lam < 2.5 else 0.9)
        with self.assertLogs("cvek", level="DEBUG") as cm:
            select_lambda(Y4, X4, K4, "GCVc", [1.0, 2.0], estimator=est)
        self.assertTrue(
            any("2 of 2 scores are not finite (0 NaN)" in m for m in cm.output)
        )
        with self.assertLogs("cvek", level="DEBUG") as cm:
            select_lambda(Y4, X4, K4, "GCV", [1.0, 3.0], estimator=est)
        self.assertTrue(
            any("1 of 2 scores are not finite (1 NaN)" in m for m in cm.output)
        )

    def test_grid_and_criterion_name_checked_once(self):
        y, X, K_mat = make_problem()
        with mock.patch.object(
            search, "check_lambda_grid", wraps=search.check_lambda_grid
        ) as check, mock.patch.object(
            search.Criterion, "parse", wraps=search.Criterion.parse
        ) as parse:
            select_lambda(y, X, K_mat, "AIC", [0.1, 1.0])
        self.assertEqual(check.call_count, 1)
        # the criterion name is parsed once, later lookups receive the member
        raw = [c for c in parse.call_args_list if not isinstance(c.args[0], Criterion)]
        self.assertEqual(len(raw), 1)

    def test_fields(self):
        y, X, K_mat = make_problem()
        grid = np.logspace(-3, 1, 10)
        result = select_lambda(y, X, K_mat, "loocv", grid)
        self.assertIsInstance(result, TuningResult)
        self.assertIs(result.criterion, Criterion.LOOCV)
        self.assertEqual(result.scores.shape, (10,))
        self.assertTrue(np.array_equal(result.lambdas, grid))
        self.assertEqual(result.score, np.nanmin(result.scores))
        self.assertEqual(float(result), result.lambda_)
        self.assertEqual(result.lambda_, tuning(y, X, K_mat, "loocv", grid))
        self.assertIn(result.lambda_, result.tied_lambdas)

    def test_select_lambda_does_not_warn(self):
        est = scaled_identity_estimator(lambda lam: 0.5)
        with warnings.catch_warnings():
            warnings.simplefilter("error", DomainWarning)
            result = select_lambda(Y4, X4, K4, "AIC", [0.2, 0.4], estimator=est)
        self.assertEqual(result.n_ties, 2)
        self.assertEqual(result.lambda_, 0.2)

    def test_evaluate_criterion_keeps_grid_order(self):
        est = scaled_identity_estimator(lambda lam: 1.0 / (1.0 + lam))
        scores = evaluate_criterion(Y4, X4, K4, "AIC", [1.0, 3.0, 2.0], estimator=est)
        # RSS and tr(A) both decrease with lam, recompute each score by hand
        expected = []
        for lam in [1.0, 3.0, 2.0]:
            a = 1.0 / (1.0 + lam)
            expected.append(math.log((1.0 - a) ** 2 * 30.0) + 2.0 * (4.0 * a + 2.0) / 4.0)
        self.assertTrue(np.allclose(scores, expected))


if __name__ == "__main__":
    unittest.main()
