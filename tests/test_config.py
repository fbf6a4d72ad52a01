"""
Unit tests for the configuration object and the numerical backend (unittest version).
"""

import logging
import pathlib
import unittest

import numpy as np
from scipy.special import gammaln

import cvek
import cvek.num as cnp
from cvek import config


class TestConfig(unittest.TestCase):

    def test_backend(self):
        self.assertEqual(config.get_backend(), "numpy")
        self.assertEqual(cnp.get_dtype(), np.float64)
        with self.assertRaises(ValueError):
            config.set_backend("torch")

    def test_resolved_dtype(self):
        cfg = config.get_config()
        self.assertIs(cfg.dtype_resolved, np.float64)
        self.assertIn("float64", str(cfg))
        self.assertFalse(hasattr(cfg, "update"))

    def test_backend_api(self):
        for name in [
            "asarray", "ones", "eye", "to_scalar", "inftobigf", "row_sq_norms",
            "logabsdet", "matmul", "einsum", "inv", "pinv", "slogdet",
            "errstate", "gammaln", "array_equal", "fill_diagonal", "nanmin",
        ]:
            self.assertTrue(callable(getattr(cnp, name)), msg=name)
        for name in ["solve", "norm", "logspace", "to_np", "isarray", "zeros", "full"]:
            self.assertFalse(hasattr(cnp, name), msg=name)

    def test_source_headers(self):
        root = pathlib.Path(cvek.__file__).parent
        for path in sorted(root.rglob("*.py")):
            head = path.read_text(encoding="utf-8").splitlines()[:5]
            rel = path.relative_to(root.parent).as_posix()
            self.assertEqual(head[0], "# " + rel, msg=rel)
            self.assertIn("# License: GPLv3 (see LICENSE)", head, msg=rel)

    def test_version(self):
        self.assertEqual(cvek.__version__, config.get_config().version)
        self.assertIsInstance(cvek.__version__, str)

    def test_zero_tol(self):
        old = config.get_zero_tol()
        self.assertEqual(old, config.DISTANCE_ZERO_TOL)
        try:
            config.set_zero_tol(0.0)
            self.assertEqual(config.get_zero_tol(), 0.0)
            with self.assertRaises(ValueError):
                config.set_zero_tol(-1.0)
            with self.assertRaises(ValueError):
                config.set_zero_tol(float("nan"))
        finally:
            config.set_zero_tol(old)

    def test_logger(self):
        logger = config.get_logger()
        self.assertEqual(logger.name, "cvek")
        old = logger.level
        try:
            config.set_log_level(logging.DEBUG)
            self.assertEqual(logger.level, logging.DEBUG)
            with self.assertLogs("cvek", level="INFO") as cm:
                cvek.tuning([1.0, 2.0, 3.0], np.ones((3, 1)), [np.eye(3)], "AIC", [0.5])
            self.assertTrue(any("Selected lambda" in m for m in cm.output))
        finally:
            config.set_log_level(old)


class TestGammalnCache(unittest.TestCase):

    def setUp(self):
        config.clear_caches("gammaln")

    def tearDown(self):
        config.clear_caches()

    def test_table_grows(self):
        table = cnp.compute_gammaln(2)
        self.assertEqual(table.shape, (6,))
        table = cnp.compute_gammaln(5)
        self.assertEqual(table.shape, (12,))
        self.assertTrue(np.allclose(table[1:], gammaln(np.arange(1, 12))))
        # smaller requests are served from the cached table
        self.assertEqual(cnp.compute_gammaln(1).shape, (4,))
        self.assertEqual(config.get_config().caches["gammaln"]["table"].shape, (12,))


class TestFeatureConversion(unittest.TestCase):

    def test_feature_matrix(self):
        self.assertEqual(cnp.as_feature_matrix([1.0, 2.0, 3.0]).shape, (3, 1))
        self.assertEqual(cnp.as_feature_matrix(2.0).shape, (1, 1))
        self.assertEqual(cnp.as_feature_matrix(np.ones((4, 2))).shape, (4, 2))
        with self.assertRaises(ValueError):
            cnp.as_feature_matrix(np.ones((2, 2, 2)))

    def test_response_vector(self):
        self.assertEqual(cnp.as_response_vector(np.ones((5, 1))).shape, (5,))
        self.assertEqual(cnp.as_response_vector([1.0, 2.0]).shape, (2,))
        with self.assertRaises(ValueError):
            cnp.as_response_vector(np.ones((5, 2)))


if __name__ == "__main__":
    unittest.main()
