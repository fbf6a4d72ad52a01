# conftest.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
# Placed at the repository root so that pytest puts the root on sys.path
# and tests/test_examples.py can import the examples directory.
import matplotlib

matplotlib.use("Agg")
