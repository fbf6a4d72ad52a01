# cvek/errors.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions and warnings raised by CVEK.

Structural problems (shapes, unknown names) raise immediately.
Numerical degeneracies inside a criterion are not errors: they
produce NaN or infinite scores that lose the minimization.
"""


class CVEKError(Exception):
    """Base class for CVEK errors."""


class DimensionMismatch(CVEKError, ValueError):
    """Two feature matrices do not have the same number of columns."""


class UnknownKernelFamily(CVEKError, ValueError):
    """The kernel family name is not one of the supported families."""


class UnknownCriterion(CVEKError, ValueError):
    """The tuning criterion name is not one of the supported criteria."""


class DomainWarning(UserWarning):
    """Several candidates of a tuning grid attain the minimal score."""
