# cvek/num/numpy_backend.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for CVEK.

This module defines the NumPy implementation of the cvek.num API.
"""

from cvek.config import get_config, init_backend, get_logger

_cvek_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.debug("Using backend: %s", _cvek_backend_)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy
from numpy.typing import NDArray

_np_dtype = numpy.float64
_config.dtype_resolved = _np_dtype

ndarray = NDArray[numpy.floating]
from numpy import (
    array_equal,
    where,
    any,
    all,
    isnan,
    isfinite,
    allclose,
    concatenate,
    hstack,
    diag,
    arange,
    abs,
    sqrt,
    exp,
    log,
    arcsin,
    sum,
    min,
    nanmin,
    sort,
    flatnonzero,
    logical_not,
    maximum,
    fill_diagonal,
    einsum,
    matmul,
    trace,
    errstate,
)
from numpy.linalg import inv, pinv, slogdet
from numpy import pi, inf, nan
from numpy import finfo, float64
from scipy.special import gammaln

# ..................................................

fmax = finfo(_np_dtype).max

# ..................................................


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        dt = _np_dtype if isinstance(x, float) else None
        return numpy.array([x], dtype=dt)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)


def to_scalar(x):
    return numpy.asarray(x).item()


def inftobigf(a, bigf=fmax / 1000.0):
    a = where(numpy.isinf(a), numpy.full_like(a, bigf), a)
    return a


# ..................................................


def row_sq_norms(x):
    """Squared Euclidean norm of each row of x."""
    return einsum("ij,ij->i", x, x)


def logabsdet(A):
    """Log modulus of det(A); -inf when A is singular."""
    sign, logabs = slogdet(A)
    if sign == 0:
        return -inf
    return logabs
