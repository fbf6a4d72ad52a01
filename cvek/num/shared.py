# cvek/num/shared.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Backend-independent helpers for cvek.num."""

from typing import Any

from cvek.config import get_config

ArrayLike = Any


def get_dtype():
    return get_config().dtype_resolved


def compute_gammaln(up_to_p: int) -> ArrayLike:
    """
    Return gammaln(k) for k = 0, ..., 2*up_to_p + 1 as a 1D backend array.
    Grows and caches a single table in _config.caches["gammaln"]["table"].
    """
    import cvek.num as cnp

    n = 2 * up_to_p + 2
    cache = get_config().caches.setdefault("gammaln", {})
    table = cache.get("table")

    if table is None:
        table = cnp.asarray(cnp.gammaln(cnp.arange(n)))
        cache["table"] = table
    elif table.shape[0] < n:
        old_n = table.shape[0]
        tail = cnp.asarray(cnp.gammaln(cnp.arange(old_n, n)))
        table = cnp.concatenate((table, tail))
        cache["table"] = table

    return table[:n]


def as_feature_matrix(x) -> ArrayLike:
    """Return x as a 2D float array; a 1D input is read as one column."""
    import cvek.num as cnp

    x = cnp.asarray(x, dtype=cnp.float64)
    if x.ndim == 0:
        return x.reshape(1, 1)
    if x.ndim == 1:
        return x.reshape(-1, 1)
    if x.ndim != 2:
        raise ValueError("feature matrices must be 1D or 2D arrays")
    return x


def as_response_vector(y) -> ArrayLike:
    """Return y as a 1D float array; a (n, 1) column is flattened."""
    import cvek.num as cnp

    y = cnp.asarray(y, dtype=cnp.float64)
    if y.ndim == 2:
        if y.shape[1] != 1:
            raise ValueError("Y should only have one column if it's a 2D array")
        y = y.reshape(-1)
    elif y.ndim != 1:
        raise ValueError("Y should be 1D or a 2D column array")
    return y
