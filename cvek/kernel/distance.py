# cvek/kernel/distance.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import cvek.num as cnp
from cvek.config import get_zero_tol
from .utils import prepare_feature_pair


def square_dist(X1, X2=None, l=1.0, zero_tol=None):
    """Squared Euclidean distance between two sets of points.

    .. math::
        D_{ij} = \\|x^{(1)}_i / l - x^{(2)}_j / l\\|^2
               = \\|x^{(1)}_i\\|^2 / l^2 + \\|x^{(2)}_j\\|^2 / l^2
                 - 2\\, x^{(1)}_i \\cdot x^{(2)}_j / l^2

    The expansion avoids a loop over pairs; row norms are broadcast
    across the result. Entries with magnitude below `zero_tol` are set
    to exactly 0, so that cancellation noise never reaches a square
    root or a log downstream.

    Parameters
    ----------
    X1 : array_like, shape (n1, d)
        First set of points. A 1D array is read as one column.
    X2 : array_like, shape (n2, d), optional
        Second set of points. Defaults to X1.
    l : float
        Length scale dividing both sets.
    zero_tol : float, optional
        Snapping threshold. Defaults to ``cvek.config.get_zero_tol()``.

    Returns
    -------
    dist_sq : ndarray, shape (n1, n2)

    Raises
    ------
    cvek.errors.DimensionMismatch
        If X1 and X2 do not have the same number of columns.
    """
    X1, X2, same = prepare_feature_pair(X1, X2)
    if zero_tol is None:
        zero_tol = get_zero_tol()

    X1 = X1 / l
    X1s = cnp.row_sq_norms(X1)
    if same:
        X2 = X1
        X2s = X1s
    else:
        X2 = X2 / l
        X2s = cnp.row_sq_norms(X2)

    dist_sq = -2.0 * cnp.matmul(X1, X2.T) + X1s[:, None] + X2s[None, :]
    dist_sq = cnp.where(cnp.abs(dist_sq) < zero_tol, 0.0, dist_sq)
    # a point is at distance 0 from itself, and no distance is negative
    if same:
        cnp.fill_diagonal(dist_sq, 0.0)
    return cnp.maximum(dist_sq, 0.0)
