# cvek/kernel/utils.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import cvek.num as cnp
from cvek.errors import DimensionMismatch


def prepare_feature_pair(X1, X2=None):
    """Validate a pair of feature matrices and convert them to 2D arrays.

    Returns (X1, X2, same) where `same` tells whether X2 was omitted or
    holds the same points as X1 (in which case X2 is X1).
    """
    X1_ = cnp.as_feature_matrix(X1)
    if X2 is None or X2 is X1:
        return X1_, X1_, True
    X2_ = cnp.as_feature_matrix(X2)
    if X1_.shape[1] != X2_.shape[1]:
        raise DimensionMismatch(
            f"dimensions of X1 and X2 do not match! "
            f"({X1_.shape[1]} columns vs {X2_.shape[1]} columns)"
        )
    if X1_.shape == X2_.shape and cnp.array_equal(X1_, X2_):
        return X1_, X1_, True
    return X1_, X2_, False
