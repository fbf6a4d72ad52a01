# cvek/kernel/stationary.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Distance-based kernels: Gaussian RBF and rational quadratic."""
from math import sqrt
import cvek.num as cnp
from .distance import square_dist


def kernel_rbf(X1, X2=None, l=1.0, p=2, sigma=1.0):
    """Gaussian RBF kernel.

    .. math::
        k(r) = \\exp\\Big(-\\frac{r^2}{2 l^2}\\Big)

    Parameters
    ----------
    X1 : array_like, shape (n1, d)
    X2 : array_like, shape (n2, d), optional
    l : float
        Length scale.

    Returns
    -------
    ndarray, shape (n1, n2)
    """
    return cnp.exp(-square_dist(X1, X2, l=sqrt(2.0) * l))


def kernel_rational(X1, X2=None, l=1.0, p=2, sigma=1.0):
    """Rational quadratic kernel with alpha = p.

    .. math::
        k(r) = \\Big(1 + \\frac{r^2}{2 p l^2}\\Big)^{-p}
    """
    r2 = square_dist(X1, X2)
    return (1.0 + r2 / (2.0 * p * l**2)) ** (-p)
