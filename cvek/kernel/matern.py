# cvek/kernel/matern.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import sqrt
import cvek.num as cnp
from .distance import square_dist


def maternp_kernel(p: int, h):
    """Matérn kernel with half-integer regularity :math:`\\nu = p + 1/2`.

    Using the half-integer simplification (Watson 1922; Abramowitz & Stegun):

    .. math::
        K(h) = \\exp(-2\\sqrt{\\nu}\\,h)\\,
               \\frac{\\Gamma(p+1)}{\\Gamma(2p+1)}
               \\sum_{i=0}^{p} \\frac{(p+i)!}{i!(p-i)!}\\,(4\\sqrt{\\nu}h)^{\\,p-i}

    Parameters
    ----------
    p : int
        Nonnegative integer with :math:`\\nu = p+1/2`.
    h : ndarray
        Scaled distances.

    Returns
    -------
    ndarray
        Kernel values.
    """
    gln = cnp.compute_gammaln(p)
    h = cnp.inftobigf(h)
    c = 2.0 * sqrt(p + 0.5)
    twoch = 2.0 * c * h
    # the i = p term has coefficient 1
    polynomial = cnp.ones(h.shape)
    for i in range(p):
        exp_log_combination = cnp.exp(
            gln[p + 1] - gln[2 * p + 1] + gln[p + i + 1] - gln[i + 1] - gln[p - i + 1]
        )
        polynomial += exp_log_combination * (twoch ** (p - i))
    return cnp.exp(-c * h) * polynomial


def kernel_matern(X1, X2=None, l=1.0, p=2, sigma=1.0):
    """Matérn kernel with :math:`\\nu = p + 1/2` and length scale l.

    .. math::
        k(r) = \\exp\\Big(-\\frac{\\sqrt{2\\nu}\\, r}{l}\\Big)
               \\frac{\\Gamma(p+1)}{\\Gamma(2p+1)}
               \\sum_{i=0}^{p} \\frac{(p+i)!}{i!(p-i)!}
               \\Big(\\frac{\\sqrt{8\\nu}\\, r}{l}\\Big)^{p-i}

    which is ``maternp_kernel(p, r / (sqrt(2) * l))``.
    """
    r = cnp.sqrt(square_dist(X1, X2))
    return maternp_kernel(int(p), r / (sqrt(2.0) * l))
