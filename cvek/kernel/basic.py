# cvek/kernel/basic.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernels built on inner products: intercept, linear, polynomial and
neural network.

Every function has the matrix-wise signature

    K = kernel_<family>(X1, X2=None, l=1.0, p=2, sigma=1.0)

and ignores the hyperparameters it does not use.
"""
import cvek.num as cnp
from .utils import prepare_feature_pair


def kernel_intercept(X1, X2=None, l=1.0, p=2, sigma=1.0):
    """Intercept kernel, a matrix of ones of shape (n1, n2)."""
    X1, X2, _ = prepare_feature_pair(X1, X2)
    return cnp.ones((X1.shape[0], X2.shape[0]))


def kernel_linear(X1, X2=None, l=1.0, p=2, sigma=1.0):
    """Linear kernel.

    .. math::
        k(x, x') = x \\cdot x'
    """
    X1, X2, _ = prepare_feature_pair(X1, X2)
    return cnp.matmul(X1, X2.T)


def kernel_polynomial(X1, X2=None, l=1.0, p=2, sigma=1.0):
    """Polynomial kernel of degree p.

    .. math::
        k(x, x') = (x \\cdot x' + 1)^p
    """
    X1, X2, _ = prepare_feature_pair(X1, X2)
    return (cnp.matmul(X1, X2.T) + 1.0) ** p


def kernel_nn(X1, X2=None, l=1.0, p=2, sigma=1.0):
    """Neural network (arcsine) kernel.

    .. math::
        k(x, x') = \\frac{2}{\\pi} \\sin^{-1}\\Big(
            \\frac{2\\sigma \\tilde{x}^T \\tilde{x}'}
                 {\\sqrt{(1 + 2\\sigma \\tilde{x}^T \\tilde{x})
                         (1 + 2\\sigma \\tilde{x}'^T \\tilde{x}')}}\\Big)

    where :math:`\\tilde{x}` is x with a leading 1.

    Parameters
    ----------
    X1 : array_like, shape (n1, d)
    X2 : array_like, shape (n2, d), optional
    sigma : float
        Covariance coefficient of the underlying network weights.

    Returns
    -------
    ndarray, shape (n1, n2)
    """
    X1, X2, _ = prepare_feature_pair(X1, X2)
    X1 = cnp.hstack((cnp.ones((X1.shape[0], 1)), X1))
    X2 = cnp.hstack((cnp.ones((X2.shape[0], 1)), X2))
    X1s = cnp.row_sq_norms(X1)
    X2s = cnp.row_sq_norms(X2)
    denom = cnp.sqrt(
        (1.0 + 2.0 * sigma * X1s)[:, None] * (1.0 + 2.0 * sigma * X2s)[None, :]
    )
    s = 2.0 * sigma * cnp.matmul(X1, X2.T) / denom
    return 2.0 / cnp.pi * cnp.arcsin(s)
