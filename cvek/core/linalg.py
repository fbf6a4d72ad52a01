# cvek/core/linalg.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear-algebra utilities shared by the tuning criteria.

All functions take a response vector Y of shape (n,) and a smoother
matrix A of shape (n, n).
"""
import cvek.num as cnp


def residual_operator(A):
    """Return I - A."""
    return cnp.eye(A.shape[0]) - A


def residual_quadratic_form(Y, A):
    """Compute Y^T (I - A)^2 Y.

    A need not be symmetric, so this is Y^T (I - A) (I - A) Y and not
    the squared norm of the residual.
    """
    R = residual_operator(A)
    RY = cnp.matmul(R, Y)
    return cnp.to_scalar(cnp.matmul(Y, cnp.matmul(R, RY)))


def residual_inner_product(Y, A):
    """Compute Y^T (I - A) Y."""
    R = residual_operator(A)
    return cnp.to_scalar(cnp.matmul(Y, cnp.matmul(R, Y)))


def log_abs_det(M):
    """Log modulus of det(M); -inf if M is singular."""
    return float(cnp.logabsdet(M))


def effective_dof(A):
    """Effective degrees of freedom tr(A)."""
    return cnp.to_scalar(cnp.trace(A))
