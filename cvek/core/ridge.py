# cvek/core/ridge.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel ridge regression with fixed effects.

This is the default estimator used by the tuning criteria. Any
callable with the same signature,

    fit = estimator(Y, X, K_mat, lam),

returning an object with a ``proj_matrix.total`` (n, n) attribute can
be used in its place.
"""
import math
from dataclasses import dataclass, field
from typing import Any, List

import cvek.num as cnp


@dataclass
class ProjectionMatrices:
    """Smoother (hat) matrices of a ridge fit.

    Attributes
    ----------
    total : ndarray, shape (n, n)
        Map from observed to fitted responses.
    fixed : ndarray, shape (n, n)
        Projection onto the fixed effects, X B.
    terms : list of ndarray, shape (n, n)
        Contribution of each kernel term, in library order.
    """

    total: Any
    fixed: Any = None
    terms: List[Any] = field(default_factory=list)


@dataclass
class RidgeFit:
    """Result of `estimate_ridge`."""

    lam: float
    beta: Any
    alpha: Any
    proj_matrix: ProjectionMatrices


def as_kernel_list(K_mat, n=None):
    """Return K_mat as a list of (n, n) arrays.

    A single 2D array is read as a one-term library.
    """
    if hasattr(K_mat, "ndim") and K_mat.ndim == 2:
        K_mat = [K_mat]
    K_list = [cnp.asarray(K, dtype=cnp.float64) for K in K_mat]
    if len(K_list) == 0:
        raise ValueError("K_mat must contain at least one kernel matrix")
    for j, K in enumerate(K_list):
        if K.ndim != 2 or K.shape[0] != K.shape[1]:
            raise ValueError(f"kernel matrix {j} must be square, got shape {K.shape}")
        if n is not None and K.shape[0] != n:
            raise ValueError(
                f"kernel matrix {j} has shape {K.shape}, expected ({n}, {n})"
            )
    return K_list


def check_lambda(lam):
    """Validate a single tuning parameter value."""
    try:
        lam = float(lam)
    except (TypeError, ValueError) as exc:
        raise ValueError("lambda must be a scalar") from exc
    if not (math.isfinite(lam) and lam > 0.0):
        raise ValueError(f"lambda must be a finite positive number, got {lam}")
    return lam


def estimate_ridge(Y, X, K_mat, lam, compute_kernel_terms=True):
    """Fit a kernel ridge regression with fixed effects.

    With :math:`K = \\sum_j K_j` and :math:`V = K + \\lambda I`,

    .. math::
        B = (X^T V^{-1} X)^{+} X^T V^{-1}, \\quad
        \\beta = B Y, \\quad
        \\alpha = V^{-1} (Y - X\\beta)

    and the smoother matrices are

    .. math::
        P_X = X B, \\quad
        P_j = K_j V^{-1} (I - P_X), \\quad
        A = P_X + K V^{-1} (I - P_X).

    Parameters
    ----------
    Y : array_like, shape (n,) or (n, 1)
        Response vector.
    X : array_like, shape (n, d)
        Fixed effect matrix.
    K_mat : sequence of array_like, shape (n, n)
        Kernel matrices, one per model term.
    lam : float
        Tuning parameter, strictly positive.
    compute_kernel_terms : bool, optional
        Also return the per-term smoother matrices (default True).

    Returns
    -------
    RidgeFit
    """
    lam = check_lambda(lam)
    Y = cnp.as_response_vector(Y)
    n = Y.shape[0]
    X = cnp.as_feature_matrix(X)
    if X.shape[0] != n:
        raise ValueError(f"X has {X.shape[0]} rows but Y has {n} entries")
    K_list = as_kernel_list(K_mat, n)

    I = cnp.eye(n)
    K = K_list[0]
    for Kj in K_list[1:]:
        K = K + Kj
    V_inv = cnp.inv(K + lam * I)

    XtV_inv = cnp.matmul(X.T, V_inv)
    B = cnp.matmul(cnp.pinv(cnp.matmul(XtV_inv, X)), XtV_inv)
    beta = cnp.matmul(B, Y)
    alpha = cnp.matmul(V_inv, Y - cnp.matmul(X, beta))

    P_X = cnp.matmul(X, B)
    V_inv_res = cnp.matmul(V_inv, I - P_X)
    total = P_X + cnp.matmul(K, V_inv_res)
    terms = []
    if compute_kernel_terms:
        terms = [cnp.matmul(Kj, V_inv_res) for Kj in K_list]

    return RidgeFit(
        lam=lam,
        beta=beta,
        alpha=alpha,
        proj_matrix=ProjectionMatrices(total=total, fixed=P_X, terms=terms),
    )
