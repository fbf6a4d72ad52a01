# cvek/kernel/library.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel descriptors, the kernel factory and the kernel library.

A kernel is an immutable value (family, l, p, sigma). Its family is
resolved to a matrix-wise function once, when the descriptor is built,
and calling the descriptor evaluates that function with the bound
hyperparameters.
"""
import enum
import numbers
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from cvek.errors import UnknownKernelFamily
from .basic import kernel_intercept, kernel_linear, kernel_polynomial, kernel_nn
from .stationary import kernel_rbf, kernel_rational
from .matern import kernel_matern


class KernelFamily(str, enum.Enum):
    INTERCEPT = "intercept"
    LINEAR = "linear"
    POLYNOMIAL = "polynomial"
    RBF = "rbf"
    MATERN = "matern"
    RATIONAL = "rational"
    NN = "nn"

    @classmethod
    def parse(cls, name):
        """Return the family named `name` (a member or a string)."""
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = name.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise UnknownKernelFamily(
            f"Unknown kernel family {name!r}; expected one of "
            f"{[m.value for m in cls]}"
        )


_MATRIX_WISE = {
    KernelFamily.INTERCEPT: kernel_intercept,
    KernelFamily.LINEAR: kernel_linear,
    KernelFamily.POLYNOMIAL: kernel_polynomial,
    KernelFamily.RBF: kernel_rbf,
    KernelFamily.MATERN: kernel_matern,
    KernelFamily.RATIONAL: kernel_rational,
    KernelFamily.NN: kernel_nn,
}


def matrix_wise_function(family) -> Callable:
    """Return the matrix-wise function of a kernel family."""
    return _MATRIX_WISE[KernelFamily.parse(family)]


@dataclass(frozen=True)
class Kernel:
    """Kernel descriptor.

    Attributes
    ----------
    family : KernelFamily
    l : float
        Length scale (rbf, matern, rational).
    p : int
        Power (polynomial), regularity index with nu = p + 1/2 (matern),
        or alpha (rational).
    sigma : float
        Covariance coefficient (nn).

    Examples
    --------
    >>> import cvek
    >>> kern = cvek.generate_kernel("rbf", l=0.5)
    >>> K = kern([[0.0], [1.0]])
    """

    family: KernelFamily
    l: float = 1.0
    p: int = 2
    sigma: float = 1.0

    @property
    def function(self) -> Callable:
        return _MATRIX_WISE[self.family]

    def __call__(self, X1, X2=None, l=None, p=None, sigma=None):
        """Gram matrix between the rows of X1 and X2 (X2 defaults to X1).

        Hyperparameters passed here take precedence over the bound ones.
        """
        return self.function(
            X1,
            X2,
            self.l if l is None else l,
            self.p if p is None else p,
            self.sigma if sigma is None else sigma,
        )

    def __str__(self):
        return f"{self.family.value}(l={self.l}, p={self.p}, sigma={self.sigma})"


def _check_hyperparameters(family, l, p, sigma):
    if not isinstance(l, numbers.Real) or not l > 0:
        raise ValueError(f"l must be a positive number, got {l!r}")
    if isinstance(p, bool) or not isinstance(p, numbers.Real) or p < 0 or int(p) != p:
        raise ValueError(f"p must be a nonnegative integer, got {p!r}")
    if family is KernelFamily.RATIONAL and p == 0:
        raise ValueError("the rational kernel needs p >= 1")
    if not isinstance(sigma, numbers.Real):
        raise ValueError(f"sigma must be a number, got {sigma!r}")


def generate_kernel(method="rbf", l=1.0, p=2, sigma=1.0) -> Kernel:
    """Generate a single kernel of the kernel library.

    Parameters
    ----------
    method : str or KernelFamily
        One of 'intercept', 'linear', 'polynomial', 'rbf', 'matern',
        'rational', 'nn'.
    l : float
        Length scale.
    p : int
        For polynomial, the power; for matern, nu = p + 1/2; for
        rational, alpha = p.
    sigma : float
        Covariance coefficient of the neural network kernel.

    Returns
    -------
    Kernel

    Raises
    ------
    cvek.errors.UnknownKernelFamily
        If `method` is not a supported family.
    ValueError
        If the hyperparameters are invalid.
    """
    family = KernelFamily.parse(method)
    _check_hyperparameters(family, l, p, sigma)
    return Kernel(family, float(l), int(p), float(sigma))


def _table_rows(table):
    if hasattr(table, "to_dict"):
        return table.to_dict("records")
    return list(table)


def define_library(table) -> List[Kernel]:
    """Build the kernel library from a table of kernel specifications.

    Parameters
    ----------
    table : sequence of mappings, or DataFrame
        One row per model term, with keys 'method', 'l', 'p' and
        optionally 'sigma' (default 1).

    Returns
    -------
    list of Kernel
        In row order.
    """
    library = []
    for i, row in enumerate(_table_rows(table)):
        try:
            method = row["method"]
            l = row["l"]
            p = row["p"]
        except (KeyError, TypeError) as exc:
            raise TypeError(
                f"row {i} of the kernel table must provide 'method', 'l' and 'p'"
            ) from exc
        sigma = row.get("sigma", 1.0) if hasattr(row, "get") else 1.0
        library.append(generate_kernel(method, l, p, sigma))
    return library


def kernel_matrices(
    library: Sequence[Kernel], features: Sequence, features_new: Optional[Sequence] = None
):
    """Evaluate each kernel of the library on its term features.

    Parameters
    ----------
    library : sequence of Kernel
    features : sequence of array_like
        Training feature matrix of each term, in library order.
    features_new : sequence of array_like, optional
        New feature matrices; when given, the i-th matrix is
        ``library[i](features_new[i], features[i])``.

    Returns
    -------
    list of ndarray
    """
    if len(features) != len(library):
        raise ValueError(
            f"{len(library)} kernels but {len(features)} feature matrices"
        )
    if features_new is None:
        return [kern(x) for kern, x in zip(library, features)]
    if len(features_new) != len(library):
        raise ValueError(
            f"{len(library)} kernels but {len(features_new)} new feature matrices"
        )
    return [kern(xn, x) for kern, x, xn in zip(library, features, features_new)]
