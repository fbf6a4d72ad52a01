# cvek/kernel/__init__.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel functions and the kernel library.

Modules
-------
distance
    Squared Euclidean distance between two sets of points.
basic
    Intercept, linear, polynomial and neural network kernels.
stationary
    Gaussian RBF and rational quadratic kernels.
matern
    Matérn kernels with half-integer regularity.
library
    Kernel descriptors, factory and library construction.
utils
    Validation of feature matrices.

Public API
-----------
- Distance:
    square_dist
- Matrix-wise kernels:
    kernel_intercept, kernel_linear, kernel_polynomial, kernel_rbf,
    kernel_matern, kernel_rational, kernel_nn, maternp_kernel
- Library:
    KernelFamily, Kernel, generate_kernel, define_library,
    kernel_matrices
"""

from .distance import square_dist
from .basic import kernel_intercept, kernel_linear, kernel_polynomial, kernel_nn
from .stationary import kernel_rbf, kernel_rational
from .matern import kernel_matern, maternp_kernel
from .library import (
    KernelFamily,
    Kernel,
    generate_kernel,
    define_library,
    kernel_matrices,
    matrix_wise_function,
)

__all__ = [
    # Distance
    "square_dist",
    # Kernels
    "kernel_intercept",
    "kernel_linear",
    "kernel_polynomial",
    "kernel_rbf",
    "kernel_matern",
    "kernel_rational",
    "kernel_nn",
    "maternp_kernel",
    # Library
    "KernelFamily",
    "Kernel",
    "generate_kernel",
    "define_library",
    "kernel_matrices",
    "matrix_wise_function",
]
