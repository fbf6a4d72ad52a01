"""Fit a kernel ridge model at the selected tuning parameter and predict

License: GPLv3 (see LICENSE)
"""
import numpy as np
import cvek
from cvek.plot import Figure


def main():
    rng = np.random.default_rng(1)
    n = 30
    xi = np.sort(rng.uniform(-1.0, 1.0, (n, 1)), axis=0)
    zi = np.sin(4.0 * xi[:, 0]) + 0.1 * rng.standard_normal(n)
    xt = np.linspace(-1.0, 1.0, 300).reshape(-1, 1)

    library = [cvek.generate_kernel("matern", l=0.4, p=2)]
    K_mat = cvek.kernel.kernel_matrices(library, [xi])
    X = np.ones((n, 1))

    lam = cvek.tuning(zi, X, K_mat, "loocv", np.logspace(-5, 1, 50))
    fit = cvek.estimate_ridge(zi, X, K_mat, lam)

    Kt = cvek.kernel.kernel_matrices(library, [xi], [xt])
    zpm = np.ones((xt.shape[0], 1)) @ fit.beta + sum(K @ fit.alpha for K in Kt)

    fig = Figure()
    fig.plot(xi, zi, "rs", label="data")
    fig.plot(xt, np.sin(4.0 * xt), "k:", label="truth")
    fig.plot(xt, zpm, "b", label="prediction")
    fig.title("loocv: lambda = {:.3g}".format(lam))
    fig.xlabel("x")
    fig.legend()
    fig.show(grid=True)


if __name__ == "__main__":
    main()
