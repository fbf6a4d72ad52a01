"""Select the tuning parameter of a two-term kernel ridge model

The response is the sum of a smooth function of x1 and a linear effect
of x2. Each criterion is evaluated on the same grid and the criterion
curves are displayed.

License: GPLv3 (see LICENSE)
"""
import numpy as np
import cvek
from cvek.plot import Figure, plot_criterion

CRITERIA = ["AIC", "AICc", "BIC", "GCV", "GCVc", "gmpml", "loocv"]


def generate_data(n=50, noise_std=0.2, seed=0):
    rng = np.random.default_rng(seed)
    x1 = rng.uniform(-1.0, 1.0, (n, 1))
    x2 = rng.uniform(-1.0, 1.0, (n, 2))
    y = np.sin(3.0 * x1[:, 0]) + x2 @ np.array([1.0, -0.5]) + noise_std * rng.standard_normal(n)
    return x1, x2, y


def main():
    x1, x2, y = generate_data()
    n = y.shape[0]

    library = cvek.define_library(
        [
            {"method": "rbf", "l": 0.5, "p": 2},
            {"method": "linear", "l": 1.0, "p": 1},
        ]
    )
    K_mat = cvek.kernel.kernel_matrices(library, [x1, x2])
    X = np.ones((n, 1))
    lambda_grid = np.logspace(-4, 1, 40)

    fig = Figure(nrows=2, ncols=4, figsize=(14, 6))
    for i, name in enumerate(CRITERIA):
        result = cvek.select_lambda(y, X, K_mat, name, lambda_grid, n_jobs=2)
        print("{:6s} lambda = {:.4g}  score = {:.4g}  ties = {}".format(
            name, result.lambda_, result.score, result.n_ties))
        fig.subplot(i + 1)
        plot_criterion(result, fig=fig)
    fig.axes[-1].set_visible(False)
    fig.fig.tight_layout()
    fig.show(grid=True)


if __name__ == "__main__":
    main()
