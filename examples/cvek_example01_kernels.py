"""Plot the kernel functions of the kernel library

License: GPLv3 (see LICENSE)
"""
import numpy as np
import cvek
from cvek.plot import Figure, plot_gram_matrix


def main():
    h = np.linspace(-3.0, 3.0, 500).reshape(-1, 1)
    x0 = np.zeros((1, 1))

    fig = Figure()
    for p in [0, 1, 4]:
        kern = cvek.generate_kernel("matern", l=1.0, p=p)
        fig.plot(h, kern(h, x0), label="matern p={} / nu={}/2".format(p, 2 * p + 1))
    fig.plot(h, cvek.generate_kernel("rbf", l=1.0)(h, x0), label="rbf")
    fig.plot(h, cvek.generate_kernel("rational", l=1.0, p=2)(h, x0), label="rational p=2")
    fig.title("Stationary kernels, l = 1")
    fig.xlabel("h")
    fig.ylabel("$k(h)$")
    fig.legend()
    fig.show(grid=True)

    fig = Figure()
    for sigma in [0.1, 1.0, 10.0]:
        kern = cvek.generate_kernel("nn", sigma=sigma)
        fig.plot(h, kern(h, x0 + 1.0), label="nn sigma={}".format(sigma))
    fig.title("Neural network kernel, k(h, 1)")
    fig.xlabel("h")
    fig.legend()
    fig.show(grid=True)

    x = np.sort(np.random.default_rng(0).uniform(-1.0, 1.0, (40, 1)), axis=0)
    plot_gram_matrix(cvek.generate_kernel("matern", l=0.5, p=1)(x), title="matern p=1, l=0.5", show=True)


if __name__ == "__main__":
    main()
