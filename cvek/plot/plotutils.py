# cvek/plot/plotutils.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import sys
import numpy as np
import matplotlib.pyplot as plt
from matplotlib import interactive


class Figure:
    """Figures manager class.

    Attributes
    ----------
    fig : matplotlib.figure.Figure
    axes : list of matplotlib.axes.Axes
    ax : matplotlib.axes.Axes
        Current axes.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.nrows = nrows
        self.ncols = ncols
        self.axes = []
        for i in range(nrows * ncols):
            self.axes.append(self.fig.add_subplot(nrows, ncols, i + 1))
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None, legend_fontsize=None, xlim=None):
        if grid:
            self.grid()
        if legend and legend_fontsize is not None:
            self.legend(fontsize=legend_fontsize)
        elif legend:
            self.legend()
        if xlim is not None:
            self.ax.set_xlim(xlim)
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def semilogx(self, x, z, *args, **kargs):
        self.ax.semilogx(x, z, *args, **kargs)

    def xlabel(self, s):
        self.ax.set_xlabel(s)

    def ylabel(self, s):
        self.ax.set_ylabel(s)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(
        self,
        visible=True,
        which="major",
        linestyle=(0, (1, 5)),
        linewidth=0.5,
        **kwargs
    ):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth, **kwargs)


def plot_criterion(result, fig=None, label=None, show=False):
    """Plot the criterion scores of a grid search against lambda.

    Non-finite scores are left out of the curve. The selected value is
    marked with a vertical line.

    Parameters
    ----------
    result : cvek.TuningResult
    fig : Figure, optional
        Figure to draw in; a new one is created when None.
    label : str, optional
        Curve label, defaults to the criterion name.
    show : bool, optional
        Call `Figure.show` at the end.

    Returns
    -------
    Figure
    """
    if fig is None:
        fig = Figure()
    if label is None:
        label = result.criterion.value

    order = np.argsort(result.lambdas)
    lambdas = np.asarray(result.lambdas)[order]
    scores = np.asarray(result.scores)[order]
    finite = np.isfinite(scores)

    fig.semilogx(lambdas[finite], scores[finite], "o-", markersize=3, label=label)
    fig.ax.axvline(result.lambda_, color="k", linestyle="--", linewidth=0.8)
    fig.xlabel("$\\lambda$")
    fig.ylabel("criterion")
    fig.title("{} (selected $\\lambda$ = {:.3g})".format(label, result.lambda_))
    if show:
        fig.show(grid=True, legend=True)
    return fig


def plot_gram_matrix(K, fig=None, title=None, show=False):
    """Display a Gram matrix as an image."""
    if fig is None:
        fig = Figure(boxoff=False)
    im = fig.ax.imshow(np.asarray(K), cmap="viridis", interpolation="nearest")
    fig.fig.colorbar(im, ax=fig.ax)
    if title is not None:
        fig.title(title)
    if show:
        fig.show()
    return fig
