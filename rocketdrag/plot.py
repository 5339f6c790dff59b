"""Plots for comparing the drag model against OpenRocket data, and the CFD fits

"""

import numpy as np
import matplotlib.pyplot as plt

from . import data

__copyright__ = """

    Copyright 2021 The RocketDrag developers

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""


def plot_overlay(series, kind="line", xlabel=None, ylabel=None, title=None, save=None, show=True):
    """
    Plots several named (x, y) series on the same axes.

    Parameters
    ----------
    series : dict or list
        {label: (x, y)} or a list of (label, x, y) tuples. A tuple can also be (label, x, y, kind) to override `kind` for that series.
        Empty series are skipped.
    kind : string, optional
        "line" or "scatter", defaults to "line"
    xlabel, ylabel, title : string, optional
        Axis labels and title
    save : string, optional
        If given, the figure is saved to this file
    show : bool, optional
        Call plt.show(), defaults to True. A figure that is saved but not shown is closed afterwards.

    Returns
    -------
    fig : matplotlib.figure.Figure
    """
    if isinstance(series, dict):
        series = [(label, x, y) for label, (x, y) in series.items()]

    fig, ax = plt.subplots()

    for entry in series:
        label, x, y = entry[:3]
        series_kind = entry[3] if len(entry) > 3 else kind

        if len(x) == 0 or len(y) == 0:
            continue

        if series_kind == "line":
            ax.plot(x, y, label=label)
        elif series_kind == "scatter":
            ax.scatter(x, y, s=12, linewidths=0, label=label)
        else:
            raise ValueError("kind must be 'line' or 'scatter', got '{}'".format(series_kind))

    if xlabel is not None:
        ax.set_xlabel(xlabel)
    if ylabel is not None:
        ax.set_ylabel(ylabel)
    if title is not None:
        ax.set_title(title)

    ax.grid()
    if ax.get_legend_handles_labels()[0]:
        ax.legend()

    if save is not None:
        fig.savefig(save, dpi=160)
        print("Saved plot to '{}'".format(save))
    if show == True:
        plt.show()
    elif save is not None:
        plt.close(fig)

    return fig


def plot_drag_comparison(flight_data, drag_series, save=None, show=True):
    """
    Plots the vertical acceleration from OpenRocket against the drag model prediction. If the model is right the two lines should match.

    Parameters
    ----------
    flight_data : pandas DataFrame
        OpenRocket data, from data.load_flight_data()
    drag_series : pandas DataFrame
        Output of model.build_drag_series()
    """
    return plot_overlay(
        [
            ("OpenRocket", flight_data[data.TIME], flight_data[data.VERTICAL_ACCELERATION]),
            ("Drag model", drag_series["Time"], drag_series["Vertical_Acceleration"]),
        ],
        xlabel="Time (s)",
        ylabel="Vertical acceleration (m/s²)",
        title="Predicted vs simulated vertical acceleration",
        save=save,
        show=show,
    )


def plot_samples(samples, save=None, show=True):
    """Plots added_force against velocity for the raw CFD samples"""
    return plot_overlay(
        [("Data", samples[data.VELOCITY], samples[data.ADDED_FORCE])],
        xlabel=data.VELOCITY,
        ylabel=data.ADDED_FORCE,
        save=save,
        show=show,
    )


def plot_fit(samples, fit, points=200, save=None, show=True):
    """
    Plots the CFD samples with the fitted polynomial over the range of the samples.

    Parameters
    ----------
    samples : pandas DataFrame
        CFD data, from data.load_samples()
    fit : fit.FittedPolynomial
        Fit to the samples
    points : int, optional
        Number of points to draw the fitted curve with, defaults to 200
    """
    x_fit = np.linspace(fit.x_range[0], fit.x_range[1], points)

    return plot_overlay(
        [
            ("Data", samples[data.VELOCITY], samples[data.ADDED_FORCE], "scatter"),
            ("Fit", x_fit, fit(x_fit), "line"),
        ],
        xlabel=data.VELOCITY,
        ylabel=data.ADDED_FORCE,
        title="R² = {:.4f}".format(fit.r2),
        save=save,
        show=show,
    )
