"""
The two drag analyses. Each one loads its input fresh, computes, and optionally plots and exports.

Drag model comparison:

- Load the OpenRocket simulation (no airbrake deployment) exported to a workbook.
- Evaluate the drag model between burnout and apogee with the coefficients in a DragConfig.
- Plot the prediction over the simulated vertical acceleration. With the right C_f the two should line up.

CFD analysis:

- Load velocity vs added_force samples from CFD.
- Fit a quadratic, which gives C_f as a function of velocity.
- Plot the fit over the samples and report R^2.

Changing a parameter means calling the function again with a new DragConfig, nothing is cached between calls.
"""

import warnings
import pandas as pd

from . import data
from .config import DragConfig
from .model import build_drag_series, find_burnout_time, find_apogee_time
from .fit import fit_polynomial
from .plot import plot_drag_comparison, plot_fit

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


def warning_on_one_line(message, category, filename, lineno, file=None, line=None):
    """A one line warning format

    Args:
        message (Warning or str): Warning message.
        category (type): Warning class.
        filename (str): File the warning was issued from.
        lineno (int): Line the warning was issued from.
        file (file, optional): Unused. Defaults to None.
        line (str, optional): Unused. Defaults to None.

    Returns:
        str: The formatted warning.
    """
    return "%s:%s: %s:%s\n" % (filename, lineno, category.__name__, message)


warnings.formatwarning = warning_on_one_line


def analysis_window(flight_data, config):
    """(start, end) of the window to compare over. Missing ends are taken as burnout and apogee."""
    t_start = config.window_start
    t_end = config.window_end

    if t_start is None:
        t_start = find_burnout_time(flight_data)
    if t_end is None:
        t_end = find_apogee_time(flight_data)

    if t_start > t_end:
        raise ValueError("The analysis window starts at {} s, after it ends at {} s".format(t_start, t_end))

    return t_start, t_end


def compare_drag_model(flight_file, config=None, sheet="raw-data", export=None, plot=True, save_plot=None, debug=False):
    """Compare the drag model prediction with the vertical acceleration of an OpenRocket simulation.

    Args:
        flight_file (str): Workbook or csv exported from OpenRocket.
        config (DragConfig, optional): Coefficients and window. Defaults to DragConfig() (all coefficients zero, window from the data).
        sheet (str or int, optional): Sheet of the workbook with the data. Defaults to "raw-data".
        export (str, optional): Export the predicted series to this .csv file. Defaults to None.
        plot (bool, optional): Show the comparison plot. Defaults to True.
        save_plot (str, optional): Save the comparison plot to this file. Defaults to None.
        debug (bool, optional): Print the window and series length. Defaults to False.

    Returns:
        pandas.DataFrame: Predicted series, columns "Time" and "Vertical_Acceleration".
    """
    if config is None:
        config = DragConfig()

    flight_data = data.load_flight_data(flight_file, sheet)
    t_start, t_end = analysis_window(flight_data, config)

    drag_series = build_drag_series(flight_data, config.C_f, t_start, t_end)

    if debug == True:
        print("C_f={}, window t={:.4f} s to t={:.4f} s, {} of {} rows used".format(
            config.C_f.tolist(), t_start, t_end, len(drag_series), len(flight_data)
        ))

    if export is not None:
        drag_series.to_csv(export, index=False)
        print("Exported drag series to '{}'".format(export))

    if plot == True or save_plot is not None:
        plot_drag_comparison(flight_data, drag_series, save=save_plot, show=plot)

    return drag_series


def fit_cfd_data(sample_file, sheet=0, degree=2, export=None, plot=True, save_plot=None, debug=False):
    """Fit C_f to CFD velocity vs added_force samples.

    Args:
        sample_file (str): Workbook or csv with "velocity" and "added_force" columns.
        sheet (str or int, optional): Sheet of the workbook with the data. Defaults to 0.
        degree (int, optional): Degree of the fitted polynomial. Defaults to 2.
        export (str, optional): Export the coefficients and R^2 to this .csv file. Defaults to None.
        plot (bool, optional): Show the fit over the data. Defaults to True.
        save_plot (str, optional): Save the plot to this file. Defaults to None.
        debug (bool, optional): Print the fit. Defaults to False.

    Returns:
        fit.FittedPolynomial: The fit, coefficients lowest degree first.
    """
    samples = data.load_samples(sample_file, sheet)
    fit = fit_polynomial(samples[data.VELOCITY], samples[data.ADDED_FORCE], degree)

    if debug == True:
        print(fit)
        print("R^2 of the fit itself: {:.6f}".format(fit.fit_r2))

    if export is not None:
        pd.DataFrame(
            {
                "term": ["C_f{}".format(i + 1) for i in range(len(fit.coefficients))] + ["r2", "fit_r2"],
                "value": fit.coefficients.tolist() + [fit.r2, fit.fit_r2],
            }
        ).to_csv(export, index=False)
        print("Exported fit to '{}'".format(export))

    if plot == True or save_plot is not None:
        plot_fit(samples, fit, save=save_plot, show=plot)

    return fit
