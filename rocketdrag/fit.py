"""Least squares polynomial fits of CFD force data, used to find C_f.

Coefficients are always ordered from lowest to highest degree, i.e. [c0, c1, c2] for c0 + c1*x + c2*x^2,
which is the same order the drag model in model.py takes them in.
"""

import warnings
import numpy as np
import scipy.stats

from .errors import RankDeficientError

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


class FittedPolynomial:
    """Result of a polynomial fit.

    Note
    ----
    `r2` is found by a linear regression of the fitted curve's
    output f(velocity) against the sampled added_force. This is not the usual R^2 of the fit (it regresses the
    fit against the data rather than the data against velocity), so `fit_r2` = 1 - SS_res/SS_tot is given as well.

    Args:
        coefficients (array): Polynomial coefficients, lowest degree first.
        r2 (float): R^2 of the linear regression of f(x) against y.
        fit_r2 (float): Coefficient of determination of the fit itself.
        x_range (tuple): (min, max) of the x data used for the fit.

    Attributes:
        coefficients (numpy.ndarray): Polynomial coefficients, lowest degree first. Read only.
        degree (int): Degree of the polynomial.
        r2 (float): R^2 of the linear regression of f(x) against y.
        fit_r2 (float): Coefficient of determination of the fit itself.
        x_range (tuple): (min, max) of the x data used for the fit.
    """

    def __init__(self, coefficients, r2, fit_r2, x_range):
        self.coefficients = np.array(coefficients, dtype=float)
        self.coefficients.setflags(write=False)
        self.r2 = float(r2)
        self.fit_r2 = float(fit_r2)
        self.x_range = x_range

    @property
    def degree(self):
        return len(self.coefficients) - 1

    def __call__(self, x):
        return np.polynomial.polynomial.polyval(x, self.coefficients)

    def __repr__(self):
        terms = " + ".join(
            "{:.6g}*x^{}".format(c, i) if i > 0 else "{:.6g}".format(c)
            for i, c in enumerate(self.coefficients)
        )
        return "FittedPolynomial({}, r2={:.6f})".format(terms, self.r2)

    def to_dict(self):
        return {
            "coefficients": self.coefficients.tolist(),
            "r2": self.r2,
            "fit_r2": self.fit_r2,
        }


def coefficient_of_determination(y, y_fit):
    """1 - SS_res/SS_tot. Gives 1.0 when the data has no variance and the fit is exact."""
    y = np.asarray(y, dtype=float)
    ss_res = np.sum((y - y_fit) ** 2)
    ss_tot = np.sum((y - np.mean(y)) ** 2)

    if ss_tot == 0:
        return 1.0 if ss_res == 0 else 0.0

    return 1 - ss_res / ss_tot


def regression_r2(y, y_fit):
    """R^2 of an ordinary least squares regression y_fit ~ y, as used for the airbrake CFD results"""
    if np.ptp(y) == 0 or np.ptp(y_fit) == 0:
        # linregress can't regress against a constant
        return 1.0 if np.allclose(y, y_fit) else 0.0

    regression = scipy.stats.linregress(y, y_fit)
    return regression.rvalue ** 2


def fit_polynomial(x, y, degree=2):
    """Least squares fit of a polynomial to (x, y) data.

    Args:
        x (array): Independent variable, e.g. velocity (m/s).
        y (array): Dependent variable, e.g. added_force (N).
        degree (int, optional): Degree of the polynomial. Defaults to 2.

    Raises:
        RankDeficientError: There are fewer than degree + 1 distinct x values, so the fit has no unique solution.

    Returns:
        FittedPolynomial: The fit, with coefficients lowest degree first.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    if x.shape != y.shape:
        raise ValueError("x and y must have the same length, got {} and {}".format(len(x), len(y)))
    if degree < 0:
        raise ValueError("degree must be non-negative, got {}".format(degree))

    valid = ~(np.isnan(x) | np.isnan(y))
    if not valid.all():
        warnings.warn("Ignoring {} sample(s) with missing values".format(np.count_nonzero(~valid)))
        x = x[valid]
        y = y[valid]

    distinct = len(np.unique(x))
    if distinct < degree + 1:
        raise RankDeficientError(
            "A degree {} fit needs at least {} distinct x values, only {} were given".format(
                degree, degree + 1, distinct
            )
        )

    coefficients = np.polynomial.polynomial.polyfit(x, y, degree)
    y_fit = np.polynomial.polynomial.polyval(x, coefficients)

    return FittedPolynomial(
        coefficients,
        r2=regression_r2(y, y_fit),
        fit_r2=coefficient_of_determination(y, y_fit),
        x_range=(float(np.min(x)), float(np.max(x))),
    )
