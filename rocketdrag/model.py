"""Simple drag model for the vertical acceleration of the rocket after burnout.

The vertical acceleration is modelled as

    a_z = -u_z * (C_f[0] + C_f[1]*|v| + C_f[2]*|v|^2) - g

where u_z is the vertical component of the rocket's orientation unit vector, |v| the total velocity and g the
gravitational acceleration. C_f holds the coefficients of the quadratic relationship between velocity and drag found from CFD.

Note
----
We solve for acceleration rather than force, so the coefficients only need to give the right shape of the curve.
They will need converting (i.e. dividing by the mass) once real C_f coefficients are used.
"""

import warnings
import numpy as np
import pandas as pd

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

# Times from the F26FJ-6 304 m simulation, used when they can't be found from the data
DEFAULT_BURNOUT_TIME = 2.6265
DEFAULT_APOGEE_TIME = 8.315


def vertical_projection(zenith_deg):
    """Vertical component of the orientation unit vector, from the zenith angle in degrees"""
    return np.sin(np.asarray(zenith_deg, dtype=float) * np.pi / 180)


def predict_acceleration(u_z, C_f, total_velocity, g):
    """Predicted vertical acceleration from the drag model.

    Works with floats or numpy arrays of equal length. NaN inputs give NaN outputs.

    Args:
        u_z (float): Vertical component of the orientation unit vector.
        C_f (array): The 3 drag coefficients [constant, linear, quadratic].
        total_velocity (float): Total velocity (m/s).
        g (float): Gravitational acceleration (m/s^2).

    Returns:
        float: Vertical acceleration (m/s^2).
    """
    C_f = np.asarray(C_f, dtype=float)
    if C_f.shape != (3,):
        raise ValueError("C_f must have exactly 3 coefficients, got {}".format(C_f.shape))

    drag = C_f[0] + C_f[1] * total_velocity + C_f[2] * total_velocity ** 2
    return -u_z * drag - g


def build_drag_series(flight_data, C_f, t_start, t_end):
    """Evaluate the drag model over the rows of the flight data between two times.

    Rows with t_start <= time <= t_end are used, in the order they appear. Rows outside are skipped, not zero filled.

    Args:
        flight_data (pandas.DataFrame): OpenRocket data, e.g. from data.load_flight_data().
        C_f (array): The 3 drag coefficients.
        t_start (float): Start of the window (s), e.g. burnout.
        t_end (float): End of the window (s), e.g. apogee.

    Returns:
        pandas.DataFrame: Columns "Time" and "Vertical_Acceleration".
    """
    time = flight_data[data.TIME]
    window = flight_data[(time >= t_start) & (time <= t_end)]

    if len(window) == 0:
        warnings.warn("No data between t={} s and t={} s, the drag series is empty".format(t_start, t_end))

    u_z = vertical_projection(window[data.ZENITH].to_numpy())
    total_velocity = window[data.TOTAL_VELOCITY].to_numpy(dtype=float)
    g = window[data.GRAVITY].to_numpy(dtype=float)

    return pd.DataFrame(
        {
            "Time": window[data.TIME].to_numpy(dtype=float),
            "Vertical_Acceleration": predict_acceleration(u_z, C_f, total_velocity, g),
        }
    )


def find_burnout_time(flight_data, default=DEFAULT_BURNOUT_TIME):
    """Time of the last sample with positive thrust, or `default` if there is no thrust data"""
    if data.THRUST not in flight_data.columns:
        return default

    burning = flight_data[flight_data[data.THRUST] > 0]
    if len(burning) == 0:
        warnings.warn("The thrust never goes above zero, using burnout at t={} s".format(default))
        return default

    return float(burning[data.TIME].iloc[-1])


def find_apogee_time(flight_data, default=DEFAULT_APOGEE_TIME):
    """Time of the highest altitude, or `default` if there is no altitude data"""
    if data.ALTITUDE not in flight_data.columns or flight_data[data.ALTITUDE].isna().all():
        return default

    return float(flight_data.loc[flight_data[data.ALTITUDE].idxmax(), data.TIME])
