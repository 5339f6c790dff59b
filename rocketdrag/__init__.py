"""Rocket drag analysis: compares a simple drag model with OpenRocket simulations and fits drag coefficients to CFD data."""

from .errors import RocketDragError, NotFoundError, DataFormatError, RankDeficientError
from .data import load_table, load_flight_data, load_samples
from .config import DragConfig
from .model import (
    predict_acceleration,
    vertical_projection,
    build_drag_series,
    find_burnout_time,
    find_apogee_time,
)
from .fit import FittedPolynomial, fit_polynomial, regression_r2, coefficient_of_determination
from .plot import plot_overlay, plot_drag_comparison, plot_samples, plot_fit
from .main import compare_drag_model, fit_cfd_data, analysis_window
