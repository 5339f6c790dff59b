import os
import unittest
import warnings

import numpy as np
import pandas as pd

import rocketdrag as rd
from rocketdrag import data

TEST_DIR = os.path.dirname(os.path.abspath(__file__))


def make_flight_data(times, zenith=90.0, velocity=10.0, g=9.81):
    n = len(times)
    return pd.DataFrame(
        {
            data.TIME: np.array(times, dtype=float),
            data.ZENITH: np.full(n, zenith),
            data.TOTAL_VELOCITY: np.full(n, velocity),
            data.GRAVITY: np.full(n, g),
            data.VERTICAL_ACCELERATION: np.zeros(n),
        }
    )


class PredictAccelerationTest(unittest.TestCase):
    def test_zero_coefficients_give_gravity(self):
        for u_z in [-1.0, -0.3, 0.0, 0.5, 1.0]:
            for v in [0.0, 12.5, 300.0]:
                self.assertEqual(rd.predict_acceleration(u_z, [0, 0, 0], v, 9.81), -9.81)

    def test_formula(self):
        # -1 * (0.1 + 0.2*10 + 0.3*100) - 9.8
        self.assertAlmostEqual(rd.predict_acceleration(1.0, [0.1, 0.2, 0.3], 10.0, 9.8), -41.9)
        self.assertAlmostEqual(rd.predict_acceleration(0.5, [1.0, 0.0, 0.0], 50.0, 0.0), -0.5)

    def test_monotonic_in_velocity(self):
        velocities = np.linspace(0, 300, 301)
        for C_f in [[0, 0.01, 0.002], [0.5, 0, 0.001], [0, 0.3, 0]]:
            acceleration = rd.predict_acceleration(0.8, C_f, velocities, 9.81)
            self.assertTrue(np.all(np.diff(acceleration) <= 0))

    def test_nan_propagates(self):
        self.assertTrue(np.isnan(rd.predict_acceleration(1.0, [0, 0, 1], np.nan, 9.81)))
        self.assertTrue(np.isnan(rd.predict_acceleration(1.0, [0, 0, 1], 10.0, np.nan)))

    def test_wrong_number_of_coefficients(self):
        with self.assertRaises(ValueError):
            rd.predict_acceleration(1.0, [0, 0], 10.0, 9.81)

    def test_vertical_projection(self):
        self.assertAlmostEqual(float(rd.vertical_projection(90)), 1.0)
        self.assertAlmostEqual(float(rd.vertical_projection(0)), 0.0)
        self.assertAlmostEqual(float(rd.vertical_projection(30)), 0.5)


class BuildDragSeriesTest(unittest.TestCase):
    def test_window_is_inclusive(self):
        flight_data = make_flight_data([1, 2, 3, 4, 5, 6])
        series = rd.build_drag_series(flight_data, [0, 0, 0], 2.0, 5.0)

        self.assertEqual(len(series), 4)
        self.assertEqual(series["Time"].tolist(), [2.0, 3.0, 4.0, 5.0])

    def test_keeps_input_order(self):
        flight_data = make_flight_data([5, 3, 4, 9, 2])
        series = rd.build_drag_series(flight_data, [0, 0, 0], 2.0, 5.0)
        self.assertEqual(series["Time"].tolist(), [5.0, 3.0, 4.0, 2.0])

    def test_gravity_and_velocity_are_separate(self):
        flight_data = make_flight_data([0, 1, 2], velocity=100.0, g=9.81)

        zero = rd.build_drag_series(flight_data, [0, 0, 0], 0, 2)
        np.testing.assert_allclose(zero["Vertical_Acceleration"], -9.81)

        quadratic = rd.build_drag_series(flight_data, [0, 0, 0.01], 0, 2)
        np.testing.assert_allclose(quadratic["Vertical_Acceleration"], -100.0 - 9.81)

    def test_uses_zenith_in_degrees(self):
        flight_data = make_flight_data([0], zenith=30.0, velocity=10.0, g=0.0)
        series = rd.build_drag_series(flight_data, [0, 0, 1], 0, 0)
        self.assertAlmostEqual(series["Vertical_Acceleration"][0], -50.0)

    def test_empty_window(self):
        flight_data = make_flight_data([1, 2, 3])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            series = rd.build_drag_series(flight_data, [0, 0, 0], 10.0, 20.0)

        self.assertEqual(len(series), 0)
        self.assertEqual(list(series.columns), ["Time", "Vertical_Acceleration"])
        self.assertTrue(any("empty" in str(w.message) for w in caught))

    def test_nan_row_is_kept(self):
        flight_data = make_flight_data([0, 1, 2])
        flight_data.loc[1, data.TOTAL_VELOCITY] = np.nan
        series = rd.build_drag_series(flight_data, [0, 0, 1], 0, 2)

        self.assertEqual(len(series), 3)
        self.assertTrue(np.isnan(series["Vertical_Acceleration"][1]))
        self.assertFalse(np.isnan(series["Vertical_Acceleration"][0]))


class EventTimesTest(unittest.TestCase):
    def setUp(self):
        self.flight_data = rd.load_flight_data(os.path.join(TEST_DIR, "testflight.csv"))

    def test_burnout(self):
        self.assertEqual(rd.find_burnout_time(self.flight_data), 2.0)

    def test_apogee(self):
        self.assertEqual(rd.find_apogee_time(self.flight_data), 8.0)

    def test_defaults_without_columns(self):
        flight_data = make_flight_data([0, 1, 2])
        self.assertEqual(rd.find_burnout_time(flight_data), 2.6265)
        self.assertEqual(rd.find_apogee_time(flight_data), 8.315)


if __name__ == "__main__":
    unittest.main()
