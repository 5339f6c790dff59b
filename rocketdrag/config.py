"""Run parameters for the drag model comparison.

The parameters can be loaded from a JSON run file, for example::

    {
        "C_f": [0.0, 0.01, 0.002],
        "window_start": 2.6265,
        "window_end": 8.315,
        "coefficient_range": [-1, 1]
    }

`window_start` and `window_end` may be left out (or set to null), in which case burnout and apogee are found from the data.
"""

import json
import numpy as np

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

DEFAULT_COEFFICIENT_RANGE = (-1.0, 1.0)


class DragConfig:
    """Parameters for one run of the drag model comparison.

    Args:
        C_f (list, optional): The 3 drag coefficients [constant, linear, quadratic]. Defaults to [0, 0, 0].
        window_start (float, optional): Start of the analysis window (s). Defaults to None (burnout, found from the data).
        window_end (float, optional): End of the analysis window (s). Defaults to None (apogee, found from the data).
        coefficient_range (tuple, optional): Allowed (min, max) of each coefficient. Defaults to (-1, 1).

    Raises:
        ValueError: If there aren't 3 coefficients, a coefficient is outside coefficient_range, or window_start > window_end.
    """

    def __init__(self, C_f=(0.0, 0.0, 0.0), window_start=None, window_end=None, coefficient_range=DEFAULT_COEFFICIENT_RANGE):
        self.C_f = np.array(C_f, dtype=float)
        self.window_start = None if window_start is None else float(window_start)
        self.window_end = None if window_end is None else float(window_end)
        self.coefficient_range = (float(coefficient_range[0]), float(coefficient_range[1]))

        self.validate()

    def validate(self):
        if self.C_f.shape != (3,):
            raise ValueError("C_f must have exactly 3 coefficients, got {}".format(self.C_f.tolist()))

        low, high = self.coefficient_range
        if low > high:
            raise ValueError("coefficient_range must be (min, max), got {}".format(self.coefficient_range))

        for i, c in enumerate(self.C_f):
            if not low <= c <= high:
                raise ValueError("C_f[{}]={} is outside the allowed range [{}, {}]".format(i, c, low, high))

        if self.window_start is not None and self.window_end is not None and self.window_start > self.window_end:
            raise ValueError(
                "window_start ({} s) must not be after window_end ({} s)".format(self.window_start, self.window_end)
            )

    def updated(self, **changes):
        """Return a copy with some parameters replaced. Parameters given as None are left unchanged."""
        values = self.to_dict()
        values.update({key: value for key, value in changes.items() if value is not None})
        return DragConfig(**values)

    def to_dict(self):
        return {
            "C_f": self.C_f.tolist(),
            "window_start": self.window_start,
            "window_end": self.window_end,
            "coefficient_range": list(self.coefficient_range),
        }

    @staticmethod
    def from_dict(dictionary):
        unknown = set(dictionary) - {"C_f", "window_start", "window_end", "coefficient_range"}
        if len(unknown) > 0:
            raise ValueError("Unknown config key(s) {}".format(sorted(unknown)))

        return DragConfig(**dictionary)

    @staticmethod
    def from_json(run_file):
        """Load the parameters from a JSON run file"""
        with open(run_file, "r") as f:
            dictionary = json.load(f)

        return DragConfig.from_dict(dictionary)

    def __repr__(self):
        return "DragConfig(C_f={}, window_start={}, window_end={})".format(
            self.C_f.tolist(), self.window_start, self.window_end
        )
