"""Exceptions raised while loading data or fitting drag coefficients."""

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


class RocketDragError(Exception):
    """Base class for all errors raised by rocketdrag"""


class NotFoundError(RocketDragError, FileNotFoundError):
    """The input file, or the sheet requested from it, does not exist"""


class DataFormatError(RocketDragError, ValueError):
    """A required column is missing or holds values that are not numbers"""


class RankDeficientError(RocketDragError, ValueError):
    """Not enough distinct samples to fit a polynomial of the requested degree"""
