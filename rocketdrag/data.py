"""Loading of OpenRocket simulation exports and CFD sample tables.

Column names are matched exactly, including the units OpenRocket puts in its
headers, so e.g. ``"Time (s)"`` and ``"Time"`` are different columns.

Workbooks (.xlsx, .xlsm) are read with pandas/openpyxl. OpenRocket's own .csv
export is also accepted: its header line starts with ``#`` and the flight
events are written as further ``#`` comment lines, both of which are handled.
"""

import io
import os
import zipfile

import pandas as pd

from .errors import RocketDragError, NotFoundError, DataFormatError

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

# OpenRocket headers used by the drag model comparison
TIME = "Time (s)"
ZENITH = "Vertical orientation (zenith) (°)"
TOTAL_VELOCITY = "Total velocity (m/s)"
GRAVITY = "Gravitational acceleration (m/s²)"
VERTICAL_ACCELERATION = "Vertical acceleration (m/s²)"
ALTITUDE = "Altitude (m)"
THRUST = "Thrust (N)"

FLIGHT_COLUMNS = [TIME, ZENITH, TOTAL_VELOCITY, GRAVITY, VERTICAL_ACCELERATION]

# CFD sample table headers
VELOCITY = "velocity"
ADDED_FORCE = "added_force"

SAMPLE_COLUMNS = [VELOCITY, ADDED_FORCE]

EXCEL_EXTENSIONS = (".xlsx", ".xlsm")
CSV_EXTENSIONS = (".csv",)


def _read_openrocket_csv(path):
    with open(path, encoding="utf-8") as csvfile:
        lines = csvfile.readlines()

    if len(lines) == 0:
        raise DataFormatError("'{}' is empty".format(path))

    # OpenRocket comments out the header, so only the first line is kept if it starts with '#'
    header = lines[0].lstrip("#").strip()
    body = [line for line in lines[1:] if not line.lstrip().startswith("#")]

    return pd.read_csv(io.StringIO("\n".join([header] + [line.rstrip("\n") for line in body])))


def _read_workbook(path, sheet):
    with pd.ExcelFile(path) as workbook:
        if isinstance(sheet, int):
            if sheet < 0 or sheet >= len(workbook.sheet_names):
                raise NotFoundError(
                    "'{}' has {} sheet(s), sheet index {} does not exist".format(
                        path, len(workbook.sheet_names), sheet
                    )
                )
        elif sheet not in workbook.sheet_names:
            raise NotFoundError(
                "'{}' has no sheet named '{}', available sheets are {}".format(
                    path, sheet, workbook.sheet_names
                )
            )

        return workbook.parse(sheet)


def _to_numeric(table, column, path):
    raw = table[column]
    numeric = pd.to_numeric(raw, errors="coerce")

    # Empty cells are allowed to become NaN, anything else that fails to parse is an error
    bad = numeric.isna() & raw.notna() & (raw.astype(str).str.strip() != "")
    if bad.any():
        row = bad.idxmax()
        raise DataFormatError(
            "Column '{}' of '{}' must be numeric, but row {} holds {!r}".format(
                column, path, row, raw[row]
            )
        )

    return numeric.astype(float)


def load_table(path, sheet=0, columns=None):
    """Read a table from a workbook or csv file into a pandas DataFrame.

    Args:
        path (str): Path to a .xlsx/.xlsm workbook or a .csv file.
        sheet (str or int, optional): Sheet name or 0-based sheet index. Ignored for .csv files. Defaults to 0.
        columns (list, optional): Headers that must be present and numeric. These are converted to float. Defaults to None.

    Raises:
        NotFoundError: The file or the sheet does not exist.
        DataFormatError: The file type isn't supported, the file can't be read, or a column in `columns` is missing or holds a value that is not a number.

    Returns:
        pandas.DataFrame: The table, rows in file order.
    """
    if not os.path.isfile(path):
        raise NotFoundError("Input file '{}' does not exist".format(path))

    extension = os.path.splitext(str(path))[1].lower()
    if extension not in EXCEL_EXTENSIONS + CSV_EXTENSIONS:
        raise DataFormatError(
            "'{}' has an unsupported file type '{}', use one of {}".format(
                path, extension, list(EXCEL_EXTENSIONS + CSV_EXTENSIONS)
            )
        )

    try:
        if extension in EXCEL_EXTENSIONS:
            table = _read_workbook(path, sheet)
        else:
            table = _read_openrocket_csv(path)
    except RocketDragError:
        # Missing sheets and empty files already have the right error
        raise
    except (ValueError, pd.errors.ParserError, zipfile.BadZipFile, UnicodeDecodeError) as e:
        raise DataFormatError("'{}' could not be read: {}".format(path, e)) from e

    if columns is not None:
        missing = [column for column in columns if column not in table.columns]
        if len(missing) > 0:
            raise DataFormatError(
                "'{}' is missing column(s) {}, found {}".format(
                    path, missing, table.columns.tolist()
                )
            )

        for column in columns:
            table[column] = _to_numeric(table, column, path)

    return table


def load_flight_data(path, sheet="raw-data"):
    """Load an OpenRocket simulation export for the drag model comparison.

    The default sheet name is the one used for the export with OpenRocket's comment rows removed.
    """
    table = load_table(path, sheet, FLIGHT_COLUMNS)

    # Only used to find the analysis window, so they are converted if present but not required
    for column in (ALTITUDE, THRUST):
        if column in table.columns:
            table[column] = _to_numeric(table, column, path)

    return table


def load_samples(path, sheet=0):
    """Load a velocity vs added_force table from CFD results"""
    return load_table(path, sheet, SAMPLE_COLUMNS)
