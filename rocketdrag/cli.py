"""Command line interface.

Examples::

    rocketdrag compare "sim-(F26FJ-6)-304m.xlsx" --cf 0 0.01 0.002 --start 2.6265 --end 8.315
    rocketdrag compare sim.csv --config run.json --export drag.csv --no-show
    rocketdrag fit vel-drag_sample.xlsx --degree 2 --save-plot fit.png
"""

import argparse
import sys

from .config import DragConfig
from .errors import RocketDragError
from .main import compare_drag_model, fit_cfd_data

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

SHEET_HELP = (
    "Sheet name, or 0-based sheet index if it is a whole number, so a sheet named e.g. '2021' "
    "can't be picked by name (default: {}). Ignored for csv files"
)


def sheet_arg(value):
    """Sheets given as a whole number are 0-based indexes, anything else is a sheet name"""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser():
    parser = argparse.ArgumentParser(prog="rocketdrag", description="Rocket drag analysis of OpenRocket and CFD data")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser("compare", help="Compare the drag model with an OpenRocket simulation")
    compare.add_argument("flight_file", help="Workbook or csv exported from OpenRocket")
    compare.add_argument("--sheet", type=sheet_arg, default="raw-data", help=SHEET_HELP.format("raw-data"))
    compare.add_argument("--config", help="JSON run file with C_f, window_start and window_end")
    compare.add_argument("--cf", type=float, nargs=3, metavar=("C_F1", "C_F2", "C_F3"), help="Drag coefficients")
    compare.add_argument("--start", type=float, help="Window start (s), defaults to burnout")
    compare.add_argument("--end", type=float, help="Window end (s), defaults to apogee")

    fit = subparsers.add_parser("fit", help="Fit C_f to CFD velocity vs added_force data")
    fit.add_argument("sample_file", help="Workbook or csv with velocity and added_force columns")
    fit.add_argument("--sheet", type=sheet_arg, default=0, help=SHEET_HELP.format("0"))
    fit.add_argument("--degree", type=int, default=2, help="Degree of the polynomial (default: 2)")

    for subparser in (compare, fit):
        subparser.add_argument("--export", help="Export the results to this csv file")
        subparser.add_argument("--save-plot", help="Save the plot to this file")
        subparser.add_argument("--no-show", action="store_true", help="Don't open the plot window")
        subparser.add_argument("--debug", action="store_true", help="Print extra information")

    return parser


def run(args):
    if args.command == "compare":
        config = DragConfig.from_json(args.config) if args.config is not None else DragConfig()
        config = config.updated(C_f=args.cf, window_start=args.start, window_end=args.end)

        compare_drag_model(
            args.flight_file,
            config,
            sheet=args.sheet,
            export=args.export,
            plot=not args.no_show,
            save_plot=args.save_plot,
            debug=args.debug,
        )
    else:
        fit = fit_cfd_data(
            args.sample_file,
            sheet=args.sheet,
            degree=args.degree,
            export=args.export,
            plot=not args.no_show,
            save_plot=args.save_plot,
            debug=args.debug,
        )
        print("C_f = {}".format(fit.coefficients.tolist()))
        print("R^2 = {:.6f}".format(fit.r2))


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        run(args)
    except (RocketDragError, ValueError, OSError) as e:
        print("rocketdrag: error: {}".format(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
