"""
s2util command line.

Usage Examples:
s2util cell --latitude 36.114574 --longitude -115.180628 --level 24 -v
s2util parents --cell-token 80c8c4245b129
s2util parents_kml --cell-token 80c8c4245b129 > parents.kml

Exit codes: 0 OK, 1 bad arguments, bad --cell-token or KML not written, 2 coordinates not valid,
3 cell from coordinates not valid.
"""

import argparse
import logging
import sys

from s2util import cells
from s2util.config import DEFAULT_ALTITUDE, DRAW_BOXES_STARTING_AT_LEVEL, MAX_LEVEL, version_string
from s2util.exceptions import InvalidLevelError, OutputError, S2UtilError
from s2util.kml_export import build_parents_kml, render_kml, write_kml

logger = logging.getLogger(__name__)

EXIT_USAGE = 1


class ArgumentParser(argparse.ArgumentParser):
    # argparse exits 2 on bad arguments but 2 is reserved for invalid coordinates
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, "%s: error: %s\n" % (self.prog, message))


def level_arg(value):
    try:
        return cells.check_level(int(value))
    except (ValueError, InvalidLevelError) as e:
        raise argparse.ArgumentTypeError(str(e))


def handle_cell(args):
    cellid = cells.cell_from_coordinates(args.latitude, args.longitude, args.level)

    if args.to_binary:
        print(cells.to_binary(cellid, 31))
    else:
        print(cellid.to_token())

    if args.verbose:
        print("")
        print("Cell level: (%d)" % cellid.level())
        latitude, longitude = cells.coordinates_from_cell(cellid)
        print("Coordinates: (%.10f), (%.10f)" % (latitude, longitude))


def handle_parents(args):
    cellid = cells.cell_from_token(args.cell_token)

    for parent in cells.ancestors(cellid):
        latitude, longitude = cells.coordinates_from_cell(parent)
        print("%2d: %16s %s  (%.10f, %.10f)" % (
            parent.level(), parent.to_token(), cells.to_binary(parent, 64), latitude, longitude))


def handle_parents_kml(args):
    cellid = cells.cell_from_token(args.cell_token)
    k = build_parents_kml(cellid, args.cell_token, altitude=args.altitude, boxes_from_level=args.boxes_from_level)

    if args.output:
        try:
            write_kml(k, args.output)
        except OSError as e:
            raise OutputError("Could not write KML: " + str(e))
    else:
        print(render_kml(k))


def build_parser():
    parser = ArgumentParser(prog="s2util", description='Google S2 cell lookup, parents listing and parents KML export')
    parser.add_argument("--version", action="version", version=version_string)
    parser.add_argument("--debug", action="store_true", help='Debug logging to stderr')

    subparsers = parser.add_subparsers(dest="command", metavar="command", required=True)

    cell = subparsers.add_parser("cell", help='Print cell information')
    cell.add_argument("--latitude", type=float, required=True, help='Latitude (decimal)')
    cell.add_argument("--longitude", type=float, required=True, help='Longitude (decimal)')
    cell.add_argument("--to-binary", action="store_true", help='Print as binary')
    cell.add_argument("-v", "--verbose", action="store_true", help='Be verbose')
    cell.add_argument("--level", type=level_arg, default=None,
                      help='Specific level 0-' + str(MAX_LEVEL) + ' (defaults to ' + str(MAX_LEVEL) + ')')
    cell.set_defaults(func=handle_cell)

    parents = subparsers.add_parser("parents", help='Print all parents for the given cell')
    parents.add_argument("--cell-token", required=True, help='Cell token (hex string)')
    parents.set_defaults(func=handle_parents)

    parents_kml = subparsers.add_parser("parents_kml", help='Generate KML showing parents of the cell')
    parents_kml.add_argument("--cell-token", required=True, help='Cell token (hex string)')
    parents_kml.add_argument("--altitude", type=float, default=DEFAULT_ALTITUDE,
                             help='Altitude of KML coordinates (defaults to ' + str(DEFAULT_ALTITUDE) + ')')
    parents_kml.add_argument("--boxes-from-level", type=level_arg, default=DRAW_BOXES_STARTING_AT_LEVEL,
                             help='Draw bounds for this level and coarser (defaults to '
                                  + str(DRAW_BOXES_STARTING_AT_LEVEL) + ')')
    parents_kml.add_argument("-o", "--output", action="store", help='Output KML filename (defaults to stdout)')
    parents_kml.set_defaults(func=handle_parents_kml)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logger.info("Running %s", version_string)

    try:
        args.func(args)
    except S2UtilError as e:
        print(e)
        return e.exit_code

    return 0
