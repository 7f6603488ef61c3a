"""
Conversions between lat/long coordinates, S2 cellids and cell tokens.

All the geometry is done by the s2sphere library:
https://github.com/sidewalklabs/s2sphere

s2sphere documentation at:
http://s2sphere.sidewalklabs.com/en/latest/index.html

For testing mapping, see:
http://s2map.com
"""

import logging
import re

import s2sphere

from s2util.config import MAX_LEVEL
from s2util.exceptions import InvalidCellError, InvalidCoordinatesError, InvalidLevelError, InvalidTokenError

logger = logging.getLogger(__name__)

# Tokens are up to 16 hex chars (64 bits) with the trailing zeros removed
TOKEN_PATTERN = re.compile(r"^[0-9a-fA-F]{1,16}$")


def check_level(level):
    if not 0 <= level <= MAX_LEVEL:
        raise InvalidLevelError("Level must be between 0 and " + str(MAX_LEVEL) + " (got " + str(level) + ")")
    return level


def cell_from_coordinates(latitude, longitude, level=None):
    """Returns the leaf cellid holding the given lat/long, or its parent at level if given."""
    # LatLng.from_degrees is used rather than building the LatLng from angles and normalizing,
    # otherwise the cell does not convert back to the original lat/long
    pos = s2sphere.LatLng.from_degrees(latitude, longitude)
    if not pos.is_valid():
        raise InvalidCoordinatesError("Coordinates not valid.")

    cellid = s2sphere.CellId.from_lat_lng(pos)
    if not cellid.is_valid():
        raise InvalidCellError("Cell not valid.")

    if level is not None:
        cellid = cellid.parent(check_level(level))

    logger.debug("(%r, %r) -> cellid %d at level %d", latitude, longitude, cellid.id(), cellid.level())
    return cellid


def cell_from_token(token):
    if not TOKEN_PATTERN.match(token):
        raise InvalidTokenError("Cell not valid.")

    cellid = s2sphere.CellId.from_token(token)
    if not cellid.is_valid():
        raise InvalidTokenError("Cell not valid.")

    logger.debug("token %s -> cellid %d at level %d", token, cellid.id(), cellid.level())
    return cellid


def coordinates_from_cell(cellid):
    """Returns the (latitude, longitude) in degrees of the cell centre."""
    ll = cellid.to_lat_lng()
    return ll.lat().degrees, ll.lng().degrees


def bounds_from_cell(cellid):
    """Returns the cell bounding rectangle as (lat_lo, lat_hi, lng_lo, lng_hi) in degrees."""
    rect = s2sphere.Cell(cellid).get_rect_bound()
    return rect.lat_lo().degrees, rect.lat_hi().degrees, rect.lng_lo().degrees, rect.lng_hi().degrees


def ancestors(cellid):
    """
    Yields the cell and each of its parents, finest first, stopping at level 1.
    A face cell (level 0) has no entries.
    """
    for level in range(cellid.level(), 0, -1):
        yield cellid.parent(level)


def to_binary(cellid, width):
    return format(cellid.id(), "0" + str(width) + "b")
