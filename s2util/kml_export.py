"""
Builds a KML showing the parents (lineage) of an S2 cell.

Each parent gets a red Placemark at its centre, parents at DRAW_BOXES_STARTING_AT_LEVEL and coarser
also get a green box around their bounds, and a yellow line joins the parent centres from the finest
level to level 1.
"""

import logging
import pathlib

from fastkml import kml
from fastkml import Placemark
from fastkml.styles import LineStyle, Style, StyleUrl
from pygeoif.geometry import LineString, Point

from s2util.cells import ancestors, bounds_from_cell, coordinates_from_cell
from s2util.config import (
    BOUNDS_STYLE,
    DEFAULT_ALTITUDE,
    DRAW_BOXES_STARTING_AT_LEVEL,
    LINEAGE_LINE_STYLE,
    PLACE_STYLE,
)

logger = logging.getLogger(__name__)


def shared_style(style):
    name, color, width = style
    return Style(id=name, styles=[LineStyle(color=color, width=width)])


def style_url(style):
    return StyleUrl(url="#" + style[0])


def bounds_line(cellid, altitude):
    lat_lo, lat_hi, lng_lo, lng_hi = bounds_from_cell(cellid)
    return LineString([
        (lng_lo, lat_hi, altitude),  # upper left
        (lng_hi, lat_hi, altitude),  # upper right
        (lng_hi, lat_lo, altitude),  # lower right
        (lng_lo, lat_lo, altitude),  # lower left
        (lng_lo, lat_hi, altitude),  # back to upper left
    ])


def build_parents_kml(cellid, token, altitude=DEFAULT_ALTITUDE, boxes_from_level=DRAW_BOXES_STARTING_AT_LEVEL):
    """
    Returns a fastkml KML object for the parents of cellid.

    token is only used to name the lineage line so it reads the same as the command line input.
    """
    doc = kml.Document(
        styles=[shared_style(LINEAGE_LINE_STYLE), shared_style(PLACE_STYLE), shared_style(BOUNDS_STYLE)],
    )

    lineage = []  # parent centres, finest first
    numboxes = 0

    for parent in ancestors(cellid):
        level = parent.level()
        latitude, longitude = coordinates_from_cell(parent)
        lineage.append((longitude, latitude, altitude))

        doc.append(Placemark(
            name="Level (" + str(level) + ") " + parent.to_token(),
            style_url=style_url(PLACE_STYLE),
            geometry=Point(longitude, latitude, altitude),
        ))

        if level <= boxes_from_level:
            doc.append(Placemark(
                name="Level (" + str(level) + ") Bounds",
                style_url=style_url(BOUNDS_STYLE),
                geometry=bounds_line(parent, altitude),
            ))
            numboxes += 1

    # A line needs 2 points, a level 1 cell only has itself
    if len(lineage) > 1:
        doc.append(Placemark(
            name="Cell " + token,
            style_url=style_url(LINEAGE_LINE_STYLE),
            geometry=LineString(lineage),
        ))

    logger.debug("KML for %s: %d parents, %d boxes", token, len(lineage), numboxes)

    k = kml.KML()
    k.append(doc)
    return k


def render_kml(k):
    return k.to_string(prettyprint=True)


def write_kml(k, filename):
    pth = pathlib.Path(filename)
    logger.info("Writing KML to %s", pth)
    k.write(pth)  # Expects a pathlib.Path object
