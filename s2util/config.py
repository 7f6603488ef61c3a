"""Defaults shared by the s2util subcommands."""

version_string = "s2util v2026-10-17"

# S2 leaf cells are level 30
MAX_LEVEL = 30

# Height (metres) given to every KML coordinate
DEFAULT_ALTITUDE = 100.0

# Bounding boxes are only drawn at this level and coarser, finer boxes are too clumped together
DRAW_BOXES_STARTING_AT_LEVEL = 15

# KML colors are aabbggrr
LINEAGE_LINE_STYLE = ("YellowLine", "7f00ffff", 4)
PLACE_STYLE = ("RedPlaces", "7f0000ff", 4)
BOUNDS_STYLE = ("GreenPoly", "7f00ff00", 10)
