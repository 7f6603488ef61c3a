import math

import pytest
import s2sphere

from s2util.cells import (
    ancestors,
    bounds_from_cell,
    cell_from_coordinates,
    cell_from_token,
    coordinates_from_cell,
    to_binary,
)
from s2util.exceptions import InvalidCellError, InvalidCoordinatesError, InvalidLevelError, InvalidTokenError
from tests.conftest import FIXTURE_CELLID, FIXTURE_LEVEL, FIXTURE_TOKEN


def test_known_coordinates_give_known_cellid(fixture_cell) -> None:
    assert fixture_cell.id() == FIXTURE_CELLID
    assert fixture_cell.level() == FIXTURE_LEVEL
    assert fixture_cell.to_token() == FIXTURE_TOKEN


def test_default_level_is_leaf() -> None:
    assert cell_from_coordinates(-33.8688, 151.2093).level() == 30


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (36.114574, -115.180628),
        (-33.8688, 151.2093),
        (0.0, 0.0),
        (89.9999, 179.9999),
        (-90.0, -180.0),
    ],
)
def test_leaf_cell_round_trips_to_coordinates(lat: float, lon: float) -> None:
    latitude, longitude = coordinates_from_cell(cell_from_coordinates(lat, lon))

    assert abs(latitude - lat) < 1e-6
    # longitude is meaningless at the poles and wraps at the antimeridian
    if abs(lat) < 89.0:
        assert abs(longitude - lon) < 1e-6


def test_parent_cell_contains_original_coordinates() -> None:
    cellid = cell_from_coordinates(51.5007, -0.1246, 12)
    lat_lo, lat_hi, lng_lo, lng_hi = bounds_from_cell(cellid)

    assert lat_lo <= 51.5007 <= lat_hi
    assert lng_lo <= -0.1246 <= lng_hi


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (-90.0001, 0.0),
        (90.0001, 0.0),
        (0.0, -180.0001),
        (0.0, 180.0001),
        (math.nan, 0.0),
        (0.0, math.inf),
    ],
)
def test_invalid_coordinates_are_rejected(lat: float, lon: float) -> None:
    with pytest.raises(InvalidCoordinatesError) as excinfo:
        cell_from_coordinates(lat, lon)

    assert excinfo.value.exit_code == 2


@pytest.mark.parametrize("level", [-1, 31, 64])
def test_out_of_range_level_is_rejected(level: int) -> None:
    with pytest.raises(InvalidLevelError):
        cell_from_coordinates(0.0, 0.0, level)


def test_token_parses_to_same_cell(fixture_cell) -> None:
    assert cell_from_token(FIXTURE_TOKEN) == fixture_cell
    assert cell_from_token(FIXTURE_TOKEN.upper()) == fixture_cell


@pytest.mark.parametrize("token", ["", "X", "xyz", "0x80c8", " 80c8", "0", "1" * 17, "80c8g"])
def test_invalid_tokens_are_rejected(token: str) -> None:
    with pytest.raises(InvalidTokenError) as excinfo:
        cell_from_token(token)

    assert excinfo.value.exit_code == 1


def test_only_cells_from_coordinates_exit_3() -> None:
    assert InvalidCellError("Cell not valid.").exit_code == 3
    assert issubclass(InvalidTokenError, InvalidCellError)


def test_ancestors_run_from_cell_down_to_level_one(fixture_cell) -> None:
    chain = list(ancestors(fixture_cell))
    levels = [c.level() for c in chain]

    assert chain[0] == fixture_cell
    assert levels == list(range(FIXTURE_LEVEL, 0, -1))
    assert all(a > b for a, b in zip(levels, levels[1:]))


def test_ancestors_all_contain_the_cell(fixture_cell) -> None:
    for parent in ancestors(fixture_cell):
        assert parent.contains(fixture_cell)


def test_face_cell_has_no_ancestors() -> None:
    face = cell_from_token("1")

    assert face.level() == 0
    assert list(ancestors(face)) == []


def test_level_one_cell_is_its_only_ancestor() -> None:
    cellid = cell_from_token("04")

    assert cellid.level() == 1
    assert list(ancestors(cellid)) == [cellid]


def test_to_binary_pads_to_width() -> None:
    face = s2sphere.CellId.from_face_pos_level(0, 0, 0)

    assert to_binary(face, 64) == "0001" + "0" * 60
    assert len(to_binary(face, 31)) == 61
    assert int(to_binary(cell_from_token(FIXTURE_TOKEN), 31), 2) == FIXTURE_CELLID
