import pytest

from s2util.cells import cell_from_coordinates

# Known value from running s2sphere against lat/long 36.114574, -115.180628 at level 24
FIXTURE_LATITUDE = 36.114574
FIXTURE_LONGITUDE = -115.180628
FIXTURE_LEVEL = 24
FIXTURE_CELLID = 9279882692622716928
FIXTURE_TOKEN = "80c8c4245b129"


@pytest.fixture
def fixture_cell():
    return cell_from_coordinates(FIXTURE_LATITUDE, FIXTURE_LONGITUDE, FIXTURE_LEVEL)
