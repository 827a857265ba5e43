import matplotlib

matplotlib.use("Agg")

import pytest

from h3geo import config
from h3geo.coords.latlng import GeoCoord


@pytest.fixture(autouse=True)
def _default_settings():
    config.configure(None)
    yield
    config.configure(None)


@pytest.fixture
def unit_square():
    """CCW unit square in degrees, as radians-tagged GeoCoords."""
    return tuple(GeoCoord.from_degrees(lat, lon)
                 for lat, lon in [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)])
