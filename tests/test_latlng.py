import math

import pytest

from h3geo import config
from h3geo.coords.latlng import AngleUnit, GeoCoord


def test_from_degrees_stores_radians():
    c = GeoCoord.from_degrees(45.0, -90.0)
    assert c.unit == AngleUnit.RADIANS
    assert c.lat == pytest.approx(math.pi / 4)
    assert c.lon == pytest.approx(-math.pi / 2)


def test_from_radians_is_identity_store():
    c = GeoCoord.from_radians(0.5, -1.25)
    assert (c.lat, c.lon) == (0.5, -1.25)
    assert c.unit == AngleUnit.RADIANS


def test_conversion_returns_new_value():
    c = GeoCoord.from_radians(0.1, 0.2)
    d = c.as_degrees()
    assert d is not c
    assert c.unit == AngleUnit.RADIANS
    assert d.unit == AngleUnit.DEGREES
    with pytest.raises(AttributeError):
        c.lat = 1.0


@pytest.mark.parametrize("lat, lon", [(0.3, -2.9), (-1.2, 3.1), (1.5707, 0.0), (-0.0001, -3.14)])
def test_radians_degrees_radians_round_trip(lat, lon):
    back = GeoCoord.from_radians(lat, lon).as_degrees().as_radians()
    assert back.lat == pytest.approx(lat, abs=1e-12)
    assert back.lon == pytest.approx(lon, abs=1e-12)


def test_longitude_190_wraps_to_minus_170():
    assert GeoCoord.from_degrees(0.0, 190.0).as_degrees().lon == pytest.approx(-170.0)
    rad = GeoCoord.from_radians(0.0, math.radians(190.0))
    assert rad.as_degrees().lon == pytest.approx(-170.0)


def test_longitude_180_is_kept():
    assert GeoCoord.from_degrees(0.0, 180.0).as_degrees().lon == pytest.approx(180.0)
    assert GeoCoord.from_radians(0.0, math.pi).as_degrees().lon == pytest.approx(180.0)


def test_longitude_minus_180_maps_to_180():
    assert GeoCoord(0.0, -180.0, AngleUnit.DEGREES).as_degrees().lon == 180.0


def test_latitude_95_wraps_on_latitude_axis():
    assert GeoCoord.from_degrees(95.0, 0.0).as_degrees().lat == pytest.approx(-85.0)


def test_poles_stay_put():
    assert GeoCoord.from_degrees(90.0, 0.0).as_degrees().lat == pytest.approx(90.0)
    assert GeoCoord.from_degrees(-90.0, 0.0).as_degrees().lat == pytest.approx(-90.0)


def test_as_degrees_on_degree_view_does_not_rescale():
    d = GeoCoord.from_degrees(10.0, 20.0).as_degrees()
    again = d.as_degrees()
    assert again.lat == pytest.approx(10.0)
    assert again.lon == pytest.approx(20.0)


def test_as_radians_on_radians_is_self():
    c = GeoCoord.from_radians(0.1, 0.2)
    assert c.as_radians() is c


def test_as_unit_accepts_string_tag():
    c = GeoCoord.from_degrees(10.0, 20.0)
    assert c.as_unit("deg").lat == pytest.approx(10.0)
    assert c.as_unit(AngleUnit.RADIANS) is c


def test_format_default_precision():
    assert str(GeoCoord(1.5, -2.25, AngleUnit.DEGREES)) == "1.500000,-2.250000"


def test_format_explicit_and_configured_precision():
    c = GeoCoord(1.23456, 7.0, AngleUnit.DEGREES)
    assert c.format(2) == "1.23,7.00"
    config.configure({"coord_precision": 3})
    assert str(c) == "1.235,7.000"


def test_as_degrees_on_infinite_input_is_nan():
    d = GeoCoord.from_radians(math.inf, -math.inf).as_degrees()
    assert math.isnan(d.lat) and math.isnan(d.lon)
    assert math.isnan(GeoCoord.from_degrees(math.nan, 0.0).as_degrees().lat)


def test_negative_precision_is_clamped():
    assert GeoCoord(1.6, -2.4, AngleUnit.DEGREES).format(-1) == "2,-2"
