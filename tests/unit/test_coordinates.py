import math

import pytest

from pluscodes import clip_latitude, location_to_integers, normalize_longitude
from pluscodes.constants import FINAL_LAT_PRECISION, FINAL_LNG_PRECISION
from pluscodes.coordinates import LAT_INT_RANGE, LNG_INT_RANGE, to_number


def test_precision_constants_are_exact_integers():
    assert FINAL_LAT_PRECISION == 25_000_000
    assert FINAL_LNG_PRECISION == 8_192_000
    assert isinstance(FINAL_LAT_PRECISION, int)
    assert isinstance(FINAL_LNG_PRECISION, int)


def test_clip_latitude():
    assert clip_latitude(0) == 0
    assert clip_latitude(45.5) == 45.5
    assert clip_latitude(90) == 90
    assert clip_latitude(90.1) == 90
    assert clip_latitude(-91) == -90


def test_normalize_longitude():
    assert normalize_longitude(0) == 0
    assert normalize_longitude(179.5) == 179.5
    assert normalize_longitude(180) == -180
    assert normalize_longitude(-180) == -180
    assert normalize_longitude(190) == -170
    assert normalize_longitude(-190) == 170
    assert normalize_longitude(720) == 0


def test_location_to_integers_ranges(locations):
    for lat, lng in locations:
        lat_int, lng_int = location_to_integers(lat, lng)
        assert 0 <= lat_int < LAT_INT_RANGE
        assert 0 <= lng_int < LNG_INT_RANGE


def test_location_to_integers_boundaries():
    assert location_to_integers(-90, -180) == (0, 0)
    assert location_to_integers(90, 0)[0] == LAT_INT_RANGE - 1
    assert location_to_integers(1000, 0)[0] == LAT_INT_RANGE - 1
    assert location_to_integers(-1000, 0)[0] == 0
    assert location_to_integers(0, 180)[1] == 0
    assert location_to_integers(0, -540)[1] == 0


def test_to_number():
    assert to_number(1) == 1.0
    assert to_number("2.5") == 2.5
    assert math.isclose(to_number(-0.1), -0.1)

    with pytest.raises(ValueError, match="latitude is not a number"):
        to_number("north", "latitude")
    with pytest.raises(ValueError):
        to_number(None)
    with pytest.raises(ValueError, match="not a finite number"):
        to_number(float("nan"))
    with pytest.raises(ValueError, match="not a finite number"):
        to_number(float("-inf"))
