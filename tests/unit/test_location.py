"""Unit tests for Location construction, map checks and wire projections."""

import math

import pytest
from pydantic import ValidationError

from venueguard.models.location import Location, build_location
from venueguard.models.wire import InputGeoPoint, InputGeoPointEmpty, LocationPayload


def test_empty_location():
    location = Location.empty()
    assert location.is_empty
    assert location.latitude == 0.0
    assert location.longitude == 0.0
    assert location.horizontal_accuracy == 0.0
    assert location.access_hash == 0
    assert not location.is_valid_map_point()


def test_default_location_is_empty():
    assert Location().is_empty


def test_from_components(moscow):
    assert not moscow.is_empty
    assert moscow.latitude == 55.7558
    assert moscow.longitude == 37.6173
    assert moscow.horizontal_accuracy == 10.0
    assert moscow.access_hash == 0


def test_access_hash_carried_through():
    location = Location.from_components(1.0, 2.0, 0.0, -1234567890123)
    assert location.access_hash == -1234567890123


@pytest.mark.parametrize(
    "latitude, longitude",
    [
        (91.0, 0.0),
        (-90.5, 0.0),
        (0.0, 181.0),
        (0.0, -180.5),
        (math.nan, 0.0),
        (0.0, math.nan),
        (math.inf, 0.0),
        (0.0, -math.inf),
    ],
)
def test_invalid_coordinates_give_empty_location(latitude, longitude):
    location = Location.from_components(latitude, longitude, 10.0, 99)
    assert location.is_empty
    assert location.access_hash == 0
    assert location.horizontal_accuracy == 0.0


def test_boundary_coordinates_accepted():
    assert not Location.from_components(90.0, 180.0).is_empty
    assert not Location.from_components(-90.0, -180.0).is_empty


@pytest.mark.parametrize(
    "accuracy, expected",
    [(math.nan, 0.0), (-1.0, 0.0), (1e9, 1500.0), (2000.0, 1500.0), (42.5, 42.5)],
)
def test_accuracy_clamped(accuracy, expected):
    location = Location.from_components(10.0, 10.0, accuracy, 0)
    assert not location.is_empty
    assert location.horizontal_accuracy == expected


def test_valid_map_point():
    assert Location.from_components(85.0, 0.0).is_valid_map_point()
    assert Location.from_components(-85.05112877, 0.0).is_valid_map_point()


def test_polar_point_not_valid_on_map():
    location = Location.from_components(89.0, 0.0)
    assert not location.is_empty
    assert not location.is_valid_map_point()


def test_from_api_location_has_no_access_hash():
    location = Location.from_api_location(40.7128, -74.0060, 25.0)
    assert not location.is_empty
    assert location.access_hash == 0
    assert location.horizontal_accuracy == 25.0


def test_build_location_matches_factory():
    assert build_location(55.7558, 37.6173, 10.0, 7) == Location.from_components(55.7558, 37.6173, 10.0, 7)


def test_location_is_immutable(moscow):
    with pytest.raises(ValidationError):
        moscow.latitude = 0.0


def test_with_access_hash(moscow):
    updated = moscow.with_access_hash(555)
    assert updated.access_hash == 555
    assert updated.latitude == moscow.latitude
    assert moscow.access_hash == 0


@pytest.mark.parametrize("access_hash", [2 ** 63, -(2 ** 63) - 1, 2 ** 70])
def test_with_access_hash_out_of_int64_range(moscow, access_hash):
    with pytest.raises(ValueError):
        moscow.with_access_hash(access_hash)


@pytest.mark.parametrize("access_hash", [2 ** 63, -(2 ** 63) - 1])
def test_access_hash_out_of_int64_range_gives_empty_location(access_hash):
    location = Location.from_components(1.0, 2.0, 0.0, access_hash)
    assert location.is_empty
    assert location.access_hash == 0


def test_access_hash_int64_limits_accepted():
    assert Location.from_components(1.0, 2.0, 0.0, 2 ** 63 - 1).access_hash == 2 ** 63 - 1
    assert Location.from_components(1.0, 2.0, 0.0, -(2 ** 63)).access_hash == -(2 ** 63)


def test_direct_construction_validates_ranges():
    with pytest.raises(ValidationError):
        Location(is_empty=False, latitude=91.0, longitude=0.0)
    with pytest.raises(ValidationError):
        Location(is_empty=False, latitude=0.0, longitude=0.0, horizontal_accuracy=2000.0)
    with pytest.raises(ValidationError):
        Location(is_empty=False, latitude=math.nan, longitude=0.0)


def test_locations_equal_and_hashable():
    first = Location.from_components(1.5, 2.5, 3.0, 4)
    second = Location.from_components(1.5, 2.5, 3.0, 4)
    assert first == second
    assert hash(first) == hash(second)
    assert first != Location.from_components(1.5, 2.5, 3.0, 5)


def test_payload(moscow):
    assert moscow.to_payload() == LocationPayload(latitude=55.7558, longitude=37.6173, horizontal_accuracy=10.0)
    assert Location.empty().to_payload() is None


def test_geo_point_with_accuracy():
    point = Location.from_components(55.7558, 37.6173, 10.2, 0).to_input_geo_point()
    assert isinstance(point, InputGeoPoint)
    assert point.flags == 1
    assert point.lat == 55.7558
    assert point.long == 37.6173
    assert point.accuracy_radius == 11


def test_geo_point_without_accuracy():
    point = Location.from_components(55.7558, 37.6173, 0.0, 0).to_input_geo_point()
    assert isinstance(point, InputGeoPoint)
    assert point.flags == 0
    assert point.accuracy_radius is None


def test_geo_point_for_empty_location():
    assert isinstance(Location.empty().to_input_geo_point(), InputGeoPointEmpty)
