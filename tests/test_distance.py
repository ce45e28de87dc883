import math

import numpy as np
import pytest

from geosites import Angle, Distance, Location, distance_degrees, great_circle_distance


def test_distance_degrees_boundaries():
    assert distance_degrees(0, 0, 0, 0) == 0.0
    assert distance_degrees(0, 0, 180, 0) == 180.0
    assert distance_degrees(0, 90, 0, -90) == 180.0


def test_distance_degrees_no_nan_for_coincident_points():
    for lon, lat in ((2.3522, 48.8566), (-77.0428, -12.05), (151.2093, -33.8688)):
        value = distance_degrees(lon, lat, lon, lat)
        assert not math.isnan(value)
        assert value == pytest.approx(0.0, abs=1e-5)


def test_distance_degrees():
    assert distance_degrees(0, 0, 90, 0) == pytest.approx(90.0)
    assert distance_degrees(0, 0, 0, 45) == pytest.approx(45.0)
    assert distance_degrees(10, 20, 30, 40) == pytest.approx(distance_degrees(30, 40, 10, 20))
    # Paris to London
    assert distance_degrees(2.3522, 48.8566, -0.1278, 51.5074) == pytest.approx(3.09, abs=0.01)


def test_distance_degrees_arrays():
    values = distance_degrees(np.zeros(3), np.zeros(3), np.array([0.0, 90.0, 180.0]), np.zeros(3))
    assert isinstance(values, np.ndarray)
    assert values == pytest.approx([0.0, 90.0, 180.0])


def test_location_distance_degrees_is_static():
    assert Location.distance_degrees(0, 0, 180, 0) == 180.0


def test_angular_distance_to():
    origin = Location()
    antipode = Location(longitude=180.0)
    angle = origin.angular_distance_to(antipode)
    assert isinstance(angle, Angle)
    assert angle.magnitude == 180.0
    assert angle.to("radian").magnitude == pytest.approx(math.pi)


def test_great_circle_distance():
    origin = Location()
    quarter = Location(longitude=90.0)
    radius = Distance(6371, "km")
    distance = great_circle_distance(origin, quarter, radius)
    assert isinstance(distance, Distance)
    assert distance.to("km").magnitude == pytest.approx(6371 * math.pi / 2)

    distance = great_circle_distance(origin, quarter, 1000.0)
    assert distance.to("meter").magnitude == pytest.approx(1000.0 * math.pi / 2)
