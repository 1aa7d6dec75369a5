"""Tests for great-circle distance."""

import pytest

from src.tracking.geo import EARTH_RADIUS_KM, haversine_km


def test_same_point_is_zero():
    """Test identical coordinates are zero distance apart."""
    assert haversine_km(48.8566, 2.3522, 48.8566, 2.3522) == 0.0


def test_one_degree_of_longitude_at_equator():
    """Test (0,0) to (0,1) is about 111.19 km."""
    assert haversine_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(111.19, rel=0.001)


def test_one_degree_of_latitude():
    """Test a degree of latitude matches a degree of longitude at the equator."""
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(
        haversine_km(0.0, 0.0, 0.0, 1.0)
    )


def test_symmetric():
    """Test distance does not depend on direction."""
    there = haversine_km(-33.8688, 151.2093, -37.8136, 144.9631)
    back = haversine_km(-37.8136, 144.9631, -33.8688, 151.2093)
    assert there == pytest.approx(back)


def test_known_city_pair():
    """Test Sydney to Melbourne is about 714 km."""
    assert haversine_km(-33.8688, 151.2093, -37.8136, 144.9631) == pytest.approx(714, rel=0.01)


def test_longitude_shrinks_with_latitude():
    """Test a degree of longitude at 60N is half as long as at the equator."""
    assert haversine_km(60.0, 0.0, 60.0, 1.0) == pytest.approx(111.19 / 2, rel=0.01)


def test_antimeridian_crossing():
    """Test points either side of 180 degrees are close together."""
    assert haversine_km(0.0, 179.9, 0.0, -179.9) == pytest.approx(22.24, rel=0.01)


def test_antipodes():
    """Test antipodal points are half the circumference apart."""
    assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(3.141592653589793 * EARTH_RADIUS_KM)


def test_custom_radius():
    """Test the sphere radius can be overridden."""
    assert haversine_km(0.0, 0.0, 0.0, 1.0, radius_km=1.0) == pytest.approx(0.0174533, rel=0.0001)
