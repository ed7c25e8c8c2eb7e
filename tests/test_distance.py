"""Tests for the haversine distance helpers."""

from __future__ import annotations

import math

import pytest

from gridgeo.config import GeometryConfig
from gridgeo.containment import contains
from gridgeo.distance import (
    circle_ring,
    coordinate_distances,
    destination,
    distance,
    haversine,
    line_length,
    nearest,
)
from gridgeo.errors import GeometryError
from gridgeo.models import Coordinate, LineString
from gridgeo.quantities import KILOMETRE, METRE, Length

EARTH_RADIUS_KM = 6378.137


def test_haversine_returns_kilometres(dortmund: Coordinate, berlin: Coordinate) -> None:
    result = haversine(
        dortmund.latitude, dortmund.longitude, berlin.latitude, berlin.longitude
    )
    assert result.unit == KILOMETRE
    # Roughly 420 km as the crow flies.
    assert 400.0 < result.value < 450.0


def test_haversine_one_degree_along_equator() -> None:
    expected = EARTH_RADIUS_KM * math.pi / 180.0
    assert haversine(0.0, 0.0, 0.0, 1.0).value == pytest.approx(expected)
    assert haversine(0.0, 0.0, 1.0, 0.0).value == pytest.approx(expected)


def test_distance_is_symmetric(dortmund: Coordinate, munich: Coordinate) -> None:
    assert distance(dortmund, munich).value == pytest.approx(
        distance(munich, dortmund).value, rel=1e-12
    )


def test_distance_to_itself_is_zero(berlin: Coordinate) -> None:
    assert distance(berlin, berlin).value == 0.0


def test_distance_grows_with_separation() -> None:
    origin = Coordinate(10.0, 20.0)
    distances = [distance(origin, Coordinate(10.0 + step, 20.0)) for step in (1, 5, 20, 60)]
    assert distances == sorted(distances)
    assert len(set(d.value for d in distances)) == 4


def test_antipodal_points_span_half_the_circumference() -> None:
    result = distance(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))
    assert result.value == pytest.approx(EARTH_RADIUS_KM * math.pi)


def test_triangle_inequality(
    dortmund: Coordinate, berlin: Coordinate, munich: Coordinate
) -> None:
    direct = distance(dortmund, munich).value
    detour = distance(dortmund, berlin).value + distance(berlin, munich).value
    assert direct <= detour + 1e-9


def test_out_of_range_input_is_not_validated() -> None:
    result = haversine(95.0, 200.0, -95.0, -200.0)
    assert math.isfinite(result.value)


def test_custom_earth_radius_scales_distance() -> None:
    default = haversine(0.0, 0.0, 0.0, 1.0)
    doubled = haversine(0.0, 0.0, 0.0, 1.0, earth_radius=Length(2 * 6378137.0, METRE))
    assert doubled.value == pytest.approx(2 * default.value)


def test_line_length_sums_consecutive_hops() -> None:
    line = LineString(((0.0, 0.0), (0.0, 1.0), (0.0, 2.0), (1.0, 2.0)))
    expected = sum(
        distance(a, b).value for a, b in zip(line.coordinates, line.coordinates[1:])
    )
    assert line_length(line).value == pytest.approx(expected)
    assert line_length(line).value == pytest.approx(3 * EARTH_RADIUS_KM * math.pi / 180)


def test_coordinate_distances_are_sorted_and_stable() -> None:
    origin = Coordinate(0.0, 0.0)
    east = Coordinate(0.0, 1.0)
    west = Coordinate(0.0, -1.0)
    far = Coordinate(0.0, 5.0)
    ranked = coordinate_distances(origin, [far, east, west])

    assert [entry.target for entry in ranked] == [east, west, far]
    # Equal distance: neither orders before the other, yet they differ.
    assert not ranked[0] < ranked[1]
    assert not ranked[1] < ranked[0]
    assert ranked[0] != ranked[1]
    assert ranked[0].origin == origin


def test_coordinate_distances_handles_empty_targets() -> None:
    assert coordinate_distances(Coordinate(0.0, 0.0), []) == []


def test_nearest_picks_closest_and_rejects_empty(
    dortmund: Coordinate, berlin: Coordinate, munich: Coordinate
) -> None:
    assert nearest(dortmund, [munich, berlin]).target == berlin
    with pytest.raises(GeometryError):
        nearest(dortmund, [])


def test_destination_lands_at_requested_distance(dortmund: Coordinate) -> None:
    target = destination(dortmund, 45.0, Length(12.5, KILOMETRE))
    assert distance(dortmund, target).value == pytest.approx(12.5, rel=1e-9)
    assert target.latitude > dortmund.latitude
    assert target.longitude > dortmund.longitude


def test_circle_ring_is_closed_and_centred(berlin: Coordinate) -> None:
    radius = Length(2.0, KILOMETRE)
    ring = circle_ring(berlin, radius)

    assert ring.is_closed
    assert len(ring) == 361
    for vertex in ring:
        assert distance(berlin, vertex).value == pytest.approx(2.0, rel=1e-9)
    assert contains(ring, berlin)
    assert not contains(ring, destination(berlin, 10.0, Length(3.0, KILOMETRE)))


def test_circle_ring_honours_segment_count(berlin: Coordinate) -> None:
    ring = circle_ring(berlin, Length(500.0), config=GeometryConfig(circle_segments=8))
    assert len(ring) == 9
