"""Tests for the shared value types."""

from __future__ import annotations

import dataclasses

import polyline
import pytest

from gridgeo.models import (
    Bounds,
    Coordinate,
    CoordinateDistance,
    LineString,
    Ring,
    as_coordinates,
    decode_polyline,
)
from gridgeo.quantities import KILOMETRE, Length


def test_coordinate_is_immutable() -> None:
    coord = Coordinate(51.0, 7.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        coord.latitude = 52.0  # type: ignore[misc]
    assert coord.as_latlon() == (51.0, 7.0)
    assert coord.elevation is None


def test_ring_normalises_tuples_and_closes() -> None:
    ring = Ring(((0, 0), (0, 1), (1, 1)))

    assert all(isinstance(c, Coordinate) for c in ring)
    assert not ring.is_closed
    closed = ring.closed()
    assert closed.is_closed
    assert len(closed) == 4
    assert closed.closed() is closed


def test_ring_distinct_coordinates_and_bounds(unit_square: Ring) -> None:
    assert len(unit_square) == 5
    assert len(unit_square.distinct_coordinates()) == 4
    assert unit_square.bounds() == Bounds(0.0, 1.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        Ring().bounds()


def test_single_coordinate_ring_is_not_closed() -> None:
    assert not Ring(((1.0, 1.0),)).is_closed
    assert not Ring().is_closed


def test_line_string_needs_two_coordinates() -> None:
    with pytest.raises(ValueError):
        LineString(((1.0, 1.0),))
    line = LineString(((1.0, 1.0), (1.0, 1.0)))
    assert line.is_degenerate
    assert not LineString(((1.0, 1.0), (1.0, 2.0))).is_degenerate


def test_coordinate_distance_orders_by_distance_only() -> None:
    origin = Coordinate(0.0, 0.0)
    near = CoordinateDistance(origin, Coordinate(0.0, 1.0), Length(1.0, KILOMETRE))
    twin = CoordinateDistance(origin, Coordinate(1.0, 0.0), Length(1000.0))
    far = CoordinateDistance(origin, Coordinate(0.0, 2.0), Length(2.0, KILOMETRE))

    assert near < far
    assert far >= near
    assert near <= twin and twin <= near
    assert near != twin
    assert sorted([far, twin, near]) == [twin, near, far]


def test_decode_polyline() -> None:
    points = [(51.49270, 7.41240), (51.49300, 7.41300), (51.49350, 7.41210)]
    decoded = decode_polyline(polyline.encode(points))

    assert len(decoded) == 3
    for coord, (lat, lon) in zip(decoded, points):
        assert coord.latitude == pytest.approx(lat, abs=1e-5)
        assert coord.longitude == pytest.approx(lon, abs=1e-5)
    assert decode_polyline("") == []


def test_as_coordinates_accepts_mixed_input() -> None:
    coords = as_coordinates([(1, 2), Coordinate(3.0, 4.0, 10.0)])
    assert coords == [Coordinate(1.0, 2.0), Coordinate(3.0, 4.0, 10.0)]
