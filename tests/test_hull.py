"""Tests for convex hull construction."""

from __future__ import annotations

from typing import List

import pytest

from gridgeo.errors import GeometryError
from gridgeo.hull import ConvexHullAlgorithm, build_convex_hull
from gridgeo.models import Coordinate, Ring


def _turn(o: Coordinate, a: Coordinate, b: Coordinate) -> float:
    """Planar cross product in (lon, lat); positive for a left turn."""

    return (a.longitude - o.longitude) * (b.latitude - o.latitude) - (
        a.latitude - o.latitude
    ) * (b.longitude - o.longitude)


def _diamond_with_interior() -> List[Coordinate]:
    return [
        Coordinate(1.0, 1.0),
        Coordinate(0.0, 1.0),
        Coordinate(1.5, 0.8),
        Coordinate(1.0, 0.0),
        Coordinate(0.5, 0.5),  # on the south-west edge
        Coordinate(2.0, 1.0),
        Coordinate(1.2, 1.5),
        Coordinate(1.0, 2.0),
        Coordinate(0.5, 1.0),
    ]


def test_hull_keeps_only_extreme_vertices() -> None:
    hull = build_convex_hull(_diamond_with_interior())

    assert isinstance(hull, Ring)
    assert hull.is_closed
    assert len(hull) == 5
    assert set(hull.coordinates) == {
        Coordinate(0.0, 1.0),
        Coordinate(1.0, 2.0),
        Coordinate(2.0, 1.0),
        Coordinate(1.0, 0.0),
    }


def test_hull_is_counter_clockwise_from_the_south() -> None:
    hull = build_convex_hull(_diamond_with_interior())
    vertices = hull.coordinates[:-1]

    assert hull[0] == Coordinate(0.0, 1.0)
    for idx in range(len(vertices)):
        o = vertices[idx]
        a = vertices[(idx + 1) % len(vertices)]
        b = vertices[(idx + 2) % len(vertices)]
        assert _turn(o, a, b) > 0


def test_hull_encloses_every_input_point() -> None:
    points = [
        Coordinate(51.49, 7.41),
        Coordinate(51.52, 7.44),
        Coordinate(51.50, 7.47),
        Coordinate(51.47, 7.45),
        Coordinate(51.48, 7.43),
        Coordinate(51.51, 7.42),
        Coordinate(51.50, 7.44),
        Coordinate(51.46, 7.40),
    ]
    hull = build_convex_hull(points)
    vertices = hull.coordinates[:-1]

    assert set(vertices) <= set(points)
    for point in points:
        for a, b in zip(hull.coordinates, hull.coordinates[1:]):
            assert _turn(a, b, point) >= -1e-12


def test_duplicates_collapse_before_building() -> None:
    points = [
        Coordinate(0.0, 0.0),
        Coordinate(0.0, 0.0),
        Coordinate(0.0, 1.0),
        Coordinate(1.0, 1.0),
        Coordinate(1.0, 1.0),
    ]
    hull = build_convex_hull(points)
    assert len(hull) == 4


def test_precision_controls_snapping() -> None:
    points = [
        Coordinate(0.0, 0.0),
        Coordinate(0.0, 1.0),
        Coordinate(1.0, 1.0),
        Coordinate(1.0, 0.0),
        Coordinate(0.0, 0.0001),  # merges with the origin at three decimals
    ]
    hull = build_convex_hull(points, precision=3)
    assert len(hull) == 5


@pytest.mark.parametrize(
    "points",
    [
        [],
        [Coordinate(1.0, 1.0)],
        [Coordinate(1.0, 1.0), Coordinate(1.0, 1.0), Coordinate(2.0, 2.0)],
    ],
)
def test_too_few_points_raise(points: List[Coordinate]) -> None:
    with pytest.raises(GeometryError):
        build_convex_hull(points)


def test_collinear_points_raise() -> None:
    points = [Coordinate(float(i), float(i)) for i in range(5)]
    with pytest.raises(GeometryError, match="collinear"):
        build_convex_hull(points)


def test_chan_algorithm_is_rejected() -> None:
    points = [Coordinate(0.0, 0.0), Coordinate(0.0, 1.0), Coordinate(1.0, 0.0)]
    with pytest.raises(GeometryError, match="CHAN"):
        build_convex_hull(points, algorithm=ConvexHullAlgorithm.CHAN)


def test_nearly_collinear_directions_are_ordered_exactly() -> None:
    # Consecutive Fibonacci vectors: their cross product is 1 on the grid,
    # far below what a floating point angle can resolve at this scale.
    origin = Coordinate(0.0, 0.0)
    far = Coordinate(48.07526976, 77.78742049)
    near = Coordinate(29.71215073, 48.07526976)
    hull = build_convex_hull([near, far, origin])

    assert hull.coordinates == (origin, far, near, origin)
