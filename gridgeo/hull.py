"""Convex hulls around clusters of coordinates.

Points are snapped to an integer grid before any comparison so that
orientation tests are exact. An Akl–Toussaint pass discards everything
strictly inside the quadrilateral spanned by the four extreme points, then a
Graham scan walks the survivors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
import logging
from typing import Iterable, List, Optional, Sequence

from .config import DEFAULT_CONFIG
from .errors import GeometryError
from .models import Coordinate, Ring

_LOG = logging.getLogger(__name__)


class ConvexHullAlgorithm(Enum):
    """Hull construction strategies.

    ``CHAN`` is kept for API compatibility only; it has never produced a
    reliable hull and requesting it raises :class:`GeometryError`.
    """

    GRAHAM = "graham"
    CHAN = "chan"


@dataclass(frozen=True, slots=True, order=True)
class HullPoint:
    """Coordinate snapped to the integer hull grid (x=lon, y=lat)."""

    x: int
    y: int


def _cross(o: HullPoint, a: HullPoint, b: HullPoint) -> int:
    """Z component of (a - o) x (b - o); positive for a left turn."""

    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _to_grid(points: Iterable[Coordinate], scale: int) -> List[HullPoint]:
    # Sorted so the extreme-point selection below is reproducible.
    snapped = {
        HullPoint(round(p.longitude * scale), round(p.latitude * scale)) for p in points
    }
    return sorted(snapped)


def _extreme_points(points: Sequence[HullPoint]) -> List[HullPoint]:
    """Return the distinct west, south, east and north extremes in ring order."""

    if not points:
        raise GeometryError("Unable to get the bounding extremes of an empty point set")
    west = min(points, key=lambda p: (p.x, p.y))
    south = min(points, key=lambda p: (p.y, p.x))
    east = max(points, key=lambda p: (p.x, p.y))
    north = max(points, key=lambda p: (p.y, p.x))
    return list(dict.fromkeys((west, south, east, north)))


def _akl_toussaint(points: List[HullPoint]) -> List[HullPoint]:
    """Drop points strictly inside the quadrilateral of the extreme points."""

    extremes = _extreme_points(points)
    if len(extremes) < 3:
        return points
    edges = list(zip(extremes, extremes[1:] + extremes[:1]))
    survivors = [
        p
        for p in points
        if p in extremes or not all(_cross(a, b, p) > 0 for a, b in edges)
    ]
    _LOG.debug(
        "Akl-Toussaint filter kept %d of %d points", len(survivors), len(points)
    )
    return survivors


def _graham_scan(points: List[HullPoint]) -> List[HullPoint]:
    """Return hull vertices counter-clockwise, starting at the lowest point."""

    pivot = min(points, key=lambda p: (p.y, p.x))

    def _by_angle(a: HullPoint, b: HullPoint) -> int:
        # Every point lies at or above the pivot, so the cross product orders
        # polar angles in [0, pi) without leaving integer arithmetic.
        turn = _cross(pivot, a, b)
        if turn:
            return -1 if turn > 0 else 1
        dist_a = (a.x - pivot.x) ** 2 + (a.y - pivot.y) ** 2
        dist_b = (b.x - pivot.x) ** 2 + (b.y - pivot.y) ** 2
        return (dist_a > dist_b) - (dist_a < dist_b)

    others = sorted((p for p in points if p != pivot), key=cmp_to_key(_by_angle))

    stack: List[HullPoint] = [pivot]
    for point in others:
        while len(stack) > 1 and _cross(stack[-2], stack[-1], point) <= 0:
            stack.pop()
        stack.append(point)

    if len(stack) < 3:
        raise GeometryError(
            "Cannot find a next point to add to the convex hull; the points are collinear"
        )
    return stack


def build_convex_hull(
    points: Iterable[Coordinate],
    precision: Optional[int] = None,
    algorithm: ConvexHullAlgorithm = ConvexHullAlgorithm.GRAHAM,
) -> Ring:
    """Build the convex hull of ``points`` as a closed ring.

    Args:
        points: Coordinates to enclose. Duplicates (after snapping) collapse.
        precision: Decimal places kept when snapping to the integer grid.
            Defaults to :attr:`GeometryConfig.hull_precision`.
        algorithm: Only :attr:`ConvexHullAlgorithm.GRAHAM` is supported.

    Returns:
        Closed ring of hull vertices, counter-clockwise in (lon, lat) and
        starting at the southernmost vertex.

    Raises:
        GeometryError: If the input is empty, fewer than three distinct
            points remain, all points are collinear, or an unsupported
            algorithm is requested.
    """

    if algorithm is not ConvexHullAlgorithm.GRAHAM:
        raise GeometryError(
            f"Convex hull algorithm {algorithm.name} is not supported; use GRAHAM"
        )

    digits = DEFAULT_CONFIG.hull_precision if precision is None else precision
    scale = 10**digits
    candidates = _to_grid(points, scale)
    candidates = _akl_toussaint(candidates)
    if len(candidates) < 3:
        raise GeometryError("Cannot build a convex hull for less than three points")

    hull = _graham_scan(candidates)
    vertices = [Coordinate(p.y / scale, p.x / scale) for p in hull]
    vertices.append(vertices[0])
    return Ring(tuple(vertices))


__all__ = ["ConvexHullAlgorithm", "HullPoint", "build_convex_hull"]
