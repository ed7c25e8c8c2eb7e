"""Point containment and collinearity predicates in lat/lon space."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from .config import DEFAULT_CONFIG
from .models import Coordinate, Ring


def _slope(dy: float, dx: float) -> float:
    """Return ``dy / dx`` with IEEE semantics for a zero denominator."""

    if dx != 0.0:
        return dy / dx
    if dy > 0.0:
        return math.inf
    if dy < 0.0:
        return -math.inf
    return math.nan


def _crosses(a: Coordinate, b: Coordinate, point: Coordinate, epsilon: float) -> bool:
    """Return True when an eastward ray from ``point`` crosses edge ``a``-``b``."""

    # Work in (x=lon, y=lat) with ``a`` the lower end of the edge.
    if a.latitude > b.latitude:
        a, b = b, a
    ax, ay = a.longitude, a.latitude
    bx, by = b.longitude, b.latitude
    px, py = point.longitude, point.latitude

    if py == ay or py == by:
        py += epsilon

    if py > by or py < ay or px > max(ax, bx):
        return False
    if px < min(ax, bx):
        return True

    red = _slope(py - ay, px - ax)
    blue = _slope(by - ay, bx - ax)
    return red >= blue


def contains(ring: Ring, point: Coordinate, *, epsilon: Optional[float] = None) -> bool:
    """Ray-casting test whether ``point`` lies inside ``ring``.

    An open ring is treated as if its closing edge existed. Points exactly on
    the boundary may be reported either way.

    Args:
        ring: Polygon boundary.
        point: Coordinate to test.
        epsilon: Latitude shift (degrees) used when the ray passes through an
            edge endpoint. Defaults to
            :attr:`GeometryConfig.ray_casting_epsilon_deg`.
    """

    eps = DEFAULT_CONFIG.ray_casting_epsilon_deg if epsilon is None else epsilon
    coords = ring.closed().coordinates
    inside = False
    for idx in range(1, len(coords)):
        if _crosses(coords[idx - 1], coords[idx], point, eps):
            inside = not inside
    return inside


def contained_in_any(rings: Iterable[Ring], point: Coordinate) -> bool:
    """Return True when ``point`` lies inside at least one ring."""

    return any(contains(ring, point) for ring in rings)


def is_between(
    a: Coordinate, b: Coordinate, c: Coordinate, *, epsilon: float = 1e-12
) -> bool:
    """Return True when ``c`` lies on the segment from ``a`` to ``b``.

    Collinearity is judged on the planar lon/lat cross product, so
    ``epsilon`` is in squared degrees.
    """

    cross = (c.latitude - a.latitude) * (b.longitude - a.longitude) - (
        c.longitude - a.longitude
    ) * (b.latitude - a.latitude)
    if abs(cross) > epsilon:
        return False

    dot = (c.longitude - a.longitude) * (b.longitude - a.longitude) + (
        c.latitude - a.latitude
    ) * (b.latitude - a.latitude)
    if dot < 0:
        return False

    squared_length = (b.longitude - a.longitude) ** 2 + (b.latitude - a.latitude) ** 2
    return dot <= squared_length


__all__ = ["contained_in_any", "contains", "is_between"]
