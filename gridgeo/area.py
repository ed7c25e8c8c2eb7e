"""Area enclosed by a polygon given in latitude/longitude."""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Sequence

from .config import DEFAULT_CONFIG, GeometryConfig
from .distance import haversine
from .errors import GeometryError
from .models import Coordinate, LatLon, Ring
from .quantities import SQUARE_METRE, Area, Length

_LOG = logging.getLogger(__name__)


def _drop_duplicates(coords: Sequence[Coordinate]) -> List[Coordinate]:
    """Keep only the last occurrence of every repeated coordinate."""

    remaining = Counter(coords)
    kept: List[Coordinate] = []
    for coord in coords:
        if remaining[coord] > 1:
            remaining[coord] -= 1
            continue
        kept.append(coord)
    return kept


def _clockwise_from(coords: List[Coordinate], start: Coordinate) -> List[Coordinate]:
    """Rotate ``coords`` to begin at ``start`` and walk it clockwise, closed."""

    idx_start = coords.index(start)
    idx_next = (idx_start + 1) % len(coords)
    if coords[idx_next].longitude > coords[idx_start].longitude:
        # Heading east from the northernmost vertex: already clockwise.
        ordered = coords[idx_start:] + coords[:idx_start]
    else:
        ordered = coords[:idx_next][::-1] + coords[idx_next:][::-1]
    ordered.append(ordered[0])
    return ordered


def polygon_area(ring: Ring, *, config: GeometryConfig = DEFAULT_CONFIG) -> Area:
    """Return the area enclosed by ``ring`` in square metres.

    The polygon is cut into trapezoids reaching from each edge west to the
    ring's minimum longitude. Each trapezoid is measured with haversine
    distances (width along the edge's upper latitude, height along its mean
    longitude); edges heading south add their trapezoid, edges heading north
    subtract it. This is a planar approximation that suits building-sized
    footprints and degrades for polygons spanning a large part of the globe.

    Args:
        ring: Closed ring with at least three distinct coordinates.
        config: Shared numeric constants (earth radius).

    Returns:
        The enclosed area. Its sign depends on the traversal and callers
        should use ``abs`` when only the magnitude matters.

    Raises:
        GeometryError: If the ring is not closed, has fewer than three
            distinct coordinates, or no coordinate attains its maximum
            latitude.
    """

    if not ring.is_closed:
        raise GeometryError("Cannot determine the area of a ring that is not closed")
    if len(ring.distinct_coordinates()) < 3:
        raise GeometryError(
            "Cannot determine the area of a ring with less than three distinct coordinates"
        )

    bounds = ring.bounds()
    lat_max_global = bounds.max_latitude
    lon_min_global = bounds.min_longitude

    coords = _drop_duplicates(ring.coordinates)
    start = next((c for c in coords if c.latitude == lat_max_global), None)
    if start is None:
        raise GeometryError(
            "Did not find a coordinate at the ring's maximum latitude "
            f"{lat_max_global}"
        )
    ordered = _clockwise_from(coords, start)

    earth_radius = Length(config.earth_radius_m)
    total = Area(0.0, SQUARE_METRE)
    previous = ordered[-1]
    for coord in ordered:
        max_lat = max(coord.latitude, previous.latitude)
        min_lat = min(coord.latitude, previous.latitude)
        if max_lat == min_lat:
            # No latitude span, so the trapezoid has no height.
            previous = coord
            continue

        mean_lon = (coord.longitude + previous.longitude) / 2
        width = haversine(
            max_lat, mean_lon, max_lat, lon_min_global, earth_radius=earth_radius
        )
        height = haversine(
            max_lat, mean_lon, min_lat, mean_lon, earth_radius=earth_radius
        )
        partial = width * height

        if coord.latitude < previous.latitude:
            total = total + partial
        else:
            total = total - partial
        previous = coord

    _LOG.debug("Polygon with %d vertices covers %s", len(coords), total)
    return total


def way_area(
    coordinates: Sequence[Coordinate | LatLon],
    *,
    config: GeometryConfig = DEFAULT_CONFIG,
) -> Area:
    """Area enclosed by a raw coordinate sequence that must already be closed."""

    ring = Ring(tuple(coordinates))
    if not ring.is_closed:
        raise GeometryError(
            "Cannot determine the area covered by a way that is not closed"
        )
    return polygon_area(ring, config=config)


__all__ = ["polygon_area", "way_area"]
