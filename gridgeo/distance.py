"""Great-circle distances on a spherical earth.

Every distance is computed with the haversine formula against a sphere of
radius :attr:`GeometryConfig.earth_radius_m`. Inputs are degrees and are not
range-checked.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

import numpy as np
from numpy.typing import NDArray

from .config import DEFAULT_CONFIG, GeometryConfig
from .errors import GeometryError
from .models import Coordinate, CoordinateDistance, LineString, Ring
from .quantities import KILOMETRE, Length

FloatArray = NDArray[np.float64]


def _radius_km(earth_radius: Optional[Length]) -> float:
    if earth_radius is None:
        return DEFAULT_CONFIG.earth_radius_m / 1000.0
    return earth_radius.to(KILOMETRE).value


def haversine(
    lat_a: float,
    lon_a: float,
    lat_b: float,
    lon_b: float,
    *,
    earth_radius: Optional[Length] = None,
) -> Length:
    """Return the great-circle distance between two lat/lon points in kilometres."""

    radius_km = _radius_km(earth_radius)
    d_lat = math.radians(lat_b - lat_a)
    d_lon = math.radians(lon_b - lon_a)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat_a))
        * math.cos(math.radians(lat_b))
        * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push ``a`` a hair past 1 for antipodal points.
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return Length(radius_km * c, KILOMETRE)


def distance(
    a: Coordinate, b: Coordinate, *, earth_radius: Optional[Length] = None
) -> Length:
    """Haversine distance between two coordinates."""

    return haversine(
        a.latitude, a.longitude, b.latitude, b.longitude, earth_radius=earth_radius
    )


def _haversine_pairs(
    lats_a: FloatArray,
    lons_a: FloatArray,
    lats_b: FloatArray,
    lons_b: FloatArray,
    radius_km: float,
) -> FloatArray:
    """Vectorised haversine returning kilometres for each pair."""

    phi_a = np.radians(lats_a)
    phi_b = np.radians(lats_b)
    d_phi = phi_b - phi_a
    d_lambda = np.radians(lons_b - lons_a)
    a = np.sin(d_phi / 2) ** 2 + np.cos(phi_a) * np.cos(phi_b) * np.sin(d_lambda / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    return radius_km * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def line_length(line: LineString, *, earth_radius: Optional[Length] = None) -> Length:
    """Sum of haversine distances between consecutive coordinates.

    Treats each pair as a short straight hop rather than a true geodesic,
    which is accurate while segments stay small relative to the earth radius.
    """

    lats = np.asarray([c.latitude for c in line], dtype=float)
    lons = np.asarray([c.longitude for c in line], dtype=float)
    hops = _haversine_pairs(lats[:-1], lons[:-1], lats[1:], lons[1:], _radius_km(earth_radius))
    return Length(float(np.sum(hops)), KILOMETRE)


def coordinate_distances(
    origin: Coordinate,
    targets: Iterable[Coordinate],
    *,
    earth_radius: Optional[Length] = None,
) -> List[CoordinateDistance]:
    """Rank ``targets`` by their distance from ``origin``, closest first.

    Sorting is stable, so targets at equal distance keep their input order.
    """

    points = list(targets)
    if not points:
        return []
    lats = np.asarray([p.latitude for p in points], dtype=float)
    lons = np.asarray([p.longitude for p in points], dtype=float)
    km = _haversine_pairs(
        np.full_like(lats, origin.latitude),
        np.full_like(lons, origin.longitude),
        lats,
        lons,
        _radius_km(earth_radius),
    )
    ranked = [
        CoordinateDistance(origin, point, Length(float(value), KILOMETRE))
        for point, value in zip(points, km)
    ]
    return sorted(ranked)


def nearest(
    origin: Coordinate,
    targets: Iterable[Coordinate],
    *,
    earth_radius: Optional[Length] = None,
) -> CoordinateDistance:
    """Return the closest target; the first one wins a tie."""

    ranked = coordinate_distances(origin, targets, earth_radius=earth_radius)
    if not ranked:
        raise GeometryError("Cannot find the nearest coordinate among no candidates")
    return ranked[0]


def destination(
    origin: Coordinate,
    bearing_deg: float,
    dist: Length,
    *,
    earth_radius: Optional[Length] = None,
) -> Coordinate:
    """Project ``origin`` along ``bearing_deg`` (clockwise from north) by ``dist``."""

    radius_km = _radius_km(earth_radius)
    angular = dist.to(KILOMETRE).value / radius_km
    lat1 = math.radians(origin.latitude)
    lon1 = math.radians(origin.longitude)
    bearing = math.radians(bearing_deg)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(angular)
        + math.cos(lat1) * math.sin(angular) * math.cos(bearing)
    )
    lon2 = lon1 + math.atan2(
        math.sin(bearing) * math.sin(angular) * math.cos(lat1),
        math.cos(angular) - math.sin(lat1) * math.sin(lat2),
    )
    return Coordinate(math.degrees(lat2), math.degrees(lon2))


def circle_ring(
    center: Coordinate,
    radius: Length,
    *,
    config: GeometryConfig = DEFAULT_CONFIG,
) -> Ring:
    """Approximate a circle of ``radius`` around ``center`` as a closed ring.

    One vertex per ``360 / config.circle_segments`` degrees of bearing; the
    centre itself is not part of the ring.
    """

    segments = max(3, config.circle_segments)
    earth_radius = Length(config.earth_radius_m)
    step = 360.0 / segments
    vertices = [
        destination(center, idx * step, radius, earth_radius=earth_radius)
        for idx in range(segments)
    ]
    vertices.append(vertices[0])
    return Ring(tuple(vertices))


__all__ = [
    "circle_ring",
    "coordinate_distances",
    "destination",
    "distance",
    "haversine",
    "line_length",
    "nearest",
]
