"""Conversion of gridgeo values into shapely geometries (x=lon, y=lat)."""

from __future__ import annotations

from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import Polygon as ShapelyPolygon

from .models import LineString, Ring
from .sanitize import sanitize


def to_shapely_linestring(
    line: LineString, *, sanitize_first: bool = True
) -> ShapelyLineString:
    """Return a shapely line string, sanitising coincident coordinates first."""

    source = sanitize(line) if sanitize_first else line
    return ShapelyLineString([(c.longitude, c.latitude) for c in source])


def to_shapely_polygon(ring: Ring) -> ShapelyPolygon:
    """Return a shapely polygon whose exterior is ``ring`` (closed if needed)."""

    closed = ring.closed()
    return ShapelyPolygon([(c.longitude, c.latitude) for c in closed])


__all__ = ["to_shapely_linestring", "to_shapely_polygon"]
