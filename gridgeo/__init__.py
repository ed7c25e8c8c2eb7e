"""Geospatial geometry primitives for grid planning."""

from .area import polygon_area, way_area
from .chaining import chain_fragments
from .closed_ways import build_closed_ways
from .config import DEFAULT_CONFIG, GeometryConfig
from .containment import contained_in_any, contains, is_between
from .distance import (
    circle_ring,
    coordinate_distances,
    destination,
    distance,
    haversine,
    line_length,
    nearest,
)
from .errors import GeometryError
from .hull import ConvexHullAlgorithm, build_convex_hull
from .models import Coordinate, CoordinateDistance, LineString, Ring
from .quantities import Area, Length
from .sanitize import sanitize

__all__ = [
    "Area",
    "ConvexHullAlgorithm",
    "Coordinate",
    "CoordinateDistance",
    "DEFAULT_CONFIG",
    "GeometryConfig",
    "GeometryError",
    "Length",
    "LineString",
    "Ring",
    "build_closed_ways",
    "build_convex_hull",
    "chain_fragments",
    "circle_ring",
    "contained_in_any",
    "contains",
    "coordinate_distances",
    "destination",
    "distance",
    "haversine",
    "is_between",
    "line_length",
    "nearest",
    "polygon_area",
    "sanitize",
    "way_area",
]
