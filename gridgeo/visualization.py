"""Utilities for visualising rings, lines and points on a map."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import folium  # Using folium to build an interactive Leaflet map.

from .models import Coordinate, LatLon, LineString, Ring

PathLike = Union[str, Path]

_RING_COLOR = "#1a9641"
_LINE_COLOR = "#2c7bb6"
_POINT_COLOR = "#d73027"


def _latlons(coordinates: Sequence[Coordinate]) -> list[LatLon]:
    return [c.as_latlon() for c in coordinates]


def create_geometry_map(
    *,
    rings: Sequence[Ring] = (),
    lines: Sequence[LineString] = (),
    points: Sequence[Coordinate] = (),
    zoom_start: int = 15,
    output_html_path: Optional[PathLike] = None,
) -> folium.Map:
    """Create an interactive map overlaying the given geometries.

    Args:
        rings: Polygon boundaries, drawn as filled polygons.
        lines: Paths, drawn as polylines.
        points: Individual coordinates, drawn as circle markers.
        zoom_start: Initial zoom level.
        output_html_path: Optional path to persist the map as an HTML file.

    Returns:
        A :class:`folium.Map` centred on the first available coordinate.

    Raises:
        ValueError: If no geometry with at least one coordinate is given.
    """

    first: Optional[Coordinate] = None
    for collection in (*rings, *lines):
        if len(collection):
            first = collection[0]
            break
    if first is None and points:
        first = points[0]
    if first is None:
        raise ValueError("At least one geometry is required to build a map")

    folium_map = folium.Map(
        location=first.as_latlon(), zoom_start=zoom_start, control_scale=True
    )
    for idx, ring in enumerate(rings):
        if len(ring) < 3:
            continue
        folium.Polygon(
            _latlons(ring.coordinates),
            color=_RING_COLOR,
            weight=3,
            fill=True,
            fill_opacity=0.2,
            tooltip=f"Ring {idx}",
        ).add_to(folium_map)
    for idx, line in enumerate(lines):
        folium.PolyLine(
            _latlons(line.coordinates),
            color=_LINE_COLOR,
            weight=4,
            opacity=0.8,
            tooltip=f"Line {idx}",
        ).add_to(folium_map)
    for point in points:
        folium.CircleMarker(
            location=point.as_latlon(),
            radius=5,
            color=_POINT_COLOR,
            fill=True,
            fill_color=_POINT_COLOR,
        ).add_to(folium_map)

    if output_html_path is not None:
        output_path = Path(output_html_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        folium_map.save(str(output_path))

    return folium_map


__all__ = ["create_geometry_map"]
