"""Stitch disconnected path fragments into one continuous route."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

from .config import DEFAULT_CONFIG, GeometryConfig
from .containment import contains
from .distance import circle_ring, distance
from .errors import GeometryError
from .models import Coordinate, LatLon, LineString, as_coordinates
from .quantities import Length

_LOG = logging.getLogger(__name__)

Fragment = Sequence[Union[Coordinate, LatLon]]


def _closest_candidate(
    anchor: Coordinate,
    fragments: Sequence[List[Coordinate]],
    pending: Sequence[int],
    search_radius: Length,
    config: GeometryConfig,
) -> Optional[Tuple[int, int]]:
    """Return ``(fragment index, coordinate index)`` of the nearest match in range.

    The first candidate encountered (fragment order, then coordinate order)
    wins a tie.
    """

    circle = circle_ring(anchor, search_radius, config=config)
    earth_radius = Length(config.earth_radius_m)
    best: Optional[Tuple[int, int]] = None
    best_distance: Optional[Length] = None
    for frag_idx in pending:
        for coord_idx, coord in enumerate(fragments[frag_idx]):
            if not contains(circle, coord, epsilon=config.ray_casting_epsilon_deg):
                continue
            candidate = distance(anchor, coord, earth_radius=earth_radius)
            if best_distance is None or candidate < best_distance:
                best = (frag_idx, coord_idx)
                best_distance = candidate
    return best


def chain_fragments(
    fragments: Sequence[Fragment],
    search_radius: Length,
    *,
    config: GeometryConfig = DEFAULT_CONFIG,
) -> LineString:
    """Join fragments of one logical route into a single line string.

    Starts from the first fragment and repeatedly appends the fragment
    holding the coordinate closest to the current path end, as long as it
    lies within ``search_radius``. A fragment matched by its last coordinate
    is appended reversed. A matched coordinate identical to the path end is
    not repeated. The search costs O(f^2 * c) for ``f`` fragments of ``c``
    coordinates, so keep ``f`` small.

    Args:
        fragments: Ordered coordinate sequences belonging to one route.
        search_radius: Radius around the path end searched for the next fragment.
        config: Shared numeric constants.

    Raises:
        GeometryError: If no fragments are given or no remaining fragment has
            a coordinate within ``search_radius`` of the path end.
    """

    if not fragments:
        raise GeometryError("Cannot chain an empty list of fragments")

    parts = [as_coordinates(fragment) for fragment in fragments]
    path: List[Coordinate] = list(parts[0])
    if not path:
        raise GeometryError("The first fragment has no coordinates")
    pending = [idx for idx in range(1, len(parts)) if parts[idx]]

    while pending:
        anchor = path[-1]
        match = _closest_candidate(anchor, parts, pending, search_radius, config)
        if match is None:
            raise GeometryError(
                f"No fragment within {search_radius} of ({anchor.latitude}, "
                f"{anchor.longitude}); {len(pending)} fragment(s) left unchained"
            )
        frag_idx, coord_idx = match
        addition = list(parts[frag_idx])
        if coord_idx == len(addition) - 1:
            addition.reverse()
        if addition[0] == anchor:
            addition = addition[1:]
        path.extend(addition)
        pending.remove(frag_idx)
        _LOG.debug("Chained fragment %d (%d coordinates)", frag_idx, len(addition))

    if len(path) < 2:
        raise GeometryError("Chained fragments collapse to a single coordinate")
    return LineString(tuple(path))


__all__ = ["Fragment", "chain_fragments"]
