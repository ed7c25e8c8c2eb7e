"""Legacy stitching of open ways into closed rings.

Deprecated: only handles ways that meet pairwise at shared coordinates and
form simple loops. Intersections touched by more than two ways are rejected
instead of guessed at. Prefer :func:`gridgeo.chaining.chain_fragments` for
routes.
"""

from __future__ import annotations

from itertools import combinations
import logging
from typing import Dict, List, Optional, Sequence, Set, Union

from .errors import GeometryError
from .models import Coordinate, LatLon, Ring, as_coordinates

_LOG = logging.getLogger(__name__)

Way = Sequence[Union[Coordinate, LatLon]]


def _find_intersections(ways: Sequence[List[Coordinate]]) -> Dict[Coordinate, Set[int]]:
    intersections: Dict[Coordinate, Set[int]] = {}
    for first, second in combinations(range(len(ways)), 2):
        shared = set(ways[first]) & set(ways[second])
        for node in sorted(shared, key=ways[first].index):
            intersections.setdefault(node, set()).update((first, second))
    return intersections


def _section(way: List[Coordinate], start: Coordinate, end: Coordinate) -> List[Coordinate]:
    """Coordinates of ``way`` from ``start`` to ``end``, reversed if needed."""

    idx_start = way.index(start)
    idx_end = way.index(end)
    if idx_start <= idx_end:
        return way[idx_start : idx_end + 1]
    return way[idx_end : idx_start + 1][::-1]


def _walk_loop(
    ways: Sequence[List[Coordinate]],
    intersections: Dict[Coordinate, Set[int]],
) -> List[Coordinate]:
    """Follow ways from intersection to intersection until the loop closes."""

    current_node = next(iter(intersections))
    loop: Optional[List[Coordinate]] = None
    while loop is None or len(loop) < 2 or loop[0] != loop[-1]:
        if loop is not None and not intersections.get(current_node):
            raise GeometryError(
                "Ran into a dead end while closing ways; the chain ends open at "
                f"({current_node.latitude}, {current_node.longitude})"
            )

        way_idx = min(intersections[current_node])
        intersections[current_node].discard(way_idx)
        way = ways[way_idx]

        candidates = [
            node for node, members in intersections.items() if way_idx in members
        ]
        if len(candidates) > 1:
            raise GeometryError(
                "Found an intersection where more than two ways meet; "
                "closing such ways is not supported"
            )
        if candidates:
            next_node = candidates[0]
            intersections[next_node].discard(way_idx)
        else:
            next_node = loop[0] if loop else way[0]
            if loop is not None and next_node not in way:
                raise GeometryError("Ran into a dead end while closing ways")

        section = _section(way, current_node, next_node)
        if loop is None:
            loop = section
        else:
            loop.extend(section[1:] if section and section[0] == loop[-1] else section)
        current_node = next_node

    if len(set(loop)) < 3:
        raise GeometryError(
            "Closing ways produced a ring with less than three distinct coordinates"
        )
    _LOG.debug("Closed a ring of %d coordinates", len(loop))
    return loop


def build_closed_ways(ways: Sequence[Way]) -> List[Ring]:
    """Join open ways that share coordinates into closed rings.

    Ways already closed on their own and sharing nothing with the others are
    returned as rings unchanged; other unconnected ways are dropped.

    Raises:
        GeometryError: If a shared coordinate is touched by more than two
            ways, the walk reaches a way that cannot close the loop, or a
            loop collapses to fewer than three distinct coordinates.
    """

    parts = [as_coordinates(way) for way in ways]
    intersections = _find_intersections(parts)
    if any(len(members) > 2 for members in intersections.values()):
        raise GeometryError(
            "There is at least one intersection shared by more than two ways, "
            "which would result in a concave hull curve"
        )

    connected = set().union(*intersections.values()) if intersections else set()
    rings: List[Ring] = []
    for idx, part in enumerate(parts):
        if idx not in connected and len(part) > 2 and part[0] == part[-1]:
            rings.append(Ring(tuple(part)))

    while intersections:
        loop = _walk_loop(parts, intersections)
        rings.append(Ring(tuple(loop)))
        intersections = {
            node: members for node, members in intersections.items() if members
        }
    return rings


__all__ = ["Way", "build_closed_ways"]
