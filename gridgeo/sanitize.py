"""Repair degenerate line strings before handing them to other geometry code."""

from __future__ import annotations

import logging
from typing import Optional

from .config import DEFAULT_CONFIG
from .models import Coordinate, LineString

_LOG = logging.getLogger(__name__)


def _perturb(coordinate: Coordinate, epsilon: float) -> Coordinate:
    elevation = coordinate.elevation
    return Coordinate(
        coordinate.latitude + epsilon,
        coordinate.longitude + epsilon,
        None if elevation is None else elevation + epsilon,
    )


def _split_pair(first: Coordinate, last: Coordinate, epsilon: float) -> LineString:
    """Return a two-point line with ``last`` nudged away from ``first``."""

    _LOG.debug(
        "Perturbing coincident coordinate (%s, %s) by %g degrees",
        last.latitude,
        last.longitude,
        epsilon,
    )
    return LineString((first, _perturb(last, epsilon)))


def sanitize(line: LineString, *, epsilon: Optional[float] = None) -> LineString:
    """Return a line string without exactly coincident coordinates.

    Two equal coordinates are split by moving the second one ``epsilon``
    degrees (latitude, longitude and elevation). Longer lines lose their
    duplicate coordinates, first occurrence wins; when that leaves a single
    coordinate the first and last input coordinates are split instead.
    Lines that are already clean are returned unchanged, which makes the
    function idempotent.

    Args:
        line: The line string to clean.
        epsilon: Perturbation in degrees. Defaults to
            :attr:`GeometryConfig.sanitize_epsilon_deg`.

    Returns:
        A line string with at least two distinct coordinates.
    """

    eps = DEFAULT_CONFIG.sanitize_epsilon_deg if epsilon is None else epsilon
    coords = line.coordinates

    if len(coords) == 2:
        if coords[0] == coords[1]:
            return _split_pair(coords[0], coords[1], eps)
        return line

    unique = list(dict.fromkeys(coords))
    if len(unique) == len(coords):
        return line
    if len(unique) == 1:
        return _split_pair(coords[0], coords[-1], eps)
    _LOG.debug("Removed %d duplicate coordinates", len(coords) - len(unique))
    return LineString(tuple(unique))


__all__ = ["sanitize"]
