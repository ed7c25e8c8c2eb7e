#!/usr/bin/env python3
"""Report length, convex hull and hull area of an encoded polyline.

Useful to sanity check coordinates harvested from map data before they are
fed into grid planning.

Usage examples:

    # Log the summary only
    python -m gridgeo.tools.inspect_polyline --polyline '_p~iF~ps|U_ulLnnqC_mqNvxq`@'

    # Also write an interactive map
    python -m gridgeo.tools.inspect_polyline \
        --polyline '_p~iF~ps|U_ulLnnqC_mqNvxq`@' \
        --output maps/route.html
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Optional, Sequence

from ..area import polygon_area
from ..config import DEFAULT_CONFIG
from ..distance import line_length
from ..errors import GeometryError
from ..hull import build_convex_hull
from ..models import LineString, Ring, decode_polyline
from ..quantities import KILOMETRE, SQUARE_METRE, Area, Length
from ..sanitize import sanitize
from ..visualization import create_geometry_map

LOGGER = logging.getLogger("inspect_polyline")


@dataclass(slots=True)
class PolylineSummary:
    """Measurements derived from one decoded polyline."""

    line: LineString
    length: Length
    hull: Ring
    hull_area: Area


def summarize_polyline(encoded: str, *, precision: Optional[int] = None) -> PolylineSummary:
    """Decode ``encoded`` and measure it.

    Raises:
        ValueError: If the polyline cannot be decoded or has fewer than two points.
        GeometryError: If no convex hull can be built from its coordinates.
    """

    coordinates = decode_polyline(encoded)
    line = sanitize(LineString(tuple(coordinates)))
    hull = build_convex_hull(line.coordinates, precision=precision)
    return PolylineSummary(
        line=line,
        length=line_length(line),
        hull=hull,
        hull_area=abs(polygon_area(hull)),
    )


def _build_parser() -> argparse.ArgumentParser:
    """Return the CLI argument parser for the polyline inspector."""

    parser = argparse.ArgumentParser(
        description=(
            "Decode an encoded polyline and report its length, convex hull and"
            " hull area."
        )
    )
    parser.add_argument("--polyline", required=True, help="Encoded polyline string")
    parser.add_argument(
        "--precision",
        type=int,
        default=DEFAULT_CONFIG.hull_precision,
        help="Decimal places kept for the hull grid (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional output HTML path for an interactive map",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point used via ``python -m gridgeo.tools.inspect_polyline``."""

    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )

    try:
        summary = summarize_polyline(args.polyline, precision=args.precision)
    except (GeometryError, ValueError) as exc:
        LOGGER.error("Failed to inspect polyline: %s", exc)
        return 1

    LOGGER.info("Decoded %d coordinates", len(summary.line))
    LOGGER.info("Line length %.3f km", summary.length.to(KILOMETRE).value)
    LOGGER.info("Convex hull has %d vertices", len(summary.hull) - 1)
    LOGGER.info("Hull area %.1f m2", summary.hull_area.to(SQUARE_METRE).value)

    if args.output is not None:
        create_geometry_map(
            rings=[summary.hull],
            lines=[summary.line],
            output_html_path=args.output,
        )
        LOGGER.info("Map written to %s", args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
