"""Command line entry points for supplementary geometry tooling."""

from .inspect_polyline import PolylineSummary, summarize_polyline

__all__ = ["PolylineSummary", "summarize_polyline"]
