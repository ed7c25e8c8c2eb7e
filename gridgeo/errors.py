"""Central error types used across the package."""

from __future__ import annotations


class GeometryError(RuntimeError):
    """Raised when geometry input violates an invariant an algorithm relies on."""


__all__ = ["GeometryError"]
