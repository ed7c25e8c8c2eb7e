"""Central configuration for the geometry toolkit.

All values are constants imported by the rest of the package. They can be
overridden through environment variables (optionally via a local `.env`).
Operations take either a :class:`GeometryConfig` or a narrower override
(``epsilon``, ``precision``, ``earth_radius``); when none is passed they fall
back to :data:`DEFAULT_CONFIG` at call time.
"""

from __future__ import annotations

from dataclasses import dataclass
import importlib
import os


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Load .env variables when python-dotenv is available.
_load_dotenv = None
try:
    _dotenv_mod = importlib.import_module("dotenv")
    _load_dotenv = getattr(_dotenv_mod, "load_dotenv", None)
except Exception:
    _load_dotenv = None

if callable(_load_dotenv):
    # Load .env from the current directory or any parent folder.
    _load_dotenv()


# ---------------------------------------------------------------------------
# Earth model
# ---------------------------------------------------------------------------
# Radius (metres) of the spherical earth used by the haversine formula.
EARTH_RADIUS_M = _env_float("GEO_EARTH_RADIUS_M", 6378137.0)


# ---------------------------------------------------------------------------
# Algorithm tolerances
# ---------------------------------------------------------------------------
# Decimal places kept when rescaling coordinates to the convex hull grid.
HULL_PRECISION = _env_int("GEO_HULL_PRECISION", 8)

# Offset (degrees) applied to split two coincident line string coordinates.
SANITIZE_EPSILON_DEG = _env_float("GEO_SANITIZE_EPSILON_DEG", 1e-13)

# Latitude shift (degrees) applied when a ray hits a polygon vertex.
RAY_CASTING_EPSILON_DEG = _env_float("GEO_RAY_CASTING_EPSILON_DEG", 1e-4)

# Number of bearing steps used to approximate a search circle.
CIRCLE_SEGMENTS = _env_int("GEO_CIRCLE_SEGMENTS", 360)


@dataclass(frozen=True, slots=True)
class GeometryConfig:
    """Immutable bundle of the numeric constants shared by all components."""

    earth_radius_m: float = EARTH_RADIUS_M
    hull_precision: int = HULL_PRECISION
    sanitize_epsilon_deg: float = SANITIZE_EPSILON_DEG
    ray_casting_epsilon_deg: float = RAY_CASTING_EPSILON_DEG
    circle_segments: int = CIRCLE_SEGMENTS


DEFAULT_CONFIG = GeometryConfig()


__all__ = [
    "CIRCLE_SEGMENTS",
    "DEFAULT_CONFIG",
    "EARTH_RADIUS_M",
    "GeometryConfig",
    "HULL_PRECISION",
    "RAY_CASTING_EPSILON_DEG",
    "SANITIZE_EPSILON_DEG",
]
