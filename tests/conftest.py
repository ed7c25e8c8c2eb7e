"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable rings and coordinates shared
by the geometry tests.
"""
from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from gridgeo.models import Coordinate, Ring


# --- Factory helpers -------------------------------------------------
def make_ring(*latlons):
    """Build a closed ring from (lat, lon) pairs."""
    coords = [Coordinate(lat, lon) for lat, lon in latlons]
    if coords and coords[0] != coords[-1]:
        coords.append(coords[0])
    return Ring(tuple(coords))


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def unit_square():
    return make_ring((0, 0), (0, 1), (1, 1), (1, 0))


@pytest.fixture
def ten_degree_square():
    return make_ring((0, 0), (0, 10), (10, 10), (10, 0))


@pytest.fixture
def dortmund():
    return Coordinate(51.4927, 7.4124)


@pytest.fixture
def berlin():
    return Coordinate(52.5200, 13.4050)


@pytest.fixture
def munich():
    return Coordinate(48.1351, 11.5820)
