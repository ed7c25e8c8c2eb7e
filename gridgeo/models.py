"""Value types shared by every geometry component."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from polyline import decode as polyline_decode

from .quantities import Length

LatLon = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in degrees with an optional, unused elevation."""

    latitude: float
    longitude: float
    elevation: Optional[float] = None

    def as_latlon(self) -> LatLon:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box of a coordinate collection."""

    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float


def _as_coordinates(values: Iterable[Coordinate | LatLon]) -> Tuple[Coordinate, ...]:
    coords: List[Coordinate] = []
    for value in values:
        if isinstance(value, Coordinate):
            coords.append(value)
        else:
            lat, lon = value
            coords.append(Coordinate(float(lat), float(lon)))
    return tuple(coords)


@dataclass(frozen=True, slots=True)
class Ring:
    """Ordered coordinates describing a polygon boundary.

    A well-formed ring is closed (first coordinate repeated at the end) and
    has at least three distinct coordinates. Construction does not enforce
    either property; the algorithms that need them check and raise.
    """

    coordinates: Tuple[Coordinate, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", _as_coordinates(self.coordinates))

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coordinates)

    def __getitem__(self, index: int) -> Coordinate:
        return self.coordinates[index]

    @property
    def is_closed(self) -> bool:
        return len(self.coordinates) > 1 and self.coordinates[0] == self.coordinates[-1]

    def closed(self) -> "Ring":
        """Return this ring, appending the first coordinate when it is open."""

        if self.is_closed or not self.coordinates:
            return self
        return Ring(self.coordinates + (self.coordinates[0],))

    def distinct_coordinates(self) -> List[Coordinate]:
        """Unique coordinates in first-seen order."""

        return list(dict.fromkeys(self.coordinates))

    def bounds(self) -> Bounds:
        if not self.coordinates:
            raise ValueError("Cannot compute bounds of an empty ring")
        lats = [c.latitude for c in self.coordinates]
        lons = [c.longitude for c in self.coordinates]
        return Bounds(min(lats), max(lats), min(lons), max(lons))


@dataclass(frozen=True, slots=True)
class LineString:
    """Open path of at least two coordinates."""

    coordinates: Tuple[Coordinate, ...]

    def __post_init__(self) -> None:
        coords = _as_coordinates(self.coordinates)
        if len(coords) < 2:
            raise ValueError("A line string needs at least two coordinates")
        object.__setattr__(self, "coordinates", coords)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coordinates)

    def __getitem__(self, index: int) -> Coordinate:
        return self.coordinates[index]

    @property
    def is_degenerate(self) -> bool:
        first = self.coordinates[0]
        return all(coord == first for coord in self.coordinates[1:])


@dataclass(frozen=True, slots=True)
class CoordinateDistance:
    """Distance from ``origin`` to ``target``.

    Orders by distance alone, so the natural ordering is inconsistent with
    equality: two different targets at the same distance are neither less
    nor greater than each other but still compare unequal.
    """

    origin: Coordinate
    target: Coordinate
    distance: Length

    def __lt__(self, other: "CoordinateDistance") -> bool:
        if not isinstance(other, CoordinateDistance):
            return NotImplemented
        return self.distance < other.distance

    def __le__(self, other: "CoordinateDistance") -> bool:
        if not isinstance(other, CoordinateDistance):
            return NotImplemented
        return self.distance <= other.distance

    def __gt__(self, other: "CoordinateDistance") -> bool:
        if not isinstance(other, CoordinateDistance):
            return NotImplemented
        return self.distance > other.distance

    def __ge__(self, other: "CoordinateDistance") -> bool:
        if not isinstance(other, CoordinateDistance):
            return NotImplemented
        return self.distance >= other.distance


def decode_polyline(encoded: str) -> List[Coordinate]:
    """Decode an encoded polyline string into coordinates."""

    if not encoded:
        return []
    try:
        decoded = polyline_decode(encoded)
    except (ValueError, TypeError, IndexError) as exc:
        raise ValueError("Unable to decode polyline") from exc
    return [Coordinate(float(lat), float(lon)) for lat, lon in decoded]


def as_coordinates(values: Sequence[Coordinate | LatLon]) -> List[Coordinate]:
    """Normalise (lat, lon) tuples and coordinates into a coordinate list."""

    return list(_as_coordinates(values))


__all__ = [
    "Bounds",
    "Coordinate",
    "CoordinateDistance",
    "LatLon",
    "LineString",
    "Ring",
    "as_coordinates",
    "decode_polyline",
]
