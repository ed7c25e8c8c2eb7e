"""Length and area quantities tagged with a unit.

Only the slice of a unit system the geometry code needs: linear lengths in
metres or kilometres and areas in square metres or square kilometres.
Comparisons and equality work on the magnitude in the base unit, so
``Length(1, "km") == Length(1000, "m")``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

METRE = "m"
KILOMETRE = "km"
SQUARE_METRE = "m2"
SQUARE_KILOMETRE = "km2"

_LENGTH_FACTORS: Dict[str, float] = {METRE: 1.0, KILOMETRE: 1000.0}
_AREA_FACTORS: Dict[str, float] = {SQUARE_METRE: 1.0, SQUARE_KILOMETRE: 1.0e6}

Number = Union[int, float]


def _factor(factors: Dict[str, float], unit: str, kind: str) -> float:
    try:
        return factors[unit]
    except KeyError:
        raise ValueError(f"Unsupported {kind} unit '{unit}'") from None


@dataclass(frozen=True, slots=True, eq=False)
class Length:
    """Scalar length tagged with a linear unit."""

    value: float
    unit: str = METRE

    def __post_init__(self) -> None:
        _factor(_LENGTH_FACTORS, self.unit, "length")

    @property
    def metres(self) -> float:
        return self.value * _LENGTH_FACTORS[self.unit]

    def to(self, unit: str) -> "Length":
        """Return the same length expressed in ``unit``."""

        factor = _factor(_LENGTH_FACTORS, unit, "length")
        return Length(self.metres / factor, unit)

    def __add__(self, other: "Length") -> "Length":
        if not isinstance(other, Length):
            return NotImplemented
        return Length(self.value + other.to(self.unit).value, self.unit)

    def __sub__(self, other: "Length") -> "Length":
        if not isinstance(other, Length):
            return NotImplemented
        return Length(self.value - other.to(self.unit).value, self.unit)

    def __neg__(self) -> "Length":
        return Length(-self.value, self.unit)

    def __abs__(self) -> "Length":
        return Length(abs(self.value), self.unit)

    def __mul__(self, other: Union["Length", Number]) -> Union["Length", "Area"]:
        if isinstance(other, Length):
            return Area(self.metres * other.metres, SQUARE_METRE)
        if isinstance(other, (int, float)):
            return Length(self.value * other, self.unit)
        return NotImplemented

    def __rmul__(self, other: Number) -> "Length":
        if isinstance(other, (int, float)):
            return Length(self.value * other, self.unit)
        return NotImplemented

    def __truediv__(self, other: Union["Length", Number]) -> Union["Length", float]:
        if isinstance(other, Length):
            return self.metres / other.metres
        if isinstance(other, (int, float)):
            return Length(self.value / other, self.unit)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.metres == other.metres

    def __hash__(self) -> int:
        return hash(("length", self.metres))

    def __lt__(self, other: "Length") -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.metres < other.metres

    def __le__(self, other: "Length") -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.metres <= other.metres

    def __gt__(self, other: "Length") -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.metres > other.metres

    def __ge__(self, other: "Length") -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.metres >= other.metres

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit}"


@dataclass(frozen=True, slots=True, eq=False)
class Area:
    """Scalar area tagged with a square-length unit."""

    value: float
    unit: str = SQUARE_METRE

    def __post_init__(self) -> None:
        _factor(_AREA_FACTORS, self.unit, "area")

    @property
    def square_metres(self) -> float:
        return self.value * _AREA_FACTORS[self.unit]

    def to(self, unit: str) -> "Area":
        """Return the same area expressed in ``unit``."""

        factor = _factor(_AREA_FACTORS, unit, "area")
        return Area(self.square_metres / factor, unit)

    def __add__(self, other: "Area") -> "Area":
        if not isinstance(other, Area):
            return NotImplemented
        return Area(self.value + other.to(self.unit).value, self.unit)

    def __sub__(self, other: "Area") -> "Area":
        if not isinstance(other, Area):
            return NotImplemented
        return Area(self.value - other.to(self.unit).value, self.unit)

    def __neg__(self) -> "Area":
        return Area(-self.value, self.unit)

    def __abs__(self) -> "Area":
        return Area(abs(self.value), self.unit)

    def __mul__(self, other: Number) -> "Area":
        if isinstance(other, (int, float)):
            return Area(self.value * other, self.unit)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Area", Number]) -> Union["Area", float]:
        if isinstance(other, Area):
            return self.square_metres / other.square_metres
        if isinstance(other, (int, float)):
            return Area(self.value / other, self.unit)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self.square_metres == other.square_metres

    def __hash__(self) -> int:
        return hash(("area", self.square_metres))

    def __lt__(self, other: "Area") -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self.square_metres < other.square_metres

    def __le__(self, other: "Area") -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self.square_metres <= other.square_metres

    def __gt__(self, other: "Area") -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self.square_metres > other.square_metres

    def __ge__(self, other: "Area") -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return self.square_metres >= other.square_metres

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit}"


__all__ = [
    "Area",
    "KILOMETRE",
    "Length",
    "METRE",
    "SQUARE_KILOMETRE",
    "SQUARE_METRE",
]
