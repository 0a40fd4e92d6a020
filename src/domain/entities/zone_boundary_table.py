"""Zone boundary table entities and the fixed classification tables."""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

NEG_INF = float("-inf")
POS_INF = float("inf")


@dataclass(frozen=True)
class ZoneBand:
    """A single classification band covering ``[min_inclusive, max_exclusive)``."""

    code: str
    min_inclusive: float
    max_exclusive: float
    description: str = ""

    def contains(self, value: float) -> bool:
        return self.min_inclusive <= value < self.max_exclusive

    @property
    def value_range(self) -> Tuple[float, float]:
        """Get band range as tuple."""
        return (self.min_inclusive, self.max_exclusive)

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class ZoneBoundaryTable:
    """Ordered bands mapping a numeric axis to classification codes.

    Bands are scanned in order and the first band containing the value wins.
    ``fallback_code`` is returned when no band matches.
    """

    name: str
    bands: Tuple[ZoneBand, ...]
    fallback_code: str
    fallback_description: str = ""

    @classmethod
    def from_definitions(
        cls,
        name: str,
        definitions: Iterable[Tuple],
        fallback_code: str,
        fallback_description: str = "",
    ) -> "ZoneBoundaryTable":
        """Create a table from ``(code, min, max[, description])`` tuples."""
        return cls(
            name=name,
            bands=tuple(ZoneBand(*definition) for definition in definitions),
            fallback_code=fallback_code,
            fallback_description=fallback_description,
        )

    def find_band(self, value: float) -> Optional[ZoneBand]:
        for band in self.bands:
            if band.contains(value):
                return band
        return None

    def lookup(self, value: float) -> str:
        """Return the code of the first band containing ``value``."""
        band = self.find_band(value)
        return band.code if band else self.fallback_code

    def describe(self, value: float) -> str:
        band = self.find_band(value)
        return band.description if band else self.fallback_description

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(band.code for band in self.bands)

    def __len__(self) -> int:
        return len(self.bands)


# USDA hardiness zones by absolute minimum temperature (Celsius).
USDA_ZONE_TABLE = ZoneBoundaryTable.from_definitions(
    "USDA",
    [
        ("1a", NEG_INF, -48.3),
        ("1b", -48.3, -45.6),
        ("2a", -45.6, -42.8),
        ("2b", -42.8, -40.0),
        ("3a", -40.0, -37.2),
        ("3b", -37.2, -34.4),
        ("4a", -34.4, -31.7),
        ("4b", -31.7, -28.9),
        ("5a", -28.9, -26.1),
        ("5b", -26.1, -23.3),
        ("6a", -23.3, -20.6),
        ("6b", -20.6, -17.8),
        ("7a", -17.8, -15.0),
        ("7b", -15.0, -12.2),
        ("8a", -12.2, -9.4),
        ("8b", -9.4, -6.7),
        ("9a", -6.7, -3.9),
        ("9b", -3.9, -1.1),
        ("10a", -1.1, 1.7),
        ("10b", 1.7, 4.4),
        ("11a", 4.4, 7.2),
        ("11b", 7.2, 10.0),
        ("12a", 10.0, 12.8),
        ("12b", 12.8, 15.6),
        ("13a", 15.6, 18.3),
        ("13b", 18.3, 21.1),
    ],
    fallback_code="13b",
)

# Upper bound of the warmest USDA band; anything above is frost-free.
USDA_WARMEST_BOUND = 21.1

# RHS hardiness ratings (UK).
RHS_RATING_TABLE = ZoneBoundaryTable.from_definitions(
    "RHS",
    [
        ("H1a", 15.0, POS_INF, "Under glass all year (>15°C)"),
        ("H1b", 10.0, 15.0, "Can be grown outside in summer (10-15°C)"),
        ("H1c", 5.0, 10.0, "Can be grown outside in summer (5-10°C)"),
        ("H2", 1.0, 5.0, "Tolerant of low temps but not surviving being frozen (1-5°C)"),
        ("H3", -5.0, 1.0, "Hardy in coastal/mild areas (-5 to 1°C)"),
        ("H4", -10.0, -5.0, "Hardy through most of UK (-10 to -5°C)"),
        ("H5", -15.0, -10.0, "Hardy in most places (-15 to -10°C)"),
        ("H6", -20.0, -15.0, "Hardy everywhere (-20 to -15°C)"),
        ("H7", NEG_INF, -20.0, "Very hardy (< -20°C)"),
    ],
    fallback_code="H4",
)

# AHS heat zones by average number of days per year above 30°C.
HEAT_ZONE_TABLE = ZoneBoundaryTable.from_definitions(
    "AHS",
    [
        ("1", 0, 1),
        ("2", 1, 7),
        ("3", 7, 14),
        ("4", 14, 30),
        ("5", 30, 45),
        ("6", 45, 60),
        ("7", 60, 90),
        ("8", 90, 120),
        ("9", 120, 150),
        ("10", 150, 180),
        ("11", 180, 210),
        ("12", 210, 365),
    ],
    fallback_code="12",
)
