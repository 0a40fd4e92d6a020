"""Hardiness category enumeration."""

from enum import Enum


class HardinessCategory(str, Enum):
    """Coarse plant hardiness category derived from the USDA zone number."""

    VERY_HARDY = "Very Hardy"
    HARDY = "Hardy"
    HALF_HARDY = "Half Hardy"
    TENDER = "Tender"

    @classmethod
    def from_zone_number(cls, zone_number: int) -> "HardinessCategory":
        """Map a USDA zone number (1-13) to a category."""
        if zone_number <= 5:
            return cls.VERY_HARDY
        if zone_number <= 7:
            return cls.HARDY
        if zone_number <= 9:
            return cls.HALF_HARDY
        return cls.TENDER
