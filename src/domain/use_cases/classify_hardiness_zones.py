"""Use case for classifying hardiness zones from the coldest minimum."""

import logging
import re

from ..entities.climate_report import HardinessZones
from ..entities.hardiness_category import HardinessCategory
from ..entities.zone_boundary_table import (
    RHS_RATING_TABLE,
    USDA_WARMEST_BOUND,
    USDA_ZONE_TABLE,
    ZoneBoundaryTable,
)

logger = logging.getLogger(__name__)


def zone_number(usda_zone: str) -> int:
    """Numeric part of a USDA zone code, e.g. ``'10b'`` -> 10."""
    match = re.match(r"\d+", usda_zone)
    return int(match.group()) if match else 9


class ClassifyHardinessZonesUseCase:
    """Use case to map a coldest-minimum temperature to hardiness zones."""

    def __init__(
        self,
        usda_table: ZoneBoundaryTable = USDA_ZONE_TABLE,
        rhs_table: ZoneBoundaryTable = RHS_RATING_TABLE,
        warmest_bound: float = USDA_WARMEST_BOUND,
    ):
        """
        Initialize use case.

        Args:
            usda_table: USDA zone bands
            rhs_table: RHS rating bands
            warmest_bound: Temperatures above this are always the warmest
                USDA zone
        """
        self.usda_table = usda_table
        self.rhs_table = rhs_table
        self.warmest_bound = warmest_bound

    def _usda_zone(self, coldest_minimum: float) -> str:
        if coldest_minimum > self.warmest_bound:
            # Frost-free, warmer than every band
            return self.usda_table.bands[-1].code
        return self.usda_table.lookup(coldest_minimum)

    def execute(self, coldest_minimum: float) -> HardinessZones:
        """
        Execute classification.

        Args:
            coldest_minimum: Absolute minimum temperature in Celsius

        Returns:
            USDA zone, RHS rating with description and hardiness category
        """
        usda_zone = self._usda_zone(coldest_minimum)
        number = zone_number(usda_zone)
        zones = HardinessZones(
            usda_zone=usda_zone,
            rhs_zone=self.rhs_table.lookup(coldest_minimum),
            rhs_description=self.rhs_table.describe(coldest_minimum),
            hardiness_category=HardinessCategory.from_zone_number(number),
            zone_number=number,
        )
        logger.debug(
            f"Classified {coldest_minimum}°C as USDA {zones.usda_zone}, "
            f"RHS {zones.rhs_zone} ({zones.hardiness_category.value})"
        )
        return zones
