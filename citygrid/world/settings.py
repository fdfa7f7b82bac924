# citygrid/world/settings.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from citygrid.constants import (
    DEFAULT_ROAD_PROBABILITY,
    DEFAULT_WORLD_LENGTH,
    MIN_WORLD_LENGTH,
    UNIT_LENGTH,
)
from citygrid.errors import InvalidConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LayoutSettings:
    """
    Grid configuration for one generated city.

    world_length: cells per side (the grid is world_length x world_length)
    road_probability: chance that a candidate interior road line is kept
    unit_length: world-space size of one cell
    """

    world_length: int = DEFAULT_WORLD_LENGTH
    road_probability: float = DEFAULT_ROAD_PROBABILITY
    unit_length: float = UNIT_LENGTH

    @property
    def max_attempts(self) -> int:
        return self.world_length * 10

    @property
    def road_count(self) -> int:
        """Nominal number of interior road lines; fewer is normal."""
        return self.world_length * 2

    def validate(self) -> None:
        if self.world_length < 1:
            raise InvalidConfigError(
                f"world_length must be >= 1, got {self.world_length}"
            )
        if not 0.0 <= self.road_probability <= 1.0:
            raise InvalidConfigError(
                f"road_probability must be in [0, 1], got {self.road_probability}"
            )
        if self.world_length < MIN_WORLD_LENGTH:
            logger.warning(
                "world_length %d is below %d; no interior roads can be placed",
                self.world_length,
                MIN_WORLD_LENGTH,
            )
