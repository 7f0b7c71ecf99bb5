"""
Grid limit configuration.

The largest permitted grid coordinate defaults to 50 and can be raised or
lowered through the MAX_GRID_COORDINATE environment variable or an explicit
override (CLI --max-coordinate, MissionProcessor(max_coordinate=...)). A bad
value from either source is never fatal: it is logged and the default is used instead.
"""
import logging
import os
from typing import NamedTuple, Optional

from mars_mission.utils.consts import (
    DEFAULT_MAX_COORDINATE,
    MAX_COORDINATE_ENV,
    MIN_COORDINATE,
)
from mars_mission.utils.errors import GridBoundsTooLargeError, NegativeGridBoundsError

logger = logging.getLogger(__name__)


class GridLimits(NamedTuple):
    max_coordinate: int
    min_coordinate: int


class GridConfig:
    """Reads grid limits once; call reset() to pick up environment changes."""

    def __init__(self, max_coordinate: Optional[int] = None):
        self._override = max_coordinate
        self.limits = self._load_configuration()

    @property
    def max_coordinate(self) -> int:
        return self.limits.max_coordinate

    @property
    def min_coordinate(self) -> int:
        return self.limits.min_coordinate

    def is_valid_coordinate(self, value: int) -> bool:
        return self.limits.min_coordinate <= value <= self.limits.max_coordinate

    def validate_grid_bounds(
        self,
        max_x: int,
        max_y: int,
        line: Optional[int] = None,
        token: Optional[str] = None,
    ) -> None:
        """
        Raises:
            NegativeGridBoundsError: either bound is below the minimum coordinate
            GridBoundsTooLargeError: either bound is above the maximum coordinate
        """
        for axis, value in (("maxX", max_x), ("maxY", max_y)):
            if value < self.limits.min_coordinate:
                raise NegativeGridBoundsError(
                    f"Invalid grid bound: {axis}={value}. Coordinates must be non-negative",
                    line=line, token=token,
                )
            if value > self.limits.max_coordinate:
                raise GridBoundsTooLargeError(
                    f"Invalid grid bound: {axis}={value}. "
                    f"Maximum coordinate value is {self.limits.max_coordinate}",
                    line=line, token=token,
                )

    def reset(self) -> None:
        self.limits = self._load_configuration()

    def _load_configuration(self) -> GridLimits:
        if self._override is not None:
            max_coordinate = self._positive_or_default(self._override, "max_coordinate")
        else:
            max_coordinate = self._positive_or_default(
                os.environ.get(MAX_COORDINATE_ENV, ""), MAX_COORDINATE_ENV
            )
        return GridLimits(max_coordinate, MIN_COORDINATE)

    @staticmethod
    def _positive_or_default(raw, source: str) -> int:
        # Unset (empty) is silent; anything else that is not a positive int warns
        if isinstance(raw, str) and not raw.strip():
            return DEFAULT_MAX_COORDINATE

        parsed = None
        if isinstance(raw, str):
            try:
                parsed = int(raw.strip())
            except ValueError:
                pass
        elif isinstance(raw, int) and not isinstance(raw, bool):
            parsed = raw

        if parsed is None or parsed <= 0:
            logger.warning(
                'Invalid %s value: "%s". Using default value %d.',
                source, raw, DEFAULT_MAX_COORDINATE,
            )
            return DEFAULT_MAX_COORDINATE
        return parsed
