# IN THIS FILE: NAMED HEADINGS -> DEGREES + MOVEMENT VECTORS
"""
Direction registry.

Headings are looked up by name rather than hardcoded so that a mission can
turn by any angle over any set of headings. 0 degrees points along the
grid's +y axis (north) and angles grow clockwise, so the movement vector is
(sin, cos) rather than the usual (cos, sin).

With the default N/E/S/W set a +/-90 degree turn always lands exactly on a
neighbour; the closest-match search only matters for custom headings.
"""
from typing import Dict, List, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict

from mars_mission.utils.consts import DEFAULT_HEADING_DEGREES, VECTOR_PRECISION
from mars_mission.utils.errors import (
    EmptyRegistryError,
    InvalidDirectionNameError,
    UnknownDirectionError,
)


class DirectionDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    degrees: float
    vector: Tuple[float, float]


class DirectionRegistry:
    """
    Maps heading names to angles. One instance per mission processor;
    nothing here is process-wide.
    """

    def __init__(self):
        # Insertion ordered: turn() tie-breaks on first registered
        self._directions: Dict[str, DirectionDefinition] = {}

    @classmethod
    def with_defaults(cls) -> "DirectionRegistry":
        registry = cls()
        registry.initialize_defaults()
        return registry

    def register(self, name: str, degrees: float) -> None:
        """
        Add or overwrite a heading.

        Raises:
            InvalidDirectionNameError: name is empty or blank
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidDirectionNameError("Direction name must be a non-empty string")

        normalized = self._normalize_degrees(degrees)
        radians = np.deg2rad(normalized)
        vector = (
            float(np.round(np.sin(radians), VECTOR_PRECISION)) + 0.0,  # x = sin(angle)
            float(np.round(np.cos(radians), VECTOR_PRECISION)) + 0.0,  # y = cos(angle)
        )
        # + 0.0 folds -0.0 into 0.0

        self._directions[name] = DirectionDefinition(name=name, degrees=normalized, vector=vector)

    def is_registered(self, name: str) -> bool:
        return name in self._directions

    def get_direction(self, name: str) -> Optional[DirectionDefinition]:
        return self._directions.get(name)

    def get_movement_vector(self, name: str) -> Tuple[float, float]:
        direction = self._directions.get(name)
        if direction is None:
            raise UnknownDirectionError(
                f"Direction '{name}' is not registered. "
                f"Available directions: {', '.join(self.registered_directions())}"
            )
        return direction.vector

    def turn(self, current: str, delta_degrees: float) -> str:
        """
        Rotate from `current` by `delta_degrees` (clockwise positive) and
        return the registered heading closest to the result.
        Exact ties go to the heading registered first.
        """
        if not self._directions:
            raise EmptyRegistryError("No directions registered in the system")

        direction = self._directions.get(current)
        if direction is None:
            raise UnknownDirectionError(f"Current direction '{current}' is not registered")

        target = self._normalize_degrees(direction.degrees + delta_degrees)
        return self._find_closest(target)

    def registered_directions(self) -> List[str]:
        return sorted(self._directions)

    def clear(self) -> None:
        self._directions.clear()

    def initialize_defaults(self) -> None:
        for name, degrees in DEFAULT_HEADING_DEGREES:
            self.register(name, degrees)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _normalize_degrees(degrees: float) -> float:
        # Python's % already returns a value in [0, 360) for negative input
        return degrees % 360

    @staticmethod
    def _degree_difference(a: float, b: float) -> float:
        diff = abs(a - b)
        return min(diff, 360 - diff)

    def _find_closest(self, target: float) -> str:
        closest = None
        smallest = float("inf")
        for name, direction in self._directions.items():
            difference = self._degree_difference(direction.degrees, target)
            if difference < smallest:
                smallest = difference
                closest = name
        return closest
