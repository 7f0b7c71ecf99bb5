# mars_mission/entities/grid.py

from typing import List, Set

from mars_mission.utils.types import GridBounds, Position


class Grid:
    """
    Rectangular mission area from (0, 0) to (max_x, max_y) inclusive.
    Tracks scented positions left behind by lost robots.
    One Grid per mission, shared by every robot in that mission.
    """

    def __init__(self, bounds: GridBounds):
        self._bounds = bounds.model_copy()
        self._scents: Set[Position] = set()

    @property
    def bounds(self) -> GridBounds:
        return self._bounds

    def is_valid_position(self, position: Position) -> bool:
        return (
            0 <= position.x <= self._bounds.max_x
            and 0 <= position.y <= self._bounds.max_y
        )

    def add_scent(self, position: Position) -> None:
        """Mark `position` as the last safe spot before a robot fell off. Idempotent."""
        self._scents.add(position)

    def has_scent(self, position: Position) -> bool:
        return position in self._scents

    def get_scented_positions(self) -> List[Position]:
        return sorted(self._scents, key=lambda p: (p.x, p.y))

    def clear_scents(self) -> None:
        """Test helper; missions never remove scent."""
        self._scents.clear()

    def __repr__(self) -> str:
        return (
            f"Grid(max_x={self._bounds.max_x}, max_y={self._bounds.max_y}, "
            f"scents={len(self._scents)})"
        )
