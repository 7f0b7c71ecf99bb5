# IN THIS FILE: POSITION, GRIDBOUNDS, ROBOTSTATE

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    """
    Integer grid coordinate.
    Frozen so it can be stored in the grid's scent set and shared safely;
    a robot moves by replacing its Position, never by mutating one.
    Negative values are allowed because a candidate move can leave the grid.
    """
    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the position shifted by (dx, dy)"""
        return Position(x=self.x + dx, y=self.y + dy)

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"


class GridBounds(BaseModel):
    """Upper-right corner of the grid. Lower-left is always (0, 0)."""
    model_config = ConfigDict(frozen=True)

    max_x: int
    max_y: int


class RobotState(BaseModel):
    """Read-only snapshot of a robot"""
    model_config = ConfigDict(frozen=True)

    position: Position
    heading: str
    is_lost: bool = False
