# IN THIS FILE: ROBOT STATE MACHINE (ACTIVE -> LOST)

import logging
from typing import Iterable, Optional, Union

from mars_mission.commands.processor import to_commands
from mars_mission.entities.grid import Grid
from mars_mission.navigation.direction_registry import DirectionRegistry
from mars_mission.utils.consts import LEFT_TURN_DEGREES, LOST_SUFFIX, RIGHT_TURN_DEGREES
from mars_mission.utils.enums import Command, RobotStatus
from mars_mission.utils.errors import InvalidCommandError, UnknownDirectionError
from mars_mission.utils.types import Position, RobotState

logger = logging.getLogger(__name__)


class Robot:
    """
    A single robot on a grid.

    The robot owns its position/heading/status but not the grid: every
    boundary and scent check goes through the Grid passed to each call.
    """

    def __init__(
        self,
        robot_id: str,
        name: str,
        position: Position,
        heading: str,
        directions: Optional[DirectionRegistry] = None,
    ):
        """
        Args:
            robot_id: Stable identifier, e.g. "robot-1"
            name: Display name, e.g. "Robot 1"
            position: Starting cell
            heading: Starting heading name (must be registered in `directions`)
            directions: Heading registry; defaults to N/E/S/W
        """
        self.directions = directions or DirectionRegistry.with_defaults()
        heading = str(heading)
        if not self.directions.is_registered(heading):
            raise UnknownDirectionError(f"Heading '{heading}' is not registered")

        self.id = robot_id
        self.name = name
        self.position = position
        self.heading = heading
        self.status = RobotStatus.ACTIVE

    @property
    def is_lost(self) -> bool:
        return self.status is RobotStatus.LOST

    @property
    def state(self) -> RobotState:
        return RobotState(position=self.position, heading=self.heading, is_lost=self.is_lost)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def process_command(self, command: Command, grid: Grid) -> None:
        """Apply one command. No-op once the robot is lost."""
        if self.is_lost:
            return

        if command is Command.LEFT:
            self.heading = self.directions.turn(self.heading, LEFT_TURN_DEGREES)
        elif command is Command.RIGHT:
            self.heading = self.directions.turn(self.heading, RIGHT_TURN_DEGREES)
        elif command is Command.FORWARD:
            self._move_forward(grid)
        else:
            raise InvalidCommandError(f"Invalid command {command!r}")

    def process_commands(self, commands: Union[str, Iterable[Command]], grid: Grid) -> None:
        """
        Apply commands in order, stopping the moment the robot is lost.

        Raises:
            InvalidCommandError: `commands` contains anything other than L, R, F.
                Validation happens up front so a bad string never half-runs.
        """
        for command in to_commands(commands):
            self.process_command(command, grid)
            if self.is_lost:
                break

    def _move_forward(self, grid: Grid) -> None:
        dx, dy = self.directions.get_movement_vector(self.heading)
        # Non-cardinal headings snap to the nearest cell
        candidate = self.position.offset(int(round(dx)), int(round(dy)))

        if grid.is_valid_position(candidate):
            self.position = candidate
            return

        if grid.has_scent(self.position):
            logger.debug(
                "%s ignored F at %s heading %s (scent)", self.id, self.position, self.heading
            )
            return

        grid.add_scent(self.position)
        self.status = RobotStatus.LOST
        logger.debug("%s lost off %s heading %s", self.id, self.position, self.heading)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def get_output_string(self) -> str:
        output = f"{self.position.x} {self.position.y} {self.heading}"
        return f"{output} {LOST_SUFFIX}" if self.is_lost else output

    def __repr__(self) -> str:
        return (
            f"Robot(id={self.id}, x={self.position.x}, y={self.position.y}, "
            f"h={self.heading}, status={self.status.name})"
        )
