# IN THIS FILE: MISSION ORCHESTRATION (PARSE -> GRID -> ROBOTS IN ORDER)

import logging
from typing import List, Optional

from mars_mission.entities.grid import Grid
from mars_mission.entities.robot import Robot
from mars_mission.mission.models import (
    MissionResults,
    MissionVisualizationData,
    ParsedInput,
    VisualizationRobot,
)
from mars_mission.navigation.direction_registry import DirectionRegistry
from mars_mission.parsing.input_parser import parse_input

logger = logging.getLogger(__name__)


class MissionProcessor:
    """
    Runs a mission end to end.

    Robots are executed strictly one after another against a single shared
    Grid, so any scent left by robot i is already in place when robot i+1
    starts. Parse errors propagate; they are never turned into an empty result.
    """

    def __init__(
        self,
        directions: Optional[DirectionRegistry] = None,
        max_coordinate: Optional[int] = None,
    ):
        self.directions = directions or DirectionRegistry.with_defaults()
        self.max_coordinate = max_coordinate

    def run(self, text: str) -> MissionResults:
        parsed = parse_input(text, max_coordinate=self.max_coordinate)
        return self.execute(parsed)

    def execute(self, parsed: ParsedInput) -> MissionResults:
        grid = Grid(parsed.bounds)
        logger.info(
            "Mission start: grid %dx%d, %d robot(s)",
            parsed.bounds.max_x, parsed.bounds.max_y, len(parsed.robot_definitions),
        )

        text_output: List[str] = []
        robots: List[VisualizationRobot] = []

        for index, definition in enumerate(parsed.robot_definitions, start=1):
            robot = Robot(
                f"robot-{index}",
                f"Robot {index}",
                definition.position,
                definition.heading,
                self.directions,
            )
            robot.process_commands(definition.instructions, grid)

            text_output.append(robot.get_output_string())
            robots.append(VisualizationRobot(
                id=robot.id,
                final_position=robot.position,
                heading=robot.heading,
                is_lost=robot.is_lost,
            ))

        scented = grid.get_scented_positions()
        logger.info(
            "Mission complete: %d lost, %d scent(s)",
            sum(r.is_lost for r in robots), len(scented),
        )

        return MissionResults(
            text_output=text_output,
            visualization_data=MissionVisualizationData(
                bounds=grid.bounds,
                robots=robots,
                scented_positions=scented,
            ),
        )


def process_mission(text: str, max_coordinate: Optional[int] = None) -> MissionResults:
    """Convenience wrapper: run one mission with the default N/E/S/W headings."""
    return MissionProcessor(max_coordinate=max_coordinate).run(text)


def format_mission_results(lines: List[str]) -> str:
    return "\n".join(lines)
