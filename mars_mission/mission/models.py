# =============================================================================
# PYDANTIC MODELS (PARSER OUTPUT + MISSION RESULTS)
# =============================================================================
from typing import List

from pydantic import BaseModel

from mars_mission.utils.types import GridBounds, Position


class RobotDefinition(BaseModel):
    position: Position
    heading: str
    instructions: str = ""


class ParsedInput(BaseModel):
    bounds: GridBounds
    robot_definitions: List[RobotDefinition]


class VisualizationRobot(BaseModel):
    id: str
    final_position: Position
    heading: str
    is_lost: bool


class MissionVisualizationData(BaseModel):
    bounds: GridBounds
    robots: List[VisualizationRobot]
    scented_positions: List[Position]


class MissionResults(BaseModel):
    text_output: List[str]
    visualization_data: MissionVisualizationData
