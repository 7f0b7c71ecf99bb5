# mars_mission/parsing/input_parser.py
"""
Mission text parser.

Two layouts are accepted and detected automatically.

Multi-line (one record per non-blank line)::

    5 3
    1 1 E
    RFRFRFRF
    3 2 N
    FRRFLLFFRRFLL

Single-line (whitespace separated, four tokens per robot)::

    5 3 1 1 E RFRFRFRF 3 2 N FRRFLLFFRRFLL

Checks run in a fixed order - grid shape, grid numbers, robot block shape,
then each robot in turn - and the first failure is raised. Nothing partial is
ever returned.
"""
import logging
import re
from typing import List, Optional, Tuple

from mars_mission.config import GridConfig
from mars_mission.mission.models import ParsedInput, RobotDefinition
from mars_mission.utils.consts import MAX_INSTRUCTION_LENGTH
from mars_mission.utils.enums import Heading
from mars_mission.utils.errors import (
    EmptyInputError,
    InstructionsTooLongError,
    InvalidHeadingError,
    InvalidInstructionCharactersError,
    MalformedGridLineError,
    MalformedRobotPositionError,
    NegativeRobotPositionError,
    NoRobotsDefinedError,
    NonNumericGridBoundsError,
    NonNumericRobotPositionError,
    OddRobotRecordCountError,
    RobotOutOfBoundsError,
    WrongTokenMultipleError,
)
from mars_mission.utils.types import GridBounds, Position

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INSTRUCTIONS = re.compile(r"[LRF]*")
_TOKENS_PER_ROBOT = 4

# (position line number, position text, instructions line number, instructions)
RawRobot = Tuple[int, str, int, str]


def parse_input(text: str, max_coordinate: Optional[int] = None) -> ParsedInput:
    """
    Parse mission text into grid bounds and robot definitions.

    Args:
        text: Raw mission text in either layout
        max_coordinate: Largest allowed grid coordinate; read from GridConfig if None,
            and a non-positive value falls back to the default with a warning

    Raises:
        InputFormatError subclass describing the first problem found
    """
    if text is None or not text.strip():
        raise EmptyInputError("Input must contain at least grid bounds")

    lines = [
        (number, line.strip())
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]

    grid_number, grid_line = lines[0]
    single_line = len(lines) == 1
    tokens = grid_line.split()
    grid_tokens = tokens[:2] if single_line else tokens

    if len(grid_tokens) != 2:
        raise MalformedGridLineError(
            f'Invalid grid format: "{grid_line}". Expected "maxX maxY"',
            line=grid_number, token=grid_line,
        )

    bounds = _parse_bounds(grid_number, grid_tokens, max_coordinate)

    if single_line:
        raw_robots = _group_single_line(grid_number, tokens[2:])
    else:
        raw_robots = _group_multi_line(lines[1:])

    robots = [_parse_robot(raw, bounds) for raw in raw_robots]

    if not robots:
        raise NoRobotsDefinedError("Input must contain at least one robot definition")

    logger.debug(
        "Parsed grid %dx%d with %d robot(s)", bounds.max_x, bounds.max_y, len(robots)
    )
    return ParsedInput(bounds=bounds, robot_definitions=robots)


# =============================================================================
# ROBOT BLOCK GROUPING
# =============================================================================

def _group_single_line(number: int, robot_tokens: List[str]) -> List[RawRobot]:
    if len(robot_tokens) % _TOKENS_PER_ROBOT != 0:
        raise WrongTokenMultipleError(
            f"Invalid robot format: {len(robot_tokens)} robot token(s) after the grid bounds. "
            f'Each robot needs exactly {_TOKENS_PER_ROBOT}: "x y heading instructions"',
            line=number,
        )

    return [
        (number, " ".join(robot_tokens[i:i + 3]), number, robot_tokens[i + 3])
        for i in range(0, len(robot_tokens), _TOKENS_PER_ROBOT)
    ]


def _group_multi_line(robot_lines: List[Tuple[int, str]]) -> List[RawRobot]:
    if len(robot_lines) % 2 != 0:
        raise OddRobotRecordCountError(
            "Invalid robot format. Each robot must have a position line and an instructions line",
            line=robot_lines[-1][0],
        )

    return [
        (number, position_line, instructions_number, instructions)
        for (number, position_line), (instructions_number, instructions)
        in zip(robot_lines[::2], robot_lines[1::2])
    ]


# =============================================================================
# FIELD VALIDATION
# =============================================================================

def _parse_bounds(number: int, tokens: List[str], max_coordinate: Optional[int]) -> GridBounds:
    text = " ".join(tokens)
    if not all(_INTEGER.fullmatch(t) for t in tokens):
        raise NonNumericGridBoundsError(
            f'Invalid grid coordinates: "{text}". Must be numbers', line=number, token=text
        )

    max_x, max_y = (int(t) for t in tokens)
    GridConfig(max_coordinate).validate_grid_bounds(max_x, max_y, line=number, token=text)

    return GridBounds(max_x=max_x, max_y=max_y)


def _parse_robot(raw: RawRobot, bounds: GridBounds) -> RobotDefinition:
    number, position_text, instructions_number, instructions = raw
    tokens = position_text.split()
    if len(tokens) != 3:
        raise MalformedRobotPositionError(
            f'Invalid robot position format: "{position_text}". Expected "x y heading"',
            line=number, token=position_text,
        )
    x_token, y_token, heading = tokens

    if not (_INTEGER.fullmatch(x_token) and _INTEGER.fullmatch(y_token)):
        raise NonNumericRobotPositionError(
            f'Invalid robot coordinates: "{position_text}". x and y must be numbers',
            line=number, token=position_text,
        )

    x, y = int(x_token), int(y_token)
    if x < 0 or y < 0:
        raise NegativeRobotPositionError(
            f'Invalid robot position: "{position_text}". Coordinates must be non-negative',
            line=number, token=position_text,
        )

    if x > bounds.max_x or y > bounds.max_y:
        raise RobotOutOfBoundsError(
            f'Invalid robot position: "{position_text}". Robot starts outside grid bounds '
            f"({bounds.max_x}, {bounds.max_y})",
            line=number, token=position_text,
        )

    if heading not in Heading.tokens():
        raise InvalidHeadingError(
            f'Invalid robot heading: "{heading}". Must be N, S, E, or W',
            line=number, token=heading,
        )

    if len(instructions) > MAX_INSTRUCTION_LENGTH:
        raise InstructionsTooLongError(
            f"Invalid instructions: {len(instructions)} characters. "
            f"Must be at most {MAX_INSTRUCTION_LENGTH} characters",
            line=instructions_number, token=instructions,
        )

    if not _INSTRUCTIONS.fullmatch(instructions):
        raise InvalidInstructionCharactersError(
            f'Invalid instructions: "{instructions}". Must contain only L, R, F characters',
            line=instructions_number, token=instructions,
        )

    return RobotDefinition(position=Position(x=x, y=y), heading=heading, instructions=instructions)
