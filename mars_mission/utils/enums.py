# IN THIS FILE: HEADINGS, COMMANDS, ROBOT STATUS
from enum import Enum, auto


class Heading(str, Enum):
    """
    Default compass headings a robot can be given in a mission file.
    The value is the single-letter token used in input and output.
    """
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def __str__(self):
        return self.value

    @classmethod
    def tokens(cls):
        return [h.value for h in cls]


class Command(str, Enum):
    """
    Robot instruction characters.
    """
    LEFT = "L"
    RIGHT = "R"
    FORWARD = "F"

    def __str__(self):
        return self.value


class RobotStatus(Enum):
    """Robot state machine states. LOST is terminal."""

    ACTIVE = auto()
    LOST = auto()
