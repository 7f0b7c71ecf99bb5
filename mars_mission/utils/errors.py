# IN THIS FILE: EXCEPTIONS RAISED BY THE MISSION ENGINE
"""
Two families of errors:

* InputFormatError - bad mission text. Raised by the parser, always fatal to
  that parse call, carries the offending line number and token.
* ContractError - an internal invariant was broken (unknown heading name,
  unrecognised command reaching a robot). These are bugs, not user input.
"""
from typing import Optional


class MissionError(Exception):
    """Base class for every error raised by mars_mission."""


# =============================================================================
# INPUT FORMAT ERRORS
# =============================================================================

class InputFormatError(MissionError, ValueError):
    def __init__(self, message: str, line: Optional[int] = None, token: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.token = token

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class EmptyInputError(InputFormatError):
    pass


class MalformedGridLineError(InputFormatError):
    pass


class NonNumericGridBoundsError(InputFormatError):
    pass


class NegativeGridBoundsError(InputFormatError):
    pass


class GridBoundsTooLargeError(InputFormatError):
    pass


class OddRobotRecordCountError(InputFormatError):
    pass


class WrongTokenMultipleError(InputFormatError):
    pass


class MalformedRobotPositionError(InputFormatError):
    pass


class NonNumericRobotPositionError(InputFormatError):
    pass


class NegativeRobotPositionError(InputFormatError):
    pass


class RobotOutOfBoundsError(InputFormatError):
    pass


class InvalidHeadingError(InputFormatError):
    pass


class InstructionsTooLongError(InputFormatError):
    pass


class InvalidInstructionCharactersError(InputFormatError):
    pass


class NoRobotsDefinedError(InputFormatError):
    pass


# =============================================================================
# CONTRACT ERRORS
# =============================================================================

class ContractError(MissionError):
    pass


class InvalidDirectionNameError(ContractError, ValueError):
    pass


class UnknownDirectionError(ContractError, KeyError):
    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class EmptyRegistryError(ContractError):
    pass


class InvalidCommandError(ContractError, ValueError):
    pass
