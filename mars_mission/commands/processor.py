# mars_mission/commands/processor.py
"""
Command validation and normalization.

Robots only ever execute `Command` values. Anything else - raw instruction
text, lists of single-character strings - goes through to_commands() first.
"""
from typing import Iterable, List, Union

from mars_mission.utils.consts import MAX_INSTRUCTION_LENGTH
from mars_mission.utils.enums import Command
from mars_mission.utils.errors import InvalidCommandError

VALID_COMMANDS = frozenset(c.value for c in Command)


def is_valid_command(command: str) -> bool:
    return command in VALID_COMMANDS


def validate_command_string(commands: str) -> bool:
    """Empty is valid (robot stays put). Over-length or unknown characters are not."""
    if len(commands) > MAX_INSTRUCTION_LENGTH:
        return False
    return all(is_valid_command(c) for c in commands)


def filter_valid_commands(commands: str) -> str:
    return "".join(c for c in commands if is_valid_command(c))


def supported_commands() -> List[Command]:
    return list(Command)


def to_commands(commands: Union[str, Iterable[Union[Command, str]]]) -> List[Command]:
    """
    Normalize instruction text or a sequence of commands into a list of Command.

    Raises:
        InvalidCommandError: any entry is not L, R or F
    """
    result = []
    for index, command in enumerate(commands):
        if isinstance(command, Command):
            result.append(command)
        elif isinstance(command, str) and is_valid_command(command):
            result.append(Command(command))
        else:
            raise InvalidCommandError(
                f"Invalid command {command!r} at index {index}. "
                f"Supported commands: {', '.join(sorted(VALID_COMMANDS))}"
            )
    return result
