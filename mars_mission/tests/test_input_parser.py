import pytest

from mars_mission.parsing.input_parser import parse_input
from mars_mission.utils.consts import MAX_COORDINATE_ENV
from mars_mission.utils.errors import (
    EmptyInputError,
    GridBoundsTooLargeError,
    InputFormatError,
    InstructionsTooLongError,
    InvalidHeadingError,
    InvalidInstructionCharactersError,
    MalformedGridLineError,
    MalformedRobotPositionError,
    NegativeGridBoundsError,
    NegativeRobotPositionError,
    NoRobotsDefinedError,
    NonNumericGridBoundsError,
    NonNumericRobotPositionError,
    OddRobotRecordCountError,
    RobotOutOfBoundsError,
    WrongTokenMultipleError,
)
from mars_mission.utils.types import GridBounds, Position


def test_parses_multi_line_sample(sample_input) -> None:
    parsed = parse_input(sample_input)

    assert parsed.bounds == GridBounds(max_x=5, max_y=3)
    assert [d.instructions for d in parsed.robot_definitions] == [
        "RFRFRFRF", "FRRFLLFFRRFLL", "LLFFFLFLFL",
    ]
    assert parsed.robot_definitions[2].position == Position(x=0, y=3)
    assert parsed.robot_definitions[2].heading == "W"


def test_multi_line_ignores_blank_lines_and_indentation() -> None:
    parsed = parse_input("\n  5 3\n\n\t1 1 E  \n\n   RFRFRFRF\n\n")

    assert len(parsed.robot_definitions) == 1
    assert parsed.robot_definitions[0].instructions == "RFRFRFRF"


def test_parses_single_line() -> None:
    parsed = parse_input("5 3 1 1 E RFRFRFRF 3 2 N FRRFLLFFRRFLL")

    assert parsed.bounds == GridBounds(max_x=5, max_y=3)
    assert len(parsed.robot_definitions) == 2
    assert parsed.robot_definitions[1].position == Position(x=3, y=2)
    assert parsed.robot_definitions[1].instructions == "FRRFLLFFRRFLL"


def test_single_and_multi_line_agree(sample_input) -> None:
    single = " ".join(sample_input.split())

    assert parse_input(single) == parse_input(sample_input)


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
def test_empty_input(text) -> None:
    with pytest.raises(EmptyInputError):
        parse_input(text)


@pytest.mark.parametrize(
    "text, error",
    [
        ("5 3 1\n1 1 E\nF", MalformedGridLineError),
        ("5\n1 1 E\nF", MalformedGridLineError),
        ("5", MalformedGridLineError),
        ("a 3\n1 1 E\nF", NonNumericGridBoundsError),
        ("5 3.5\n1 1 E\nF", NonNumericGridBoundsError),
        ("\u0665 \u0663 1 1 E F", NonNumericGridBoundsError),
        ("5 \u0663\n1 1 E\nF", NonNumericGridBoundsError),
        ("-1 3\n0 0 E\nF", NegativeGridBoundsError),
        ("51 3\n1 1 E\nF", GridBoundsTooLargeError),
        ("5 3\n1 1 E", OddRobotRecordCountError),
        ("5 3 1 1 E", WrongTokenMultipleError),
        ("5 3 1 1 E F 2", WrongTokenMultipleError),
        ("5 3\n1 1\nF", MalformedRobotPositionError),
        ("5 3\n1 1 E X\nF", MalformedRobotPositionError),
        ("5 3\nx 1 E\nF", NonNumericRobotPositionError),
        ("5 3\n\u0661 1 E\nF", NonNumericRobotPositionError),
        ("5 3 1 \uff11 E F", NonNumericRobotPositionError),
        ("5 3\n-1 1 E\nF", NegativeRobotPositionError),
        ("5 3\n6 1 E\nF", RobotOutOfBoundsError),
        ("5 3\n1 4 E\nF", RobotOutOfBoundsError),
        ("5 3\n1 1 Q\nF", InvalidHeadingError),
        ("5 3\n1 1 n\nF", InvalidHeadingError),
        ("5 3\n1 1 E\n" + "F" * 101, InstructionsTooLongError),
        ("5 3\n1 1 E\nFX", InvalidInstructionCharactersError),
        ("5 3", NoRobotsDefinedError),
    ],
)
def test_rejects_malformed_input(text, error) -> None:
    with pytest.raises(error):
        parse_input(text)


def test_all_errors_are_input_format_errors() -> None:
    with pytest.raises(InputFormatError):
        parse_input("5 3\n1 1 E\nBAD")
    with pytest.raises(ValueError):
        parse_input("5 3\n1 1 E\nBAD")


def test_instruction_error_is_same_in_both_layouts() -> None:
    with pytest.raises(InvalidInstructionCharactersError) as multi:
        parse_input("5 3\n1 1 E\nINVALID123")
    with pytest.raises(InvalidInstructionCharactersError) as single:
        parse_input("5 3 1 1 E BAD@CHARS")

    assert multi.value.message == (
        'Invalid instructions: "INVALID123". Must contain only L, R, F characters'
    )
    assert single.value.token == "BAD@CHARS"


@pytest.mark.parametrize("text", ["5 3\n6 0 N\nF", "5 3 0 4 N F"])
def test_out_of_bounds_start_in_both_layouts(text) -> None:
    with pytest.raises(RobotOutOfBoundsError):
        parse_input(text)


def test_instructions_at_limit_are_accepted() -> None:
    parsed = parse_input("5 3\n1 1 E\n" + "L" * 100)

    assert len(parsed.robot_definitions[0].instructions) == 100


def test_error_reports_line_and_token() -> None:
    text = "5 3\n1 1 E\nF\n\n2 2 X\nF"

    with pytest.raises(InvalidHeadingError) as exc:
        parse_input(text)

    assert exc.value.line == 5
    assert exc.value.token == "X"
    assert str(exc.value).startswith("line 5: ")


def test_instruction_error_points_at_instruction_line() -> None:
    with pytest.raises(InvalidInstructionCharactersError) as exc:
        parse_input("5 3\n1 1 E\nFFZ")

    assert exc.value.line == 3


def test_first_failure_in_definition_order() -> None:
    # robot 1 has a bad heading, robot 2 a malformed position line
    text = "5 3\n1 1 Q\nF\n1 1\nF"

    with pytest.raises(InvalidHeadingError):
        parse_input(text)


def test_block_shape_checked_before_robot_fields() -> None:
    with pytest.raises(OddRobotRecordCountError):
        parse_input("5 3\n9 9 Q\nF\n1 1 E")


def test_grid_checks_before_robot_block() -> None:
    with pytest.raises(GridBoundsTooLargeError):
        parse_input("60 3\n1 1 E")


def test_max_coordinate_argument() -> None:
    assert parse_input("80 80 1 1 E F", max_coordinate=100).bounds.max_x == 80

    with pytest.raises(GridBoundsTooLargeError, match="Maximum coordinate value is 10"):
        parse_input("11 3 1 1 E F", max_coordinate=10)


def test_max_coordinate_from_environment(monkeypatch) -> None:
    monkeypatch.setenv(MAX_COORDINATE_ENV, "100")

    assert parse_input("75 3 1 1 E F").bounds == GridBounds(max_x=75, max_y=3)


def test_zero_by_zero_grid() -> None:
    parsed = parse_input("0 0 0 0 N F")

    assert parsed.bounds == GridBounds(max_x=0, max_y=0)


@pytest.mark.parametrize("limit", [0, -1])
def test_non_positive_max_coordinate_uses_default(limit) -> None:
    assert parse_input("50 50 1 1 E F", max_coordinate=limit).bounds.max_x == 50

    with pytest.raises(GridBoundsTooLargeError, match="Maximum coordinate value is 50"):
        parse_input("51 3 1 1 E F", max_coordinate=limit)


def test_grid_bound_errors_point_at_grid_line() -> None:
    with pytest.raises(NegativeGridBoundsError) as exc:
        parse_input("\n5 -3\n1 1 E\nF")

    assert exc.value.line == 2
    assert exc.value.token == "5 -3"
    assert "maxY=-3" in str(exc.value)
