import pytest

from mars_mission.entities.grid import Grid
from mars_mission.navigation.direction_registry import DirectionRegistry
from mars_mission.utils.consts import MAX_COORDINATE_ENV
from mars_mission.utils.types import GridBounds

SAMPLE_INPUT = """5 3
1 1 E
RFRFRFRF
3 2 N
FRRFLLFFRRFLL
0 3 W
LLFFFLFLFL"""

SAMPLE_OUTPUT = """1 1 E
3 3 N LOST
2 3 S"""


@pytest.fixture(autouse=True)
def _clean_grid_env(monkeypatch):
    monkeypatch.delenv(MAX_COORDINATE_ENV, raising=False)


@pytest.fixture
def sample_input() -> str:
    return SAMPLE_INPUT


@pytest.fixture
def sample_output() -> str:
    return SAMPLE_OUTPUT


@pytest.fixture
def directions() -> DirectionRegistry:
    return DirectionRegistry.with_defaults()


@pytest.fixture
def grid() -> Grid:
    return Grid(GridBounds(max_x=5, max_y=3))
