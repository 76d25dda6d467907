import os
import random

# Headless Qt for widget and timer tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtWidgets import QApplication

from snackmaze.config import EngineSettings
from snackmaze.engine.maze_engine import MazeEngine
from snackmaze.generators.maze.maze_types import CellCoord, Direction, Maze


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def engine(qapp):
    eng = MazeEngine(EngineSettings(seed=1234), rng=random.Random(1234))
    yield eng
    eng.shutdown()


@pytest.fixture
def timed_engine(qapp):
    eng = MazeEngine(EngineSettings(timer_enabled=True), rng=random.Random(99))
    yield eng
    eng.shutdown()


def corridor_maze() -> Maze:
    """2x2 maze carved as (0,0) -> (0,1) -> (1,1) -> (1,0)."""
    maze = Maze(2, 2)
    maze.carve(CellCoord(0, 0), Direction.RIGHT)
    maze.carve(CellCoord(0, 1), Direction.DOWN)
    maze.carve(CellCoord(1, 1), Direction.LEFT)
    maze.start = CellCoord(0, 0)
    maze.goal = CellCoord(1, 1)
    return maze


@pytest.fixture
def small_maze():
    return corridor_maze()


def path_directions(path):
    """Convert a list of adjacent CellCoords into the Directions that walk it."""
    steps = []
    for a, b in zip(path, path[1:]):
        for direction in Direction:
            if a.neighbor(direction) == b:
                steps.append(direction)
                break
    return steps
