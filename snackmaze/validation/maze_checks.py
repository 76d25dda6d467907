"""
Structural validation checks for generated mazes.

Validates a maze against the perfect-maze contract:
- Shared walls agree on both sides (MAZE-001)
- Outer border is closed (MAZE-002)
- Exactly rows*cols - 1 passages are carved (MAZE-003)
- Every cell is reachable from the start (MAZE-004)
- Start and goal sit at the conventional corners (MAZE-005, MAZE-006)

A connected passage graph with rows*cols - 1 edges is a spanning tree, so
MAZE-003 and MAZE-004 together rule out loops.
"""

from typing import Callable, Iterable, Tuple

import numpy as np

from snackmaze.generators.maze.maze_types import CellCoord, Direction, Maze
from snackmaze.generators.maze.paths import reachable_cells
from .core import ValidationResult
from .rules import MAZE_001, MAZE_002, MAZE_003, MAZE_004, MAZE_005, MAZE_006


def _fmt(row: int, col: int) -> str:
    return f"({row}, {col})"


def check_wall_symmetry(maze: Maze) -> ValidationResult:
    """MAZE-001: each interior wall is either present on both sides or on neither."""
    result = ValidationResult()
    walls = maze.walls

    right = walls[:, :-1, Direction.RIGHT.wall_index]
    left = walls[:, 1:, Direction.LEFT.wall_index]
    for row, col in np.argwhere(right != left):
        a, b = _fmt(row, col), _fmt(row, col + 1)
        result.add_issue(MAZE_001.issue(location=a, a=a, b=b))

    down = walls[:-1, :, Direction.DOWN.wall_index]
    up = walls[1:, :, Direction.UP.wall_index]
    for row, col in np.argwhere(down != up):
        a, b = _fmt(row, col), _fmt(row + 1, col)
        result.add_issue(MAZE_001.issue(location=a, a=a, b=b))

    return result


def _border_cells(maze: Maze) -> Iterable[Tuple[Direction, np.ndarray, Callable]]:
    walls = maze.walls
    yield Direction.UP, walls[0, :, Direction.UP.wall_index], lambda i: (0, i)
    yield Direction.DOWN, walls[-1, :, Direction.DOWN.wall_index], lambda i: (maze.rows - 1, i)
    yield Direction.LEFT, walls[:, 0, Direction.LEFT.wall_index], lambda i: (i, 0)
    yield Direction.RIGHT, walls[:, -1, Direction.RIGHT.wall_index], lambda i: (i, maze.cols - 1)


def check_border_closed(maze: Maze) -> ValidationResult:
    """MAZE-002: no passage leads out of the grid."""
    result = ValidationResult()
    for side, edge, to_cell in _border_cells(maze):
        for (index,) in np.argwhere(~edge):
            cell = _fmt(*to_cell(int(index)))
            result.add_issue(MAZE_002.issue(location=cell, side=side.value, cell=cell))
    return result


def check_edge_count(maze: Maze) -> ValidationResult:
    """MAZE-003: a spanning tree over R*C cells has R*C - 1 edges."""
    result = ValidationResult()
    expected = maze.cell_count - 1
    actual = maze.carved_edge_count()
    if actual != expected:
        result.add_issue(MAZE_003.issue(actual=actual, expected=expected))
    return result


def check_connectivity(maze: Maze) -> ValidationResult:
    """MAZE-004: every cell is reachable from the start cell."""
    result = ValidationResult()
    reached = reachable_cells(maze, maze.start or CellCoord(0, 0))
    unreachable = maze.cell_count - len(reached)
    if unreachable:
        result.add_issue(MAZE_004.issue(unreachable=unreachable, total=maze.cell_count))
    return result


def check_markers(maze: Maze) -> ValidationResult:
    """MAZE-005/006: start at (0, 0), goal at the opposite corner."""
    result = ValidationResult()
    expected = {
        "Start": (maze.start, CellCoord(0, 0)),
        "Goal": (maze.goal, CellCoord(maze.rows - 1, maze.cols - 1)),
    }
    for marker, (actual, wanted) in expected.items():
        if actual is None:
            result.add_issue(MAZE_006.issue(marker=marker))
        elif actual != wanted:
            result.add_issue(MAZE_005.issue(
                location=_fmt(actual.row, actual.col),
                marker=marker,
                actual=_fmt(actual.row, actual.col),
                expected=_fmt(wanted.row, wanted.col),
            ))
    return result


def validate_maze(maze: Maze) -> ValidationResult:
    """
    Run every structural check against a maze.

    Args:
        maze: A fully generated maze

    Returns:
        Merged ValidationResult of all checks
    """
    result = ValidationResult()
    result.merge(check_wall_symmetry(maze))
    result.merge(check_border_closed(maze))
    result.merge(check_edge_count(maze))
    result.merge(check_connectivity(maze))
    result.merge(check_markers(maze))
    return result
