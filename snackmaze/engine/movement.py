"""
Movement validator: the only authority on whether a step is legal.
"""

from dataclasses import dataclass
from typing import Optional

from snackmaze.generators.maze.maze_types import CellCoord, Direction, Maze


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move attempt; truthy when the move is allowed."""
    allowed: bool
    to_cell: Optional[CellCoord] = None

    def __bool__(self) -> bool:
        return self.allowed


REJECTED = MoveResult(allowed=False)


def try_move(maze: Maze, from_cell: CellCoord, direction: Direction) -> MoveResult:
    """
    Check a single step from from_cell in the given direction.

    Only the source cell's wall flag is consulted; carving keeps shared
    walls symmetric, so the destination's opposite flag always agrees.

    Args:
        maze: The maze being played
        from_cell: Current player cell
        direction: Requested direction

    Returns:
        MoveResult with the destination when allowed, REJECTED otherwise
    """
    to_cell = from_cell.neighbor(direction)
    if not maze.in_bounds(to_cell):
        return REJECTED
    if maze.has_wall(from_cell, direction):
        return REJECTED
    return MoveResult(allowed=True, to_cell=to_cell)
