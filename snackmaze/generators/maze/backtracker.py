"""
Recursive backtracker maze generator.

Carves a perfect maze (a spanning tree of the grid graph) with an explicit
stack instead of recursion, so large grids never hit the interpreter's
recursion limit. The random source is injected so tests can make
generation deterministic.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Set

from snackmaze.errors import InvalidConfigurationError
from .maze_types import CellCoord, Direction, Maze, MIN_GRID_SIZE

logger = logging.getLogger(__name__)

# Neighbor scan order; the choice among candidates is random, the scan is not.
_SCAN_ORDER = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


def _unvisited_neighbors(
    maze: Maze,
    coord: CellCoord,
    visited: Set[CellCoord]
) -> List[Direction]:
    """Directions from coord that lead to in-bounds cells not yet visited."""
    candidates = []
    for direction in _SCAN_ORDER:
        other = coord.neighbor(direction)
        if maze.in_bounds(other) and other not in visited:
            candidates.append(direction)
    return candidates


def generate_maze(
    rows: int,
    cols: int,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Maze:
    """
    Generate a perfect maze with the randomized recursive backtracker.

    Args:
        rows: Grid rows (>= 2)
        cols: Grid columns (>= 2)
        rng: Random source to draw from (takes precedence over seed)
        seed: Seed for a private random.Random (None = random seed)

    Returns:
        Maze with rows*cols - 1 carved passages, start at (0, 0) and goal
        at (rows-1, cols-1)

    Raises:
        InvalidConfigurationError: If rows or cols is below 2
    """
    if rows < MIN_GRID_SIZE or cols < MIN_GRID_SIZE:
        raise InvalidConfigurationError(
            f"Maze must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {rows}x{cols}"
        )

    if rng is None:
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        rng = random.Random(seed)

    maze = Maze(rows, cols, seed=seed)

    origin = CellCoord(0, 0)
    visited: Set[CellCoord] = {origin}
    stack: List[CellCoord] = [origin]

    while stack:
        current = stack[-1]
        candidates = _unvisited_neighbors(maze, current, visited)
        if candidates:
            direction = rng.choice(candidates)
            nxt = maze.carve(current, direction)
            visited.add(nxt)
            stack.append(nxt)
        else:
            stack.pop()

    maze.start = origin
    maze.goal = CellCoord(rows - 1, cols - 1)

    logger.debug(
        "Generated %dx%d maze (seed=%s): %d cells visited, %d passages carved",
        rows, cols, seed, len(visited), maze.carved_edge_count()
    )
    return maze
