"""
Reachability and path queries over a maze's passage graph.

Used by the structural validator (connectivity) and by the hint overlay
(the unique start-to-goal route of a perfect maze).
"""

from collections import deque
from typing import Dict, List, Optional, Set

from .maze_types import CellCoord, Maze


def reachable_cells(maze: Maze, start: Optional[CellCoord] = None) -> Set[CellCoord]:
    """
    Collect every cell reachable from start without crossing a wall.

    Args:
        maze: The maze to explore
        start: Origin cell (defaults to maze.start, then (0, 0))

    Returns:
        Set of reachable cell coordinates, including start
    """
    origin = start or maze.start or CellCoord(0, 0)
    visited: Set[CellCoord] = set()
    queue = deque([origin])

    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        for neighbor in maze.open_neighbors(current):
            if neighbor not in visited:
                queue.append(neighbor)

    return visited


def find_path(maze: Maze, start: CellCoord, goal: CellCoord) -> List[CellCoord]:
    """
    Breadth-first route between two cells.

    In a perfect maze this is the only simple path between them.

    Returns:
        Cells from start to goal inclusive, or an empty list if goal is
        unreachable
    """
    came_from: Dict[CellCoord, Optional[CellCoord]] = {start: None}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        if current == goal:
            break
        for neighbor in maze.open_neighbors(current):
            if neighbor not in came_from:
                came_from[neighbor] = current
                queue.append(neighbor)

    if goal not in came_from:
        return []

    path = []
    step: Optional[CellCoord] = goal
    while step is not None:
        path.append(step)
        step = came_from[step]
    path.reverse()
    return path


def solution_path(maze: Maze) -> List[CellCoord]:
    """Route from the maze's start cell to its goal cell."""
    return find_path(maze, maze.start, maze.goal)
