"""
Maze grid model, generator and path queries.
"""

from .maze_types import Cell, CellCoord, Direction, Maze, MIN_GRID_SIZE
from .backtracker import generate_maze
from .paths import find_path, reachable_cells, solution_path

__all__ = [
    'Cell',
    'CellCoord',
    'Direction',
    'Maze',
    'MIN_GRID_SIZE',
    'generate_maze',
    'find_path',
    'reachable_cells',
    'solution_path',
]
