"""
Data model for thin-wall mazes.

Defines the core data structures shared by the generator, the movement
validator and the renderer:
- Direction: Cardinal move direction enum (UP, RIGHT, DOWN, LEFT)
- CellCoord: Grid position (row, col integers)
- Cell: Read-only view of one grid position and its four wall flags
- Maze: R x C grid backed by a numpy wall array

Wall storage:
- Maze.walls has shape (rows, cols, 4), indexed by Direction.wall_index
- Index order is top, right, bottom, left
- True means the wall is present; carving clears the flag on both sides
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import numpy as np

from snackmaze.errors import InvalidConfigurationError


MIN_GRID_SIZE = 2


class Direction(Enum):
    """Cardinal direction for a move or a wall side."""
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def wall_index(self) -> int:
        """Index of this side in the last axis of Maze.walls."""
        return _WALL_ORDER.index(self)

    @property
    def offset(self) -> Tuple[int, int]:
        """(d_row, d_col) step for this direction."""
        offsets = {
            Direction.UP: (-1, 0),
            Direction.RIGHT: (0, 1),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
        }
        return offsets[self]

    def opposite(self) -> 'Direction':
        """Return the opposite direction."""
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]

    @classmethod
    def parse(cls, value) -> 'Direction':
        """Resolve a Direction from an enum member or a case-insensitive name.

        Raises:
            InvalidConfigurationError: If the name is not a direction
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidConfigurationError(f"Unknown direction: {value!r}") from None


_WALL_ORDER = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


@dataclass(frozen=True)
class CellCoord:
    """Grid cell coordinate (row 0 is the top row)."""
    row: int
    col: int

    def neighbor(self, direction: Direction) -> 'CellCoord':
        """Get the neighboring cell in the given direction."""
        d_row, d_col = direction.offset
        return CellCoord(self.row + d_row, self.col + d_col)


@dataclass(frozen=True)
class Cell:
    """One grid position with its wall flags and start/goal markers."""
    row: int
    col: int
    has_wall_top: bool = True
    has_wall_right: bool = True
    has_wall_bottom: bool = True
    has_wall_left: bool = True
    is_start: bool = False
    is_goal: bool = False

    @property
    def coord(self) -> CellCoord:
        return CellCoord(self.row, self.col)

    def has_wall(self, direction: Direction) -> bool:
        """Check if this cell has a wall on the given side."""
        flags = {
            Direction.UP: self.has_wall_top,
            Direction.RIGHT: self.has_wall_right,
            Direction.DOWN: self.has_wall_bottom,
            Direction.LEFT: self.has_wall_left,
        }
        return flags[direction]


@dataclass(eq=False)
class Maze:
    """
    Thin-wall maze over an R x C grid.

    A freshly constructed maze has every wall present. The generator carves
    passages with carve(); once generation completes the maze is treated as
    read-only by every consumer.

    Attributes:
        rows: Number of grid rows (>= 2)
        cols: Number of grid columns (>= 2)
        walls: Boolean array of shape (rows, cols, 4), True = wall present
        start: Start cell, (0, 0) by convention
        goal: Goal cell, (rows-1, cols-1) by convention
        seed: Seed the generator used, when known
    """
    rows: int
    cols: int
    walls: np.ndarray = field(default=None, repr=False)
    start: Optional[CellCoord] = None
    goal: Optional[CellCoord] = None
    seed: Optional[int] = None

    def __post_init__(self):
        if self.rows < MIN_GRID_SIZE or self.cols < MIN_GRID_SIZE:
            raise InvalidConfigurationError(
                f"Maze must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, "
                f"got {self.rows}x{self.cols}"
            )
        if self.walls is None:
            self.walls = np.ones((self.rows, self.cols, 4), dtype=bool)
        elif self.walls.shape != (self.rows, self.cols, 4):
            raise InvalidConfigurationError(
                f"Wall array shape {self.walls.shape} does not match "
                f"{self.rows}x{self.cols} grid"
            )

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, coord: CellCoord) -> bool:
        """Check if a coordinate lies inside [0, rows) x [0, cols)."""
        return 0 <= coord.row < self.rows and 0 <= coord.col < self.cols

    def has_wall(self, coord: CellCoord, direction: Direction) -> bool:
        return bool(self.walls[coord.row, coord.col, direction.wall_index])

    def carve(self, coord: CellCoord, direction: Direction) -> CellCoord:
        """
        Remove the wall between a cell and its neighbor.

        Both sides of the shared wall are cleared so the flags stay
        symmetric.

        Args:
            coord: The cell to carve from
            direction: Side of coord to open

        Returns:
            The neighbor cell on the other side of the removed wall
        """
        other = coord.neighbor(direction)
        if not self.in_bounds(other):
            raise InvalidConfigurationError(
                f"Cannot carve {direction.value} from ({coord.row}, {coord.col}): "
                f"neighbor is outside the grid"
            )
        self.walls[coord.row, coord.col, direction.wall_index] = False
        self.walls[other.row, other.col, direction.opposite().wall_index] = False
        return other

    def open_neighbors(self, coord: CellCoord) -> List[CellCoord]:
        """Cells reachable from coord in one step (no wall in between)."""
        result = []
        for direction in _WALL_ORDER:
            other = coord.neighbor(direction)
            if self.in_bounds(other) and not self.has_wall(coord, direction):
                result.append(other)
        return result

    def carved_edge_count(self) -> int:
        """Number of passages between horizontally or vertically adjacent cells."""
        right_open = ~self.walls[:, :-1, Direction.RIGHT.wall_index]
        down_open = ~self.walls[:-1, :, Direction.DOWN.wall_index]
        return int(np.count_nonzero(right_open) + np.count_nonzero(down_open))

    def cell(self, row: int, col: int) -> Cell:
        """Build a read-only Cell view for the given position."""
        top, right, bottom, left = (bool(w) for w in self.walls[row, col])
        coord = CellCoord(row, col)
        return Cell(
            row=row,
            col=col,
            has_wall_top=top,
            has_wall_right=right,
            has_wall_bottom=bottom,
            has_wall_left=left,
            is_start=coord == self.start,
            is_goal=coord == self.goal,
        )

    def iter_cells(self) -> Iterator[Cell]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield self.cell(row, col)

    def to_rows(self) -> List[List[Cell]]:
        """Row-major grid of Cell views, for renderers."""
        return [[self.cell(r, c) for c in range(self.cols)] for r in range(self.rows)]
