"""
DifficultyPreset dataclass: the parameter bundle behind each level.
"""

from __future__ import annotations
import functools
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from snackmaze.errors import InvalidConfigurationError
from snackmaze.generators.maze.maze_types import MIN_GRID_SIZE


@functools.total_ordering
class DifficultyLevel(Enum):
    """Ordered difficulty key: EASY < MEDIUM < HARD < EXPERT."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def rank(self) -> int:
        return list(DifficultyLevel).index(self)

    def __lt__(self, other):
        if not isinstance(other, DifficultyLevel):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> 'DifficultyLevel':
        """
        Resolve a level from an enum member or a case-insensitive name.

        Raises:
            InvalidConfigurationError: If the name is not a known level
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            known = ", ".join(level.value for level in cls)
            raise InvalidConfigurationError(
                f"Unknown difficulty {value!r} (expected one of: {known})"
            ) from None


@dataclass(frozen=True)
class DifficultyPreset:
    """
    An immutable bundle of grid, rendering and timing parameters.

    Presets are shared read-only between sessions; regenerating a maze
    never modifies the preset it was built from.
    """

    # Identity
    level: DifficultyLevel
    name: str

    # Grid parameters
    rows: int
    cols: int

    # Rendering parameters (pixels)
    cell_size: int
    wall_thickness: int

    # Countdown allowance in seconds (used only in timer mode)
    time_limit: int

    # Decorations shown by the selector and on the goal cell
    emoji: str = ""
    goal_emoji: str = ""

    def validate(self) -> 'DifficultyPreset':
        """
        Check that the preset can produce a playable maze.

        Returns:
            Self, for chaining

        Raises:
            InvalidConfigurationError: If any dimension or limit is out of range
        """
        if self.rows < MIN_GRID_SIZE or self.cols < MIN_GRID_SIZE:
            raise InvalidConfigurationError(
                f"Preset {self.name!r}: grid must be at least "
                f"{MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {self.rows}x{self.cols}"
            )
        if self.cell_size <= 0 or self.wall_thickness <= 0:
            raise InvalidConfigurationError(
                f"Preset {self.name!r}: cell size and wall thickness must be positive"
            )
        if self.time_limit <= 0:
            raise InvalidConfigurationError(
                f"Preset {self.name!r}: time limit must be positive, got {self.time_limit}"
            )
        return self

    @property
    def pixel_size(self):
        """(width, height) of the rendered grid in pixels."""
        return (self.cols * self.cell_size, self.rows * self.cell_size)

    def to_grid_params(self) -> Dict[str, Any]:
        """
        Convert preset to maze generator parameters.

        Returns:
            Dictionary compatible with generate_maze()
        """
        return {
            "rows": self.rows,
            "cols": self.cols,
        }
