"""
Hard preset. Long dead ends and thinner walls.
"""

from ..base import DifficultyLevel, DifficultyPreset


HARD_PRESET = DifficultyPreset(
    level=DifficultyLevel.HARD,
    name="Hard",

    # Grid parameters
    rows=11,
    cols=11,

    # Rendering parameters
    cell_size=36,
    wall_thickness=2,

    # Timer mode allowance (seconds)
    time_limit=120,

    emoji="🔥",
    goal_emoji="🍟",
)
