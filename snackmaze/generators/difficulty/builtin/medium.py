"""
Medium preset. More turns, still plenty of time.
"""

from ..base import DifficultyLevel, DifficultyPreset


MEDIUM_PRESET = DifficultyPreset(
    level=DifficultyLevel.MEDIUM,
    name="Medium",

    # Grid parameters
    rows=9,
    cols=9,

    # Rendering parameters
    cell_size=42,
    wall_thickness=3,

    # Timer mode allowance (seconds)
    time_limit=90,

    emoji="⭐",
    goal_emoji="🍔",
)
