"""
Easy preset. Small grid with a generous clock.
"""

from ..base import DifficultyLevel, DifficultyPreset


EASY_PRESET = DifficultyPreset(
    level=DifficultyLevel.EASY,
    name="Easy",

    # Grid parameters
    rows=7,
    cols=7,

    # Rendering parameters
    cell_size=48,
    wall_thickness=3,

    # Timer mode allowance (seconds)
    time_limit=60,

    emoji="🌟",
    goal_emoji="🍗",
)
