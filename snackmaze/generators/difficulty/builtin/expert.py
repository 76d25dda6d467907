"""
Expert preset. The largest grid, where every second counts.
"""

from ..base import DifficultyLevel, DifficultyPreset


EXPERT_PRESET = DifficultyPreset(
    level=DifficultyLevel.EXPERT,
    name="Expert",

    # Grid parameters
    rows=13,
    cols=13,

    # Rendering parameters
    cell_size=32,
    wall_thickness=2,

    # Timer mode allowance (seconds)
    time_limit=150,

    emoji="💎",
    goal_emoji="🥪",
)
