"""
Difficulty presets: named grid and timing bundles selected by level.
"""

from .base import DifficultyLevel, DifficultyPreset
from .catalog import DIFFICULTY_CATALOG, DifficultyCatalog

__all__ = ['DifficultyLevel', 'DifficultyPreset', 'DIFFICULTY_CATALOG', 'DifficultyCatalog']
