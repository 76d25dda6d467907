"""
Difficulty catalog: registry of all available difficulty presets.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Union

from snackmaze.errors import InvalidConfigurationError
from .base import DifficultyLevel, DifficultyPreset

logger = logging.getLogger(__name__)


class DifficultyCatalog:
    """Registry mapping difficulty levels to presets."""

    def __init__(self):
        self._presets: Dict[DifficultyLevel, DifficultyPreset] = {}

    def register(self, preset: DifficultyPreset):
        """Register a preset in the catalog, replacing any preset for the same level."""
        preset.validate()
        if preset.level in self._presets:
            logger.debug("Replacing preset for %s", preset.level)
        self._presets[preset.level] = preset

    def get_preset(self, level: Union[DifficultyLevel, str]) -> DifficultyPreset:
        """
        Resolve the preset for a difficulty level.

        Args:
            level: A DifficultyLevel or its case-insensitive name

        Returns:
            The registered preset

        Raises:
            InvalidConfigurationError: If the level is unknown or unregistered
        """
        key = DifficultyLevel.parse(level)
        try:
            return self._presets[key]
        except KeyError:
            raise InvalidConfigurationError(f"No preset registered for {key}") from None

    def list_levels(self) -> List[DifficultyLevel]:
        """All registered levels, easiest first."""
        return sorted(self._presets.keys())

    def list_presets(self) -> List[DifficultyPreset]:
        return [self._presets[level] for level in self.list_levels()]

    def __contains__(self, level) -> bool:
        try:
            return DifficultyLevel.parse(level) in self._presets
        except InvalidConfigurationError:
            return False

    def __len__(self) -> int:
        return len(self._presets)


# Global singleton
DIFFICULTY_CATALOG = DifficultyCatalog()

# Import and register built-in presets
from .builtin import register_builtin_presets
register_builtin_presets(DIFFICULTY_CATALOG)
