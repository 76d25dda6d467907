"""
Built-in difficulty presets.
"""

from .easy import EASY_PRESET
from .medium import MEDIUM_PRESET
from .hard import HARD_PRESET
from .expert import EXPERT_PRESET


def register_builtin_presets(catalog):
    """Register all built-in presets with the catalog."""
    catalog.register(EASY_PRESET)
    catalog.register(MEDIUM_PRESET)
    catalog.register(HARD_PRESET)
    catalog.register(EXPERT_PRESET)


__all__ = [
    'EASY_PRESET',
    'MEDIUM_PRESET',
    'HARD_PRESET',
    'EXPERT_PRESET',
    'register_builtin_presets',
]
