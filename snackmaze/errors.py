"""
Exception hierarchy for the maze engine.
"""


class MazeError(Exception):
    pass


class InvalidConfigurationError(MazeError):
    """Raised when a grid size, preset or named option cannot be used.

    Fatal to the regeneration that triggered it; the engine keeps the
    previous session rather than building a corrupt maze.
    """
    pass
