"""
Snack Maze - procedural maze puzzle for the kids zone.
"""

__version__ = "1.0.0"
