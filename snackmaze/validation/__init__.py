"""
Structural validation for generated mazes.

Public API:
    - ValidationResult, ValidationIssue, Severity: Core result types
    - ValidationError: Exception raised on FAIL issues when fail_fast=True
    - validate_maze(): Run every structural check
    - enforce_maze(): Validate and raise on failure
    - maze_gate: Decorator for maze-producing functions
"""

from .core import (
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationError,
)
from .maze_checks import (
    check_wall_symmetry,
    check_border_closed,
    check_edge_count,
    check_connectivity,
    check_markers,
    validate_maze,
)
from .gates import enforce_maze, maze_gate

__all__ = [
    # Core types
    'Severity',
    'ValidationIssue',
    'ValidationResult',
    'ValidationError',
    # Checks
    'check_wall_symmetry',
    'check_border_closed',
    'check_edge_count',
    'check_connectivity',
    'check_markers',
    'validate_maze',
    # Gates
    'enforce_maze',
    'maze_gate',
]
