"""
Validation rule definitions for generated mazes.

Each rule has:
- Code: Unique identifier (e.g., "MAZE-001")
- Severity: FAIL, WARN, or INFO
- Message template: Human-readable description
- Remediation: Suggested fix
"""

from dataclasses import dataclass
from typing import Optional

from .core import Severity, ValidationIssue


@dataclass(frozen=True)
class ValidationRule:
    """Definition of a validation rule.

    Attributes:
        code: Unique rule code (e.g., "MAZE-001")
        severity: Default severity for this rule
        message_template: Template for error message (use {placeholders})
        remediation_template: Template for suggested fix
    """
    code: str
    severity: Severity
    message_template: str
    remediation_template: Optional[str] = None

    def format_message(self, **kwargs) -> str:
        return self.message_template.format(**kwargs)

    def issue(self, location: Optional[str] = None, **kwargs) -> ValidationIssue:
        """Build a ValidationIssue for this rule."""
        remediation = None
        if self.remediation_template:
            remediation = self.remediation_template.format(**kwargs)
        return ValidationIssue(
            severity=self.severity,
            code=self.code,
            message=self.format_message(**kwargs),
            remediation=remediation,
            location=location,
        )


# =============================================================================
# MAZE STRUCTURE RULES (MAZE)
# =============================================================================

MAZE_001 = ValidationRule(
    code="MAZE-001",
    severity=Severity.FAIL,
    message_template="Asymmetric wall between {a} and {b}",
    remediation_template="Carve both sides of a shared wall together",
)

MAZE_002 = ValidationRule(
    code="MAZE-002",
    severity=Severity.FAIL,
    message_template="Open border on the {side} side of {cell}",
    remediation_template="Outer border walls must stay present",
)

MAZE_003 = ValidationRule(
    code="MAZE-003",
    severity=Severity.FAIL,
    message_template="Maze has {actual} passages, a spanning tree needs {expected}",
    remediation_template="Regenerate; extra passages create loops, missing ones isolate cells",
)

MAZE_004 = ValidationRule(
    code="MAZE-004",
    severity=Severity.FAIL,
    message_template="{unreachable} of {total} cells unreachable from start",
)

MAZE_005 = ValidationRule(
    code="MAZE-005",
    severity=Severity.WARN,
    message_template="{marker} is at {actual}, expected {expected}",
)

MAZE_006 = ValidationRule(
    code="MAZE-006",
    severity=Severity.FAIL,
    message_template="{marker} cell is missing",
)
