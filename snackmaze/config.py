"""
Engine settings.

Settings only choose how sessions are created; no game state is ever
read from or written to disk.
"""

from dataclasses import dataclass
from typing import Optional


# Countdown period in milliseconds
TICK_INTERVAL_MS = 1000


@dataclass
class EngineSettings:
    # Session defaults
    difficulty: str = "easy"
    timer_enabled: bool = False

    # Seeding for reproducible mazes
    seed: Optional[int] = None  # None = random seed, otherwise deterministic

    # Countdown tick period; one second outside of tests and demos
    tick_interval_ms: int = TICK_INTERVAL_MS

    # Run structural checks on every generated maze
    validate_mazes: bool = True

    @classmethod
    def from_args(cls, args) -> 'EngineSettings':
        """Build settings from an argparse namespace, keeping defaults for missing options."""
        defaults = cls()
        return cls(
            difficulty=getattr(args, "difficulty", None) or defaults.difficulty,
            timer_enabled=bool(getattr(args, "timer", defaults.timer_enabled)),
            seed=getattr(args, "seed", defaults.seed),
            tick_interval_ms=getattr(args, "tick_ms", None) or defaults.tick_interval_ms,
            validate_mazes=not getattr(args, "no_validate", False),
        )
