"""
Maze puzzle engine: movement rules, session state machine and countdown.
"""

from .movement import MoveResult, REJECTED, try_move
from .session import (
    Session,
    SessionSnapshot,
    SessionStatus,
    apply_move,
    apply_tick,
    snapshot,
    start_session,
)
from .countdown import CountdownTimer
from .maze_engine import MazeEngine

__all__ = [
    # Movement
    'MoveResult',
    'REJECTED',
    'try_move',
    # Session state machine
    'Session',
    'SessionSnapshot',
    'SessionStatus',
    'apply_move',
    'apply_tick',
    'snapshot',
    'start_session',
    # Runtime
    'CountdownTimer',
    'MazeEngine',
]
