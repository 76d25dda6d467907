"""
Session state machine for one maze-solving attempt.

Sessions are immutable values. Every transition takes a Session and
returns a new one (or the same object when the transition is a no-op), so
no stale field can survive a regeneration: the engine simply replaces its
reference.

States:
- INITIALIZING: maze built, player not yet placed (never observable
  outside start_session)
- PLAYING: accepting moves and ticks
- WON: player reached the goal cell (terminal)
- TIMED_OUT: countdown reached zero while playing (terminal)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from snackmaze.generators.difficulty.base import DifficultyLevel, DifficultyPreset
from snackmaze.generators.maze.maze_types import CellCoord, Direction, Maze
from .movement import MoveResult, REJECTED, try_move


class SessionStatus(Enum):
    INITIALIZING = "initializing"
    PLAYING = "playing"
    WON = "won"
    TIMED_OUT = "timed_out"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionStatus.WON, SessionStatus.TIMED_OUT)


@dataclass(frozen=True)
class Session:
    """
    Complete state of one maze attempt.

    Attributes:
        token: Identity of this session, used to reject stale timer ticks
        maze: The maze being solved (never mutated)
        difficulty: Level of the preset the maze was built from
        timer_enabled: Whether the countdown is live
        time_limit: Countdown allowance of the preset, in seconds
        position: Current player cell
        moves: Number of accepted moves
        time_remaining: Seconds left (inert when timer_enabled is False)
        status: Current state machine state
    """
    token: int
    maze: Maze
    difficulty: DifficultyLevel
    timer_enabled: bool
    time_limit: int
    position: CellCoord
    moves: int = 0
    time_remaining: int = 0
    status: SessionStatus = SessionStatus.INITIALIZING

    @property
    def is_playing(self) -> bool:
        return self.status == SessionStatus.PLAYING


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session for the presentation layer."""
    maze: Maze
    position: CellCoord
    moves: int
    time_remaining: int
    status: SessionStatus
    difficulty: DifficultyLevel
    timer_enabled: bool
    time_limit: int

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    @property
    def elapsed(self) -> Optional[int]:
        """Seconds used so far in timer mode, None otherwise."""
        if not self.timer_enabled:
            return None
        return self.time_limit - self.time_remaining


def start_session(
    maze: Maze,
    preset: DifficultyPreset,
    timer_enabled: bool,
    token: int,
) -> Session:
    """
    Build a session for a freshly generated maze and place the player.

    The INITIALIZING state resolves to PLAYING before this returns.

    Args:
        maze: Newly generated maze
        preset: Preset the maze was built from
        timer_enabled: Whether the countdown should run
        token: Unique identity for the new session

    Returns:
        A PLAYING session at the maze's start cell with zero moves
    """
    session = Session(
        token=token,
        maze=maze,
        difficulty=preset.level,
        timer_enabled=timer_enabled,
        time_limit=preset.time_limit,
        position=maze.start,
    )
    return replace(
        session,
        moves=0,
        time_remaining=preset.time_limit if timer_enabled else 0,
        status=SessionStatus.PLAYING,
    )


def apply_move(session: Session, direction: Direction) -> Tuple[Session, MoveResult]:
    """
    Apply a directional intent.

    Rejected moves and moves outside PLAYING leave the session untouched.

    Returns:
        Tuple of (resulting session, move result)
    """
    if not session.is_playing:
        return session, REJECTED

    result = try_move(session.maze, session.position, direction)
    if not result:
        return session, result

    status = SessionStatus.PLAYING
    if result.to_cell == session.maze.goal:
        status = SessionStatus.WON

    return replace(
        session,
        position=result.to_cell,
        moves=session.moves + 1,
        status=status,
    ), result


def apply_tick(session: Session, token: int) -> Session:
    """
    Apply one countdown tick issued for the session identified by token.

    Ticks for another session, ticks outside timer mode or PLAYING, and
    ticks with nothing left to count are ignored. The tick that reaches
    zero also moves the session to TIMED_OUT.
    """
    if token != session.token:
        return session
    if not session.timer_enabled or not session.is_playing:
        return session
    if session.time_remaining <= 0:
        return session

    remaining = session.time_remaining - 1
    status = SessionStatus.TIMED_OUT if remaining == 0 else SessionStatus.PLAYING
    return replace(session, time_remaining=remaining, status=status)


def snapshot(session: Session) -> SessionSnapshot:
    return SessionSnapshot(
        maze=session.maze,
        position=session.position,
        moves=session.moves,
        time_remaining=session.time_remaining,
        status=session.status,
        difficulty=session.difficulty,
        timer_enabled=session.timer_enabled,
        time_limit=session.time_limit,
    )
