"""
Maze engine: the interface the presentation layer talks to.

Owns the current Session, the countdown timer and the random source.
All state changes arrive through the Qt event loop (directional intents
from the UI, ticks from the countdown), so they never overlap.
"""

import itertools
import logging
import random
from typing import List, Optional, Union

from PyQt5.QtCore import QObject, pyqtSignal

from snackmaze.config import EngineSettings
from snackmaze.errors import MazeError
from snackmaze.generators.difficulty import DIFFICULTY_CATALOG, DifficultyCatalog
from snackmaze.generators.difficulty.base import DifficultyLevel, DifficultyPreset
from snackmaze.generators.maze import CellCoord, Direction, Maze, generate_maze, solution_path
from snackmaze.validation import maze_gate
from .countdown import CountdownTimer
from .session import (
    Session, SessionSnapshot, SessionStatus,
    apply_move, apply_tick, snapshot, start_session,
)

logger = logging.getLogger(__name__)


@maze_gate()
def _generate_checked(rows: int, cols: int, seed: int) -> Maze:
    return generate_maze(rows, cols, seed=seed)


class MazeEngine(QObject):
    """Regenerates sessions, routes moves and ticks, and reports outcomes."""

    # Emitted with a SessionSnapshot after every state change
    session_changed = pyqtSignal(object)
    # Emitted with the final SessionSnapshot on entering WON / TIMED_OUT
    game_won = pyqtSignal(object)
    timed_out = pyqtSignal(object)
    # Player asked to leave this game (page shell switches to another one)
    give_up_requested = pyqtSignal()

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        catalog: Optional[DifficultyCatalog] = None,
        rng: Optional[random.Random] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._settings = settings or EngineSettings()
        self._catalog = catalog or DIFFICULTY_CATALOG
        self._rng = rng or random.Random(self._settings.seed)
        self._tokens = itertools.count(1)
        self._shut_down = False
        # Token of a session the player walked away from
        self._abandoned_token: Optional[int] = None

        self._timer = CountdownTimer(self._settings.tick_interval_ms, parent=self)
        self._timer.ticked.connect(self._on_tick)

        self._session: Optional[Session] = None
        self._regenerate(
            DifficultyLevel.parse(self._settings.difficulty),
            self._settings.timer_enabled,
        )

    # ---------------------------------------------------------------
    # Read-only accessors
    # ---------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    @property
    def difficulty(self) -> DifficultyLevel:
        return self._session.difficulty

    @property
    def timer_enabled(self) -> bool:
        return self._session.timer_enabled

    @property
    def preset(self) -> DifficultyPreset:
        return self._catalog.get_preset(self._session.difficulty)

    @property
    def catalog(self) -> DifficultyCatalog:
        return self._catalog

    @property
    def countdown(self) -> CountdownTimer:
        return self._timer

    @property
    def is_shut_down(self) -> bool:
        return self._shut_down

    @property
    def is_abandoned(self) -> bool:
        """True once give_up() froze the current session."""
        return self._abandoned_token == self._session.token

    def snapshot(self) -> SessionSnapshot:
        return snapshot(self._session)

    def solution_path(self) -> List[CellCoord]:
        """Unique route from start to goal in the current maze."""
        return solution_path(self._session.maze)

    # ---------------------------------------------------------------
    # Regeneration triggers
    # ---------------------------------------------------------------

    def select_difficulty(self, level: Union[DifficultyLevel, str]) -> SessionSnapshot:
        """Start a fresh session for another preset."""
        return self._regenerate(DifficultyLevel.parse(level), self._session.timer_enabled)

    def request_new_maze(self) -> SessionSnapshot:
        """Start a fresh session at the current difficulty."""
        return self._regenerate(self._session.difficulty, self._session.timer_enabled)

    def set_timer_mode(self, enabled: bool) -> SessionSnapshot:
        """Start a fresh session with or without a live countdown.

        Progress on the current maze is forfeited even if the mode is
        unchanged.
        """
        return self._regenerate(self._session.difficulty, bool(enabled))

    def _regenerate(self, level: DifficultyLevel, timer_enabled: bool) -> SessionSnapshot:
        if self._shut_down:
            logger.warning("Ignoring regeneration request after shutdown")
            return self.snapshot()

        # Build the new maze before touching the current session so a bad
        # preset leaves the running game intact.
        try:
            preset = self._catalog.get_preset(level).validate()
            seed = self._rng.randrange(2**31)
            if self._settings.validate_mazes:
                maze = _generate_checked(seed=seed, **preset.to_grid_params())
            else:
                maze = generate_maze(seed=seed, **preset.to_grid_params())
        except MazeError as e:
            logger.error("Cannot start %s session: %s", level, e)
            raise

        self._timer.cancel()
        self._session = start_session(maze, preset, timer_enabled, next(self._tokens))
        if timer_enabled:
            self._timer.start(self._session.token)

        logger.info(
            "Session %d: %s %dx%d maze (seed=%d, timer=%s)",
            self._session.token, preset.name, preset.rows, preset.cols,
            seed, "on" if timer_enabled else "off"
        )
        return self._publish()

    # ---------------------------------------------------------------
    # Events
    # ---------------------------------------------------------------

    def move(self, direction: Union[Direction, str]) -> SessionSnapshot:
        """
        Attempt one step in the given direction.

        Args:
            direction: A Direction or its case-insensitive name

        Returns:
            Snapshot after the attempt (unchanged when the move was rejected)
        """
        direction = Direction.parse(direction)
        if self._shut_down or self.is_abandoned:
            return self.snapshot()

        session, result = apply_move(self._session, direction)
        if session is self._session:
            logger.debug("Move %s rejected at %s", direction.value, self._session.position)
            return self.snapshot()

        self._session = session
        if session.status == SessionStatus.WON:
            self._timer.cancel()
            logger.info("Session %d won in %d moves", session.token, session.moves)
            current = self._publish()
            self.game_won.emit(current)
            return current
        return self._publish()

    def _on_tick(self, token: int):
        if self._shut_down or token != self._session.token:
            logger.debug("Discarding stale tick for session %d", token)
            return
        if self.is_abandoned:
            return

        session = apply_tick(self._session, token)
        if session is self._session:
            return

        self._session = session
        if session.status == SessionStatus.TIMED_OUT:
            self._timer.cancel()
            logger.info("Session %d timed out after %d moves", session.token, session.moves)
            current = self._publish()
            self.timed_out.emit(current)
            return
        self._publish()

    def give_up(self):
        """
        Abandon the current session and ask the page shell to switch games.

        The clock stops and the session stays frozen: moves are ignored
        until a regeneration starts a new session.
        """
        self._timer.cancel()
        self._abandoned_token = self._session.token
        logger.info("Session %d abandoned", self._session.token)
        self.give_up_requested.emit()

    def shutdown(self):
        """Cancel any outstanding countdown; later ticks and moves are ignored."""
        self._timer.cancel()
        self._shut_down = True
        logger.debug("Maze engine shut down")

    def _publish(self) -> SessionSnapshot:
        current = self.snapshot()
        self.session_changed.emit(current)
        return current
