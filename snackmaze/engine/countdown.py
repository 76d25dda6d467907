"""
Countdown timer bound to a session token.

Wraps a QTimer that fires once per interval (one second by default) and
emits the token of the session it was started for. Cancelling stops the
QTimer and forgets the token in one step, so a timeout already queued in
the event loop is dropped instead of reaching a newer session.
"""

import logging
from typing import Optional

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from snackmaze.config import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class CountdownTimer(QObject):
    """Cancellable once-per-second ticker for timer-mode sessions."""

    # Emitted with the bound session token on every tick
    ticked = pyqtSignal(int)

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self._token: Optional[int] = None
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    @property
    def bound_token(self) -> Optional[int]:
        """Token of the session this timer ticks for, None when cancelled."""
        return self._token

    @property
    def is_active(self) -> bool:
        return self._token is not None and self._timer.isActive()

    def start(self, token: int):
        """Start ticking for the given session, replacing any previous binding."""
        self.cancel()
        self._token = token
        self._timer.start()
        logger.debug("Countdown started for session %d", token)

    def cancel(self):
        """Stop ticking immediately; safe to call when not running."""
        if self._token is not None:
            logger.debug("Countdown cancelled for session %d", self._token)
        self._timer.stop()
        self._token = None

    def _on_timeout(self):
        if self._token is None:
            logger.debug("Dropping tick from cancelled countdown")
            return
        self.ticked.emit(self._token)
