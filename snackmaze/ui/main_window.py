"""
Main window hosting the maze card.

Stands in for the page shell: it mounts the game, reacts to the give up
request and tears the engine down on close. Only window geometry is kept
in QSettings; game state is never persisted.
"""

import logging
from typing import Optional

from PyQt5.QtCore import QSettings
from PyQt5.QtWidgets import QMainWindow

from snackmaze.config import EngineSettings
from snackmaze.engine.maze_engine import MazeEngine
from snackmaze.ui.maze_game_widget import MazeGameWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    # Settings keys
    SETTINGS_ORG = "SnackMaze"
    SETTINGS_APP = "MainWindow"

    def __init__(self, settings: Optional[EngineSettings] = None):
        super().__init__()
        self.setWindowTitle("Snack Maze")
        self._settings = QSettings(self.SETTINGS_ORG, self.SETTINGS_APP)

        self.engine = MazeEngine(settings, parent=self)
        self.game_widget = MazeGameWidget(self.engine)
        self.setCentralWidget(self.game_widget)

        self.engine.give_up_requested.connect(self._on_give_up)
        self.engine.game_won.connect(lambda s: self.statusBar().showMessage("You did it!", 5000))
        self.engine.timed_out.connect(lambda s: self.statusBar().showMessage("Out of time", 5000))

        self._restore_geometry()
        self.game_widget.setFocus()

    def _on_give_up(self):
        # The page shell would switch to another game here.
        self.statusBar().showMessage("Thanks for playing! Pick another game from the menu.")

    def _restore_geometry(self):
        geometry = self._settings.value("window_geometry")
        if geometry:
            self.restoreGeometry(geometry)

    def closeEvent(self, event):
        """Handle window close."""
        self._settings.setValue("window_geometry", self.saveGeometry())
        self.engine.shutdown()
        event.accept()
