"""
QPainter-based maze renderer.

Paints the floor, the goal tint, an optional solution overlay, the thin
walls and the player/goal markers. Geometry comes from the active preset:
cell_size for the grid pitch and wall_thickness for the pen width.
"""

from typing import List, Optional

from PyQt5.QtCore import QPointF, QRectF, QSize, Qt
from PyQt5.QtGui import QColor, QFont, QPainter, QPen
from PyQt5.QtWidgets import QSizePolicy, QWidget

from snackmaze.engine.session import SessionSnapshot, SessionStatus
from snackmaze.generators.difficulty.base import DifficultyPreset
from snackmaze.generators.maze.maze_types import CellCoord
from snackmaze.ui import style_constants as sc

PLAYER_EMOJI = "🧒"
WIN_EMOJI = "🥳"
TIMEOUT_EMOJI = "😢"


class MazeCanvas(QWidget):
    """Widget that draws one session snapshot."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._snapshot: Optional[SessionSnapshot] = None
        self._preset: Optional[DifficultyPreset] = None
        self._hint_path: List[CellCoord] = []
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)

    def set_snapshot(self, snapshot: SessionSnapshot, preset: DifficultyPreset):
        """Show a new snapshot; resizes when the preset's grid size changes."""
        resized = self._preset is None or self._preset.pixel_size != preset.pixel_size
        self._snapshot = snapshot
        self._preset = preset
        if resized:
            self.setFixedSize(self.sizeHint())
            self.updateGeometry()
        self.update()

    def set_hint_path(self, path: List[CellCoord]):
        self._hint_path = list(path)
        self.update()

    @property
    def hint_path(self) -> List[CellCoord]:
        return list(self._hint_path)

    def sizeHint(self) -> QSize:
        if self._preset is None:
            return QSize(200, 200)
        width, height = self._preset.pixel_size
        return QSize(width, height)

    def _cell_rect(self, row: int, col: int) -> QRectF:
        size = self._preset.cell_size
        return QRectF(col * size, row * size, size, size)

    def paintEvent(self, event):
        if self._snapshot is None or self._preset is None:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        maze = self._snapshot.maze
        size = self._preset.cell_size

        # Floor
        painter.fillRect(self.rect(), QColor(sc.BG_CELL))
        for coord in self._hint_path:
            painter.fillRect(self._cell_rect(coord.row, coord.col), QColor(sc.BG_HINT))
        painter.fillRect(self._cell_rect(maze.goal.row, maze.goal.col), QColor(sc.BG_GOAL))

        # Walls
        pen = QPen(QColor(sc.WALL_COLOR))
        pen.setWidth(self._preset.wall_thickness)
        pen.setCapStyle(Qt.RoundCap)
        painter.setPen(pen)
        for cell in maze.iter_cells():
            x0, y0 = cell.col * size, cell.row * size
            x1, y1 = x0 + size, y0 + size
            if cell.has_wall_top:
                painter.drawLine(QPointF(x0, y0), QPointF(x1, y0))
            if cell.has_wall_left:
                painter.drawLine(QPointF(x0, y0), QPointF(x0, y1))
            # Right and bottom walls only on the border; interior ones are
            # drawn by the neighbor's top/left flags.
            if cell.has_wall_right and cell.col == maze.cols - 1:
                painter.drawLine(QPointF(x1, y0), QPointF(x1, y1))
            if cell.has_wall_bottom and cell.row == maze.rows - 1:
                painter.drawLine(QPointF(x0, y1), QPointF(x1, y1))

        # Markers
        font = QFont()
        font.setPixelSize(int(size * 0.55))
        painter.setFont(font)
        painter.drawText(
            self._cell_rect(maze.goal.row, maze.goal.col),
            Qt.AlignCenter, self._preset.goal_emoji
        )
        player = PLAYER_EMOJI
        if self._snapshot.status == SessionStatus.WON:
            player = WIN_EMOJI
        elif self._snapshot.status == SessionStatus.TIMED_OUT:
            player = TIMEOUT_EMOJI
        position = self._snapshot.position
        painter.drawText(self._cell_rect(position.row, position.col), Qt.AlignCenter, player)

        painter.end()
