"""
Snack Maze - Game Widget

Mounts a MazeEngine and gives it a face: difficulty selector, timer
toggle, maze canvas, move/time stats, arrow pad and the new maze, hint
and give up buttons. Arrow keys and WASD send directional intents.
"""

from typing import Dict, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QFrame
)

from snackmaze.engine.maze_engine import MazeEngine
from snackmaze.engine.session import SessionSnapshot, SessionStatus
from snackmaze.generators.difficulty.base import DifficultyLevel
from snackmaze.generators.maze.maze_types import Direction
from snackmaze.ui import style_constants as sc
from snackmaze.ui.maze_canvas import MazeCanvas


KEY_DIRECTIONS = {
    Qt.Key_Up: Direction.UP,
    Qt.Key_W: Direction.UP,
    Qt.Key_Down: Direction.DOWN,
    Qt.Key_S: Direction.DOWN,
    Qt.Key_Left: Direction.LEFT,
    Qt.Key_A: Direction.LEFT,
    Qt.Key_Right: Direction.RIGHT,
    Qt.Key_D: Direction.RIGHT,
}

ARROW_LABELS = {
    Direction.UP: "▲",
    Direction.DOWN: "▼",
    Direction.LEFT: "◀",
    Direction.RIGHT: "▶",
}


def format_seconds(seconds: int) -> str:
    mins, secs = divmod(max(seconds, 0), 60)
    return f"{mins:d}:{secs:02d}"


class ToggleButton(QPushButton):
    """Push button that tracks its own on/off state and shows it as [x]/[ ]."""

    toggled_state = pyqtSignal(bool)

    def __init__(self, text: str = "", parent=None):
        super().__init__(parent)
        self._label_text = text
        self._checked = False
        self._update_display()
        self.clicked.connect(self._on_clicked)

    def _update_display(self):
        prefix = "[x] " if self._checked else "[ ] "
        super().setText(prefix + self._label_text)

    def _on_clicked(self):
        self._checked = not self._checked
        self._update_display()
        self.toggled_state.emit(self._checked)

    def isChecked(self) -> bool:
        return self._checked

    def setChecked(self, checked: bool):
        """Update the display without emitting toggled_state."""
        self._checked = bool(checked)
        self._update_display()


class MazeGameWidget(QWidget):
    """Playable maze card driven by a MazeEngine."""

    def __init__(self, engine: MazeEngine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self._difficulty_buttons: Dict[DifficultyLevel, QPushButton] = {}
        self._arrow_buttons: Dict[Direction, QPushButton] = {}
        self._hint_visible = False
        self._current_maze = None

        self._init_ui()
        self._connect_signals()
        self._render(self.engine.snapshot())
        self.setFocusPolicy(Qt.StrongFocus)

    def _init_ui(self):
        """Initialize the user interface."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(sc.SPACING_LG, sc.SPACING_LG, sc.SPACING_LG, sc.SPACING_LG)
        main_layout.setSpacing(sc.SPACING_MD)

        title = QLabel("🏃 Maze Adventure! 🍔")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"font-size: {sc.FONT_SIZE_XL}; font-weight: bold; color: {sc.PRIMARY_ACTION};")
        main_layout.addWidget(title)

        subtitle = QLabel("Help the hungry kid find the food!")
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"color: {sc.TEXT_MUTED};")
        main_layout.addWidget(subtitle)

        # Difficulty selector strip
        selector = QFrame()
        selector.setStyleSheet(f"background-color: {sc.BG_STAT}; border-radius: {sc.BORDER_RADIUS_LG};")
        selector_layout = QHBoxLayout(selector)
        selector_layout.setContentsMargins(sc.SPACING_XS, sc.SPACING_XS, sc.SPACING_XS, sc.SPACING_XS)
        for preset in self.engine.catalog.list_presets():
            button = QPushButton(f"{preset.emoji} {preset.name}")
            button.clicked.connect(lambda _=False, level=preset.level: self.engine.select_difficulty(level))
            self._difficulty_buttons[preset.level] = button
            selector_layout.addWidget(button)
        main_layout.addWidget(selector, alignment=Qt.AlignCenter)

        self.timer_toggle = ToggleButton("Race the clock")
        self.timer_toggle.setStyleSheet(sc.button_style(sc.SECONDARY_ACTION, sc.SECONDARY_ACTION_HOVER))
        main_layout.addWidget(self.timer_toggle, alignment=Qt.AlignCenter)

        # Outcome banner
        self.banner = QLabel("")
        self.banner.setAlignment(Qt.AlignCenter)
        self.banner.setVisible(False)
        main_layout.addWidget(self.banner)

        self.canvas = MazeCanvas()
        main_layout.addWidget(self.canvas, alignment=Qt.AlignCenter)

        # Stats
        stats_layout = QHBoxLayout()
        self.moves_value = self._add_stat(stats_layout, "Moves")
        self.time_value = self._add_stat(stats_layout, "Time")
        main_layout.addLayout(stats_layout)

        # Arrow pad
        pad = QGridLayout()
        pad.setSpacing(sc.SPACING_XS)
        positions = {
            Direction.UP: (0, 1),
            Direction.LEFT: (1, 0),
            Direction.DOWN: (1, 1),
            Direction.RIGHT: (1, 2),
        }
        for direction, (row, col) in positions.items():
            button = QPushButton(ARROW_LABELS[direction])
            button.setFixedSize(sc.HIT_TARGET_LARGE, sc.HIT_TARGET_LARGE)
            button.setFocusPolicy(Qt.NoFocus)
            button.setStyleSheet(sc.button_style(sc.PRIMARY_ACTION, sc.PRIMARY_ACTION_HOVER))
            button.clicked.connect(lambda _=False, d=direction: self.engine.move(d))
            self._arrow_buttons[direction] = button
            pad.addWidget(button, row, col)
        pad_holder = QWidget()
        pad_holder.setLayout(pad)
        main_layout.addWidget(pad_holder, alignment=Qt.AlignCenter)

        # Actions
        actions = QHBoxLayout()
        self.new_maze_button = QPushButton("🔄 New Maze")
        self.new_maze_button.setStyleSheet(sc.button_style(sc.PRIMARY_ACTION, sc.PRIMARY_ACTION_HOVER))
        self.hint_button = QPushButton("🗺 Show the way")
        self.hint_button.setStyleSheet(sc.button_style(sc.SECONDARY_ACTION, sc.SECONDARY_ACTION_HOVER))
        self.give_up_button = QPushButton("Try another game")
        self.give_up_button.setStyleSheet(sc.button_style(sc.DANGER_COLOR, sc.DANGER_HOVER))
        for button in (self.new_maze_button, self.hint_button, self.give_up_button):
            button.setFocusPolicy(Qt.NoFocus)
            actions.addWidget(button)
        main_layout.addLayout(actions)

        help_label = QLabel("Use arrow keys, WASD or the buttons to move!")
        help_label.setAlignment(Qt.AlignCenter)
        help_label.setStyleSheet(f"color: {sc.TEXT_MUTED}; font-size: {sc.FONT_SIZE_SM};")
        main_layout.addWidget(help_label)

        self.setStyleSheet(f"MazeGameWidget {{ background-color: {sc.BG_PAGE}; }}")

    def _add_stat(self, layout: QHBoxLayout, caption: str) -> QLabel:
        box = QFrame()
        box.setStyleSheet(f"background-color: {sc.BG_STAT}; border-radius: {sc.BORDER_RADIUS_LG};")
        box_layout = QVBoxLayout(box)
        label = QLabel(caption)
        label.setAlignment(Qt.AlignCenter)
        label.setStyleSheet(f"color: {sc.TEXT_MUTED}; font-size: {sc.FONT_SIZE_SM};")
        value = QLabel("0")
        value.setAlignment(Qt.AlignCenter)
        value.setStyleSheet(f"color: {sc.PRIMARY_ACTION}; font-size: {sc.FONT_SIZE_XL}; font-weight: bold;")
        box_layout.addWidget(label)
        box_layout.addWidget(value)
        layout.addWidget(box)
        return value

    def _connect_signals(self):
        self.engine.session_changed.connect(self._render)
        self.engine.game_won.connect(self._on_won)
        self.engine.timed_out.connect(self._on_timed_out)
        self.engine.give_up_requested.connect(lambda: self._set_arrows_enabled(False))
        self.timer_toggle.toggled_state.connect(self.engine.set_timer_mode)
        self.new_maze_button.clicked.connect(self.engine.request_new_maze)
        self.hint_button.clicked.connect(self._toggle_hint)
        self.give_up_button.clicked.connect(self.engine.give_up)

    # ---------------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------------

    def _render(self, snapshot: SessionSnapshot):
        self.canvas.set_snapshot(snapshot, self.engine.preset)

        # A regenerated session always brings a new maze object.
        if snapshot.maze is not self._current_maze:
            self._current_maze = snapshot.maze
            self._set_hint(False)
            self.banner.setVisible(False)

        self.moves_value.setText(str(snapshot.moves))
        if snapshot.timer_enabled:
            self.time_value.setText(format_seconds(snapshot.time_remaining))
        else:
            self.time_value.setText("--")
        self.timer_toggle.setChecked(snapshot.timer_enabled)

        for level, button in self._difficulty_buttons.items():
            selected = level == snapshot.difficulty
            if selected:
                button.setStyleSheet(sc.button_style(sc.SECONDARY_ACTION, sc.SECONDARY_ACTION_HOVER))
            else:
                button.setStyleSheet(sc.button_style(sc.BG_CARD, sc.BG_STAT, text=sc.TEXT_MUTED))

        self._set_arrows_enabled(snapshot.status == SessionStatus.PLAYING and not self.engine.is_abandoned)

    def _set_arrows_enabled(self, enabled: bool):
        for button in self._arrow_buttons.values():
            button.setEnabled(enabled)

    def _show_banner(self, text: str, color: str):
        self.banner.setText(text)
        self.banner.setStyleSheet(
            f"color: {color}; font-size: {sc.FONT_SIZE_MD}; font-weight: bold; "
            f"border: 2px solid {color}; border-radius: {sc.BORDER_RADIUS_LG}; padding: {sc.SPACING_SM}px;"
        )
        self.banner.setVisible(True)

    def _on_won(self, snapshot: SessionSnapshot):
        message = f"🎉 Yummy! You found it in {snapshot.moves} moves!"
        if snapshot.elapsed is not None:
            message += f" ({format_seconds(snapshot.elapsed)} used)"
        self._show_banner(message + " 🎉", sc.SUCCESS_COLOR)

    def _on_timed_out(self, snapshot: SessionSnapshot):
        self._show_banner("⏰ Time's up! Try a new maze!", sc.TIMEOUT_COLOR)

    def _set_hint(self, visible: bool):
        self._hint_visible = visible
        self.canvas.set_hint_path(self.engine.solution_path() if visible else [])
        self.hint_button.setText("🙈 Hide the way" if visible else "🗺 Show the way")

    def _toggle_hint(self):
        self._set_hint(not self._hint_visible)

    # ---------------------------------------------------------------
    # Input
    # ---------------------------------------------------------------

    def keyPressEvent(self, event):
        direction: Optional[Direction] = KEY_DIRECTIONS.get(event.key())
        if direction is None or event.isAutoRepeat():
            super().keyPressEvent(event)
            return
        self.engine.move(direction)
        event.accept()
