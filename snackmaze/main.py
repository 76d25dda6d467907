#!/usr/bin/env python3
"""
Snack Maze - Main Application Entry Point

Parses command line options, configures logging, then initializes the Qt
application and launches the maze window.

    python -m snackmaze.main --difficulty hard --timer
"""

import argparse
import logging
import os
import sys

# Set Qt environment variables before importing Qt modules.
os.environ.setdefault('QT_MAC_WANTS_LAYER', '1')

from PyQt5.QtWidgets import QApplication

from snackmaze.config import EngineSettings
from snackmaze.generators.difficulty import DifficultyLevel

logger = logging.getLogger("snackmaze")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Snack Maze - find the food!")
    parser.add_argument(
        "--difficulty",
        choices=[level.value for level in DifficultyLevel],
        default="easy",
        help="starting difficulty",
    )
    parser.add_argument("--timer", action="store_true", help="start in race-the-clock mode")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible mazes")
    parser.add_argument("--tick-ms", type=int, default=None, help="countdown tick period (ms)")
    parser.add_argument("--no-validate", action="store_true", help="skip maze structure checks")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv=None):
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = EngineSettings.from_args(args)
    logger.info("Starting Snack Maze (difficulty=%s, timer=%s)", settings.difficulty, settings.timer_enabled)

    # Initialize Qt application
    app = QApplication(sys.argv[:1])
    app.setApplicationName("Snack Maze")
    app.setOrganizationName("SnackMaze")
    app.setStyle("Fusion")

    from snackmaze.ui.main_window import MainWindow
    window = MainWindow(settings)
    window.show()

    # Run the application
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
