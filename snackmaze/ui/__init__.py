"""
Snack Maze UI Package

PyQt5 widgets that render a maze session and forward player input.
Import MainWindow from snackmaze.ui.main_window.
"""
