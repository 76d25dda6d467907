"""
Centralized style constants for the Snack Maze UI.

This module defines the design system tokens for consistent styling across
all widgets. Use these constants instead of hardcoded values.
"""

# =============================================================================
# COLOR PALETTE - Semantic roles
# =============================================================================

# Primary action colors
PRIMARY_ACTION = "#E4572E"        # Ketchup red - New Maze, arrows
PRIMARY_ACTION_HOVER = "#C9461F"

# Secondary action colors
SECONDARY_ACTION = "#F3A712"      # Mustard - selected difficulty, timer
SECONDARY_ACTION_HOVER = "#D9930A"

# Danger colors
DANGER_COLOR = "#8C2F39"          # Give up
DANGER_HOVER = "#6E222B"

# =============================================================================
# STATE COLORS
# =============================================================================

SUCCESS_COLOR = "#669D31"         # Pickle green - win banner, goal cell
TIMEOUT_COLOR = "#8C2F39"

# =============================================================================
# BACKGROUND COLORS
# =============================================================================

BG_PAGE = "#FFF8EC"               # Cream page background
BG_CARD = "#FFFFFF"
BG_STAT = "#FBE8C8"               # Stat pills, selector strip
BG_CELL = "#FFF3DD"               # Maze floor
BG_GOAL = "#E3F0D3"               # Goal cell tint
BG_HINT = "#FDE2B3"               # Solution overlay

# =============================================================================
# TEXT / WALL COLORS
# =============================================================================

TEXT_MUTED = "#8A7663"
WALL_COLOR = "#7A4E2D"            # Bread crust

# =============================================================================
# TYPOGRAPHY / SPACING
# =============================================================================

FONT_SIZE_SM = "10pt"
FONT_SIZE_MD = "12pt"
FONT_SIZE_XL = "18pt"

SPACING_XS = 4
SPACING_SM = 8
SPACING_MD = 12
SPACING_LG = 16

BORDER_RADIUS_MD = "8px"
BORDER_RADIUS_LG = "12px"

# Arrow pad button size (px)
HIT_TARGET_LARGE = 48


def button_style(color: str, hover: str, text: str = "white") -> str:
    """Stylesheet for a filled, rounded push button."""
    return f"""
        QPushButton {{
            background-color: {color};
            color: {text};
            border: none;
            border-radius: {BORDER_RADIUS_MD};
            padding: {SPACING_SM}px {SPACING_MD}px;
            font-weight: bold;
        }}
        QPushButton:hover {{
            background-color: {hover};
        }}
        QPushButton:disabled {{
            background-color: {BG_STAT};
            color: {TEXT_MUTED};
        }}
    """
