# src/dropfour/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# Pacing before the AI drops its token (seconds)
AI_MOVE_DELAY_SEC = 0.6
AI_THINKING_SPINNER = True

# Session defaults
DEFAULT_DIFFICULTY = "easy"
DEFAULT_AI_TOKEN = "O"
FIRST_MOVER = "X"

# Hard tier walks columns in this order when nothing tactical is on the board
HARD_PREFERENCE_ORDER = (3, 2, 4, 1, 5, 0, 6)

# Logging
LOG_LEVEL = "INFO"
LOG_ROTATION = "1 MB"
