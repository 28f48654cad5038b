from __future__ import annotations
from dropfour import config
from dropfour.types import Cell

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

# token palette: X red, O green, empty gray
PIECE_COLORS = {None: "\033[90m", "X": "\033[31m", "O": "\033[32m"}
PIECE_GLYPHS = {None: "·", "X": "X", "O": "O"}
STATUS = "\033[36m"


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def piece(cell: Cell, highlighted: bool = False) -> str:
    """
    One board cell. Winning-line cells are drawn in reverse video, or in
    lower case when colour is off.
    """
    glyph = PIECE_GLYPHS[cell]
    if not config.USE_COLOR:
        return glyph.lower() if highlighted else glyph
    code = PIECE_COLORS[cell] + (REVERSE if highlighted else "")
    return f"{code}{glyph}{RESET}"
