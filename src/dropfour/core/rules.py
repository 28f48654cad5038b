from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from dropfour.config import ROWS, COLS, CONNECT_N
from dropfour.core.board import Board
from dropfour.types import Coord, Move, Player


@dataclass(frozen=True, slots=True)
class WinResult:
    winner: Player
    line: Tuple[Coord, ...]


@dataclass(frozen=True, slots=True)
class Win:
    result: WinResult

    @property
    def winner(self) -> Player:
        return self.result.winner

    @property
    def line(self) -> Tuple[Coord, ...]:
        return self.result.line


@dataclass(frozen=True, slots=True)
class _Marker:
    name: str

    def __repr__(self) -> str:
        return self.name


IN_PROGRESS = _Marker("IN_PROGRESS")
DRAW = _Marker("DRAW")

Outcome = Union[_Marker, Win]


def is_terminal(outcome: Outcome) -> bool:
    return outcome != IN_PROGRESS


def _run(board: Board, r: int, c: int, dr: int, dc: int) -> Optional[WinResult]:
    g = board.grid
    p = g[r][c]
    if p is None:
        return None
    for i in range(1, CONNECT_N):
        if g[r + dr * i][c + dc * i] != p:
            return None
    return WinResult(p, tuple((r + dr * i, c + dc * i) for i in range(CONNECT_N)))


def check_winner_with_line(board: Board) -> Optional[WinResult]:
    """
    First run of four in scan order, or None.

    Scan order decides which line is reported when one drop completes two:
    horizontal, vertical, diagonal down-right, diagonal down-left.
    """
    n = CONNECT_N

    # Horizontal: top to bottom, left to right
    for r in range(ROWS):
        for c in range(COLS - n + 1):
            res = _run(board, r, c, 0, 1)
            if res:
                return res

    # Vertical: left to right, anchored at the lower cell and read upward
    for c in range(COLS):
        for r in range(ROWS - 1, n - 2, -1):
            res = _run(board, r, c, -1, 0)
            if res:
                return res

    # Diagonal down-right
    for r in range(ROWS - n + 1):
        for c in range(COLS - n + 1):
            res = _run(board, r, c, 1, 1)
            if res:
                return res

    # Diagonal down-left
    for r in range(ROWS - n + 1):
        for c in range(n - 1, COLS):
            res = _run(board, r, c, 1, -1)
            if res:
                return res

    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res.winner if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None


def detect(board: Board) -> Outcome:
    res = check_winner_with_line(board)
    if res is not None:
        return Win(res)
    if board.is_full():
        return DRAW
    return IN_PROGRESS


def winning_moves(board: Board, player: Player) -> List[Move]:
    """Playable columns (ascending) where a drop by `player` wins on the spot."""
    out: List[Move] = []
    for m in board.valid_moves():
        b2 = board.with_drop(m, player)
        if b2 is not None and check_winner(b2) == player:
            out.append(m)
    return out
