from __future__ import annotations
from typing import Optional, Iterable, List, Set

from dropfour import config
from dropfour.core.board import Board
from dropfour.core.rules import DRAW, Win
from dropfour.game.state import SessionState
from dropfour.types import Coord
from dropfour.ui.colors import c, piece, BOLD, DIM, STATUS


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = []
        for cidx in range(board.cols):
            parts.append(piece(board.grid[r][cidx], (r, cidx) in hl))
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def status_line(state: SessionState, ai_token: Optional[str] = None) -> str:
    def who(p: str) -> str:
        return f"{p} (AI)" if p == ai_token else p

    if isinstance(state.outcome, Win):
        return f"Player {who(state.outcome.winner)} wins!"
    if state.outcome == DRAW:
        return "Draw game."
    return f"Player {who(state.mover)}'s turn."


def render(
    state: SessionState,
    status: str = "",
    ai_token: Optional[str] = None,
    difficulty: Optional[str] = None,
) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    header = f"Round {state.round_no} | X {state.score_x} - O {state.score_o}"
    if difficulty and ai_token:
        header += f" | AI: {ai_token} ({difficulty})"
    print(c(header, DIM))
    print(c(status_line(state, ai_token), STATUS))
    print(status if status else "")

    line = state.outcome.line if isinstance(state.outcome, Win) else None
    for row in board_lines(state.board, highlight=line):
        print(row)

    print(c(f"   Enter 1-{state.board.cols} to drop, r to reset, d <easy|medium|hard>, q to quit.", DIM))
