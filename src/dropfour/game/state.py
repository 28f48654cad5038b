from __future__ import annotations
from dataclasses import dataclass, field

from dropfour.config import FIRST_MOVER
from dropfour.core.board import Board
from dropfour.core.rules import IN_PROGRESS, Outcome, Win, is_terminal
from dropfour.types import Player


@dataclass(frozen=True, slots=True)
class SessionState:
    """
    One authoritative snapshot of a session.

    Transitions build a new SessionState; board, outcome, mover and scores
    always change together.
    """
    board: Board = field(default_factory=Board.empty)
    mover: Player = FIRST_MOVER
    outcome: Outcome = IN_PROGRESS
    score_x: int = 0
    score_o: int = 0
    starter: Player = FIRST_MOVER
    round_no: int = 1

    @property
    def is_over(self) -> bool:
        return is_terminal(self.outcome)

    @property
    def winner(self) -> Player | None:
        return self.outcome.winner if isinstance(self.outcome, Win) else None

    def score(self, player: Player) -> int:
        return self.score_x if player == "X" else self.score_o
