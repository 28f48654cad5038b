from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from dropfour.core.board import Board
from dropfour.core.rules import winning_moves
from dropfour.types import Move, Player


def winning_move(board: Board, player: Player) -> Optional[Move]:
    """Lowest playable column that wins immediately for `player`."""
    moves = winning_moves(board, player)
    return moves[0] if moves else None


def tactical_move(board: Board, me: Player, opp: Player) -> tuple[Optional[Move], str]:
    """
    The two tactical rules shared by the medium and hard tiers:
      1) play an immediate win
      2) block the opponent's immediate win
    Returns (column, reason) or (None, "") when neither applies.
    """
    m = winning_move(board, me)
    if m is not None:
        return m, "immediate_win"
    m = winning_move(board, opp)
    if m is not None:
        return m, "block"
    return None, ""


@dataclass
class TacticalAgent:
    """
    Medium tier:
      1) Play immediate winning move if available
      2) Block opponent immediate winning move
      3) Otherwise random valid move

    Ties are broken by lowest column index.
    """
    name: str = "Tactical"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, board: Board, me: Player, opp: Player) -> Optional[Move]:
        moves = board.valid_moves()
        if not moves:
            self.last_info = {"note": "no_moves"}
            return None

        m, note = tactical_move(board, me, opp)
        if m is None:
            m, note = self.rng.choice(moves), "random"

        self.last_info = {"note": note, "move_col": int(m) + 1}
        logger.debug("{} ({}) picks {} [{}]", self.name, me, int(m) + 1, note)
        return m
