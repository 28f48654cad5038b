
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from loguru import logger

from dropfour.ai.tactical_agent import tactical_move
from dropfour.config import HARD_PREFERENCE_ORDER
from dropfour.core.board import Board
from dropfour.core.rules import winning_moves
from dropfour.types import Move, Player

# favourability ranks
REJECT = 0
SAFE = 1
THREAT = 2


@dataclass
class HeuristicAgent:
    """
    Hard tier, two plies deep at most:
      - immediate win
      - immediate block
      - walk the centre-first preference order and keep candidates the
        opponent cannot punish on their very next drop; a candidate that
        leaves two winning columns open (one can't block both) beats a
        merely safe one
      - otherwise random valid move

    Deliberately no deeper search.
    """
    name: str = "Heuristic"
    preference_order: Tuple[int, ...] = HARD_PREFERENCE_ORDER
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def favourability(self, board: Board, col: int, me: Player, opp: Player) -> int:
        after = board.with_drop(col, me)
        if after is None:
            return REJECT
        # opponent replies with an immediate win
        if winning_moves(after, opp):
            return REJECT
        # two or more winning drops next turn cannot all be blocked
        if len(winning_moves(after, me)) >= 2:
            return THREAT
        return SAFE

    def choose_move(self, board: Board, me: Player, opp: Player) -> Optional[Move]:
        moves = board.valid_moves()
        if not moves:
            self.last_info = {"note": "no_moves"}
            return None

        m, note = tactical_move(board, me, opp)

        if m is None:
            first_safe: Optional[Move] = None
            for col in self.preference_order:
                if not board.is_playable(col):
                    continue
                rank = self.favourability(board, col, me, opp)
                if rank == THREAT:
                    m, note = Move(col), "threat"
                    break
                if rank == SAFE and first_safe is None:
                    first_safe = Move(col)
            if m is None and first_safe is not None:
                m, note = first_safe, "prefer"

        if m is None:
            m, note = self.rng.choice(moves), "random"

        self.last_info = {"note": note, "move_col": int(m) + 1}
        logger.debug("{} ({}) picks {} [{}]", self.name, me, int(m) + 1, note)
        return m
