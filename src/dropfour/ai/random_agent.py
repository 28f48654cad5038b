from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from dropfour.core.board import Board
from dropfour.types import Move, Player


@dataclass
class RandomAgent:
    """Easy tier: any playable column, uniformly at random."""
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def random_move(self, board: Board) -> Optional[Move]:
        moves = board.valid_moves()
        if not moves:
            return None
        return self.rng.choice(moves)

    def choose_move(self, board: Board, me: Player, opp: Player) -> Optional[Move]:
        choice = self.random_move(board)
        self.last_info = {"note": "random", "move_col": None if choice is None else int(choice) + 1}
        logger.debug("{} ({}) picks {}", self.name, me, self.last_info["move_col"])
        return choice
