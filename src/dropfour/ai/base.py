from __future__ import annotations
from typing import Optional, Protocol

from dropfour.core.board import Board
from dropfour.types import Move, Player


class Agent(Protocol):
    name: str
    last_info: dict

    def choose_move(self, board: Board, me: Player, opp: Player) -> Optional[Move]:
        ...
