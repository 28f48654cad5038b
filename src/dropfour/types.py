# src/dropfour/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col), row 0 is the top
Difficulty = Literal["easy", "medium", "hard"]

PLAYERS: Tuple[Player, Player] = ("X", "O")
DIFFICULTIES: Tuple[Difficulty, ...] = ("easy", "medium", "hard")


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"
