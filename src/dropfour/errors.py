from __future__ import annotations


class MoveError(Exception):
    """Base class for rejected move requests. The session is left untouched."""


class ColumnFull(MoveError, ValueError):
    def __init__(self, column: int) -> None:
        super().__init__(f"Column {column + 1} is full.")
        self.column = column


class GameAlreadyOver(MoveError):
    def __init__(self, outcome: object = None) -> None:
        super().__init__("Game is over. Reset to play again.")
        self.outcome = outcome
