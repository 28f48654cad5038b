from __future__ import annotations

import random

import pytest

from dropfour.core.board import Board
from dropfour.game.scheduler import ManualScheduler

# Full board, no four in a row anywhere.
DRAW_ROWS = [
    "XOXOXOX",
    "XOXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "XOXOXOX",
    "XOXOXOX",
]


class AvoidColumn(random.Random):
    """Random stand-in that never picks `col` when anything else is allowed."""

    def __init__(self, col: int) -> None:
        super().__init__(0)
        self.col = col

    def choice(self, seq):
        rest = [c for c in seq if int(c) != self.col]
        return rest[0] if rest else seq[0]


class LastColumn(random.Random):
    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def draw_board() -> Board:
    return Board.from_rows(DRAW_ROWS)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
