# src/dropfour/core/board.py

from __future__ import annotations
import operator
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from dropfour.config import ROWS, COLS
from dropfour.types import Cell, Player, Move, PLAYERS

Row = Tuple[Cell, ...]

_CHARS = {None: ".", "X": "X", "O": "O"}


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable 6x7 grid. Row 0 is the top; tokens fall toward row ROWS - 1.

    Updates return a new Board. Untouched rows are shared with the
    previous board, which is safe because rows are tuples.
    """
    grid: Tuple[Row, ...]

    def __post_init__(self) -> None:
        if len(self.grid) != ROWS or any(len(row) != COLS for row in self.grid):
            raise ValueError(f"Board must be {ROWS}x{COLS}.")
        for row in self.grid:
            for cell in row:
                if cell is not None and cell not in PLAYERS:
                    raise ValueError(f"Invalid cell value: {cell!r}")

    @property
    def rows(self) -> int:
        return ROWS

    @property
    def cols(self) -> int:
        return COLS

    @classmethod
    def empty(cls) -> "Board":
        blank: Row = (None,) * COLS
        return cls(tuple(blank for _ in range(ROWS)))

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from top-to-bottom strings, '.' for empty:

            Board.from_rows([
                ".......",
                ...
                "...X...",
            ])
        """
        grid: List[Row] = []
        for line in rows:
            row: List[Cell] = []
            for ch in line.strip():
                if ch in ".-_ ":
                    row.append(None)
                elif ch in PLAYERS:
                    row.append(ch)  # type: ignore[arg-type]
                else:
                    raise ValueError(f"Invalid board character: {ch!r}")
            grid.append(tuple(row))
        return cls(tuple(grid))

    def to_rows(self) -> List[str]:
        return ["".join(_CHARS[cell] for cell in row) for row in self.grid]

    def get(self, row: int, col: int) -> Cell:
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise IndexError(f"Cell ({row}, {col}) is outside the board.")
        return self.grid[row][col]

    def _check_col(self, col: int) -> int:
        c = operator.index(col)  # floats and strings raise TypeError
        if c < 0 or c >= COLS:
            raise ValueError("Column out of range.")
        return c

    def drop_row(self, col: Move | int) -> Optional[int]:
        """Row the next token in `col` lands on, or None if the column is full."""
        c = self._check_col(col)
        for r in range(ROWS - 1, -1, -1):
            if self.grid[r][c] is None:
                return r
        return None

    def with_drop(self, col: Move | int, player: Player) -> Optional["Board"]:
        r = self.drop_row(col)
        if r is None:
            return None
        c = operator.index(col)
        row = self.grid[r]
        new_row = row[:c] + (player,) + row[c + 1:]
        return Board(self.grid[:r] + (new_row,) + self.grid[r + 1:])

    def is_playable(self, col: Move | int) -> bool:
        return self.grid[0][self._check_col(col)] is None

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(COLS) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

    def count(self, player: Player) -> int:
        return sum(row.count(player) for row in self.grid)

    def __str__(self) -> str:
        return "\n".join(self.to_rows())
