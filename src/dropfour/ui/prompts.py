from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from dropfour.types import DIFFICULTIES, Move


@dataclass(frozen=True)
class Command:
    kind: str                   # "move" | "reset" | "difficulty" | "quit"
    move: Optional[Move] = None
    tier: Optional[str] = None


def parse_command(raw: str, cols: int) -> Command:
    """
    Turn one line of input into a Command.

      1..cols        drop in that column
      r / reset      start the next round
      d <tier>       change AI difficulty
      q / quit       leave
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return Command("quit")
    if s in {"r", "reset", "n", "new"}:
        return Command("reset")

    parts = s.split()
    if parts and parts[0] in {"d", "difficulty"}:
        if len(parts) != 2 or parts[1] not in DIFFICULTIES:
            raise ValueError(f"Usage: d {'|'.join(DIFFICULTIES)}")
        return Command("difficulty", tier=parts[1])

    if not s.isdigit():
        raise ValueError(f"Invalid input. Enter 1-{cols}, r, d <tier> or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Command("move", move=Move(col))
