from __future__ import annotations

import random
from typing import Optional

from dropfour.ai.base import Agent
from dropfour.core.board import Board
from dropfour.types import DIFFICULTIES, Difficulty, Move, Player


def agent_for(tier: Difficulty, rng: Optional[random.Random] = None) -> Agent:
    """Build the agent that plays a difficulty tier."""
    from dropfour.ai.random_agent import RandomAgent
    from dropfour.ai.tactical_agent import TacticalAgent
    from dropfour.ai.heuristic_agent import HeuristicAgent

    rng = rng or random.Random()
    factories = {
        "easy": lambda: RandomAgent(name="Easy (random)", rng=rng),
        "medium": lambda: TacticalAgent(name="Medium (tactical)", rng=rng),
        "hard": lambda: HeuristicAgent(name="Hard (heuristic)", rng=rng),
    }
    if tier not in factories:
        raise ValueError(f"Unknown difficulty {tier!r}; expected one of {', '.join(DIFFICULTIES)}.")
    return factories[tier]()


def choose_move(
    board: Board,
    ai: Player,
    opponent: Player,
    tier: Difficulty,
    rng: Optional[random.Random] = None,
) -> Optional[Move]:
    """
    Column the AI drops into, or None when the board has no playable column.
    Only the random fallback uses `rng`; every other rule is deterministic.
    """
    return agent_for(tier, rng).choose_move(board, ai, opponent)
