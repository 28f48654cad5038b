from __future__ import annotations

import argparse
import itertools
import random
from typing import Dict, List, Sequence

import pandas as pd
from loguru import logger

from dropfour.ai.base import Agent
from dropfour.ai.pick import agent_for
from dropfour.game.actions import apply_move, next_round
from dropfour.game.state import SessionState
from dropfour.logger import configure_logging
from dropfour.scripts.report import plot_win_rates, summarize
from dropfour.types import DIFFICULTIES, Difficulty, other


def play_single_game(agent_x: Agent, agent_o: Agent) -> SessionState:
    """AI vs AI on a fresh board, X opens. Returns the terminal state."""
    state = next_round()
    while not state.is_over:
        agent = agent_x if state.mover == "X" else agent_o
        col = agent.choose_move(state.board, state.mover, other(state.mover))
        if col is None:
            break
        state = apply_move(state, col)
    return state


def tournament(
    tiers: Sequence[Difficulty] = DIFFICULTIES,
    games_per_pair: int = 20,
    seed: int = 0,
) -> pd.DataFrame:
    """
    Every ordered pairing of tiers (mirror matches included) plays
    `games_per_pair` games. One row per game, kept in memory only.
    """
    rng = random.Random(seed)
    rows: List[Dict[str, object]] = []

    for tier_x, tier_o in itertools.product(tiers, repeat=2):
        for g in range(games_per_pair):
            state = play_single_game(agent_for(tier_x, rng), agent_for(tier_o, rng))
            rows.append({
                "tier_x": tier_x,
                "tier_o": tier_o,
                "game": g + 1,
                "winner": state.winner or "draw",
                "moves": state.board.count("X") + state.board.count("O"),
            })
        logger.info("{} vs {}: {} games done", tier_x, tier_o, games_per_pair)

    return pd.DataFrame(rows, columns=["tier_x", "tier_o", "game", "winner", "moves"])


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play the AI tiers against each other.")
    ap.add_argument("--games", type=int, default=20, help="Games per ordered tier pairing")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for the random fallbacks")
    ap.add_argument("--tiers", nargs="+", choices=list(DIFFICULTIES), default=list(DIFFICULTIES))
    ap.add_argument("--show", action="store_true", help="Show a bar chart of win rates")
    ap.add_argument("--log-level", default="INFO")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    # console sink follows --log-level too
    configure_logging(args.log_level, console=True)

    games = tournament(args.tiers, games_per_pair=args.games, seed=args.seed)
    summary = summarize(games)

    print("\n=== TOURNAMENT RESULTS ===")
    print(f"Games: {len(games):,}  Seed: {args.seed}")
    print(summary.to_string(index=False))

    if args.show:
        plot_win_rates(summary, show=True)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
