from __future__ import annotations

import argparse

from dropfour import config
from dropfour.game.controller import GameSession
from dropfour.logger import configure_logging
from dropfour.types import DIFFICULTIES, PLAYERS
from dropfour.ui.menu import run_game, run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Connect Four in the terminal.")
    ap.add_argument("--mode", choices=["hvh", "hvc"], default=None,
                    help="hvh = human vs human, hvc = human vs computer. Omit for the interactive menu.")
    ap.add_argument("--difficulty", choices=list(DIFFICULTIES), default=config.DEFAULT_DIFFICULTY,
                    help="AI tier for hvc games")
    ap.add_argument("--ai-token", choices=list(PLAYERS), default=config.DEFAULT_AI_TOKEN,
                    help="Token the computer plays (X always opens the first round)")
    ap.add_argument("--delay", type=float, default=config.AI_MOVE_DELAY_SEC,
                    help="Seconds the AI waits before dropping")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    ap.add_argument("--log-level", default=config.LOG_LEVEL, help="Level for logs/dropfour.log")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    # the board owns the terminal; logs only go to the file sink
    configure_logging(args.log_level)

    if args.mode is None:
        run_menu()
        return 0

    ai_token = args.ai_token if args.mode == "hvc" else None
    session = GameSession(ai_token=ai_token, difficulty=args.difficulty, ai_delay=args.delay)
    run_game(session)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
