from __future__ import annotations

from loguru import logger

from dropfour import config
from dropfour.errors import MoveError
from dropfour.game.controller import GameSession
from dropfour.types import DIFFICULTIES
from dropfour.ui.effects import ai_thinking
from dropfour.ui.prompts import parse_command
from dropfour.ui.render import render


def run_game(session: GameSession, show_thinking: bool = True) -> None:
    """
    Terminal front-end. Reads commands, forwards them to the session and
    redraws from session.get_state() after every step.
    """
    status = f"Player {session.get_state().mover} starts."

    while True:
        state = session.get_state()
        render(state, status, ai_token=session.ai_token, difficulty=session.difficulty)

        if session.ai_due:
            if show_thinking:
                ai_thinking(f"AI ({session.difficulty})", delay=session.ai_delay)
            before = state.board
            session.play_ai_turn()
            after = session.get_state().board
            col = next((c for c in range(after.cols) if before.drop_row(c) != after.drop_row(c)), None)
            status = f"AI chose {col + 1}" if col is not None else ""
            continue

        try:
            raw = input("> ")
        except EOFError:
            return

        try:
            cmd = parse_command(raw, state.board.cols)
        except ValueError as e:
            status = str(e)
            continue

        if cmd.kind == "quit":
            render(session.get_state(), "Game quit.", ai_token=session.ai_token, difficulty=session.difficulty)
            return

        if cmd.kind == "reset":
            new = session.reset()
            status = f"Round {new.round_no}: player {new.mover} starts."
            continue

        if cmd.kind == "difficulty":
            session.configure_difficulty(cmd.tier)  # type: ignore[arg-type]
            status = f"Difficulty set to {cmd.tier}."
            continue

        try:
            session.request_move(cmd.move)  # type: ignore[arg-type]
            status = f"Player {state.mover} chose {int(cmd.move) + 1}"  # type: ignore[arg-type]
        except MoveError as e:
            status = str(e)


def run_menu() -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs AI")

    choice = input("Choice: ").strip()

    if choice == "2":
        tier = input(f"Difficulty ({'/'.join(DIFFICULTIES)}) [easy]: ").strip().lower() or "easy"
        if tier not in DIFFICULTIES:
            print(f"\nUnknown difficulty {tier!r}. Using easy.\n")
            tier = "easy"
        logger.info("Menu: human vs AI ({})", tier)
        run_game(GameSession(ai_token=config.DEFAULT_AI_TOKEN, difficulty=tier))  # type: ignore[arg-type]
        return

    if choice != "1":
        print("\nInvalid choice. Defaulting to Human vs Human.\n")
    logger.info("Menu: human vs human")
    run_game(GameSession(ai_token=None))
