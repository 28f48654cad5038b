from __future__ import annotations
from dataclasses import replace

from loguru import logger

from dropfour.config import FIRST_MOVER
from dropfour.core.board import Board
from dropfour.core.rules import DRAW, IN_PROGRESS, Win, detect
from dropfour.errors import ColumnFull, GameAlreadyOver
from dropfour.game.state import SessionState
from dropfour.types import Move, other


def apply_move(state: SessionState, move: Move | int) -> SessionState:
    """
    Drop the mover's token into `move` and classify the result.

    Raises GameAlreadyOver after a win or draw and ColumnFull when the column
    has no room; in both cases `state` is untouched. The mover only changes
    while the game is still running.
    """
    if state.is_over:
        raise GameAlreadyOver(state.outcome)

    board = state.board.with_drop(move, state.mover)
    if board is None:
        raise ColumnFull(int(move))

    outcome = detect(board)
    logger.debug("{} -> col {} (round {})", state.mover, int(move) + 1, state.round_no)

    if isinstance(outcome, Win):
        logger.info("Player {} wins round {} with {}", outcome.winner, state.round_no, list(outcome.line))
        return replace(
            state,
            board=board,
            outcome=outcome,
            score_x=state.score_x + (outcome.winner == "X"),
            score_o=state.score_o + (outcome.winner == "O"),
        )

    if outcome == DRAW:
        logger.info("Round {} is a draw", state.round_no)
        return replace(state, board=board, outcome=outcome)

    return replace(state, board=board, outcome=outcome, mover=other(state.mover))


def next_round(state: SessionState | None = None) -> SessionState:
    """
    Fresh board for the next round, scores carried over.

    The loser of the previous round opens. After a draw the player who did
    not open the drawn round goes first. With no previous round, FIRST_MOVER.
    """
    if state is None:
        return SessionState(mover=FIRST_MOVER, starter=FIRST_MOVER)

    if isinstance(state.outcome, Win):
        starter = other(state.outcome.winner)
    elif state.outcome == DRAW:
        starter = other(state.starter)
    else:
        # abandoned round: keep whoever opened it
        starter = state.starter

    return SessionState(
        board=Board.empty(),
        mover=starter,
        outcome=IN_PROGRESS,
        score_x=state.score_x,
        score_o=state.score_o,
        starter=starter,
        round_no=state.round_no + 1,
    )
