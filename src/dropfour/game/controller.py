from __future__ import annotations

import random
from typing import Callable, List, Optional

from loguru import logger

from dropfour.ai.pick import agent_for
from dropfour.config import AI_MOVE_DELAY_SEC, DEFAULT_AI_TOKEN, DEFAULT_DIFFICULTY
from dropfour.errors import MoveError
from dropfour.game.actions import apply_move, next_round
from dropfour.game.scheduler import Handle, Scheduler
from dropfour.game.state import SessionState
from dropfour.types import DIFFICULTIES, Difficulty, Move, Player, other

Listener = Callable[[SessionState], None]


class GameSession:
    """
    Owns the single authoritative SessionState and the AI turn.

    The presentation layer calls request_move / reset / configure_difficulty
    and reads get_state(); it can also subscribe() to hear about transitions
    it didn't trigger (the deferred AI move).

    With a scheduler attached the AI move is queued after `ai_delay` seconds.
    Without one, `ai_due` turns True and the caller runs play_ai_turn()
    itself. Either way a queued AI turn is bound to the generation it was
    scheduled for; any accepted move or reset bumps the generation so a late
    callback becomes a no-op.

    `state` starts the session from an existing snapshot instead of a fresh
    first round.
    """

    def __init__(
        self,
        ai_token: Optional[Player] = DEFAULT_AI_TOKEN,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,  # type: ignore[assignment]
        scheduler: Optional[Scheduler] = None,
        ai_delay: float = AI_MOVE_DELAY_SEC,
        rng: Optional[random.Random] = None,
        state: Optional[SessionState] = None,
    ) -> None:
        self._check_difficulty(difficulty)
        self.ai_token = ai_token
        self.difficulty: Difficulty = difficulty
        self.scheduler = scheduler
        self.ai_delay = ai_delay
        self.rng = rng or random.Random()

        self._state = state if state is not None else next_round()
        self._generation = 0
        self._pending: Optional[Handle] = None
        self._listeners: List[Listener] = []

        logger.info(
            "New session: ai={} difficulty={} first={}",
            ai_token or "none", difficulty, self._state.mover,
        )
        self._maybe_schedule_ai()

    # ----- read side -----
    @property
    def generation(self) -> int:
        return self._generation

    @property
    def human_token(self) -> Optional[Player]:
        return other(self.ai_token) if self.ai_token else None

    @property
    def ai_due(self) -> bool:
        s = self._state
        return self.ai_token is not None and not s.is_over and s.mover == self.ai_token

    def get_state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ----- commands -----
    def request_move(self, col: Move | int) -> SessionState:
        """
        Drop the current mover's token. Raises ColumnFull or GameAlreadyOver;
        the session is unchanged when it does.
        """
        try:
            new_state = apply_move(self._state, col)
        except MoveError as e:
            logger.warning("Rejected move {}: {}", int(col) + 1, e)
            raise
        self._commit(new_state)
        return new_state

    def reset(self) -> SessionState:
        new_state = next_round(self._state)
        logger.info(
            "Reset to round {}: {} opens | score X {} - O {}",
            new_state.round_no, new_state.mover, new_state.score_x, new_state.score_o,
        )
        self._commit(new_state)
        return new_state

    def configure_difficulty(self, tier: Difficulty) -> None:
        self._check_difficulty(tier)
        if tier != self.difficulty:
            logger.info("Difficulty {} -> {}", self.difficulty, tier)
        self.difficulty = tier

    def play_ai_turn(self, generation: Optional[int] = None) -> Optional[SessionState]:
        """
        Pick and apply the AI move for the current state.

        `generation` is what the scheduler passes back; a stale one (the
        session moved on since the turn was queued) makes this a no-op.
        Returns the new state, or None when nothing was played.
        """
        if generation is not None and generation != self._generation:
            logger.debug("Dropping stale AI turn (gen {} != {})", generation, self._generation)
            return None
        self._cancel_pending()
        if not self.ai_due:
            return None

        assert self.ai_token is not None
        agent = agent_for(self.difficulty, self.rng)
        col = agent.choose_move(self._state.board, self.ai_token, other(self.ai_token))
        if col is None:
            return None
        return self.request_move(col)

    # ----- internals -----
    @staticmethod
    def _check_difficulty(tier: str) -> None:
        if tier not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty {tier!r}; expected one of {', '.join(DIFFICULTIES)}.")

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _commit(self, new_state: SessionState) -> None:
        self._cancel_pending()
        self._state = new_state
        self._generation += 1
        for listener in list(self._listeners):
            listener(new_state)
        self._maybe_schedule_ai()

    def _maybe_schedule_ai(self) -> None:
        if self.scheduler is None or not self.ai_due or self._pending is not None:
            return
        logger.debug("AI turn queued in {}s (gen {})", self.ai_delay, self._generation)
        self._pending = self.scheduler.call_later(self.ai_delay, self.play_ai_turn, self._generation)
