from __future__ import annotations
import sys
import time

from dropfour import config


def ai_thinking(label: str = "AI is thinking", delay: float | None = None) -> None:
    """
    Pause before the AI drops, with an optional spinner, so its moves are
    not instant.
    """
    delay = config.AI_MOVE_DELAY_SEC if delay is None else delay
    if delay <= 0:
        return

    if not config.AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    frames = ["|", "/", "-", "\\"]
    start = time.time()
    i = 0
    while (time.time() - start) < delay:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
