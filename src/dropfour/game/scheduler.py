from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, List, Protocol, Tuple


class Handle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """
    Anything with `call_later(delay, callback, *args) -> handle`.
    asyncio event loops fit as-is.
    """

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Handle:
        ...


@dataclass(slots=True)
class ManualHandle:
    when: float
    callback: Callable[..., Any]
    args: Tuple[Any, ...]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass(slots=True)
class ManualScheduler:
    """
    Virtual clock. Nothing runs until `advance()` or `run_all()` is called,
    which keeps timing out of tests and batch play.
    """
    now: float = 0.0
    _queue: List[Tuple[float, int, ManualHandle]] = field(default_factory=list)
    _seq: Any = field(default_factory=itertools.count)

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ManualHandle:
        handle = ManualHandle(self.now + max(0.0, float(delay)), callback, args)
        heapq.heappush(self._queue, (handle.when, next(self._seq), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run what came due. Returns callbacks run."""
        deadline = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= deadline:
            when, _, handle = heapq.heappop(self._queue)
            self.now = max(self.now, when)
            if handle.cancelled:
                continue
            handle.callback(*handle.args)
            ran += 1
        self.now = deadline
        return ran

    def run_all(self, limit: int = 10_000) -> int:
        """Drain the queue, including callbacks scheduled while draining."""
        ran = 0
        while self._queue and ran < limit:
            when, _, handle = heapq.heappop(self._queue)
            self.now = max(self.now, when)
            if handle.cancelled:
                continue
            handle.callback(*handle.args)
            ran += 1
        return ran
