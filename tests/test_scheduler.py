from __future__ import annotations

from dropfour.game.scheduler import ManualScheduler


def test_runs_in_time_order(scheduler):
    calls = []
    scheduler.call_later(2.0, calls.append, "b")
    scheduler.call_later(1.0, calls.append, "a")
    scheduler.call_later(5.0, calls.append, "c")

    assert scheduler.advance(1.5) == 1
    assert calls == ["a"]
    assert scheduler.advance(1.0) == 1
    assert calls == ["a", "b"]
    assert scheduler.now == 2.5
    assert scheduler.pending == 1


def test_cancelled_handles_never_run(scheduler):
    calls = []
    h = scheduler.call_later(1.0, calls.append, 1)
    h.cancel()
    assert scheduler.pending == 0
    assert scheduler.advance(5.0) == 0
    assert calls == []


def test_run_all_includes_callbacks_scheduled_while_draining():
    s = ManualScheduler()
    calls = []

    def chain(n: int) -> None:
        calls.append(n)
        if n < 3:
            s.call_later(1.0, chain, n + 1)

    s.call_later(0.5, chain, 1)
    assert s.run_all() == 3
    assert calls == [1, 2, 3]
    assert s.now == 2.5
