from __future__ import annotations

import pytest

from algorithms.timeline import CancellationToken, Timeline


def test_call_later_fires_once_when_due(clock) -> None:
    tl = Timeline(clock=clock)
    fired = []
    tl.call_later(3.0, lambda: fired.append(clock.t), CancellationToken())

    clock.t = 2.9
    assert tl.poll() == 0
    clock.t = 3.0
    assert tl.poll() == 1
    clock.t = 10.0
    assert tl.poll() == 0
    assert fired == [3.0]


def test_cancelled_task_never_fires(clock) -> None:
    tl = Timeline(clock=clock)
    token = CancellationToken()
    fired = []
    tl.call_later(1.0, lambda: fired.append("late"), token)
    assert tl.pending() == 1

    token.cancel()
    assert tl.pending() == 0
    clock.t = 5.0
    tl.poll()
    assert fired == []


def test_call_every_catches_up_missed_ticks(clock) -> None:
    tl = Timeline(clock=clock)
    ticks = []
    tl.call_every(0.25, lambda: ticks.append(1), CancellationToken())

    clock.t = 1.0
    assert tl.poll() == 4
    assert len(ticks) == 4


def test_periodic_task_stops_when_callback_returns_false(clock) -> None:
    tl = Timeline(clock=clock)
    count = {"n": 0}

    def tick():
        count["n"] += 1
        return count["n"] < 3

    tl.call_every(1.0, tick, CancellationToken())
    clock.t = 10.0
    tl.poll()
    assert count["n"] == 3
    assert tl.pending() == 0


def test_shared_token_cancels_from_inside_a_callback(clock) -> None:
    tl = Timeline(clock=clock)
    token = CancellationToken()
    ticks = []
    tl.call_every(0.5, lambda: ticks.append(1), token)
    tl.call_later(1.25, token.cancel, token)

    clock.t = 5.0
    tl.poll()
    assert len(ticks) == 2


def test_tasks_scheduled_by_callbacks_are_anchored_to_due_time(clock) -> None:
    tl = Timeline(clock=clock)
    token = CancellationToken()
    seen = []
    tl.call_later(1.0, lambda: tl.call_later(0.5, lambda: seen.append("child"), token), token)

    # one late poll covers both the parent and the child
    clock.t = 1.5
    tl.poll()
    assert seen == ["child"]


def test_occurrences_fire_in_due_order(clock) -> None:
    tl = Timeline(clock=clock)
    order = []
    token = CancellationToken()
    tl.call_later(2.0, lambda: order.append("b"), token)
    tl.call_later(1.0, lambda: order.append("a"), token)
    tl.call_later(2.0, lambda: order.append("c"), token)
    clock.t = 3.0
    tl.poll()
    assert order == ["a", "b", "c"]


def test_explicit_poll_time(clock) -> None:
    tl = Timeline(clock=clock)
    fired = []
    tl.call_later(1.0, lambda: fired.append(1), CancellationToken())
    tl.poll(now=1.0)
    assert fired == [1]


def test_invalid_interval_and_clear(clock) -> None:
    tl = Timeline(clock=clock)
    with pytest.raises(ValueError):
        tl.call_every(0, lambda: None, CancellationToken())

    tl.call_later(1.0, lambda: None, CancellationToken())
    tl.clear()
    assert tl.pending() == 0
