import math

import pytest

from connect4_timer import TimerTick, TurnTimer


def test_defaults_to_ten_seconds_and_inactive():
    t = TurnTimer()
    assert t.limit == 10.0
    assert not t.active
    assert t.remaining() == 10.0


def test_inactive_tick_is_a_no_op():
    t = TurnTimer(limit=1.0)
    assert t.tick(5.0) is TimerTick.ELAPSED
    assert t.elapsed == 0.0


def test_tick_accumulates():
    t = TurnTimer(limit=10.0)
    t.start()
    for _ in range(4):
        assert t.tick(0.25) is TimerTick.ELAPSED
    assert t.elapsed == pytest.approx(1.0)
    assert t.remaining() == pytest.approx(9.0)
    assert t.seconds_left() == 9


def test_expires_exactly_once():
    t = TurnTimer(limit=1.0)
    t.start()
    results = [t.tick(0.2) for _ in range(20)]
    assert results.count(TimerTick.EXPIRED) == 1
    assert not t.active
    assert t.remaining() == 0.0


def test_remaining_never_negative():
    t = TurnTimer(limit=0.5)
    t.start()
    t.tick(0.25)
    t.tick(0.25)
    t.tick(0.25)
    assert t.remaining() == 0.0
    assert t.seconds_left() == 0


def test_start_opens_a_fresh_window():
    t = TurnTimer(limit=0.5)
    t.start()
    t.tick(0.25)
    assert t.tick(0.25) is TimerTick.EXPIRED
    t.start()
    assert t.elapsed == 0.0
    t.tick(0.25)
    assert t.tick(0.25) is TimerTick.EXPIRED


def test_reset_stops_and_zeroes():
    t = TurnTimer(limit=3.0)
    t.start()
    t.tick(0.2)
    t.reset()
    assert not t.active and t.elapsed == 0.0


@pytest.mark.parametrize("bad", [math.nan, math.inf, -1.0])
def test_bad_frame_time_does_not_count(bad):
    t = TurnTimer(limit=1.0)
    t.start()
    assert t.tick(bad) is TimerTick.ELAPSED
    assert t.elapsed == 0.0


def test_seconds_left_rounds_up():
    t = TurnTimer(limit=10.0)
    t.start()
    t.tick(0.1)
    assert t.seconds_left() == 10
