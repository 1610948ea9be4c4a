import math

import pytest

from connect4_animation import Animation, AnimationBusyError
from connect4_types import Player

DT = 1 / 60


def frames_to_land(anim, row):
    anim.start_drop(3, row, Player.RED)
    frames = 0
    while not anim.advance(DT):
        frames += 1
        assert frames < 10_000
    return frames + 1


def test_starts_idle():
    anim = Animation(cell_size=100, gravity=1600)
    assert not anim.is_active()
    assert anim.snapshot() is None
    assert not anim.advance(DT)


def test_start_drop_initialises_from_rest():
    anim = Animation(cell_size=100, gravity=1600)
    anim.start_drop(2, 5, Player.YELLOW)
    assert anim.is_active()
    assert anim.y == 0.0 and anim.velocity == 0.0
    snap = anim.snapshot()
    assert (snap.column, snap.y, snap.player) == (2, 0.0, Player.YELLOW)
    assert anim.target_y() == 550.0


def test_semi_implicit_euler_step():
    anim = Animation(cell_size=100, gravity=1600)
    anim.start_drop(0, 5, Player.RED)
    anim.advance(0.1)
    assert anim.velocity == pytest.approx(160.0)
    assert anim.y == pytest.approx(16.0)
    anim.advance(0.1)
    assert anim.velocity == pytest.approx(320.0)
    assert anim.y == pytest.approx(48.0)


def test_lands_clamped_on_target_and_goes_idle():
    anim = Animation(cell_size=100, gravity=1600)
    anim.start_drop(4, 0, Player.RED)
    ys = []
    while anim.is_active():
        landed = anim.advance(DT)
        ys.append(anim.y)
        assert anim.y <= anim.target_y()
    assert landed
    assert ys == sorted(ys)
    assert ys[-1] == anim.target_y() == 50.0
    assert anim.landed.column == 4 and anim.landed.row == 0
    assert anim.snapshot() is None


def test_time_to_land_is_deterministic_and_grows_with_row():
    anim = Animation(cell_size=100, gravity=1600)
    frames = [frames_to_land(anim, row) for row in range(6)]
    again = [frames_to_land(anim, row) for row in range(6)]
    assert frames == again
    assert all(a <= b for a, b in zip(frames, frames[1:]))
    assert frames[0] < frames[-1]


def test_second_drop_while_falling_is_rejected():
    anim = Animation()
    anim.start_drop(1, 5, Player.RED)
    with pytest.raises(AnimationBusyError):
        anim.start_drop(2, 5, Player.YELLOW)
    assert anim.column == 1


@pytest.mark.parametrize("col,row", [(-1, 0), (7, 0), (0, -1), (0, 6)])
def test_out_of_range_target(col, row):
    with pytest.raises(ValueError):
        Animation().start_drop(col, row, Player.RED)


@pytest.mark.parametrize("gravity", [-1.0, 0.0, 0, math.nan])
def test_gravity_must_be_positive(gravity):
    with pytest.raises(ValueError):
        Animation(gravity=gravity)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, -0.5])
def test_bad_frame_time_is_a_no_op(bad):
    anim = Animation(cell_size=100, gravity=1600)
    anim.start_drop(0, 5, Player.RED)
    anim.advance(0.05)
    y, v = anim.y, anim.velocity
    assert not anim.advance(bad)
    assert (anim.y, anim.velocity) == (y, v)


def test_reset_is_abrupt():
    anim = Animation()
    anim.start_drop(6, 3, Player.YELLOW)
    anim.advance(0.1)
    anim.reset()
    assert not anim.is_active()
    assert (anim.column, anim.target_row, anim.player, anim.y, anim.velocity) == (0, 0, None, 0.0, 0.0)
    assert anim.landed is None
    anim.start_drop(0, 0, Player.RED)
