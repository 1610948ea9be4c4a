import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from connect4_game import Game, MoveStatus, Phase


class FixedChoice:
    """Random source stand-in: always picks `column`, records what it was offered."""
    def __init__(self, column=None):
        self.column = column
        self.offered = []

    def choice(self, columns):
        self.offered.append(list(columns))
        if self.column is None or self.column not in columns:
            return columns[0]
        return self.column


def finish_drop(game, dt=1 / 60, max_frames=1000):
    for _ in range(max_frames):
        if game.phase is not Phase.ANIMATING_DROP:
            return
        game.tick(dt)
    raise AssertionError("drop never landed")


def play(game, column):
    assert game.select_column(column) is MoveStatus.STARTED
    finish_drop(game)


@pytest.fixture
def rng():
    return FixedChoice()


@pytest.fixture
def game(rng):
    g = Game(rng=rng)
    g.start_game()
    return g
