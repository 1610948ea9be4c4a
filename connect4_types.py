"""Players and game outcome"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

COLS, ROWS = 7, 6


class Player(Enum):
    RED = 1
    YELLOW = 2

    def other(self) -> "Player":
        return Player.YELLOW if self is Player.RED else Player.RED

    @property
    def label(self) -> str:
        return "Player 1 (Red)" if self is Player.RED else "Player 2 (Yellow)"


class OutcomeKind(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    winner: Optional[Player] = None

    @staticmethod
    def in_progress() -> "Outcome":
        return Outcome(OutcomeKind.IN_PROGRESS)

    @staticmethod
    def won(player: Player) -> "Outcome":
        return Outcome(OutcomeKind.WON, player)

    @staticmethod
    def draw() -> "Outcome":
        return Outcome(OutcomeKind.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.kind is not OutcomeKind.IN_PROGRESS
