"""Falling piece: a single in-flight drop under constant gravity"""
import logging
from dataclasses import dataclass
from typing import Optional
from connect4_config import CONFIG, sanitize_dt
from connect4_types import Player, COLS, ROWS

log = logging.getLogger("connect4.animation")


class AnimationBusyError(RuntimeError):
    """Raised when a drop is requested while another piece is still falling."""


@dataclass
class FallingPiece:
    column: int
    y: float
    player: Player


@dataclass
class LandedPiece:
    column: int
    row: int
    player: Player


class Animation:
    """
    Idle/Falling state machine for the drop animation.

    `y` is measured in pixels from the top of the board to the piece centre.
    Each advance applies semi-implicit Euler integration: velocity first,
    then position from the new velocity. Once `y` reaches the centre of the
    target row it is clamped there and the machine returns to idle.
    """
    def __init__(self, cell_size: Optional[float] = None, gravity: Optional[float] = None):
        self.cell_size = float(CONFIG["CELL_SIZE"] if cell_size is None else cell_size)
        self.gravity = float(CONFIG["GRAVITY"] if gravity is None else gravity)
        if not self.gravity > 0:
            raise ValueError("gravity must be positive")
        self.landed: Optional[LandedPiece] = None
        self.reset()

    def reset(self):
        self.active = False
        self.column = 0
        self.target_row = 0
        self.player: Optional[Player] = None
        self.y = 0.0
        self.velocity = 0.0
        self.landed = None

    def is_active(self) -> bool:
        return self.active

    def start_drop(self, column: int, target_row: int, player: Player):
        if self.active:
            raise AnimationBusyError(f"column {self.column} is still falling")
        if not (0 <= column < COLS) or not (0 <= target_row < ROWS):
            raise ValueError(f"drop target out of range: row {target_row} col {column}")
        self.active = True
        self.column = column
        self.target_row = target_row
        self.player = player
        self.y = 0.0
        self.velocity = 0.0
        self.landed = None

    def target_y(self) -> float:
        return self.target_row * self.cell_size + self.cell_size / 2.0

    def advance(self, dt) -> bool:
        """Step the fall; True exactly on the frame the piece lands."""
        if not self.active:
            return False
        dt = sanitize_dt(dt)
        self.velocity += self.gravity * dt
        self.y += self.velocity * dt
        target = self.target_y()
        if self.y >= target:
            self.y = target
            self.active = False
            self.landed = LandedPiece(self.column, self.target_row, self.player)
            return True
        return False

    def snapshot(self) -> Optional[FallingPiece]:
        if not self.active:
            return None
        return FallingPiece(self.column, self.y, self.player)
