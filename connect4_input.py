"""Pointer and key translation into logical actions"""
from enum import Enum
from typing import Optional
import pygame
from connect4_types import COLS

class Action(Enum):
    START = "start"
    RESTART = "restart"
    MENU = "menu"
    QUIT = "quit"

KEY_ACTIONS = {
    pygame.K_r: Action.RESTART,
    pygame.K_ESCAPE: Action.MENU,
}

def column_at(x: float, cell: float) -> Optional[int]:
    """Logical column under a click at x; None outside the board."""
    if x < 0:
        return None
    col = int(x // cell)
    return col if col < COLS else None

def on_board(pos, dims) -> bool:
    x, y = pos
    return 0 <= x < dims.board_w and 0 <= y < dims.board_h

def key_action(key: int) -> Optional[Action]:
    return KEY_ACTIONS.get(key)
