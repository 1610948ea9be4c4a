# connect4_layout.py
from dataclasses import dataclass
from connect4_config import CONFIG
from connect4_types import COLS, ROWS

@dataclass
class Dims:
    cell: int
    board_w: int
    board_h: int
    status_h: int
    total_w: int
    total_h: int
    piece_r: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    status_h = 50

    board_w = COLS * cell
    board_h = ROWS * cell

    return Dims(
        cell=cell,
        board_w=board_w, board_h=board_h,
        status_h=status_h,
        total_w=board_w,
        total_h=board_h + status_h,
        piece_r=int(cell * 0.4),
    )
