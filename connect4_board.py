"""Board model: drop, win check, draw check"""
import logging
from typing import List, Optional, Tuple
from connect4_types import Player, COLS, ROWS

log = logging.getLogger("connect4.board")

Grid = List[List[Optional[Player]]]

# (dr, dc): horizontal, vertical, diagonal down-right, diagonal down-left
AXES = ((0, 1), (1, 0), (1, 1), (1, -1))


class Board:
    """6x7 grid, row 0 at the top. Pieces only ever land on the lowest empty row."""
    def __init__(self):
        self.cells: Grid = [[None] * COLS for _ in range(ROWS)]

    def reset(self):
        for row in self.cells:
            for c in range(COLS):
                row[c] = None

    @property
    def grid(self) -> Tuple[Tuple[Optional[Player], ...], ...]:
        return tuple(tuple(row) for row in self.cells)

    def cell(self, row: int, col: int) -> Optional[Player]:
        return self.cells[row][col]

    @staticmethod
    def is_valid_column(col: int) -> bool:
        return isinstance(col, int) and not isinstance(col, bool) and 0 <= col < COLS

    def open_row(self, col: int) -> Optional[int]:
        if not self.is_valid_column(col):
            return None
        for r in range(ROWS - 1, -1, -1):
            if self.cells[r][col] is None:
                return r
        return None

    def open_columns(self) -> List[int]:
        return [c for c in range(COLS) if self.cells[0][c] is None]

    def drop_piece(self, col: int, player: Player) -> Optional[int]:
        """Place player's piece in col; returns the landing row, None if the column is full."""
        r = self.open_row(col)
        if r is None:
            return None
        self.cells[r][col] = player
        log.debug("%s landed at row %d col %d", player.name, r, col)
        return r

    def check_win(self, row: int, col: int) -> bool:
        if not (0 <= row < ROWS and 0 <= col < COLS):
            return False
        player = self.cells[row][col]
        if player is None:
            return False
        for dr, dc in AXES:
            count = 0
            for i in range(-3, 4):
                r, c = row + i * dr, col + i * dc
                if r < 0 or r >= ROWS or c < 0 or c >= COLS:
                    continue
                if self.cells[r][c] is player:
                    count += 1
                    if count >= 4:
                        return True
                else:
                    count = 0
        return False

    def check_draw(self) -> bool:
        return all(self.cells[0][c] is not None for c in range(COLS))

    def __str__(self) -> str:
        marks = {None: ".", Player.RED: "R", Player.YELLOW: "Y"}
        return "\n".join("".join(marks[v] for v in row) for row in self.cells)
