"""
Game controller for Connect Four.

Owns the board, the falling-piece animation, the turn timer, whose turn it
is and the outcome. The frontend feeds it logical events (start, column
clicks, restart, back to menu) and one tick per frame, and reads snapshots
back for drawing.

Phases:

  MENU            start screen; only start_game() does anything
  AWAITING_INPUT  timer running; select_column() or a timeout starts a drop
  ANIMATING_DROP  piece falling; input ignored until it lands
  GAME_OVER       board frozen until restart() or return_to_menu()
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from connect4_animation import Animation, FallingPiece
from connect4_board import Board
from connect4_config import CONFIG, sanitize_dt
from connect4_rng import ColumnRandom
from connect4_timer import TimerTick, TurnTimer
from connect4_types import Outcome, OutcomeKind, Player

log = logging.getLogger("connect4.game")


class Phase(Enum):
    MENU = "menu"
    AWAITING_INPUT = "awaiting_input"
    ANIMATING_DROP = "animating_drop"
    GAME_OVER = "game_over"


class MoveStatus(Enum):
    STARTED = "started"
    INVALID_COLUMN = "invalid_column"
    COLUMN_FULL = "column_full"
    IGNORED = "ignored"


class Game:
    def __init__(self, rng=None,
                 animation: Optional[Animation] = None,
                 timer: Optional[TurnTimer] = None,
                 on_game_over: Optional[Callable[[Outcome], None]] = None,
                 on_reset: Optional[Callable[[], None]] = None):
        self.board = Board()
        self.animation = animation if animation is not None else Animation()
        self.timer = timer if timer is not None else TurnTimer()
        self.rng = rng if rng is not None else ColumnRandom(CONFIG["RNG_SEED"])
        self.on_game_over = on_game_over
        self.on_reset = on_reset

        self.phase = Phase.MENU
        self.current_player = Player.RED
        self.outcome = Outcome.in_progress()
        self.moves = 0
        self.forced_moves = 0

    # ---------- Discrete actions ----------
    def start_game(self):
        if self.phase is not Phase.MENU:
            return
        self._reset_state()
        self.timer.start()
        self.phase = Phase.AWAITING_INPUT
        log.info("Game started, %s to move", self.current_player.label)

    def restart(self):
        if self.phase is Phase.MENU:
            return
        if self.phase is Phase.ANIMATING_DROP:
            log.info("Restart while a piece was falling in column %d", self.animation.column)
        self._reset_state()
        self.timer.start()
        self.phase = Phase.AWAITING_INPUT
        log.info("Game restarted")
        if self.on_reset:
            self.on_reset()

    def return_to_menu(self):
        self._reset_state()
        self.phase = Phase.MENU
        log.info("Back to start screen")
        if self.on_reset:
            self.on_reset()

    def _reset_state(self):
        self.board.reset()
        self.animation.reset()
        self.timer.reset()
        self.current_player = Player.RED
        self.outcome = Outcome.in_progress()
        self.moves = 0
        self.forced_moves = 0

    # ---------- Moves ----------
    def select_column(self, column: int) -> MoveStatus:
        """Start a drop for the player to move. Clicks and timeouts both come through here."""
        if self.phase is not Phase.AWAITING_INPUT:
            return MoveStatus.IGNORED
        if not self.board.is_valid_column(column):
            log.info("Rejected move: column %r out of range", column)
            return MoveStatus.INVALID_COLUMN
        row = self.board.open_row(column)
        if row is None:
            log.info("Rejected move: column %d is full", column + 1)
            return MoveStatus.COLUMN_FULL
        self.animation.start_drop(column, row, self.current_player)
        self.timer.reset()
        self.phase = Phase.ANIMATING_DROP
        log.debug("%s drops in column %d (row %d)", self.current_player.name, column, row)
        return MoveStatus.STARTED

    def _forced_move(self):
        open_cols = self.board.open_columns()
        if not open_cols:
            return
        column = self.rng.choice(open_cols)
        log.info("%s ran out of time, random drop in column %d", self.current_player.label, column + 1)
        if self.select_column(column) is MoveStatus.STARTED:
            self.forced_moves += 1

    def _commit(self):
        landed = self.animation.landed
        row = self.board.drop_piece(landed.column, landed.player)
        self.moves += 1
        log.debug("Board after move %d:\n%s", self.moves, self.board)

        if self.board.check_win(row, landed.column):
            self._finish(Outcome.won(landed.player))
        elif self.board.check_draw():
            self._finish(Outcome.draw())
        else:
            self.current_player = self.current_player.other()
            self.timer.start()
            self.phase = Phase.AWAITING_INPUT

    def _finish(self, outcome: Outcome):
        self.outcome = outcome
        self.timer.reset()
        self.phase = Phase.GAME_OVER
        log.info(self.status_text())
        if self.on_game_over:
            self.on_game_over(outcome)

    # ---------- Frame update ----------
    def tick(self, dt):
        dt = sanitize_dt(dt)
        if self.phase is Phase.ANIMATING_DROP:
            if self.animation.advance(dt):
                self._commit()
        elif self.phase is Phase.AWAITING_INPUT:
            if self.timer.tick(dt) is TimerTick.EXPIRED:
                self._forced_move()

    # ---------- Read-only views ----------
    def is_game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def falling_piece(self) -> Optional[FallingPiece]:
        return self.animation.snapshot()

    def time_remaining(self) -> float:
        return self.timer.remaining()

    def status_text(self) -> str:
        if self.outcome.kind is OutcomeKind.WON:
            return f"{self.outcome.winner.label} WINS!"
        if self.outcome.kind is OutcomeKind.DRAW:
            return "Game Over - It's a DRAW!"
        return f"{self.current_player.label}'s Turn"
