"""Per-turn countdown"""
import math
from enum import Enum
from typing import Optional
from connect4_config import CONFIG, sanitize_dt


class TimerTick(Enum):
    ELAPSED = "elapsed"
    EXPIRED = "expired"


class TurnTimer:
    """
    Counts up to `limit` seconds and reports expiry once.

    The timer knows nothing about the game; the caller decides when it
    should tick. After expiring it stays inactive until start() or reset().
    """
    def __init__(self, limit: Optional[float] = None):
        self.limit = float(CONFIG["TURN_TIME_LIMIT"] if limit is None else limit)
        self.active = False
        self.elapsed = 0.0

    def start(self):
        self.active = True
        self.elapsed = 0.0

    def reset(self):
        self.active = False
        self.elapsed = 0.0

    def tick(self, dt) -> TimerTick:
        if not self.active:
            return TimerTick.ELAPSED
        self.elapsed += sanitize_dt(dt)
        if self.elapsed >= self.limit:
            self.active = False
            return TimerTick.EXPIRED
        return TimerTick.ELAPSED

    def remaining(self) -> float:
        return max(0.0, self.limit - self.elapsed)

    def seconds_left(self) -> int:
        return int(math.ceil(self.remaining()))
