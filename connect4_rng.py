"""Column randomizer for timed-out turns"""
import os
from typing import Optional, Sequence


class ColumnRandom:
    """
    Small seeded LCG that picks a column uniformly from the open ones.

    Game only needs an object with `choice(columns)`; tests pass their own.
    """
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = int.from_bytes(os.urandom(4), "little")
        self.state = seed & 0xFFFFFFFF

    def _lcg_next(self):
        self.state = (self.state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF
        return self.state

    def _rand(self):
        return (self._lcg_next() >> 16) & 0x7FFF

    def _below(self, n: int) -> int:
        # reject the tail of the 15-bit range so every index is equally likely
        limit = 0x8000 - (0x8000 % n)
        while True:
            v = self._rand()
            if v < limit:
                return v % n

    def choice(self, columns: Sequence[int]) -> int:
        if not columns:
            raise IndexError("no open columns to choose from")
        return columns[self._below(len(columns))]
