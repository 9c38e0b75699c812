"""Deterministic pseudo-random stream used by every generator."""

from __future__ import annotations

from ..core.constants import LCG_INCREMENT, LCG_MODULUS, LCG_MULTIPLIER


class SeededRandom:
    """Linear congruential generator with a ``Math.random``-like interface.

    The recurrence is ``state = (state * 9301 + 49297) % 233280``. It is a poor
    source of randomness but it is cheap to reproduce, and puzzles printed from
    a saved seed only look the same if these constants never change.
    """

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self._state = self.seed

    def next(self) -> float:
        """Advance the stream and return a float in ``[0, 1)``."""
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self._state / LCG_MODULUS

    def randrange(self, n: int) -> int:
        """Return an integer in ``[0, n)`` consuming exactly one draw."""
        return int(self.next() * n)

    @property
    def state(self) -> int:
        return self._state
