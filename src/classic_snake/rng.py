"""Seeded 64-bit linear congruential generator used for food placement."""

from __future__ import annotations

_MULTIPLIER = 6364136223846793005
_INCREMENT = 1
_MASK = (1 << 64) - 1

# A zero seed is replaced so the stream never starts from the all-zero state.
ZERO_SEED_REPLACEMENT = 0x4D595DF4D0F33173


class LinearCongruentialRNG:
    """Deterministic LCG over unsigned 64-bit state.

    ``state' = state * 6364136223846793005 + 1 (mod 2**64)``. The output is a
    pure function of the seed and the number of draws, so games built from
    the same seed place food identically.
    """

    def __init__(self, seed: int) -> None:
        seed &= _MASK
        self.state = ZERO_SEED_REPLACEMENT if seed == 0 else seed

    def next(self) -> int:
        """Advance the generator and return the new 64-bit state."""
        self.state = (self.state * _MULTIPLIER + _INCREMENT) & _MASK
        return self.state

    def next_int(self, bound: int) -> int:
        """Return ``next() % bound``, an integer in ``[0, bound)``."""
        if bound < 1:
            raise ValueError("bound must be at least 1.")
        return self.next() % bound
