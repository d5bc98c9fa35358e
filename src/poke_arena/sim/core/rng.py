"""Seeded random number generator for deterministic battle simulation.

Wraps Python's random.Random so that damage rolls and opponent move
choices are reproducible.  Each battle session gets a *forked* RNG so
that consuming random values in one battle does not perturb another.
"""

from __future__ import annotations

import hashlib
import random


class BattleRNG:
    """Deterministic RNG that can be forked into independent sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    # -- core random methods -------------------------------------------------

    def random_uniform(self, low: float, high: float) -> float:
        """Return a random float *N* such that ``low <= N <= high``."""
        return self._rng.uniform(low, high)

    def random_index(self, length: int) -> int:
        """Return a uniformly chosen index into a sequence of *length* items."""
        if length <= 0:
            raise ValueError(f"random_index needs a positive length, got {length}")
        return self._rng.randrange(length)

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> BattleRNG:
        """Create a child RNG whose seed is derived from this RNG's seed and
        *name*.

        Forking with the same *name* always produces the same child seed,
        so ``fork("battle-0")`` replays identically for a given engine seed.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        child_seed = int.from_bytes(digest[:8], "big")
        return BattleRNG(child_seed)

    def __repr__(self) -> str:
        return f"BattleRNG(seed={self._seed})"
