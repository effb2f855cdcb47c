"""Seeded random number generator shared by the maze generators."""

import random
from typing import Optional


class SeededRNG:
    """Seeded random number generator for reproducible mazes."""
    
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed
    
    @property
    def seed(self) -> Optional[int]:
        """Get the current seed."""
        return self._seed
    
    def set_seed(self, seed: Optional[int]):
        """Set a new seed."""
        self._seed = seed
        self._rng.seed(seed)
    
    def randint(self, a: int, b: int) -> int:
        """Generate a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)
    
    def shuffle(self, seq) -> None:
        """Shuffle the sequence in place."""
        self._rng.shuffle(seq)


# Global instance, seeded from the OS on first import
default_rng = SeededRNG()


def resolve_rng(rng: Optional[SeededRNG]) -> SeededRNG:
    """Return ``rng``, or the global instance when none is given."""
    return default_rng if rng is None else rng


def set_global_seed(seed: Optional[int]):
    """Set the seed for the global RNG instance."""
    default_rng.set_seed(seed)


def get_global_seed() -> Optional[int]:
    """Get the seed of the global RNG instance."""
    return default_rng.seed
