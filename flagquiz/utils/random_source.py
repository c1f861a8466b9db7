"""
Random number source for Guess the Flag.

The quiz session draws every random value through a ``RandomSource`` so
callers (and tests) can control the sequence.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Protocol


class RandomSource(Protocol):
    """What the quiz session needs from a random generator."""

    def randrange(self, stop: int) -> int:
        """Return an int uniformly drawn from ``[0, stop)``."""
        ...

    def shuffle(self, items: list) -> None:
        """Shuffle *items* in place."""
        ...


@dataclass
class SystemRandomSource:
    """``RandomSource`` backed by :class:`random.Random`.

    Pass *seed* to get a reproducible game.
    """

    seed: Optional[int] = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def randrange(self, stop: int) -> int:
        return self._rng.randrange(stop)

    def shuffle(self, items: list) -> None:
        self._rng.shuffle(items)
