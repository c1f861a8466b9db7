"""
Country pool for Guess the Flag.

Holds the ordered list of country names the quiz draws from.  The pool
is reshuffled at the start of every round and the first few entries are
the flags shown to the player.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from flagquiz.config import (
    CHOICES_PER_ROUND,
    COUNTRIES,
    FLAG_LABELS,
    UNKNOWN_FLAG_LABEL,
)
from flagquiz.utils.random_source import RandomSource


def flag_label(country: str) -> str:
    """Return the screen-reader description for *country*'s flag."""
    return FLAG_LABELS.get(country, UNKNOWN_FLAG_LABEL)


@dataclass
class CountryPool:
    """Ordered pool of country names.

    The pool never gains or loses entries: shuffling only reorders it.
    It must hold at least ``choices`` distinct names.
    """

    countries: list[str] = field(default_factory=lambda: list(COUNTRIES))
    choices: int = CHOICES_PER_ROUND

    def __post_init__(self) -> None:
        self.countries = list(self.countries)
        if len(self.countries) < self.choices:
            raise ValueError(
                f"country pool needs at least {self.choices} entries, "
                f"got {len(self.countries)}"
            )
        if len(set(self.countries)) != len(self.countries):
            raise ValueError("country pool contains duplicate names")

    def __len__(self) -> int:
        return len(self.countries)

    def __getitem__(self, index: int) -> str:
        return self.countries[index]

    def shuffle(self, rng: RandomSource) -> None:
        """Reorder the pool in place."""
        rng.shuffle(self.countries)

    @property
    def displayed(self) -> list[str]:
        """The countries whose flags are on screen this round."""
        return self.countries[: self.choices]

    @property
    def labels(self) -> list[str]:
        return [flag_label(name) for name in self.displayed]
