"""
Core game logic for Guess the Flag.

A ``QuizSession`` owns the round and score state and the transitions
the front end drives: picking a flag, moving on after the result alert,
and restarting once the game is over.  It never touches pygame, so any
front end (or a test) can render its state and feed it input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from flagquiz.config import TOTAL_ROUNDS
from flagquiz.models.country import CountryPool
from flagquiz.utils.functions import (
    final_score_message,
    result_message,
    result_title,
    score_delta,
)
from flagquiz.utils.random_source import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


# ── Errors ──────────────────────────────────────────────────────────────────


class QuizError(Exception):
    """Base class for misuse of a quiz session."""


class InvalidSelectionError(QuizError, ValueError):
    """The picked index is not one of the flags on screen."""


class InvalidTransitionError(QuizError, RuntimeError):
    """The requested transition is not allowed in the current state."""


# ── Game states ─────────────────────────────────────────────────────────────


class GameState(Enum):
    AWAITING_ANSWER = auto()
    SHOWING_RESULT = auto()
    GAME_OVER = auto()


class Outcome(Enum):
    CORRECT = auto()
    WRONG = auto()


@dataclass(frozen=True)
class RoundResult:
    """What happened when the player picked a flag."""

    outcome: Outcome
    score: int
    selected_index: int
    selected_country: str
    correct_country: str

    @property
    def is_correct(self) -> bool:
        return self.outcome is Outcome.CORRECT

    @property
    def title(self) -> str:
        return result_title(self.is_correct)

    @property
    def message(self) -> str:
        return result_message(self.is_correct, self.score, self.selected_country)


# ── Quiz session ────────────────────────────────────────────────────────────


@dataclass
class QuizSession:
    """Round and score state for one game.

    ``current_round`` is 1-based and keeps counting past ``total_rounds``
    after the last pick; the next ``advance()`` then ends the game.
    """

    total_rounds: int = TOTAL_ROUNDS
    pool: CountryPool = field(default_factory=CountryPool)
    rng: RandomSource = field(default_factory=SystemRandomSource)

    score: int = field(default=0, init=False)
    current_round: int = field(default=1, init=False)
    correct_answer: int = field(default=0, init=False)
    selected: Optional[int] = field(default=None, init=False)
    last_result: Optional[RoundResult] = field(default=None, init=False)
    state: GameState = field(default=GameState.AWAITING_ANSWER, init=False)

    def __post_init__(self) -> None:
        if self.total_rounds < 1:
            raise ValueError(f"total_rounds must be at least 1, got {self.total_rounds}")
        self._new_round()

    # ── Read-only views ─────────────────────────────────────────────────

    @property
    def displayed_countries(self) -> list[str]:
        return self.pool.displayed

    @property
    def target_country(self) -> str:
        """Name the player is asked to find."""
        return self.pool[self.correct_answer]

    @property
    def is_game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def final_score(self) -> Optional[int]:
        """The score once the game is over, ``None`` before that."""
        return self.score if self.is_game_over else None

    @property
    def game_over_message(self) -> str:
        return final_score_message(self.score)

    # ── Transitions ─────────────────────────────────────────────────────

    def submit_answer(self, index: int) -> RoundResult:
        """Pick the flag at *index* and score it.

        Raises ``InvalidSelectionError`` if *index* is not one of the
        displayed flags and ``InvalidTransitionError`` if a result is
        already showing or the game is over.
        """
        self._require(GameState.AWAITING_ANSWER, "submit_answer")
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not 0 <= index < self.pool.choices
        ):
            raise InvalidSelectionError(
                f"selection must be an index in [0, {self.pool.choices}), got {index!r}"
            )

        self.selected = index
        is_correct = index == self.correct_answer
        self.score += score_delta(is_correct)
        self.current_round += 1

        result = RoundResult(
            outcome=Outcome.CORRECT if is_correct else Outcome.WRONG,
            score=self.score,
            selected_index=index,
            selected_country=self.pool[index],
            correct_country=self.target_country,
        )
        self.last_result = result
        self.state = GameState.SHOWING_RESULT
        logger.debug(
            "Picked %s for %s: %s, score %d",
            result.selected_country, result.correct_country,
            result.outcome.name, self.score,
        )
        return result

    def advance(self) -> GameState:
        """Dismiss the result and start the next round, or end the game."""
        self._require(GameState.SHOWING_RESULT, "advance")
        if self.current_round > self.total_rounds:
            self.state = GameState.GAME_OVER
            logger.info("Game over, final score %d", self.score)
        else:
            self._new_round()
        return self.state

    def restart(self) -> GameState:
        """Start a fresh game after game over."""
        self._require(GameState.GAME_OVER, "restart")
        self.score = 0
        self.current_round = 1
        self._new_round()
        return self.state

    # ── Internals ───────────────────────────────────────────────────────

    def _require(self, expected: GameState, action: str) -> None:
        if self.state is not expected:
            raise InvalidTransitionError(
                f"{action}() is only valid in {expected.name}, "
                f"session is in {self.state.name}"
            )

    def _new_round(self) -> None:
        self.pool.shuffle(self.rng)
        self.correct_answer = self.rng.randrange(self.pool.choices)
        self.selected = None
        self.last_result = None
        self.state = GameState.AWAITING_ANSWER
        logger.info(
            "Round %d of %d: find %s",
            self.current_round, self.total_rounds, self.target_country,
        )
