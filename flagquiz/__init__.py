"""
Guess the Flag - pick the right flag out of three
"""

__version__ = "1.0.0"

from .game import (
    GameState,
    InvalidSelectionError,
    InvalidTransitionError,
    Outcome,
    QuizError,
    QuizSession,
    RoundResult,
)
from .config import *  # noqa: F401,F403

__all__ = [
    "GameState",
    "InvalidSelectionError",
    "InvalidTransitionError",
    "Outcome",
    "QuizError",
    "QuizSession",
    "RoundResult",
]
