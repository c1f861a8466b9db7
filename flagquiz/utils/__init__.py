"""Utility functions and helpers."""

from .functions import (
    final_score_message,
    result_message,
    result_title,
    score_delta,
)
from .input_handler import InputEvent, GameAction
from .random_source import RandomSource, SystemRandomSource

__all__ = [
    "final_score_message",
    "result_message",
    "result_title",
    "score_delta",
    "InputEvent",
    "GameAction",
    "RandomSource",
    "SystemRandomSource",
]
