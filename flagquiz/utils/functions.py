"""
Shared helpers for Guess the Flag.

Scoring rules and the wording of the result alerts.
"""

from __future__ import annotations

from flagquiz.config import POINTS_CORRECT, POINTS_WRONG


# ── Scoring helpers ─────────────────────────────────────────────────────────


def score_delta(is_correct: bool) -> int:
    """Points gained (or lost) for one answer."""
    return POINTS_CORRECT if is_correct else POINTS_WRONG


# ── Alert wording ───────────────────────────────────────────────────────────


def result_title(is_correct: bool) -> str:
    return "Correct" if is_correct else "Wrong"


def result_message(is_correct: bool, score: int, selected_country: str) -> str:
    """Body of the alert shown after a pick.

    A wrong pick names the country whose flag was actually tapped.
    """
    if is_correct:
        return f"Your score is {score}"
    return f"That's the flag of {selected_country}"


def final_score_message(score: int) -> str:
    return f"Your final score is {score}"
