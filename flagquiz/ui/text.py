"""
UI text utilities for Guess the Flag.

Builds the HUD and alert strings from a quiz session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flagquiz.game import GameState, QuizSession

TITLE_TEXT = "Guess the Flag"
PROMPT_TEXT = "Tap the flag of"
GAME_OVER_TITLE = "Game Over"
CONTINUE_HINT = "Continue"
RESTART_HINT = "Restart"


@dataclass
class ScoreDisplay:
    """Formats the score and round counter for HUD display."""

    session: QuizSession

    def format_score(self) -> str:
        return f"Score: {self.session.score}"

    def format_round(self) -> str:
        # Clamp so the HUD never shows "Round: 4 of 3" behind the last alert
        shown = min(self.session.current_round, self.session.total_rounds)
        return f"Round: {shown} of {self.session.total_rounds}"

    def alert(self) -> Optional[tuple[str, str, str]]:
        """Return ``(title, message, button)`` for the active alert, if any."""
        state = self.session.state
        if state is GameState.GAME_OVER:
            return (GAME_OVER_TITLE, self.session.game_over_message, RESTART_HINT)
        result = self.session.last_result
        if state is GameState.SHOWING_RESULT and result is not None:
            return (result.title, result.message, CONTINUE_HINT)
        return None
