"""
Input handler for Guess the Flag.

Maps player input (number keys, confirm keys, mouse clicks) to game
actions without depending on pygame constants, so it can be driven by
plain values in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence


class GameAction(Enum):
    """Actions the player can trigger."""
    SELECT_FLAG = auto()
    CONFIRM = auto()  # "Continue" on the result alert, "Restart" on game over
    QUIT = auto()
    NONE = auto()


@dataclass
class InputEvent:
    """Abstract input event consumed by the game loop."""
    action: GameAction
    flag_index: int = -1


# Characters accepted from the keyboard
SELECT_KEYS: dict[str, int] = {"1": 0, "2": 1, "3": 2}
CONFIRM_KEYS: frozenset[str] = frozenset({"\r", "\n", " "})
QUIT_KEYS: frozenset[str] = frozenset({"\x1b"})


def action_for_key(char: str) -> InputEvent:
    """Translate a typed character (``event.unicode``) into an action."""
    if char in SELECT_KEYS:
        return InputEvent(GameAction.SELECT_FLAG, SELECT_KEYS[char])
    if char in CONFIRM_KEYS:
        return InputEvent(GameAction.CONFIRM)
    if char in QUIT_KEYS:
        return InputEvent(GameAction.QUIT)
    return InputEvent(GameAction.NONE)


def flag_at(
    pos: tuple[int, int],
    flag_rects: Sequence[tuple[int, int, int, int]],
) -> Optional[int]:
    """Return the index of the flag rectangle ``(x, y, w, h)`` under *pos*."""
    px, py = pos
    for i, (x, y, w, h) in enumerate(flag_rects):
        if x <= px < x + w and y <= py < y + h:
            return i
    return None


def action_for_click(
    pos: tuple[int, int],
    flag_rects: Sequence[tuple[int, int, int, int]],
    awaiting_answer: bool,
) -> InputEvent:
    """Translate a left click at *pos* (game coordinates) into an action.

    While a flag is being asked for, only clicks on a flag count.
    Otherwise any click dismisses the alert.
    """
    if not awaiting_answer:
        return InputEvent(GameAction.CONFIRM)
    index = flag_at(pos, flag_rects)
    if index is None:
        return InputEvent(GameAction.NONE)
    return InputEvent(GameAction.SELECT_FLAG, index)
