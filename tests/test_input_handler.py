"""
Tests for mapping keys and clicks to game actions.
"""

from flagquiz.utils.input_handler import (
    GameAction,
    InputEvent,
    action_for_click,
    action_for_key,
    flag_at,
)

RECTS = [(10, 100, 50, 20), (10, 130, 50, 20), (10, 160, 50, 20)]


class TestKeys:
    def test_number_keys_select_flags(self):
        assert action_for_key("1") == InputEvent(GameAction.SELECT_FLAG, 0)
        assert action_for_key("2") == InputEvent(GameAction.SELECT_FLAG, 1)
        assert action_for_key("3") == InputEvent(GameAction.SELECT_FLAG, 2)

    def test_confirm_keys(self):
        for char in ("\r", "\n", " "):
            assert action_for_key(char).action == GameAction.CONFIRM

    def test_escape_quits(self):
        assert action_for_key("\x1b").action == GameAction.QUIT

    def test_other_keys_ignored(self):
        for char in ("4", "a", ""):
            assert action_for_key(char).action == GameAction.NONE


class TestClicks:
    def test_flag_at(self):
        assert flag_at((10, 100), RECTS) == 0
        assert flag_at((59, 149), RECTS) == 1
        assert flag_at((30, 170), RECTS) == 2

    def test_flag_at_misses(self):
        assert flag_at((60, 100), RECTS) is None
        assert flag_at((30, 125), RECTS) is None
        assert flag_at((0, 0), RECTS) is None

    def test_click_on_flag_selects(self):
        event = action_for_click((30, 135), RECTS, awaiting_answer=True)
        assert event == InputEvent(GameAction.SELECT_FLAG, 1)

    def test_click_beside_flags_ignored(self):
        event = action_for_click((200, 135), RECTS, awaiting_answer=True)
        assert event.action == GameAction.NONE

    def test_click_dismisses_alert(self):
        event = action_for_click((30, 135), RECTS, awaiting_answer=False)
        assert event.action == GameAction.CONFIRM
