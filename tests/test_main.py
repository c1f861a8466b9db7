"""
Tests for main.py – argument parsing, layout, and action dispatch.

The app is exercised without opening a window: ``dispatch`` is driven
with plain ``InputEvent`` values.
"""

import logging
import os

import pytest

from flagquiz.config import FLAG_HEIGHT, FLAG_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH
from flagquiz.game import GameState
from flagquiz.utils.input_handler import GameAction, InputEvent
from main import GuessTheFlagApp, flag_rects, parse_args, setup_logging


def pick(index):
    return InputEvent(GameAction.SELECT_FLAG, index)


CONFIRM = InputEvent(GameAction.CONFIRM)


# ── Entry point validation ─────────────────────────────────────────────────


class TestEntryPoint:
    def test_launcher_exists(self):
        """guess-the-flag.py must exist as the game entry point."""
        root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        assert os.path.isfile(os.path.join(root, "guess-the-flag.py"))


# ── Argument parsing ───────────────────────────────────────────────────────


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.rounds == 3
        assert args.seed is None
        assert args.scale == 2
        assert args.fullscreen is False
        assert args.mute is False
        assert args.debug is False

    def test_rounds(self):
        assert parse_args(["--rounds", "5"]).rounds == 5

    @pytest.mark.parametrize("value", ["0", "-1", "x"])
    def test_invalid_rounds_rejected(self, value):
        with pytest.raises(SystemExit):
            parse_args(["--rounds", value])

    def test_seed(self):
        assert parse_args(["--seed", "42"]).seed == 42

    def test_scale_multiplier(self):
        for n in range(1, 5):
            assert parse_args(["--scale", str(n)]).scale == n

    def test_invalid_scale_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--scale", "5"])

    def test_flags(self):
        args = parse_args(["--fullscreen", "--mute", "--debug"])
        assert args.fullscreen and args.mute and args.debug


class TestSetupLogging:
    def test_debug_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        setup_logging(debug=True)
        assert calls["level"] == logging.DEBUG

    def test_info_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        setup_logging()
        assert calls["level"] == logging.INFO


# ── Layout ──────────────────────────────────────────────────────────────────


class TestLayout:
    def test_three_flags_on_screen(self):
        rects = flag_rects()
        assert len(rects) == 3
        for x, y, w, h in rects:
            assert (w, h) == (FLAG_WIDTH, FLAG_HEIGHT)
            assert 0 <= x and x + w <= SCREEN_WIDTH
            assert 0 <= y and y + h <= SCREEN_HEIGHT

    def test_flags_do_not_overlap(self):
        rects = flag_rects()
        for (_, y1, _, h1), (_, y2, _, _) in zip(rects, rects[1:]):
            assert y1 + h1 < y2


# ── GuessTheFlagApp (without a display) ─────────────────────────────────────


class TestGuessTheFlagApp:
    def test_app_defaults(self):
        app = GuessTheFlagApp()
        assert app.scale == 2
        assert app.running is False
        assert app.session.total_rounds == 3
        assert app.session.state == GameState.AWAITING_ANSWER

    def test_rounds_and_seed_forwarded(self):
        a = GuessTheFlagApp(rounds=5, seed=9)
        b = GuessTheFlagApp(rounds=5, seed=9)
        assert a.session.total_rounds == 5
        assert a.session.pool.countries == b.session.pool.countries
        assert a.session.correct_answer == b.session.correct_answer

    def test_mute_disables_audio(self):
        app = GuessTheFlagApp(mute=True)
        assert app.audio.enabled is False
        assert app.audio.init() is False

    def test_render_without_screen_is_noop(self):
        GuessTheFlagApp(mute=True)._render()


class TestDispatch:
    def make_app(self, rounds=3):
        return GuessTheFlagApp(rounds=rounds, seed=1, mute=True)

    def test_select_scores(self):
        app = self.make_app()
        app.dispatch(pick(app.session.correct_answer))
        assert app.session.score == 5
        assert app.session.state == GameState.SHOWING_RESULT

    def test_confirm_advances(self):
        app = self.make_app()
        app.dispatch(pick(0))
        app.dispatch(CONFIRM)
        assert app.session.state == GameState.AWAITING_ANSWER
        assert app.session.current_round == 2

    def test_second_pick_ignored_while_alert_showing(self):
        app = self.make_app()
        app.dispatch(pick(app.session.correct_answer))
        app.dispatch(pick(0))
        assert app.session.score == 5
        assert app.session.current_round == 2

    def test_confirm_ignored_while_awaiting(self):
        app = self.make_app()
        app.dispatch(CONFIRM)
        assert app.session.state == GameState.AWAITING_ANSWER
        assert app.session.current_round == 1

    def test_full_game_and_restart(self):
        app = self.make_app(rounds=2)
        for _ in range(2):
            app.dispatch(pick(app.session.correct_answer))
            app.dispatch(CONFIRM)
        assert app.session.state == GameState.GAME_OVER
        assert app.session.final_score == 10
        assert app.hud.alert()[0] == "Game Over"

        app.dispatch(CONFIRM)
        assert app.session.state == GameState.AWAITING_ANSWER
        assert app.session.score == 0
        assert app.session.current_round == 1

    def test_quit(self):
        app = self.make_app()
        app.running = True
        app.dispatch(InputEvent(GameAction.QUIT))
        assert app.running is False

    def test_none_action_ignored(self):
        app = self.make_app()
        app.dispatch(InputEvent(GameAction.NONE))
        assert app.session.state == GameState.AWAITING_ANSWER

    def test_sounds_played(self):
        app = self.make_app(rounds=1)
        played = []
        app.audio.play = played.append
        correct = app.session.correct_answer
        app.dispatch(pick((correct + 1) % 3))
        app.dispatch(CONFIRM)
        assert [e.name for e in played] == ["WRONG", "GAME_OVER"]
