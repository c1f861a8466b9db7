"""
Main entry point for Guess the Flag.

Initializes pygame, runs the event loop and renders the quiz session:
three flags, the country to find, the score and round counters, and the
result / game-over alerts.

Usage:
    python guess-the-flag.py [OPTIONS]

Options:
    --rounds N           Rounds per game (default: 3)
    --seed N             Seed the random source (reproducible games)
    --scale N            Display scale multiplier (1-4, default: 2)
    --fullscreen         Launch in fullscreen mode
    --mute               Disable sound effects
    --debug              Debug logging and overlay

Controls:
    1 / 2 / 3 or click   Pick a flag
    Enter / Space / click  Dismiss the alert (Continue / Restart)
    ESC                  Quit
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Optional

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from flagquiz.config import (
    COLOR_BACKGROUND_BOTTOM,
    COLOR_BACKGROUND_TOP,
    COLOR_DIM_ALPHA,
    COLOR_PANEL,
    COLOR_TEXT,
    COLOR_TEXT_DARK,
    COLOR_TITLE,
    FLAG_HEIGHT,
    FLAG_SPACING,
    FLAG_TOP,
    FLAG_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOTAL_ROUNDS,
    UPDATE_RATE,
)
from flagquiz.game import GameState, QuizSession
from flagquiz.models.country import flag_label
from flagquiz.ui.audio import AudioManager, SoundEvent
from flagquiz.ui.text import PROMPT_TEXT, TITLE_TEXT, ScoreDisplay
from flagquiz.utils.input_handler import (
    GameAction,
    InputEvent,
    action_for_click,
    action_for_key,
)
from flagquiz.utils.random_source import SystemRandomSource

logger = logging.getLogger(__name__)


# ── Constants ───────────────────────────────────────────────────────────────

DEFAULT_SCALE: int = 2
MIN_SCALE: int = 1
MAX_SCALE: int = 4

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ── Logging ─────────────────────────────────────────────────────────────────


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")


# ── Argument parsing ───────────────────────────────────────────────────────


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Guess the Flag – pick the flag of the named country",
    )
    parser.add_argument(
        "--rounds", type=_positive_int, default=TOTAL_ROUNDS,
        metavar="N",
        help=f"Rounds per game (default: {TOTAL_ROUNDS})",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        metavar="N",
        help="Seed the random source for a reproducible game",
    )
    parser.add_argument(
        "--scale", type=int, default=DEFAULT_SCALE,
        choices=range(MIN_SCALE, MAX_SCALE + 1),
        metavar="N",
        help=f"Display scale multiplier ({MIN_SCALE}-{MAX_SCALE}, default: {DEFAULT_SCALE})",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    parser.add_argument(
        "--mute", action="store_true",
        help="Disable sound effects",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug logging and overlay (shows the answer)",
    )
    return parser.parse_args(argv)


# ── Layout ──────────────────────────────────────────────────────────────────


def flag_rects(count: int = 3) -> list[tuple[int, int, int, int]]:
    """Screen rectangles ``(x, y, w, h)`` of the flags, top to bottom."""
    x = (SCREEN_WIDTH - FLAG_WIDTH) // 2
    return [
        (x, FLAG_TOP + i * (FLAG_HEIGHT + FLAG_SPACING), FLAG_WIDTH, FLAG_HEIGHT)
        for i in range(count)
    ]


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class GuessTheFlagApp:
    """Top-level application wrapper.

    Owns the pygame display, the quiz session and the main loop.
    """

    scale: int = DEFAULT_SCALE
    fullscreen: bool = False
    debug: bool = False
    rounds: int = TOTAL_ROUNDS
    seed: Optional[int] = None
    mute: bool = False

    # Runtime state (initialized in ``init``)
    screen: Any = field(default=None, repr=False)
    canvas: Any = field(default=None, repr=False)
    clock: Any = field(default=None, repr=False)
    flags: Any = field(default=None, repr=False)
    fonts: dict[str, Any] = field(default_factory=dict, repr=False)
    session: QuizSession = field(init=False)
    hud: ScoreDisplay = field(init=False)
    running: bool = False

    audio: AudioManager = field(default_factory=AudioManager)

    def __post_init__(self) -> None:
        self.session = QuizSession(
            total_rounds=self.rounds,
            rng=SystemRandomSource(self.seed),
        )
        self.hud = ScoreDisplay(self.session)
        self.audio.enabled = not self.mute

    # ── Initialisation ──────────────────────────────────────────────────

    def init(self) -> bool:
        """Initialise pygame and create the display surface.

        Returns True on success, False on failure.
        """
        if pygame is None:
            logger.error("pygame is required. Install with: pip install pygame")
            return False

        try:
            pygame.init()
        except pygame.error as exc:
            logger.error("Error initialising pygame: %s", exc)
            return False

        flags = pygame.FULLSCREEN if self.fullscreen else 0
        size = (SCREEN_WIDTH * self.scale, SCREEN_HEIGHT * self.scale)
        try:
            self.screen = pygame.display.set_mode(size, flags)
        except pygame.error as exc:
            logger.error("Error creating display: %s", exc)
            pygame.quit()
            return False

        from flagquiz.ui.flags import FlagRenderer

        pygame.display.set_caption(TITLE_TEXT)
        self.canvas = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()
        self.flags = FlagRenderer()
        self.fonts = {
            "title": pygame.font.Font(None, 30),
            "country": pygame.font.Font(None, 28),
            "body": pygame.font.Font(None, 18),
            "hud": pygame.font.Font(None, 22),
        }
        self.audio.init()

        self.running = True
        logger.info(
            "Started: %d rounds, scale %d%s",
            self.session.total_rounds, self.scale,
            ", seed %d" % self.seed if self.seed is not None else "",
        )
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Process input and redraw until the player quits."""
        if not self.running:
            return

        try:
            while self.running:
                self._handle_events()
                self._render()
                self.clock.tick(UPDATE_RATE)
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self.shutdown()

    # ── Event handling ──────────────────────────────────────────────────

    def _handle_events(self) -> None:
        """Translate pygame events into game actions."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                action = InputEvent(GameAction.QUIT)
            elif event.type == pygame.KEYDOWN:
                action = action_for_key(event.unicode)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                action = action_for_click(
                    (mx // self.scale, my // self.scale),
                    flag_rects(),
                    self.session.state is GameState.AWAITING_ANSWER,
                )
            else:
                continue
            self.dispatch(action)

    def dispatch(self, event: InputEvent) -> None:
        """Apply one player action to the session.

        Actions that make no sense in the current state are ignored.
        """
        state = self.session.state

        if event.action is GameAction.QUIT:
            self.running = False

        elif event.action is GameAction.SELECT_FLAG:
            if state is GameState.AWAITING_ANSWER:
                result = self.session.submit_answer(event.flag_index)
                self.audio.play(
                    SoundEvent.CORRECT if result.is_correct else SoundEvent.WRONG
                )

        elif event.action is GameAction.CONFIRM:
            if state is GameState.SHOWING_RESULT:
                if self.session.advance() is GameState.GAME_OVER:
                    self.audio.play(SoundEvent.GAME_OVER)
            elif state is GameState.GAME_OVER:
                self.session.restart()

    # ── Rendering ───────────────────────────────────────────────────────

    def _render(self) -> None:
        """Draw the canvas and scale it onto the window."""
        if self.screen is None:
            return

        self._render_background()
        self._render_question()
        self._render_flags()
        self._render_hud()

        alert = self.hud.alert()
        if alert is not None:
            self._render_alert(*alert)

        if self.debug:
            self._render_debug()

        pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
        pygame.display.flip()

    def _blit_centered(self, font_key: str, text: str, color, y: int) -> int:
        """Draw *text* horizontally centred at *y*; return the next free y."""
        surf = self.fonts[font_key].render(text, True, color)
        self.canvas.blit(surf, (SCREEN_WIDTH // 2 - surf.get_width() // 2, y))
        return y + surf.get_height()

    def _render_background(self) -> None:
        split = int(SCREEN_HEIGHT * 0.3)
        self.canvas.fill(COLOR_BACKGROUND_TOP, pygame.Rect(0, 0, SCREEN_WIDTH, split))
        self.canvas.fill(
            COLOR_BACKGROUND_BOTTOM,
            pygame.Rect(0, split, SCREEN_WIDTH, SCREEN_HEIGHT - split),
        )
        self._blit_centered("title", TITLE_TEXT, COLOR_TEXT, 14)

    def _render_question(self) -> None:
        rects = flag_rects()
        top = 50
        bottom = rects[-1][1] + FLAG_HEIGHT + 14
        pygame.draw.rect(
            self.canvas, COLOR_PANEL,
            pygame.Rect(8, top, SCREEN_WIDTH - 16, bottom - top),
            border_radius=20,
        )
        y = self._blit_centered("body", PROMPT_TEXT, COLOR_TEXT_DARK, top + 10)
        self._blit_centered("country", self.session.target_country, COLOR_TITLE, y + 4)

    def _render_flags(self) -> None:
        selected = self.session.selected
        for i, (country, (x, y, _, _)) in enumerate(
            zip(self.session.displayed_countries, flag_rects())
        ):
            surface = self.flags.surface_for(country)
            if selected is not None and i != selected:
                surface = surface.copy()
                surface.set_alpha(COLOR_DIM_ALPHA)
            self.canvas.blit(surface, (x, y))

    def _render_hud(self) -> None:
        y = SCREEN_HEIGHT - 50
        y = self._blit_centered("hud", self.hud.format_score(), COLOR_TEXT, y)
        self._blit_centered("body", self.hud.format_round(), COLOR_TEXT, y + 4)

    def _render_alert(self, title: str, message: str, button: str) -> None:
        """Draw a modal box with a title, message and button hint."""
        shade = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 120))
        self.canvas.blit(shade, (0, 0))

        box = pygame.Rect(16, SCREEN_HEIGHT // 2 - 50, SCREEN_WIDTH - 32, 100)
        pygame.draw.rect(self.canvas, COLOR_PANEL, box, border_radius=12)
        y = self._blit_centered("hud", title, COLOR_TEXT_DARK, box.y + 12)
        y = self._blit_centered("body", message, COLOR_TEXT_DARK, y + 8)
        self._blit_centered("hud", button, COLOR_TITLE, y + 14)

    def _render_debug(self) -> None:
        """Draw the answer index and the flag descriptions."""
        font = self.fonts["body"]
        lines = [f"answer: {self.session.correct_answer}"] + [
            f"{i + 1}: {flag_label(name)[:28]}"
            for i, name in enumerate(self.session.displayed_countries)
        ]
        y = 2
        for line in lines:
            surface = font.render(line, True, (0, 255, 0))
            self.canvas.blit(surface, (2, y))
            y += 12

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean up and quit pygame."""
        self.running = False
        self.audio.shutdown()
        if pygame is not None:
            pygame.quit()


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    setup_logging(args.debug)

    app = GuessTheFlagApp(
        scale=args.scale,
        fullscreen=args.fullscreen,
        debug=args.debug,
        rounds=args.rounds,
        seed=args.seed,
        mute=args.mute,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
