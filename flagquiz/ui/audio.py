"""
Audio manager for Guess the Flag.

Provides sound-effect loading and playback, gracefully degrading when
pygame.mixer is unavailable or sound files are missing.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

logger = logging.getLogger(__name__)


class SoundEvent(Enum):
    """Identifiers for game sound effects."""
    CORRECT = auto()
    WRONG = auto()
    GAME_OVER = auto()


# Map each event to its .wav file name inside data/sfx/
_SOUND_FILES: dict[SoundEvent, str] = {
    SoundEvent.CORRECT: "correct.wav",
    SoundEvent.WRONG: "wrong.wav",
    SoundEvent.GAME_OVER: "game_over.wav",
}


@dataclass
class AudioManager:
    """Loads and plays sound effects.

    Falls back to silent operation when mixer is unavailable or
    individual sound files are missing.
    """

    sfx_dir: str = os.path.join("data", "sfx")
    enabled: bool = True

    # Internal state
    _initialized: bool = field(default=False, repr=False)
    _sounds: dict[SoundEvent, Any] = field(default_factory=dict, repr=False)

    def init(self) -> bool:
        """Initialise the mixer and load available sound files.

        Returns True if the mixer was initialised successfully.

        The default SDL audio driver is not always detected inside a
        virtual environment, so a few common drivers are tried in turn.
        """
        if not self.enabled:
            return False

        try:
            import pygame.mixer
        except ImportError:
            logger.info("pygame.mixer not available, audio disabled")
            return False

        if not pygame.mixer.get_init():
            original_driver = os.environ.get("SDL_AUDIODRIVER")
            initialized = False
            for driver in [None, "pulseaudio", "alsa", "dsp", "dummy"]:
                try:
                    if driver is not None:
                        os.environ["SDL_AUDIODRIVER"] = driver
                    pygame.mixer.init()
                    initialized = True
                    break
                except pygame.error as exc:
                    logger.debug("Audio driver %s failed: %s", driver, exc)
            if not initialized:
                # Leave the environment as we found it
                if original_driver is not None:
                    os.environ["SDL_AUDIODRIVER"] = original_driver
                elif "SDL_AUDIODRIVER" in os.environ:
                    del os.environ["SDL_AUDIODRIVER"]
                logger.info("No audio driver available, audio disabled")
                return False

        self._initialized = True
        self._load_sounds()
        return True

    def _load_sounds(self) -> None:
        """Attempt to load each configured sound file."""
        if not self._initialized:
            return
        import pygame.mixer

        for event, filename in _SOUND_FILES.items():
            path = os.path.join(self.sfx_dir, filename)
            if not os.path.isfile(path):
                continue
            try:
                self._sounds[event] = pygame.mixer.Sound(path)
            except pygame.error as exc:
                logger.warning("Could not load sound %s: %s", path, exc)

    def play(self, event: SoundEvent) -> None:
        """Play the sound associated with *event*, if available."""
        if not self._initialized or not self.enabled:
            return
        sound = self._sounds.get(event)
        if sound is not None:
            sound.play()

    def shutdown(self) -> None:
        """Release mixer resources."""
        if self._initialized:
            import pygame.mixer
            pygame.mixer.quit()
            self._initialized = False
            self._sounds.clear()
