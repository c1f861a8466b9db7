"""User interface components."""

from .audio import AudioManager, SoundEvent
from .text import ScoreDisplay

__all__ = [
    "AudioManager",
    "ScoreDisplay",
    "SoundEvent",
]
