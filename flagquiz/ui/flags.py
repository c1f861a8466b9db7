"""
Flag rendering for Guess the Flag.

Produces one pygame surface per country, either from an image file in
``data/flags/`` or drawn from the country's stripe layout.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Optional

import pygame

from flagquiz.config import FLAG_HEIGHT, FLAG_WIDTH, FLAGS_DIR
from flagquiz.models.flag import FlagDesign, Orientation, design_for

logger = logging.getLogger(__name__)


def draw_design(design: FlagDesign, width: int, height: int) -> pygame.Surface:
    """Draw *design* onto a new ``width`` x ``height`` surface."""
    surface = pygame.Surface((width, height))
    if design.orientation is Orientation.HORIZONTAL:
        for color, (offset, size) in zip(design.colors, design.stripe_spans(height)):
            surface.fill(color, pygame.Rect(0, offset, width, size))
    else:
        for color, (offset, size) in zip(design.colors, design.stripe_spans(width)):
            surface.fill(color, pygame.Rect(offset, 0, size, height))
    if design.canton is not None:
        canton = pygame.Rect(
            0, 0,
            round(width * design.canton.width),
            round(height * design.canton.height),
        )
        surface.fill(design.canton.color, canton)
    return surface


@dataclass
class FlagRenderer:
    """Caches a scaled surface per country."""

    flags_dir: str = FLAGS_DIR
    width: int = FLAG_WIDTH
    height: int = FLAG_HEIGHT

    _cache: dict[str, Any] = field(default_factory=dict, repr=False)

    def surface_for(self, country: str) -> pygame.Surface:
        surface = self._cache.get(country)
        if surface is None:
            surface = self._load(country)
            if surface is None:
                surface = draw_design(design_for(country), self.width, self.height)
            self._cache[country] = surface
        return surface

    def _load(self, country: str) -> Optional[pygame.Surface]:
        path = os.path.join(self.flags_dir, f"{country}.png")
        if not os.path.isfile(path):
            return None
        try:
            image = pygame.image.load(path)
        except pygame.error as exc:
            logger.warning("Could not load flag image %s: %s", path, exc)
            return None
        return pygame.transform.scale(image, (self.width, self.height))

    def clear(self) -> None:
        self._cache.clear()
