"""
Flag artwork model for Guess the Flag.

Each country maps to a simple stripe layout used to draw its flag when
no image file is available.  Flags with emblems (UK, US, Spain) are
approximated by their dominant stripes plus an optional canton.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (206, 17, 38)
BLUE: Color = (0, 85, 164)
NAVY: Color = (1, 33, 105)
GREEN: Color = (0, 135, 81)
GOLD: Color = (255, 206, 0)
ORANGE: Color = (255, 136, 62)
SKY: Color = (0, 114, 206)


class Orientation(Enum):
    HORIZONTAL = auto()  # stripes stacked top to bottom
    VERTICAL = auto()    # stripes laid out left to right


@dataclass(frozen=True)
class Canton:
    """Rectangle in the top-left corner, as fractions of the flag size."""
    color: Color
    width: float
    height: float


@dataclass(frozen=True)
class FlagDesign:
    """Stripe layout for one flag.

    *weights* gives the relative size of each stripe; equal stripes
    when omitted.
    """

    orientation: Orientation
    colors: tuple[Color, ...]
    weights: tuple[int, ...] = ()
    canton: Optional[Canton] = None

    def __post_init__(self) -> None:
        if not self.colors:
            raise ValueError("flag design needs at least one stripe")
        if self.weights and len(self.weights) != len(self.colors):
            raise ValueError("one weight per stripe is required")

    def stripe_spans(self, length: int) -> list[tuple[int, int]]:
        """Split *length* pixels into ``(offset, size)`` per stripe.

        The last stripe absorbs rounding so the spans cover exactly
        *length* pixels.
        """
        weights = self.weights or (1,) * len(self.colors)
        total = sum(weights)
        spans: list[tuple[int, int]] = []
        offset = 0
        for i, weight in enumerate(weights):
            if i == len(weights) - 1:
                size = length - offset
            else:
                size = length * weight // total
            spans.append((offset, size))
            offset += size
        return spans


FLAG_DESIGNS: dict[str, FlagDesign] = {
    "Estonia": FlagDesign(Orientation.HORIZONTAL, (SKY, BLACK, WHITE)),
    "France": FlagDesign(Orientation.VERTICAL, (BLUE, WHITE, RED)),
    "Germany": FlagDesign(Orientation.HORIZONTAL, (BLACK, RED, GOLD)),
    "Ireland": FlagDesign(Orientation.VERTICAL, (GREEN, WHITE, ORANGE)),
    "Italy": FlagDesign(Orientation.VERTICAL, (GREEN, WHITE, RED)),
    "Nigeria": FlagDesign(Orientation.VERTICAL, (GREEN, WHITE, GREEN)),
    "Poland": FlagDesign(Orientation.HORIZONTAL, (WHITE, RED)),
    "Russia": FlagDesign(Orientation.HORIZONTAL, (WHITE, BLUE, RED)),
    "Spain": FlagDesign(Orientation.HORIZONTAL, (RED, GOLD, RED), weights=(1, 2, 1)),
    "UK": FlagDesign(
        Orientation.HORIZONTAL,
        (NAVY, WHITE, RED, WHITE, NAVY),
        weights=(4, 1, 2, 1, 4),
    ),
    "US": FlagDesign(
        Orientation.HORIZONTAL,
        (RED, WHITE) * 6 + (RED,),
        canton=Canton(NAVY, width=0.4, height=7 / 13),
    ),
}

# Grey placeholder for names without a design
UNKNOWN_DESIGN = FlagDesign(Orientation.HORIZONTAL, ((128, 128, 128),))


def design_for(country: str) -> FlagDesign:
    """Return the stripe layout for *country*."""
    return FLAG_DESIGNS.get(country, UNKNOWN_DESIGN)
