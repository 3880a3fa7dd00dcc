"""Overlay color assignment from a fixed hue palette."""

from __future__ import annotations

import random

PALETTE_HUES: tuple[int, ...] = (152, 189, 28, 210, 340, 260)
SATURATION = 70
LIGHTNESS = 45


def hsl(hue: int) -> str:
    return f"hsl({hue} {SATURATION}% {LIGHTNESS}%)"


class ColorPalette:
    """Picks overlay colors pseudo-randomly from ``PALETTE_HUES``.

    Pass a seed to get a reproducible sequence. Colors are not required to
    be unique across layers.
    """

    def __init__(self, seed: int | None = None, hues: tuple[int, ...] = PALETTE_HUES) -> None:
        if not hues:
            raise ValueError("Color palette needs at least one hue")
        self._hues = tuple(hues)
        self._rng = random.Random(seed)

    @property
    def colors(self) -> list[str]:
        return [hsl(h) for h in self._hues]

    def next_color(self) -> str:
        return hsl(self._rng.choice(self._hues))
