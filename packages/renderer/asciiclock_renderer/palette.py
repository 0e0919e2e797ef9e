"""Brightness to glyph mapping."""

from __future__ import annotations

import math

DEFAULT_GLYPHS = (
    " .`-_':,;^=+/\"|)\\<>)iv%xclrs{*}I?!][1taeo7zjLunT#JCwfy325Fp6mqSghVd4EgXPGZbYkOA&8U$@KHDBWNMR0Q"
)


class Palette:
    """Ordered glyph ramp, darkest first."""

    def __init__(self, glyphs: str = DEFAULT_GLYPHS) -> None:
        if len(glyphs) < 2:
            raise ValueError("Palette needs at least two glyphs")
        self.glyphs = glyphs

    def __len__(self) -> int:
        return len(self.glyphs)

    def index_for(self, brightness: float) -> int:
        value = min(1.0, max(0.0, float(brightness)))
        idx = math.ceil((len(self.glyphs) - 1) * value)
        return min(len(self.glyphs) - 1, max(0, idx))

    def char_for(self, brightness: float) -> str:
        return self.glyphs[self.index_for(brightness)]


DEFAULT_PALETTE = Palette()
