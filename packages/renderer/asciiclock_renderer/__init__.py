"""Renderer package for ASCII clock rasterization."""

from .cursor import Cursor
from .image import buffer_to_image, preview_data_url
from .palette import DEFAULT_GLYPHS, DEFAULT_PALETTE, Palette
from .raster import ClipPolicy, RasterBuffer, round_half_away
from .renderer import AsciiRenderer

__all__ = [
    "AsciiRenderer",
    "ClipPolicy",
    "Cursor",
    "DEFAULT_GLYPHS",
    "DEFAULT_PALETTE",
    "Palette",
    "RasterBuffer",
    "buffer_to_image",
    "preview_data_url",
    "round_half_away",
]
