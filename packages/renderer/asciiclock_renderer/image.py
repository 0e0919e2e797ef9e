"""Grayscale PNG previews of a raster buffer."""

from __future__ import annotations

import base64
from io import BytesIO

import numpy as np
from PIL import Image

from .raster import RasterBuffer


def buffer_to_image(buffer: RasterBuffer, scale: int = 4) -> Image.Image:
    if scale < 1:
        raise ValueError("Preview scale must be at least 1")
    levels = np.rint(buffer.as_array() * 255.0).astype(np.uint8)
    image = Image.fromarray(levels).convert("L")
    # Width is doubled to match the doubled glyphs of the text output.
    return image.resize((buffer.width * 2 * scale, buffer.height * scale), Image.Resampling.NEAREST)


def preview_data_url(buffer: RasterBuffer, scale: int = 4) -> str:
    image = buffer_to_image(buffer, scale=scale)
    buf = BytesIO()
    image.save(buf, format="PNG")
    b64 = base64.b64encode(buf.getvalue()).decode("ascii")
    return f"data:image/png;base64,{b64}"
