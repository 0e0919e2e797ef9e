"""Request boundary: timestamp in, rendered clock text out."""

from __future__ import annotations

import math
import re
import time
from dataclasses import dataclass
from datetime import timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from asciiclock_renderer import AsciiRenderer, ClipPolicy, Palette
from asciiclock_scene import ClockFace, ClockGeometry, World

from .config import AppConfig
from .logging_setup import get_logger


_NUMERIC_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

logger = get_logger("dispatch")


@dataclass(frozen=True)
class ClockFrame:
    timestamp: int
    width: int
    height: int
    text: str


def coerce_timestamp(raw: Any, now: float | None = None) -> int:
    """Best-effort integer seconds from a query value.

    Missing values mean "now". Strings are read up to the first non-numeric
    character, and anything without a numeric prefix becomes 0.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return int(time.time() if now is None else now)
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _NUMERIC_PREFIX_RE.match(str(raw))
        if not match:
            return 0
        value = float(match.group(1))
    if not math.isfinite(value):
        return 0
    return int(value)


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Map a config name to a tzinfo; ``None`` stands for host local time."""
    if not name or name.upper() == "UTC":
        return timezone.utc
    if name.lower() == "local":
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {name}") from exc


def build_scene(timestamp: float, tz: tzinfo | None = timezone.utc, geometry: ClockGeometry | None = None) -> World:
    world = World()
    world.add_child(ClockFace(timestamp, tz=tz, geometry=geometry))
    return world


def render_scene(
    timestamp: float,
    width: int = 60,
    height: int = 60,
    tz: tzinfo | None = timezone.utc,
    geometry: ClockGeometry | None = None,
    clip: ClipPolicy = ClipPolicy.DISCARD,
    palette: Palette | None = None,
) -> AsciiRenderer:
    """Run one render pass and hand back the renderer holding the buffer."""
    renderer = AsciiRenderer(width, height, palette=palette, clip=clip)
    renderer.render(build_scene(timestamp, tz=tz, geometry=geometry))
    return renderer


def render_clock(
    timestamp: float,
    width: int = 60,
    height: int = 60,
    tz: tzinfo | None = timezone.utc,
    geometry: ClockGeometry | None = None,
    clip: ClipPolicy = ClipPolicy.DISCARD,
    palette: Palette | None = None,
) -> ClockFrame:
    start = time.perf_counter()
    renderer = render_scene(timestamp, width, height, tz=tz, geometry=geometry, clip=clip, palette=palette)
    text = renderer.to_text()
    duration_ms = (time.perf_counter() - start) * 1000.0
    logger.debug(
        f"rendered clock ts={timestamp} size={width}x{height}",
        extra={"event": "clock_rendered", "duration_ms": round(duration_ms, 3)},
    )
    return ClockFrame(timestamp=int(timestamp), width=width, height=height, text=text)


def geometry_from_config(cfg: AppConfig) -> ClockGeometry:
    return ClockGeometry(radius=cfg.clock.radius, angle_step=cfg.clock.angle_step)


def render_from_config(cfg: AppConfig, raw_time: Any = None, now: float | None = None) -> ClockFrame:
    return render_clock(
        coerce_timestamp(raw_time, now=now),
        width=cfg.grid.width,
        height=cfg.grid.height,
        tz=resolve_timezone(cfg.clock.timezone),
        geometry=geometry_from_config(cfg),
        clip=ClipPolicy(cfg.render.clip),
    )
