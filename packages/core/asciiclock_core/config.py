"""Persistent settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1


@dataclass
class GridConfig:
    width: int = 60
    height: int = 60


@dataclass
class ClockConfig:
    radius: float = 22.0
    angle_step: float = 0.01
    timezone: str = "UTC"


@dataclass
class RenderConfig:
    clip: str = "discard"


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8000
    poll_ms: int = 900
    pause_ticks: int = 5


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class PerformanceConfig:
    cpu_percent_max: float = 50.0
    rss_mb_max: float = 200.0
    fps_min: float = 20.0


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    grid: GridConfig = field(default_factory=GridConfig)
    clock: ClockConfig = field(default_factory=ClockConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "AsciiClock"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "AsciiClock"
    return Path.home() / ".config" / "asciiclock"


def config_path() -> Path:
    override = os.environ.get("ASCIICLOCK_CONFIG", "").strip()
    if override:
        return Path(override).expanduser()
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if not hasattr(defaults, k):
            continue
        current = getattr(defaults, k)
        try:
            value = type(current)(v)
        except (TypeError, ValueError):
            # Keep the field default when the stored value has the wrong shape.
            continue
        setattr(defaults, k, value)
    return defaults


def _normalize_grid(cfg: AppConfig) -> None:
    cfg.grid.width = max(1, int(cfg.grid.width))
    cfg.grid.height = max(1, int(cfg.grid.height))


def _normalize_clock(cfg: AppConfig) -> None:
    cfg.clock.radius = float(max(0.0, cfg.clock.radius))
    step = float(cfg.clock.angle_step)
    cfg.clock.angle_step = step if step > 0 else ClockConfig.angle_step
    cfg.clock.timezone = str(cfg.clock.timezone or "UTC")


def _normalize_render(cfg: AppConfig) -> None:
    if cfg.render.clip not in ("discard", "clamp"):
        cfg.render.clip = "discard"


def _normalize_server(cfg: AppConfig) -> None:
    cfg.server.port = max(0, min(65535, int(cfg.server.port)))
    cfg.server.poll_ms = max(200, min(5000, int(cfg.server.poll_ms)))
    cfg.server.pause_ticks = max(0, int(cfg.server.pause_ticks))


def _normalize_performance(cfg: AppConfig) -> None:
    cfg.performance.cpu_percent_max = float(max(1.0, cfg.performance.cpu_percent_max))
    cfg.performance.rss_mb_max = float(max(32.0, cfg.performance.rss_mb_max))
    cfg.performance.fps_min = float(max(1.0, cfg.performance.fps_min))


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    version = _merge(AppConfig, {"config_version": data.get("config_version", CONFIG_VERSION)}).config_version
    cfg = AppConfig(
        config_version=version,
        grid=_merge(GridConfig, data.get("grid", {})),
        clock=_merge(ClockConfig, data.get("clock", {})),
        render=_merge(RenderConfig, data.get("render", {})),
        server=_merge(ServerConfig, data.get("server", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
        performance=_merge(PerformanceConfig, data.get("performance", {})),
    )

    _normalize_grid(cfg)
    _normalize_clock(cfg)
    _normalize_render(cfg)
    _normalize_server(cfg)
    _normalize_performance(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
