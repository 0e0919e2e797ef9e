"""Core services: settings, logging, dispatch, diagnostics, and performance."""

from .config import AppConfig, load_config, save_config
from .diagnostics import build_doctor_payload
from .dispatch import ClockFrame, build_scene, coerce_timestamp, render_clock, render_from_config, resolve_timezone
from .performance import BudgetStatus, PerformanceController, PerformanceTargets

__all__ = [
    "AppConfig",
    "BudgetStatus",
    "ClockFrame",
    "PerformanceController",
    "PerformanceTargets",
    "build_doctor_payload",
    "build_scene",
    "coerce_timestamp",
    "load_config",
    "render_clock",
    "render_from_config",
    "resolve_timezone",
    "save_config",
]
