"""Typed scene models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClockTime:
    hour: int
    minute: int
    second: int


@dataclass(frozen=True)
class HandAngles:
    hour: float
    minute: float
    second: float


@dataclass(frozen=True)
class HandStyle:
    length: int
    brightness: float


@dataclass(frozen=True)
class ClockGeometry:
    radius: float = 22
    angle_step: float = 0.01
    hour_hand: HandStyle = field(default_factory=lambda: HandStyle(length=10, brightness=0.75))
    minute_hand: HandStyle = field(default_factory=lambda: HandStyle(length=15, brightness=0.5))
    second_hand: HandStyle = field(default_factory=lambda: HandStyle(length=20, brightness=0.25))
