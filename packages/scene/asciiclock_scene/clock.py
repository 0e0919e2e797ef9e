"""Clock face actor and hand angle math."""

from __future__ import annotations

import math
from datetime import datetime, timezone, tzinfo
from typing import TYPE_CHECKING

from .actors import Actor, Line
from .models import ClockGeometry, ClockTime, HandAngles

if TYPE_CHECKING:
    from asciiclock_renderer import AsciiRenderer


def clock_time(timestamp: float, tz: tzinfo | None = timezone.utc) -> ClockTime:
    """Wall clock reading for ``timestamp``; ``tz=None`` uses host local time."""
    moment = datetime.fromtimestamp(timestamp, tz=tz)
    hour = moment.hour % 12 or 12
    return ClockTime(hour=hour, minute=moment.minute, second=moment.second)


def hand_angles(t: ClockTime) -> HandAngles:
    """Hand angles in degrees, 0 up, clockwise.

    Each slower hand only takes a fractional correction from the next faster
    hand: the hour hand ignores seconds.
    """
    return HandAngles(
        hour=30 * ((t.hour % 12) + t.minute / 60),
        minute=6 * (t.minute + t.second / 60),
        second=6 * t.second,
    )


class ClockFace(Actor):
    """Draws a circle around the grid center and spawns the three hands."""

    def __init__(
        self,
        timestamp: float,
        tz: tzinfo | None = timezone.utc,
        geometry: ClockGeometry | None = None,
    ) -> None:
        super().__init__()
        self.timestamp = timestamp
        self.tz = tz
        self.geometry = geometry or ClockGeometry()

    def center(self, size: tuple[int, int]) -> tuple[int, int]:
        width, height = size
        return math.ceil(width / 2), math.ceil(height / 2)

    def draw(self, renderer: "AsciiRenderer") -> None:
        mid_x, mid_y = self.center(renderer.size())
        self.x, self.y = mid_x, mid_y

        radius = self.geometry.radius
        step = self.geometry.angle_step
        angle = 0.0
        while angle < 2 * math.pi:
            renderer.move_to(mid_x + radius * math.cos(angle), mid_y + radius * math.sin(angle), absolute=True)
            renderer.plot_pixel(1.0)
            angle += step

        angles = hand_angles(clock_time(self.timestamp, self.tz))
        hands = (
            (angles.hour, self.geometry.hour_hand),
            (angles.minute, self.geometry.minute_hand),
            (angles.second, self.geometry.second_hand),
        )
        # Later children draw on top: second hand last.
        for angle_deg, style in hands:
            self.add_child(Line(mid_x, mid_y, angle=angle_deg, length=style.length, brightness=style.brightness))
