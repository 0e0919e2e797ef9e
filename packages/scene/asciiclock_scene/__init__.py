"""Scene graph actors for the ASCII clock."""

from .actors import Actor, Container, Line, World, direction
from .clock import ClockFace, clock_time, hand_angles
from .models import ClockGeometry, ClockTime, HandAngles, HandStyle

__all__ = [
    "Actor",
    "ClockFace",
    "ClockGeometry",
    "ClockTime",
    "Container",
    "HandAngles",
    "HandStyle",
    "Line",
    "World",
    "clock_time",
    "direction",
    "hand_angles",
]
