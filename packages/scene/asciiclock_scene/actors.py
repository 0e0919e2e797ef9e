"""Scene graph containers and the line actor."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from asciiclock_renderer import AsciiRenderer


class Container:
    """Owns an ordered list of child actors."""

    def __init__(self) -> None:
        self._children: list[Actor] = []

    def add_child(self, child: "Actor") -> None:
        if not isinstance(child, Actor):
            raise TypeError(f"Expected Actor, got {type(child).__name__}")
        self._children.append(child)

    @property
    def children(self) -> list["Actor"]:
        return self._children


class World(Container):
    """Root container for one render pass."""


class Actor(Container, ABC):
    def __init__(self, x: float = 0, y: float = 0) -> None:
        super().__init__()
        self.x = x
        self.y = y

    @abstractmethod
    def draw(self, renderer: "AsciiRenderer") -> None:
        raise NotImplementedError


def direction(angle: float) -> tuple[float, float]:
    """Unit step for ``angle`` degrees, 0 pointing up and increasing clockwise."""
    rad = angle * math.pi / 180
    # Rows grow downwards, so "up" is negative y.
    return math.sin(rad), -math.cos(rad)


class Line(Actor):
    """Straight run of ``length`` unit steps leaving the anchor at ``angle``.

    The anchor cell itself is not plotted.
    """

    def __init__(self, x: float = 0, y: float = 0, angle: float = 0, length: int = 0, brightness: float = 1.0) -> None:
        super().__init__(x, y)
        self.angle = angle
        self.length = int(length)
        self.brightness = brightness

    def draw(self, renderer: "AsciiRenderer") -> None:
        renderer.move_to(self.x, self.y, absolute=True)
        dx, dy = direction(self.angle)
        for _ in range(self.length):
            renderer.move_to(dx, dy)
            renderer.plot_pixel(self.brightness)
