"""Current drawing position for a render pass."""

from __future__ import annotations


class Cursor:
    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0

    def move_absolute(self, dx: float, dy: float) -> None:
        self.x = 0.0
        self.y = 0.0
        self.move_relative(dx, dy)

    def move_relative(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def position(self) -> tuple[float, float]:
        return self.x, self.y
