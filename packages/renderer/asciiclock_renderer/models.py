"""Typed renderer models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from .renderer import AsciiRenderer


class Drawable(Protocol):
    @property
    def children(self) -> Sequence["Drawable"]: ...

    def draw(self, renderer: "AsciiRenderer") -> None: ...


class ChildContainer(Protocol):
    @property
    def children(self) -> Sequence[Drawable]: ...
