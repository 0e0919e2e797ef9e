"""Scene traversal and the drawing primitives exposed to actors."""

from __future__ import annotations

from .cursor import Cursor
from .models import ChildContainer, Drawable
from .palette import DEFAULT_PALETTE, Palette
from .raster import ClipPolicy, RasterBuffer


class AsciiRenderer:
    """Owns one buffer and one cursor for a single render pass.

    Actors only reach the buffer through ``move_to`` and ``plot_pixel``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        palette: Palette | None = None,
        clip: ClipPolicy = ClipPolicy.DISCARD,
    ) -> None:
        self._buffer = RasterBuffer(width, height, clip=clip)
        self._cursor = Cursor()
        self.palette = palette or DEFAULT_PALETTE

    @property
    def buffer(self) -> RasterBuffer:
        return self._buffer

    @property
    def cursor(self) -> tuple[float, float]:
        return self._cursor.position()

    def size(self) -> tuple[int, int]:
        return self._buffer.size()

    def move_to(self, dx: float, dy: float, absolute: bool = False) -> None:
        if absolute:
            self._cursor.move_absolute(dx, dy)
        else:
            self._cursor.move_relative(dx, dy)

    def plot_pixel(self, brightness: float) -> bool:
        x, y = self._cursor.position()
        return self._buffer.plot(x, y, brightness)

    def render(self, container: ChildContainer) -> None:
        for actor in container.children:
            self.process_actor(actor)

    def process_actor(self, actor: Drawable) -> None:
        actor.draw(self)
        # Read children only after draw: actors may add children while drawing.
        for child in actor.children:
            self.process_actor(child)

    def to_text(self) -> str:
        return self._buffer.serialize(self.palette)
