"""Shared types for aco-tool: ColorEntry, Palette, Writer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# Photoshop colorspace tags. Only RGB is decoded; the rest are named for diagnostics.
COLORSPACE_RGB = 0
COLORSPACE_NAMES = {
    0: 'RGB',
    1: 'HSB',
    2: 'CMYK',
    7: 'Lab',
    8: 'Grayscale',
    9: 'Wide CMYK',
}


@dataclass(frozen=True)
class ColorEntry:
    """One RGB swatch decoded from an ACO record."""

    r: int
    g: int
    b: int
    name: str | None = None  # None for v1 documents and unnamed v2 entries

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'


@dataclass(frozen=True)
class Palette:
    """One decoded ACO document."""

    version: int
    entries: tuple[ColorEntry, ...] = ()
    declared_count: int = 0  # color count from the stream header
    skipped: tuple[int, ...] = ()  # colorspace tags of non-RGB records, in stream order

    def __len__(self) -> int:
        return len(self.entries)


class Writer:
    """A self-registering output format.

    Usage in a writer module:

        writer = Writer(name='gpl', help='GIMP palette text')

        @writer.render
        def render(palette, args):
            ...
    """

    def __init__(self, name: str, help: str = '', binary: bool = False):
        self.name = name
        self.help = help
        self.binary = binary
        self._render_fn: Callable | None = None

    def render(self, fn: Callable) -> Callable:
        """Decorator to register the render function."""
        self._render_fn = fn
        return fn

    def execute(self, palette: Palette, args: Any) -> str | bytes:
        """Render the palette with the writer's render function."""
        if self._render_fn is None:
            raise RuntimeError(f'Writer {self.name} has no render function')
        return self._render_fn(palette, args)


def option(args: Any, name: str, default: Any) -> Any:
    """Read an optional CLI value from ``args``, using ``default`` only when it is unset."""
    value = getattr(args, name, None)
    return default if value is None else value
