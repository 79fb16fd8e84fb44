"""Mirrored square grid built from a seed bitstream."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterator

from .models import Color, Point
from .seed import Seed

COLOR_SAMPLES_PER_CATEGORY = 10
COLOR_SAMPLES = COLOR_SAMPLES_PER_CATEGORY * len(Color)

_COLOR_ORDER = tuple(Color)


def choose_color(bits: Iterator[bool]) -> Color:
    """Consume exactly ``COLOR_SAMPLES`` draws and pick a color from their sum."""
    total = sum(1 for bit in islice(bits, COLOR_SAMPLES) if bit)
    return _COLOR_ORDER[total % len(_COLOR_ORDER)]


@dataclass(frozen=True)
class Canvas:
    size: int
    pixels: tuple[bool, ...]
    color: Color

    @classmethod
    def generate(cls, size: int, seed: Seed) -> "Canvas":
        if size < 0:
            raise ValueError("canvas size must not be negative")

        pixels = [False] * (size * size)
        middle = size // 2

        # Grid draws come first; the color reads whatever follows them.
        for index in range(size * size):
            column = index % size
            if column >= middle:
                continue
            shown = next(seed)
            mirrored = size * (index // size) + (size - 1) - column
            pixels[index] = shown
            pixels[mirrored] = shown

        color = choose_color(seed)
        return cls(size=size, pixels=tuple(pixels), color=color)

    @classmethod
    def from_word(cls, word: str, size: int = 10) -> "Canvas":
        return cls.generate(size, Seed.from_word(word))

    def pixel(self, x: int | Point, y: int | None = None) -> bool | None:
        """Return the cell at ``(x, y)`` or ``None`` when it lies outside the grid."""
        if isinstance(x, Point):
            x, y = x.x, x.y
        if y is None:
            raise TypeError("pixel() needs a Point or both coordinates")
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None
        return self.pixels[x + self.size * y]

    def rows(self) -> tuple[tuple[bool, ...], ...]:
        return tuple(self.pixels[y * self.size : (y + 1) * self.size] for y in range(self.size))

    def __iter__(self) -> Iterator[tuple[Point, bool]]:
        for y in range(self.size):
            for x in range(self.size):
                yield Point(x, y), self.pixels[x + self.size * y]
