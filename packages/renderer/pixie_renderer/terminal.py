"""ANSI block-art renderer for terminals."""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import TextIO

from pixie_generator import Canvas, Color

ANSI_CODES = MappingProxyType(
    {
        Color.RED: 160,
        Color.GREEN: 40,
        Color.BLUE: 33,
        Color.PURPLE: 140,
        Color.PINK: 199,
        Color.BROWN: 130,
        Color.YELLOW: 226,
        Color.BLACK: 232,
    }
)

FILLED = "██"
BLANK = "  "


class TerminalRenderer:
    """Draws a canvas as colored two-column blocks inside a box border."""

    @staticmethod
    def ansi_color(color: Color) -> int:
        return ANSI_CODES[color]

    def render(self, canvas: Canvas, stream: TextIO) -> None:
        code = self.ansi_color(canvas.color)
        start = f"\x1b[38;5;{code};48;5;15m"
        end = "\x1b[0m"
        line = "──" * canvas.size

        stream.write(f"{start}┌─{line}─┐{end}\n")
        stream.write(f"{start}│ ")

        current_row = 0
        for point, shown in canvas:
            if point.y > current_row:
                current_row = point.y
                stream.write(f" │{end}\n")
                stream.write(f"{start}│ ")
            stream.write(FILLED if shown else BLANK)

        stream.write(f" │{end}\n")
        stream.write(f"{start}└─{line}─┘{end}\n")

    def render_text(self, canvas: Canvas) -> str:
        buf = StringIO()
        self.render(canvas, buf)
        return buf.getvalue()
