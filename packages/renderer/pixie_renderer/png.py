"""PNG renderer built on Pillow."""

from __future__ import annotations

from io import BytesIO
from types import MappingProxyType
from typing import BinaryIO

from PIL import Image, ImageDraw

from pixie_generator import Canvas, Color

RGB_COLORS = MappingProxyType(
    {
        Color.RED: (222, 48, 48),
        Color.GREEN: (109, 212, 123),
        Color.BLUE: (48, 146, 227),
        Color.PURPLE: (220, 187, 252),
        Color.PINK: (227, 97, 177),
        Color.BROWN: (190, 99, 9),
        Color.YELLOW: (254, 255, 41),
        Color.BLACK: (0, 0, 0),
    }
)

BACKGROUND = (255, 255, 255)
DEFAULT_CELL_PX = 50


class PngRenderer:
    """Paints one square per lit cell on a white image with a half-cell margin."""

    def __init__(self, cell_px: int = DEFAULT_CELL_PX) -> None:
        if cell_px < 2:
            raise ValueError("cell_px must be at least 2")
        self.cell_px = cell_px
        self.margin = cell_px // 2

    @staticmethod
    def rgb_color(color: Color) -> tuple[int, int, int]:
        return RGB_COLORS[color]

    def image_size(self, canvas: Canvas) -> int:
        return self.cell_px * canvas.size + self.margin * 2

    def render_image(self, canvas: Canvas) -> Image.Image:
        side = self.image_size(canvas)
        fill = self.rgb_color(canvas.color)

        image = Image.new("RGB", (side, side), BACKGROUND)
        draw = ImageDraw.Draw(image)
        for point, shown in canvas:
            if not shown:
                continue
            x0 = self.margin + point.x * self.cell_px
            y0 = self.margin + point.y * self.cell_px
            draw.rectangle((x0, y0, x0 + self.cell_px - 1, y0 + self.cell_px - 1), fill=fill)
        return image

    def render(self, canvas: Canvas, fp: BinaryIO) -> None:
        self.render_image(canvas).save(fp, format="PNG")

    def render_bytes(self, canvas: Canvas) -> bytes:
        buf = BytesIO()
        self.render(canvas, buf)
        return buf.getvalue()
