"""Generator package: word digests, mirrored canvases and color selection."""

from .canvas import COLOR_SAMPLES, Canvas, choose_color
from .models import Color, Point
from .seed import Seed

__all__ = [
    "COLOR_SAMPLES",
    "Canvas",
    "Color",
    "Point",
    "Seed",
    "choose_color",
]
