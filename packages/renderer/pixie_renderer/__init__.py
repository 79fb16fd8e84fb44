"""Renderer package for terminal block art and PNG images."""

from .png import RGB_COLORS, PngRenderer
from .terminal import ANSI_CODES, TerminalRenderer

__all__ = [
    "ANSI_CODES",
    "PngRenderer",
    "RGB_COLORS",
    "TerminalRenderer",
]
