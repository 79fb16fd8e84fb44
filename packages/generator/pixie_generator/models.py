"""Typed models shared by the generator and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    # Definition order is the selection order used by choose_color.
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    BROWN = "brown"
    YELLOW = "yellow"
    BLACK = "black"


@dataclass(frozen=True)
class Point:
    x: int
    y: int
