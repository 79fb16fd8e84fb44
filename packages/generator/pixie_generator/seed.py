"""Word digest exposed as an endless stream of booleans."""

from __future__ import annotations

import hashlib


class Seed:
    """Cyclic bitstream over a SHA-256 digest.

    Each draw reads the byte under the cursor and yields ``True`` when it is
    even, then advances. The cursor wraps to the first byte after the last
    one, so the stream never ends. A fresh stream is obtained by building a
    new Seed, not by rewinding this one.
    """

    def __init__(self, data: bytes, position: int = 0) -> None:
        if not data:
            raise ValueError("seed data must not be empty")
        if not 0 <= position < len(data):
            raise ValueError("seed position out of range")
        self._data = bytes(data)
        self._position = position

    @classmethod
    def from_word(cls, word: str) -> "Seed":
        return cls(hashlib.sha256(word.encode("utf-8")).digest())

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def position(self) -> int:
        return self._position

    def __iter__(self) -> "Seed":
        return self

    def __next__(self) -> bool:
        value = self._data[self._position]
        self._position = (self._position + 1) % len(self._data)
        return value % 2 == 0

    def __repr__(self) -> str:
        return f"Seed(data={self._data.hex()}, position={self._position})"
