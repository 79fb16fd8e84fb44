"""Output sink selection for rendered images."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from .errors import PixieError

STDOUT = "-"


@contextmanager
def open_output(filename: str) -> Iterator[BinaryIO]:
    """Yield a binary sink for ``filename``; ``-`` means standard output."""
    if filename == STDOUT:
        sink = sys.stdout.buffer
        try:
            yield sink
        finally:
            sink.flush()
        return

    try:
        fh = open(filename, "wb")
    except OSError as exc:
        raise PixieError.from_os_error(exc).with_context(f'cannot open "{filename}"') from exc
    with fh:
        yield fh


def is_seekable(sink: BinaryIO) -> bool:
    try:
        return bool(sink.seekable())
    except (AttributeError, OSError, ValueError):
        return False
