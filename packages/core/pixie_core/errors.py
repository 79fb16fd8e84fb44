"""Error type surfaced to the command line."""

from __future__ import annotations

import errno
from enum import Enum


PERMISSION_DENIED_MESSAGE = "file is not readable/writable"


class ErrorKind(str, Enum):
    IO = "io"
    GENERIC = "generic"


class PixieError(Exception):
    """Fatal error for a single invocation, with optional destination context."""

    def __init__(self, kind: ErrorKind, message: str, context: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.context = context

    @classmethod
    def from_os_error(cls, exc: OSError) -> "PixieError":
        if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
            message = PERMISSION_DENIED_MESSAGE
        else:
            message = exc.strerror or str(exc)
        err = cls(ErrorKind.IO, message)
        err.__cause__ = exc
        return err

    @classmethod
    def from_image_error(cls, exc: Exception) -> "PixieError":
        if isinstance(exc, OSError):
            return cls.from_os_error(exc)
        err = cls(ErrorKind.GENERIC, str(exc))
        err.__cause__ = exc
        return err

    def with_context(self, context: str) -> "PixieError":
        self.context = context
        return self

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message
