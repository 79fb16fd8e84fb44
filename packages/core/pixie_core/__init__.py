"""Core services for settings, logging, errors and output sinks."""

from .config import AppConfig, LoggingConfig, RenderConfig, config_path, load_config
from .errors import PERMISSION_DENIED_MESSAGE, ErrorKind, PixieError
from .logging_setup import configure_logging, get_logger, reset_logging
from .output import STDOUT, is_seekable, open_output

__all__ = [
    "AppConfig",
    "ErrorKind",
    "LoggingConfig",
    "PERMISSION_DENIED_MESSAGE",
    "PixieError",
    "RenderConfig",
    "STDOUT",
    "config_path",
    "configure_logging",
    "get_logger",
    "is_seekable",
    "load_config",
    "open_output",
    "reset_logging",
]
