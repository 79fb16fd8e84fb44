"""Persistent CLI defaults and load/save helpers."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .paths import app_root


CONFIG_VERSION = 1
OUTPUT_FORMATS = ("term", "png")
MAX_SIZE = 256


@dataclass
class RenderConfig:
    size: int = 10
    output: str = "term"
    filename: str = "-"


@dataclass
class LoggingConfig:
    keep_log_files: int = 7
    console: bool = False


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_path() -> Path:
    override = os.environ.get("PIXIE_CONFIG")
    if override:
        return Path(override).expanduser()
    return app_root() / "config.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    try:
        size = int(cfg.render.size)
    except (TypeError, ValueError):
        size = RenderConfig.size
    cfg.render.size = max(0, min(MAX_SIZE, size))
    if cfg.render.output not in OUTPUT_FORMATS:
        cfg.render.output = "term"
    if not isinstance(cfg.render.filename, str) or not cfg.render.filename:
        cfg.render.filename = "-"


def _normalize_logging(cfg: AppConfig) -> None:
    try:
        keep = int(cfg.logging.keep_log_files)
    except (TypeError, ValueError):
        keep = LoggingConfig.keep_log_files
    cfg.logging.keep_log_files = max(2, keep)
    cfg.logging.console = bool(cfg.logging.console)


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=CONFIG_VERSION,
        render=_merge(RenderConfig, raw.get("render", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )

    _normalize_render(cfg)
    _normalize_logging(cfg)
    return cfg
