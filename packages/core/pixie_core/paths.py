"""Per-user locations for settings and logs."""

from __future__ import annotations

import os
import platform
from pathlib import Path


def app_root() -> Path:
    override = os.environ.get("PIXIE_HOME")
    if override:
        return Path(override).expanduser()
    if platform.system() == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Pixie"
    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Pixie"
    return Path.home() / ".config" / "pixie"
