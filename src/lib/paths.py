"""VS Code settings.json location.

TIER 1: May import from core only.
"""

import os
import sys
from collections.abc import Mapping
from pathlib import Path

from core.errors import ConfigError
from lib.config import SyncSettings
from lib.logger import get_logger

logger = get_logger("paths")

SETTINGS_PARTS = ("Code", "User", "settings.json")


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise ConfigError("Could not determine the user's home directory") from e


def default_vscode_settings_path(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Path:
    """Get the default VS Code settings.json path for a platform.

    - Windows: %APPDATA%/Code/User/settings.json
    - macOS: ~/Library/Application Support/Code/User/settings.json
    - Linux and others: ~/.config/Code/User/settings.json

    Args:
        platform: sys.platform value (defaults to the running platform).
        environ: Environment mapping (defaults to os.environ).
        home: Home directory (defaults to Path.home()).

    Raises:
        ConfigError: If APPDATA (Windows) or the home directory is unavailable.
    """
    platform = platform or sys.platform
    if environ is None:
        environ = os.environ

    if platform.startswith("win"):
        appdata = environ.get("APPDATA")
        if not appdata:
            raise ConfigError("APPDATA is not set; cannot locate VS Code settings")
        return Path(appdata).joinpath(*SETTINGS_PARTS)

    home = home or _home()
    if platform == "darwin":
        return home.joinpath("Library", "Application Support", *SETTINGS_PARTS)
    return home.joinpath(".config", *SETTINGS_PARTS)


def resolve_override_path(raw: str) -> Path:
    """Turn a user-entered path into a Path (trimmed, ~ expanded)."""
    return Path(raw.strip()).expanduser()


def get_vscode_settings_path(settings: SyncSettings) -> Path:
    """Get the settings.json path, preferring the user override if set."""
    override = settings.vscode_settings_path
    if override and override.strip():
        path = resolve_override_path(override)
        logger.debug("Using VS Code settings override: %s", path)
        return path
    return default_vscode_settings_path()
