"""Configuration management.

TIER 1: May import from core only.

Settings are loaded into an explicit SyncSettings object and passed to
whatever needs them; nothing here is cached process-wide. Settings files
may be JSONC (JSON with Comments).
"""

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from core.errors import ConfigError
from core.jsonc import parse_jsonc

# Environment variable overriding the VS Code settings.json location
SETTINGS_PATH_ENV = "VSCODE_SETTINGS_PATH"

# Accepted spellings per field: snake_case first, then the camelCase used
# by the desktop app's settings store
FIELD_ALIASES = {
    "enabled": ("enabled", "enableVscodeClaudeSync"),
    "vscode_settings_path": ("vscode_settings_path", "vscodeSettingsPath"),
}


@dataclass(frozen=True)
class SyncSettings:
    """Settings for syncing environment variables into VS Code."""

    enabled: bool = False
    vscode_settings_path: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SyncSettings":
        """Build settings from a mapping.

        Raises:
            ConfigError: If a field has the wrong type.
        """
        enabled = _lookup(data, "enabled", False)
        if not isinstance(enabled, bool):
            raise ConfigError(f"'enabled' must be a boolean, got {type(enabled).__name__}")

        path = _lookup(data, "vscode_settings_path", None)
        if path is not None and not isinstance(path, str):
            raise ConfigError(
                f"'vscode_settings_path' must be a string, got {type(path).__name__}"
            )

        return cls(enabled=enabled, vscode_settings_path=path)


def _lookup(data: Mapping[str, Any], field: str, default: Any) -> Any:
    for alias in FIELD_ALIASES[field]:
        if alias in data:
            return data[alias]
    return default


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> SyncSettings:
    """Load sync settings from a JSONC file and the environment.

    A missing file yields defaults. VSCODE_SETTINGS_PATH, when set, wins over
    the file's path override.

    Args:
        path: Settings file (config.jsonc or config.json). Optional.
        environ: Environment mapping (defaults to os.environ).

    Returns:
        SyncSettings instance.

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object.
    """
    if environ is None:
        environ = os.environ

    data: Any = {}
    if path is not None and path.exists():
        try:
            data = json.loads(parse_jsonc(path.read_text(encoding="utf-8")))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid {path.name}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{path.name} must contain a JSON object")

    settings = SyncSettings.from_dict(data)

    if override := environ.get(SETTINGS_PATH_ENV, "").strip():
        settings = replace(settings, vscode_settings_path=override)

    return settings
