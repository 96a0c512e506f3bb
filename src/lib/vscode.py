"""VS Code Claude Code extension synchronization.

TIER 1: May import from core only.

Syncs environment variables into VS Code's `claudeCode.environmentVariables`
setting in settings.json. Only that key is touched; every other setting,
comment and blank line in the file is kept as written.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from core.jsonc import parse_document
from core.patch import remove_key, set_key
from core.ports import DocumentStorePort
from core.types import Structured
from lib import fileio
from lib.config import SyncSettings
from lib.logger import get_logger
from lib.paths import get_vscode_settings_path

logger = get_logger("vscode")

ENV_KEY = "claudeCode.environmentVariables"


def env_to_pairs(env: Any) -> list[tuple[str, str]]:
    """Convert a flat env mapping into (name, value) pairs.

    Non-string values become "" and anything that is not a mapping
    yields no pairs.

    Example:
        >>> env_to_pairs({"ANTHROPIC_BASE_URL": "http://localhost:3000"})
        [('ANTHROPIC_BASE_URL', 'http://localhost:3000')]
    """
    if not isinstance(env, Mapping):
        return []
    return [(str(name), value if isinstance(value, str) else "") for name, value in env.items()]


def sync_document(document: str, env: Any) -> str:
    """Return document with the env variables written under ENV_KEY."""
    return set_key(document, ENV_KEY, env_to_pairs(env))


def clear_document(document: str) -> str:
    """Return document without ENV_KEY (unchanged if it is absent)."""
    return remove_key(document, ENV_KEY)


def read_vscode_env(document: str) -> dict[str, str]:
    """Read the env variables currently stored under ENV_KEY.

    Best effort: comments and trailing commas are tolerated, anything else
    that does not parse yields an empty dict.
    """
    parsed = parse_document(document, strict=False)
    if not isinstance(parsed, Structured) or not isinstance(parsed.value, dict):
        return {}

    entries = parsed.value.get(ENV_KEY)
    if not isinstance(entries, list):
        return {}

    return {
        entry["name"]: entry["value"] if isinstance(entry.get("value"), str) else ""
        for entry in entries
        if isinstance(entry, dict) and isinstance(entry.get("name"), str)
    }


def sync_env_to_vscode(
    env: Any,
    settings: SyncSettings,
    store: DocumentStorePort = fileio,
) -> Path:
    """Sync environment variables to VS Code's settings.json.

    Reads the existing file (absent counts as empty), updates only ENV_KEY,
    and writes it back atomically if anything changed.

    Args:
        env: Flat mapping of variable name to value.
        settings: Sync settings (path override).
        store: Document store (defaults to the filesystem).

    Returns:
        Path of the settings file.

    Raises:
        MalformedValueError: If the existing value cannot be scanned. Nothing
            is written in that case.
        ConfigError: If the settings path cannot be resolved.
        SettingsIOError: If the file cannot be read or written.
    """
    path = get_vscode_settings_path(settings)
    document = store.read_document(path) or ""

    if document.strip() and "}" not in document:
        logger.warning("%s has no JSON object; replacing its content", path)

    updated = sync_document(document, env)

    if updated == document:
        logger.debug("VS Code settings already up to date: %s", path)
        return path

    store.write_document(path, updated)
    logger.info("Synced %d environment variables to %s", len(env_to_pairs(env)), path)
    return path


def clear_vscode_env(settings: SyncSettings, store: DocumentStorePort = fileio) -> bool:
    """Remove ENV_KEY from VS Code's settings.json.

    Returns:
        True if the file was rewritten, False if it or the key was absent.
    """
    path = get_vscode_settings_path(settings)
    document = store.read_document(path)

    if document is None:
        logger.debug("No VS Code settings at %s; nothing to clear", path)
        return False

    updated = clear_document(document)
    if updated == document:
        return False

    store.write_document(path, updated)
    logger.info("Removed %s from %s", ENV_KEY, path)
    return True


def sync_if_enabled(
    env: Any,
    settings: SyncSettings,
    store: DocumentStorePort = fileio,
) -> Path | None:
    """Run sync_env_to_vscode only when settings.enabled is set."""
    if not settings.enabled:
        logger.debug("VS Code sync disabled; skipping")
        return None
    return sync_env_to_vscode(env, settings, store)
