"""Lib module - I/O adapters.

TIER 1: May import from core only.
"""

from lib.config import SyncSettings, load_settings
from lib.fileio import read_document, write_document
from lib.logger import get_logger, set_log_level
from lib.paths import default_vscode_settings_path, get_vscode_settings_path
from lib.vscode import (
    ENV_KEY,
    clear_document,
    clear_vscode_env,
    env_to_pairs,
    read_vscode_env,
    sync_document,
    sync_env_to_vscode,
    sync_if_enabled,
)

__all__ = [
    "ENV_KEY",
    "SyncSettings",
    "clear_document",
    "clear_vscode_env",
    "default_vscode_settings_path",
    "env_to_pairs",
    "get_logger",
    "get_vscode_settings_path",
    "load_settings",
    "read_document",
    "read_vscode_env",
    "set_log_level",
    "sync_document",
    "sync_env_to_vscode",
    "sync_if_enabled",
    "write_document",
]
