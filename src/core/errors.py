"""Custom exceptions for vscode-env-sync.

TIER 0: No internal imports, only Python stdlib.
"""


class SyncError(Exception):
    """Base exception for vscode-env-sync."""

    pass


class ConfigError(SyncError):
    """Configuration error."""

    pass


class MalformedValueError(SyncError):
    """Existing value of a key could not be scanned to its end."""

    def __init__(self, key: str, offset: int):
        self.key = key
        self.offset = offset
        super().__init__(f"Malformed value for {key!r} at offset {offset}")


class SettingsIOError(SyncError):
    """Reading or writing a settings file failed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
