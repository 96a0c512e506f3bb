"""Core module - JSONC patch engine, types, errors, ports.

TIER 0: No internal imports, only Python stdlib.

Exports:
- Error types: SyncError, ConfigError, MalformedValueError, SettingsIOError
- Types: ByteRange, KeyLocation, ValueKind, Structured, RawText
- Engine: locate_key, scan_value_end, detect_indent_unit, format_value,
  apply_replace, apply_insert, apply_remove, set_key, remove_key
- Reading: strip_comments, parse_jsonc, parse_document
- Ports: DocumentStorePort, verify_port
"""

from core.errors import ConfigError, MalformedValueError, SettingsIOError, SyncError
from core.formatter import detect_indent_unit, escape_string, format_value
from core.jsonc import parse_document, parse_jsonc, strip_comments
from core.locator import locate_key
from core.patch import apply_insert, apply_remove, apply_replace, remove_key, set_key
from core.ports import DocumentStorePort, verify_port
from core.scanner import scan_value_end
from core.types import ByteRange, KeyLocation, RawText, Structured, ValueKind

__all__ = [
    "ByteRange",
    "ConfigError",
    "DocumentStorePort",
    "KeyLocation",
    "MalformedValueError",
    "RawText",
    "SettingsIOError",
    "Structured",
    "SyncError",
    "ValueKind",
    "apply_insert",
    "apply_remove",
    "apply_replace",
    "detect_indent_unit",
    "escape_string",
    "format_value",
    "locate_key",
    "parse_document",
    "parse_jsonc",
    "remove_key",
    "scan_value_end",
    "set_key",
    "strip_comments",
    "verify_port",
]
