"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class MemoryStore:
    """In-memory document store satisfying DocumentStorePort."""

    def __init__(self, files: dict[Path, str] | None = None):
        self.files = dict(files or {})
        self.writes: list[Path] = []

    def read_document(self, path: Path) -> str | None:
        return self.files.get(path)

    def write_document(self, path: Path, content: str) -> None:
        self.files[path] = content
        self.writes.append(path)


@pytest.fixture
def memory_store():
    """Return an empty in-memory document store."""
    return MemoryStore()


@pytest.fixture
def settings_path(tmp_path):
    """Return a VS Code settings.json path inside tmp_path (not created)."""
    return tmp_path / "Code" / "User" / "settings.json"


@pytest.fixture
def vscode_settings():
    """Return a realistic VS Code settings.json with comments."""
    return """{
    // Editor
    "editor.fontSize": 14,
    "editor.rulers": [80, 120], /* soft limits */
    "http.proxy": "http://proxy.local:8080",
    "files.exclude": {
        "**/.git": true
    }
}
"""
