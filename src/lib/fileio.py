"""Settings file storage with atomic replacement.

TIER 1: May import from core only.

Implements core.ports.DocumentStorePort as module-level functions. Text is
read and written without newline translation so CRLF files come back
byte-for-byte.
"""

import os
import stat
import tempfile
from pathlib import Path

from core.errors import SettingsIOError


def read_document(path: Path) -> str | None:
    """Read a UTF-8 document.

    Returns:
        File content, or None if the file does not exist.

    Raises:
        SettingsIOError: If the file exists but cannot be read or decoded.
    """
    try:
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsIOError(path, str(e)) from e


def write_document(path: Path, content: str) -> None:
    """Replace path with content atomically.

    Content goes to a temporary file in the same directory, which is then
    renamed over the target. A crash leaves either the old or the new file,
    never a partial one. The existing file's permission bits are kept.

    Raises:
        SettingsIOError: If the directory or file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as e:
        raise SettingsIOError(path, str(e)) from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        if path.exists():
            tmp_path.chmod(stat.S_IMODE(path.stat().st_mode))

        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise SettingsIOError(path, str(e)) from e
