"""Port interfaces for Clean Architecture.

TIER 0: No internal imports, only Python stdlib.

Ports define contracts that adapters must implement. The patch engine only
ever sees strings; reading and writing the settings file goes through a
store satisfying DocumentStorePort.

Usage:
    # In lib - implement the port as plain module functions
    def read_document(path: Path) -> str | None: ...
    def write_document(path: Path, content: str) -> None: ...

    # Or pass any object with the same methods (e.g., an in-memory store)
"""

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DocumentStorePort(Protocol):
    """Port for settings document storage.

    Implemented by: lib.fileio
    """

    def read_document(self, path: Path) -> str | None:
        """Read document text, or None if it does not exist."""
        ...

    def write_document(self, path: Path, content: str) -> None:
        """Replace the document with content in one step."""
        ...


def verify_port(implementation: Any, port: type) -> bool:
    """Verify that an implementation satisfies a port.

    Args:
        implementation: Object to verify.
        port: Protocol class to check against.

    Returns:
        True if implementation satisfies the port.

    Example:
        from lib import fileio
        from core.ports import DocumentStorePort, verify_port

        assert verify_port(fileio, DocumentStorePort)
    """
    return isinstance(implementation, port)
