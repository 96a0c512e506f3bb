"""Core types and enums.

TIER 0: No internal imports, only Python stdlib.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Kinds of JSON value, chosen from the value's first character."""

    ARRAY = "array"
    OBJECT = "object"
    STRING = "string"
    BARE = "bare"  # number, true, false, null

    def is_container(self) -> bool:
        """Check if the value nests other values."""
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


@dataclass(frozen=True)
class ByteRange:
    """Half-open span [start, end) over a document string."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid range [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, document: str) -> str:
        """Return the text covered by this range."""
        return document[self.start : self.end]


@dataclass(frozen=True)
class KeyLocation:
    """Where a key declaration starts and where its value begins."""

    key_start: int
    value_start: int

    @property
    def key_range(self) -> ByteRange:
        """Range from the opening quote of the key up to the value."""
        return ByteRange(self.key_start, self.value_start)


@dataclass(frozen=True)
class Structured:
    """Document text that parsed as JSON."""

    value: Any


@dataclass(frozen=True)
class RawText:
    """Document text that did not parse."""

    text: str


ParsedDocument = Structured | RawText
