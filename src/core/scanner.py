"""Value-span scanning over raw JSONC text.

TIER 0: No internal imports, only Python stdlib.

Every function here takes the document string plus an offset and returns
another offset. Nothing is parsed into Python objects, so comments and
layout around the scanned region are never touched.

Failures (unterminated strings, unbalanced brackets, truncated input) are
reported as None, never as an exception.
"""

from core.types import ValueKind

WHITESPACE = " \t\r\n"

# Bracket pairs tracked by the container scan
BRACKETS = {"[": "]", "{": "}"}

# Characters that end a bare token (number, true, false, null)
BARE_DELIMITERS = ",]}"


def value_kind(char: str) -> ValueKind:
    """Classify a value by its first significant character."""
    if char == "[":
        return ValueKind.ARRAY
    if char == "{":
        return ValueKind.OBJECT
    if char == '"':
        return ValueKind.STRING
    return ValueKind.BARE


def is_comment_start(document: str, offset: int) -> bool:
    """Check if a // or /* comment opens at offset."""
    return document.startswith("//", offset) or document.startswith("/*", offset)


def skip_comment(document: str, start: int) -> int:
    """Return the offset just past the comment opening at start.

    Line comments stop before their line break. An unclosed block comment
    runs to the end of the document.
    """
    if document.startswith("//", start):
        end = document.find("\n", start)
        return len(document) if end == -1 else end

    end = document.find("*/", start + 2)
    return len(document) if end == -1 else end + 2


def skip_string(document: str, start: int) -> int | None:
    """Return the offset just past the string literal opening at start.

    A backslash escapes exactly the next character, so \\" does not close
    the string and \\\\ does not leave the escape pending.

    Returns:
        Offset after the closing quote, or None if the string is unterminated.
    """
    escape_next = False
    i = start + 1

    while i < len(document):
        char = document[i]
        if escape_next:
            escape_next = False
        elif char == "\\":
            escape_next = True
        elif char == '"':
            return i + 1
        i += 1

    return None


def skip_insignificant(document: str, offset: int) -> int:
    """Skip whitespace and comments, returning the next significant offset."""
    while offset < len(document):
        if document[offset] in WHITESPACE:
            offset += 1
        elif is_comment_start(document, offset):
            offset = skip_comment(document, offset)
        else:
            break
    return offset


def last_significant(document: str, end: int, start: int = 0) -> int | None:
    """Find the last significant character in document[start:end].

    Whitespace and comments are not significant; string contents are
    skipped as a whole so a comma or bracket inside a string never counts.
    start must not fall inside a string or comment.

    Returns:
        Offset of that character, or None if the region holds nothing.
    """
    last = None
    i = start

    while i < end:
        char = document[i]

        if char in WHITESPACE:
            i += 1
            continue

        if is_comment_start(document, i):
            i = skip_comment(document, i)
            continue

        if char == '"':
            string_end = skip_string(document, i)
            if string_end is None or string_end > end:
                return end - 1
            last = string_end - 1
            i = string_end
            continue

        last = i
        i += 1

    return last


def scan_value_end(document: str, value_start: int) -> int | None:
    """Return the offset one past the JSON value starting at value_start.

    Dispatches on the first character: arrays and objects are matched by
    bracket depth, strings by their closing quote, and anything else is a
    bare token.

    Args:
        document: Full document text.
        value_start: Offset of the value's first significant character.

    Returns:
        End offset (never below value_start), or None if the value is
        malformed or truncated.
    """
    if value_start < 0 or value_start >= len(document):
        return None

    kind = value_kind(document[value_start])

    if kind is ValueKind.STRING:
        return skip_string(document, value_start)
    if kind.is_container():
        return _scan_container_end(document, value_start)
    return _scan_bare_end(document, value_start)


def _scan_container_end(document: str, start: int) -> int | None:
    """Match the bracket at start against its closing partner."""
    open_char = document[start]
    close_char = BRACKETS[open_char]
    depth = 0
    i = start

    while i < len(document):
        char = document[i]

        # Brackets inside strings do not count
        if char == '"':
            string_end = skip_string(document, i)
            if string_end is None:
                return None
            i = string_end
            continue

        # Neither do brackets inside comments
        if is_comment_start(document, i):
            i = skip_comment(document, i)
            continue

        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1

    return None


def _scan_bare_end(document: str, start: int) -> int | None:
    """Scan a number, boolean or null up to the next delimiter."""
    i = start

    while i < len(document):
        char = document[i]
        if char in BARE_DELIMITERS or char in WHITESPACE or is_comment_start(document, i):
            break
        i += 1

    # An empty token means there was no value at all
    return i if i > start else None
