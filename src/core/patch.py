"""Patch applier - text-level edits of a single root key.

TIER 0: No internal imports, only Python stdlib.

Each operation takes a document string and returns a new one. Text outside
the edited span (comments, whitespace, key order) is carried over verbatim.
"""

from collections.abc import Iterable

from core.errors import MalformedValueError
from core.formatter import (
    detect_indent_unit,
    detect_newline,
    escape_string,
    format_value,
    line_indent,
)
from core.locator import locate_key
from core.scanner import last_significant, scan_value_end, skip_insignificant
from core.types import ByteRange

BOM = "\ufeff"


def apply_replace(document: str, value_range: ByteRange, rendered: str) -> str:
    """Swap the text of an existing value for rendered."""
    return document[: value_range.start] + rendered + document[value_range.end :]


def apply_insert(document: str, key: str, rendered: str, indent: str) -> str:
    """Add "key": rendered as the last member of the root object.

    A comma is added after the previous member unless the object is empty
    or the member already ends with one. The comma goes right after the
    member's value, never after a trailing comment.

    Args:
        document: Document text (may be empty).
        key: Key to add.
        rendered: Rendered value text (see format_value).
        indent: Indent unit for the new line.

    Returns:
        New document. If there is no closing brace at all, a minimal object
        holding just the new key.
    """
    newline = detect_newline(document)
    entry = f"{indent}{escape_string(key)}: {rendered}"
    close = _root_close(document)

    if close == -1:
        return f"{{{newline}{entry}{newline}}}{newline}"

    head = document[:close]
    body = head.rstrip()
    gap = head[len(body) :]
    # Keep whatever indentation the closing brace already had
    closing_indent = gap.rsplit("\n", 1)[1] if "\n" in gap else ""

    last = last_significant(document, len(body))
    if last is not None and document[last] not in "{,":
        body = body[: last + 1] + "," + body[last + 1 :]

    return body + newline + entry + newline + closing_indent + document[close:]


def apply_remove(document: str, key_range: ByteRange, value_range: ByteRange) -> str:
    """Delete a key declaration and tidy the punctuation around it.

    The span from the key's opening quote to the end of its value is widened
    forward over one trailing comma, and to the whole line when the entry is
    alone on it. A comma separated from the value by a comment is deleted
    on its own so the comment survives. Afterwards a comma left dangling
    before a closing bracket is removed too.
    """
    start = key_range.start
    end = value_range.end

    comma = skip_insignificant(document, end)
    has_comma = comma < len(document) and document[comma] == ","
    if has_comma:
        if comma == _skip_blanks(document, end):
            end = comma + 1
        else:
            document = document[:comma] + document[comma + 1 :]

    tail = _skip_blanks(document, end)
    owns_tail = tail >= len(document) or document[tail] in "\r\n"

    head = start
    while head > 0 and document[head - 1] in " \t":
        head -= 1
    owns_head = head == 0 or document[head - 1] == "\n"

    if owns_head and owns_tail:
        # Entry sits alone on its line: drop the line entirely
        start = head
        end = tail
        if document.startswith("\r\n", end):
            end += 2
        elif document.startswith("\n", end):
            end += 1
    elif owns_head or has_comma:
        end = tail
    else:
        start = head

    return _strip_dangling_comma(document[:start] + document[end:], start)


def set_key(document: str, key: str, pairs: Iterable[tuple[str, str]]) -> str:
    """Write pairs as the value of key, replacing or inserting as needed.

    Raises:
        MalformedValueError: If key exists but its value cannot be scanned.
            The document is not modified in that case.
    """
    indent = detect_indent_unit(document)
    newline = detect_newline(document)
    location = locate_key(document, key)

    if location is None:
        rendered = format_value(pairs, indent, newline=newline)
        return apply_insert(document, key, rendered, indent)

    value_end = scan_value_end(document, location.value_start)
    if value_end is None:
        raise MalformedValueError(key, location.value_start)

    rendered = format_value(
        pairs,
        indent,
        base_indent=line_indent(document, location.key_start),
        newline=newline,
    )
    return apply_replace(document, ByteRange(location.value_start, value_end), rendered)


def remove_key(document: str, key: str) -> str:
    """Remove key from the root object. Absent key returns document unchanged.

    Raises:
        MalformedValueError: If key exists but its value cannot be scanned.
    """
    location = locate_key(document, key)
    if location is None:
        return document

    value_end = scan_value_end(document, location.value_start)
    if value_end is None:
        raise MalformedValueError(key, location.value_start)

    return apply_remove(
        document,
        location.key_range,
        ByteRange(location.value_start, value_end),
    )


def _root_close(document: str) -> int:
    """Offset of the root object's closing brace, or -1 if there is none."""
    start = skip_insignificant(document, 1 if document.startswith(BOM) else 0)
    if start < len(document) and document[start] == "{":
        end = scan_value_end(document, start)
        if end is not None:
            return end - 1

    # Root could not be matched; fall back to the rightmost brace
    return document.rfind("}")


def _skip_blanks(document: str, offset: int) -> int:
    """Skip spaces and tabs (not line breaks)."""
    while offset < len(document) and document[offset] in " \t":
        offset += 1
    return offset


def _strip_dangling_comma(document: str, at: int) -> str:
    """Drop a comma before at when only a closing bracket follows it."""
    following = skip_insignificant(document, at)
    if following >= len(document) or document[following] not in "}]":
        return document

    last = last_significant(document, at)
    if last is None or document[last] != ",":
        return document

    return document[:last] + document[last + 1 :]
