"""Rendering of replacement values in the document's own style.

TIER 0: No internal imports, only Python stdlib.
"""

import json
from collections.abc import Iterable

# Used when the document has no indented line to learn from
DEFAULT_INDENT = "    "


def detect_indent_unit(document: str) -> str:
    """Infer one level of indentation from the document.

    The first line that starts with whitespace and has content after it
    decides the unit.

    Args:
        document: Document text.

    Returns:
        The leading whitespace of that line, or DEFAULT_INDENT.
    """
    for line in document.splitlines():
        content = line.lstrip(" \t")
        if content.strip() and len(content) < len(line):
            return line[: len(line) - len(content)]
    return DEFAULT_INDENT


def detect_newline(document: str) -> str:
    """Return the line break style used by the document."""
    return "\r\n" if "\r\n" in document else "\n"


def line_indent(document: str, offset: int) -> str:
    """Return the leading whitespace of the line containing offset."""
    line_start = document.rfind("\n", 0, offset) + 1
    line = document[line_start:offset]
    return line[: len(line) - len(line.lstrip(" \t"))]


def escape_string(text: str) -> str:
    """Quote text as a JSON string literal.

    Escapes quotes, backslashes and control characters; other characters
    (including non-ASCII) are written as-is.
    """
    return json.dumps(text, ensure_ascii=False)


def format_value(
    pairs: Iterable[tuple[str, str]],
    indent: str,
    base_indent: str | None = None,
    newline: str = "\n",
) -> str:
    """Render name/value pairs as a pretty-printed array of objects.

    Args:
        pairs: (name, value) string pairs, in output order.
        indent: Indent unit of the document.
        base_indent: Indentation of the line holding the key. Defaults to one
            indent unit (a member of the root object).
        newline: Line break to use between lines.

    Returns:
        "[]" for no pairs, otherwise a multi-line block whose closing bracket
        lines up with base_indent.

    Example:
        >>> print(format_value([("A", "1")], "  "))
        [
            {
              "name": "A",
              "value": "1"
            }
          ]
    """
    if base_indent is None:
        base_indent = indent

    item = base_indent + indent
    field = item + indent

    entries = [
        f"{item}{{{newline}"
        f'{field}"name": {escape_string(name)},{newline}'
        f'{field}"value": {escape_string(value)}{newline}'
        f"{item}}}"
        for name, value in pairs
    ]

    if not entries:
        return "[]"

    return f"[{newline}" + f",{newline}".join(entries) + f"{newline}{base_indent}]"
