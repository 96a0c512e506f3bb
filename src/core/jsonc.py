"""JSONC reader - JSON with Comments support.

TIER 0: No internal imports, only Python stdlib.

Used only for reading. Writing never goes through json.loads/json.dumps of
a commented document, since that would drop the comments.
"""

import json

from core.scanner import is_comment_start, skip_comment, skip_insignificant, skip_string
from core.types import ParsedDocument, RawText, Structured


def strip_comments(content: str) -> str:
    """Strip JSONC comments from content.

    Removes:
    - Single-line comments: // comment
    - Multi-line comments: /* comment */

    Preserves strings containing // or /* sequences. Line breaks that end
    single-line comments are kept.

    Args:
        content: JSONC content with comments.

    Returns:
        Content without comments (still may have trailing commas).
    """
    result = []
    i = 0

    while i < len(content):
        if content[i] == '"':
            end = skip_string(content, i) or len(content)
            result.append(content[i:end])
            i = end
            continue

        if is_comment_start(content, i):
            i = skip_comment(content, i)
            continue

        result.append(content[i])
        i += 1

    return "".join(result)


def strip_trailing_commas(content: str) -> str:
    """Remove trailing commas from JSON content.

    Handles:
    - ,] → ]
    - ,} → }

    Args:
        content: JSON content (comments already stripped).

    Returns:
        Content without commas directly before a closing bracket.
    """
    result = []
    i = 0

    while i < len(content):
        char = content[i]

        if char == '"':
            end = skip_string(content, i) or len(content)
            result.append(content[i:end])
            i = end
            continue

        if char == ",":
            following = skip_insignificant(content, i + 1)
            if following < len(content) and content[following] in "]}":
                i += 1
                continue

        result.append(char)
        i += 1

    return "".join(result)


def parse_jsonc(content: str) -> str:
    """Convert JSONC to valid JSON.

    Removes comments and trailing commas to produce valid JSON
    that can be parsed with json.loads().
    """
    return strip_trailing_commas(strip_comments(content))


def parse_document(content: str, strict: bool = True) -> ParsedDocument:
    """Parse a document into an explicit Structured/RawText result.

    Args:
        content: Document text.
        strict: If True, only plain JSON counts as Structured. If False,
            comments and trailing commas are stripped first.

    Returns:
        Structured(value) when the text parses, RawText(content) otherwise.
    """
    text = content if strict else parse_jsonc(content)
    try:
        return Structured(json.loads(text))
    except json.JSONDecodeError:
        return RawText(content)
