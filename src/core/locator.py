"""Key locator for JSONC documents.

TIER 0: No internal imports, only Python stdlib.

Finds where a key is declared in the root object without trusting a plain
substring or regex search: the scan walks string literals and comments as
whole tokens, so key text inside an unrelated value (a URL, a description,
a commented-out line) is never taken for the declaration.
"""

import json

from core.scanner import is_comment_start, skip_comment, skip_insignificant, skip_string
from core.types import KeyLocation


def locate_key(document: str, key: str) -> KeyLocation | None:
    """Locate the first declaration of key among the root object's members.

    A string token is a key declaration when the next significant character
    after it is a colon. Nested objects are walked past, so a member of the
    same name deeper in the document is not matched.

    Args:
        document: JSONC document text.
        key: Literal key name (e.g., "claudeCode.environmentVariables").

    Returns:
        KeyLocation with the offset of the key's opening quote and the offset
        of its value's first significant character, or None if absent.
    """
    # Key text as it appears between the quotes in the document
    quoted = json.dumps(key, ensure_ascii=False)[1:-1]
    depth = 0
    i = 0

    while i < len(document):
        char = document[i]

        if char == '"':
            end = skip_string(document, i)
            if end is None:
                return None

            if depth == 1 and document[i + 1 : end - 1] == quoted:
                colon = skip_insignificant(document, end)
                if colon < len(document) and document[colon] == ":":
                    return KeyLocation(
                        key_start=i,
                        value_start=skip_insignificant(document, colon + 1),
                    )

            i = end
            continue

        if is_comment_start(document, i):
            i = skip_comment(document, i)
            continue

        if char in "[{":
            depth += 1
        elif char in "]}":
            depth -= 1
        i += 1

    return None
