"""Tests for core/patch.py - replace, insert and remove."""

import json

import pytest

from core.errors import MalformedValueError
from core.jsonc import parse_jsonc
from core.patch import apply_insert, apply_remove, apply_replace, remove_key, set_key
from core.types import ByteRange

PAIR = [("X", "Y")]


def loads_jsonc(document: str):
    """Parse a JSONC document for assertions."""
    return json.loads(parse_jsonc(document))


class TestApplyReplace:
    """Tests for apply_replace()."""

    def test_replaces_span(self):
        """Should splice rendered text over the value range."""
        assert apply_replace('{"k": 1}', ByteRange(6, 7), "[]") == '{"k": []}'

    def test_keeps_surroundings(self):
        """Should keep text on both sides verbatim."""
        document = '{\n  "k": null, // why\n  "b": 2\n}'
        start = document.index("null")
        result = apply_replace(document, ByteRange(start, start + 4), "true")
        assert result == '{\n  "k": true, // why\n  "b": 2\n}'


class TestApplyInsert:
    """Tests for apply_insert()."""

    def test_compact_object(self):
        """Should add a comma after the previous member."""
        assert apply_insert('{"a":1}', "k", "[]", "    ") == '{"a":1,\n    "k": []\n}'

    def test_empty_object(self):
        """Should not add a comma to an empty object."""
        assert apply_insert("{}", "k", "[]", "    ") == '{\n    "k": []\n}'

    def test_multiline_object(self):
        """Should insert a new line before the closing brace."""
        result = apply_insert('{\n  "a": 1\n}\n', "k", "[]", "  ")
        assert result == '{\n  "a": 1,\n  "k": []\n}\n'

    def test_existing_trailing_comma(self):
        """Should not double a trailing comma."""
        result = apply_insert('{\n  "a": 1,\n}', "k", "[]", "  ")
        assert result == '{\n  "a": 1,\n  "k": []\n}'

    def test_comma_goes_before_trailing_comment(self):
        """Should put the comma after the value, not inside the comment."""
        result = apply_insert('{\n  "a": 1 // note\n}', "k", "[]", "  ")
        assert result == '{\n  "a": 1, // note\n  "k": []\n}'

    def test_comment_only_object(self):
        """Should treat an object holding only comments as empty."""
        result = apply_insert("{\n  // nothing yet\n}", "k", "[]", "  ")
        assert result == '{\n  // nothing yet\n  "k": []\n}'

    def test_brace_in_trailing_comment(self):
        """Should target the root object's brace, not one in a later comment."""
        result = apply_insert('{"a": 1}\n// }', "k", "[]", "    ")
        assert result == '{"a": 1,\n    "k": []\n}\n// }'

    def test_keeps_closing_indent(self):
        """Should keep the closing brace's own indentation."""
        result = apply_insert('{\n  "a": 1\n  }', "k", "[]", "  ")
        assert result == '{\n  "a": 1,\n  "k": []\n  }'

    def test_crlf(self):
        """Should use the document's line breaks."""
        result = apply_insert('{\r\n  "a": 1\r\n}', "k", "[]", "  ")
        assert result == '{\r\n  "a": 1,\r\n  "k": []\r\n}'

    def test_empty_document(self):
        """Should synthesize a minimal object."""
        result = apply_insert("", "k", "[]", "    ")
        assert result == '{\n    "k": []\n}\n'
        assert json.loads(result) == {"k": []}

    def test_whitespace_document(self):
        """Should synthesize a minimal object for blank input."""
        assert json.loads(apply_insert("  \n", "k", "[]", "    ")) == {"k": []}

    def test_no_closing_brace(self):
        """Should synthesize a minimal object when there is no brace."""
        assert json.loads(apply_insert("garbage", "k", "1", "  ")) == {"k": 1}

    def test_unterminated_root_falls_back_to_last_brace(self):
        """Should use the rightmost brace when the root cannot be matched."""
        result = apply_insert('{"a": "x}', "k", "1", "  ")
        assert result == '{"a": "x,\n  "k": 1\n}'


class TestApplyRemove:
    """Tests for apply_remove()."""

    def test_only_member_inline(self):
        """Should leave an empty object."""
        result = apply_remove('{"k": 1}', ByteRange(1, 6), ByteRange(6, 7))
        assert result == "{}"

    def test_line_disappears(self):
        """Should drop the key's line including its indentation."""
        document = '{\n  "k": [1],\n  "b": 2\n}'
        result = apply_remove(document, ByteRange(4, 9), ByteRange(9, 12))
        assert result == '{\n  "b": 2\n}'


class TestRemoveKey:
    """Tests for remove_key()."""

    def test_middle_member(self):
        """Should keep exactly one comma between remaining members."""
        document = '{\n  "a": 1,\n  "k": 2,\n  "b": 3\n}'
        assert remove_key(document, "k") == '{\n  "a": 1,\n  "b": 3\n}'

    def test_last_member(self):
        """Should strip the comma left on the previous member."""
        document = '{\n  "a": 1,\n  "k": 2\n}'
        assert remove_key(document, "k") == '{\n  "a": 1\n}'

    def test_last_member_with_trailing_comma(self):
        """Should not leave a trailing comma behind."""
        document = '{\n  "a": 1,\n  "k": 2,\n}'
        assert remove_key(document, "k") == '{\n  "a": 1\n}'

    def test_only_member_multiline(self):
        """Should leave an empty object without a blank line."""
        assert remove_key('{\n  "k": [1]\n}', "k") == "{\n}"

    def test_first_inline(self):
        """Should remove the following comma and space."""
        assert remove_key('{"k": 1, "b": 2}', "k") == '{"b": 2}'

    def test_middle_inline(self):
        """Should keep single separators inline."""
        assert remove_key('{"a": 1, "k": 2, "b": 3}', "k") == '{"a": 1, "b": 3}'

    def test_last_inline(self):
        """Should strip the dangling comma inline."""
        assert remove_key('{"a": 1, "k": 2}', "k") == '{"a": 1}'

    def test_comment_on_previous_line(self):
        """Should strip the dangling comma before a trailing comment."""
        document = '{\n  "a": 1, // keep\n  "k": 2\n}'
        assert remove_key(document, "k") == '{\n  "a": 1 // keep\n}'

    def test_comment_on_key_line(self):
        """Should keep a comment that shares the key's line."""
        document = '{\n  "k": 1, // about k\n  "b": 2\n}'
        assert remove_key(document, "k") == '{\n  // about k\n  "b": 2\n}'

    def test_comment_before_comma(self):
        """Should drop a comma that follows a block comment and keep the comment."""
        document = '{\n  "k": 1 /* x */,\n  "b": 2\n}'
        result = remove_key(document, "k")
        assert result == '{\n  /* x */\n  "b": 2\n}'
        assert loads_jsonc(result) == {"b": 2}

    def test_comma_first_after_line_comment(self):
        """Should drop a leading comma on the next line after a line comment."""
        document = '{\n  "k": 1 // x\n  ,"b": 2\n}'
        result = remove_key(document, "k")
        assert result == '{\n  // x\n  "b": 2\n}'
        assert loads_jsonc(result) == {"b": 2}

    def test_comment_before_comma_inline(self):
        """Should keep single separators when a comment precedes the comma."""
        document = '{"a": 1, "k": 2 /*x*/ , "b": 3}'
        result = remove_key(document, "k")
        assert loads_jsonc(result) == {"a": 1, "b": 3}
        assert "/*x*/" in result

    def test_multiline_value(self):
        """Should remove every line of a multi-line value."""
        document = (
            '{\n    "a": 1,\n    "k": [\n        {\n            "name": "A",\n'
            '            "value": "B"\n        }\n    ],\n    "b": 2\n}'
        )
        assert remove_key(document, "k") == '{\n    "a": 1,\n    "b": 2\n}'

    def test_crlf(self):
        """Should remove CRLF line breaks whole."""
        document = '{\r\n  "k": 1,\r\n  "b": 2\r\n}'
        assert remove_key(document, "k") == '{\r\n  "b": 2\r\n}'

    def test_absent_key_is_noop(self):
        """Should return the document unchanged."""
        document = '{\n  // c\n  "a": 1,\n}'
        assert remove_key(document, "k") == document

    def test_malformed_value(self):
        """Should raise instead of cutting a partial span."""
        with pytest.raises(MalformedValueError) as exc_info:
            remove_key('{"k": [1, 2}', "k")
        assert exc_info.value.key == "k"
        assert exc_info.value.offset == 6


class TestSetKey:
    """Tests for set_key()."""

    def test_insert_into_compact_object(self):
        """Should insert a populated multi-line array."""
        result = set_key('{"a":1}', "k", PAIR)
        assert '"a":1' in result
        assert '"k": [\n' in result
        assert json.loads(result) == {"a": 1, "k": [{"name": "X", "value": "Y"}]}

    def test_replace_keeps_comments(self):
        """Should only touch the value span."""
        document = '{\n  // note\n  "k": [],\n  "b": 2\n}'
        result = set_key(document, "k", PAIR)
        assert result == (
            '{\n  // note\n  "k": [\n    {\n      "name": "X",\n'
            '      "value": "Y"\n    }\n  ],\n  "b": 2\n}'
        )

    def test_empty_document(self):
        """Should synthesize a minimal object."""
        result = set_key("", "k", [])
        assert result == '{\n    "k": []\n}\n'

    def test_replace_scalar(self):
        """Should replace non-array values too."""
        assert set_key('{"k": null, "b": 1}', "k", []) == '{"k": [], "b": 1}'

    def test_replace_populated_with_empty(self):
        """Should collapse a populated array to []."""
        document = '{\n  "k": [\n    {"name": "A", "value": "B"}\n  ]\n}'
        assert set_key(document, "k", []) == '{\n  "k": []\n}'

    def test_escapes_values(self):
        """Should write values that read back exactly."""
        result = set_key("{}", "k", [("A", 'say "hi"\n\\')])
        assert json.loads(result)["k"][0]["value"] == 'say "hi"\n\\'

    @pytest.mark.parametrize(
        "document",
        [
            "",
            "{}",
            '{"a":1}',
            '{\n  // note\n  "k": [],\n  "b": 2\n}',
            '{\n\t"a": 1, // c\n}',
            '{\r\n  "a": 1\r\n}',
        ],
    )
    def test_idempotent(self, document):
        """Should yield the same document when applied twice."""
        once = set_key(document, "k", PAIR + [("Z", "1")])
        assert set_key(once, "k", PAIR + [("Z", "1")]) == once

    def test_nested_key_not_replaced(self):
        """Should insert at the root when the key only exists nested."""
        document = '{\n  "[python]": {\n    "k": 1\n  }\n}'
        result = set_key(document, "k", [])
        assert loads_jsonc(result) == {"[python]": {"k": 1}, "k": []}

    def test_malformed_value(self):
        """Should raise and leave nothing half-written."""
        with pytest.raises(MalformedValueError):
            set_key('{"k": "unterminated}', "k", PAIR)
