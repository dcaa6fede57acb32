"""Tests for serialization module."""

import json

from tscbaseline.diagnostics import ErrorSummary
from tscbaseline.serialize import (
    CURRENT_BASELINE_VERSION,
    DeterministicSerializer,
    canonical_json_bytes,
)


class TestCanonicalJsonBytes:
    """Test canonical_json_bytes function."""

    def test_sorted_and_compact(self):
        """Test key sorting and compact separators."""
        assert canonical_json_bytes({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'

    def test_utf8_without_escaping(self):
        """Test that non-ASCII text is UTF-8 encoded, not escaped."""
        assert canonical_json_bytes({"m": "é"}) == '{"m":"é"}'.encode("utf-8")


class TestDeterministicSerializer:
    """Test DeterministicSerializer class."""

    def test_serialize_summary_basic(self):
        """Test basic summary serialization and field order."""
        serializer = DeterministicSerializer()
        summary = ErrorSummary(file="a.ts", code="TS1", message="m", line=4, count=2)

        result = serializer.serialize_summary(summary)

        assert result == {"file": "a.ts", "code": "TS1", "message": "m", "line": 4, "count": 2}
        assert list(result) == ["file", "code", "message", "line", "count"]

    def test_serialize_summary_ignore_messages(self):
        """Test that message is dropped in message-less mode."""
        serializer = DeterministicSerializer(ignore_messages=True)
        summary = ErrorSummary(file="a.ts", code="TS1", message="m", line=4, count=2)

        assert "message" not in serializer.serialize_summary(summary)

    def test_serialize_summary_without_line(self):
        """Test that an unknown line is not written."""
        serializer = DeterministicSerializer()
        summary = ErrorSummary(file="a.ts", code="TS1", message="m", line=None, count=1)

        assert "line" not in serializer.serialize_summary(summary)

    def test_serialize_document(self):
        """Test document structure."""
        serializer = DeterministicSerializer(ignore_messages=True)
        document = serializer.serialize_document(
            {"k": ErrorSummary(file="a.ts", code="TS1", line=1, count=1)}
        )

        assert document["meta"] == {
            "baselineFileVersion": CURRENT_BASELINE_VERSION,
            "ignoreMessages": True,
        }
        assert list(document) == ["meta", "errors"]
        assert document["errors"]["k"] == {"file": "a.ts", "code": "TS1", "line": 1, "count": 1}

    def test_to_json_string_is_pretty(self):
        """Test two-space indentation."""
        serializer = DeterministicSerializer()
        text = serializer.to_json_string({"meta": {"baselineFileVersion": 1}})

        assert text == '{\n  "meta": {\n    "baselineFileVersion": 1\n  }\n}'
        assert json.loads(text) == {"meta": {"baselineFileVersion": 1}}

    def test_envelopes(self):
        """Test success and error envelopes."""
        serializer = DeterministicSerializer()

        assert serializer.create_success_envelope({"x": 1}) == {"ok": True, "data": {"x": 1}}
        assert serializer.create_error_envelope("CODE", "msg") == {
            "ok": False,
            "error": {"code": "CODE", "message": "msg"},
        }
        assert serializer.create_error_envelope("CODE", "msg", {"a": 1})["error"]["details"] == {"a": 1}
