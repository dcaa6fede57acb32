"""Tests for report formatting."""

from tscbaseline.diagnostics import ErrorSummary, SpecificError
from tscbaseline.report import (
    CHECK_NAME,
    format_check_summary,
    format_human_check_output,
    to_gitlab_output_format,
    to_human_readable_text,
)


def _specific_errors_map():
    return {
        "file1.ts": [
            SpecificError(code="E001", file="file1.ts", message="Syntax error", line=1, column=2),
            SpecificError(code="E001", file="file1.ts", message="Syntax error", line=3, column=4),
        ],
        "file2.ts": [
            SpecificError(code="E002", file="file2.ts", message="Type mismatch", line=5, column=6),
        ],
    }


def _error_summary_map():
    return {
        "f3f953ce": ErrorSummary(code="E001", file="file1.ts", message="Syntax error", line=3, count=2),
        "08f2382a": ErrorSummary(code="E002", file="file2.ts", message="Type mismatch", line=5, count=1),
    }


class TestHumanReadableText:
    """Test to_human_readable_text function."""

    def test_formats_blocks(self):
        """Test the full human-readable layout."""
        expected = "\n".join([
            "File: file1.ts",
            "Message: Syntax error",
            "Code: E001",
            "Hash: f3f953ce",
            "Count of new errors: 2",
            "2 current errors:",
            "file1.ts(1,2)",
            "file1.ts(3,4)",
            "",
            "File: file2.ts",
            "Message: Type mismatch",
            "Code: E002",
            "Hash: 08f2382a",
            "Count of new errors: 1",
            "1 current error:",
            "file2.ts(5,6)",
        ])

        assert to_human_readable_text(_error_summary_map(), _specific_errors_map()) == expected

    def test_message_omitted_when_ignored(self):
        """Test that message-less summaries have no Message line."""
        summaries = {"abc": ErrorSummary(code="E001", file="file1.ts", message=None, line=3, count=2)}

        text = to_human_readable_text(summaries, _specific_errors_map(), ignore_messages=True)

        assert "Message:" not in text
        assert "2 current errors:" in text

    def test_empty(self):
        """Test that no summaries render as an empty string."""
        assert to_human_readable_text({}, {}) == ""


class TestCheckOutput:
    """Test the full check report."""

    def test_no_new_errors(self):
        """Test the report when nothing is new."""
        output = format_human_check_output({}, {}, 0, 1)

        assert output == "\n\n\n0 new errors found. 1 error already in baseline."

    def test_new_errors(self):
        """Test the report header when new errors exist."""
        summaries = {"08f2382a": _error_summary_map()["08f2382a"]}

        output = format_human_check_output(summaries, _specific_errors_map(), 1, 0)

        assert output.startswith("\nNew errors found:\nFile: file2.ts\n")
        assert output.endswith("file2.ts(5,6)\n\n1 new error found. 0 errors already in baseline.")

    def test_summary_pluralization(self):
        """Test singular and plural tallies."""
        assert format_check_summary(1, 1) == "1 new error found. 1 error already in baseline."
        assert format_check_summary(2, 0) == "2 new errors found. 0 errors already in baseline."


class TestGitLabOutputFormat:
    """Test to_gitlab_output_format function."""

    def test_entries(self):
        """Test entry fields of the code quality report."""
        entries = to_gitlab_output_format(_error_summary_map())

        assert entries[0] == {
            "description": "E001: Syntax error",
            "check_name": CHECK_NAME,
            "fingerprint": "f3f953ce",
            "severity": "major",
            "location": {"path": "file1.ts", "lines": {"begin": 3}},
        }
        assert [e["fingerprint"] for e in entries] == ["f3f953ce", "08f2382a"]

    def test_message_less_and_lineless_entry(self):
        """Test fallbacks for summaries without message or line."""
        entries = to_gitlab_output_format(
            {"abc": ErrorSummary(code="E009", file="x.ts", message=None, line=None, count=1)}
        )

        assert entries[0]["description"] == "E009"
        assert entries[0]["location"]["lines"]["begin"] == 1
