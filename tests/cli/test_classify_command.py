"""
Functional tests for the classify CLI command.

Tests value classification including:
- Positional values and stdin input
- Output format options (JSON, CSV, table)
- Filtering unmatched values
- Usage errors
"""

import json

import pytest

from tsformats.cli.commands.classify import classify


class TestClassifyHelp:
    """Tests for classify command help."""

    def test_classify_help_shows_usage(self, runner):
        result = runner.invoke(classify, ["--help"])

        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "VALUES" in result.output

    def test_classify_help_shows_options(self, runner):
        result = runner.invoke(classify, ["--help"])

        assert "--stdin" in result.output
        assert "--format" in result.output
        assert "--unmatched-only" in result.output


class TestClassifyOutput:
    """Tests for classify output formats."""

    def test_json_output(self, runner):
        result = runner.invoke(classify, ["1716159600", "hello", "-f", "json", "-q"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == [
            {
                "value": "1716159600",
                "formats": ["CUSTOM_EPOCH", "UNIX_SECONDS"],
                "categories": ["special", "unix_epoch"],
                "ambiguous": True,
            },
            {
                "value": "hello",
                "formats": [],
                "categories": [],
                "ambiguous": False,
            },
        ]

    def test_table_output(self, runner):
        result = runner.invoke(classify, ["Mon, 19 May 2025 14:30:15 GMT"])

        assert result.exit_code == 0
        assert "Value" in result.output
        assert "Formats" in result.output
        assert "RFC_822_1123" in result.output
        assert "1 values shown, 1 matched at least one format" in result.output

    def test_csv_output(self, runner):
        result = runner.invoke(classify, ["2025-05-19", "-f", "csv", "-q"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == "value,formats,categories,ambiguous"
        assert lines[1] == "2025-05-19,ISO_DATE,iso8601,no"

    def test_quiet_suppresses_summary(self, runner):
        result = runner.invoke(classify, ["2025-05-19", "-q"])

        assert result.exit_code == 0
        assert "values shown" not in result.output

    def test_configured_default_format(self, runner, monkeypatch):
        monkeypatch.setenv("TSFORMATS_OUTPUT__FORMAT", "json")

        result = runner.invoke(classify, ["2025-05-19", "-q"])

        assert result.exit_code == 0
        assert json.loads(result.output)[0]["formats"] == ["ISO_DATE"]


class TestClassifyInput:
    """Tests for input handling."""

    def test_stdin(self, runner):
        result = runner.invoke(
            classify,
            ["--stdin", "-f", "json", "-q"],
            input="2025-05-19\n\n14:30:15\r\n",
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [row["value"] for row in data] == ["2025-05-19", "14:30:15"]
        assert data[1]["formats"] == ["TIME_24H"]

    def test_stdin_and_arguments_combined(self, runner):
        result = runner.invoke(
            classify,
            ["1716159600", "--stdin", "-f", "json", "-q"],
            input="2025-05-19\n",
        )

        assert result.exit_code == 0
        assert [row["value"] for row in json.loads(result.output)] == [
            "1716159600",
            "2025-05-19",
        ]

    def test_unmatched_only(self, runner):
        result = runner.invoke(
            classify,
            ["2025-05-19", "garbage", "--unmatched-only", "-f", "json", "-q"],
        )

        assert result.exit_code == 0
        assert [row["value"] for row in json.loads(result.output)] == ["garbage"]

    def test_no_values_is_usage_error(self, runner):
        result = runner.invoke(classify, [])

        assert result.exit_code == 2
        assert "Provide at least one VALUE" in result.output

    @pytest.mark.parametrize("value", ["", "\x00", "２０２５-05-19"])
    def test_odd_values_do_not_fail(self, runner, value):
        result = runner.invoke(classify, [value, "-f", "json", "-q"])

        assert result.exit_code == 0
        assert json.loads(result.output)[0]["formats"] == []
