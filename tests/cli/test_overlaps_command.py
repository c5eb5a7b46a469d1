"""
Functional tests for the overlaps CLI command.
"""

import json
from pathlib import Path

from tsformats.cli.commands.overlaps import overlaps


class TestOverlapsCommand:
    """Tests for the overlap report."""

    def test_json_report(self, runner):
        result = runner.invoke(overlaps, ["-f", "json", "-q"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        pairs = {(row["first"], row["second"]) for row in data}
        assert ("CUSTOM_EPOCH", "UNIX_SECONDS") in pairs
        assert all(row["expected"] for row in data)

    def test_unexpected_only_empty_for_catalog(self, runner):
        result = runner.invoke(overlaps, ["--unexpected-only", "-f", "json", "-q"])

        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_extra_probe(self, runner):
        result = runner.invoke(
            overlaps,
            ["--no-examples", "-p", "05/06/2025 14:30:15", "-f", "json", "-q"],
        )

        assert result.exit_code == 0
        rows = [r for r in json.loads(result.output) if r["probe"] == "05/06/2025 14:30:15"]
        assert [(r["first"], r["second"]) for r in rows] == [("EU_DATETIME", "US_DATETIME")]

    def test_extra_probes_from_config(self, runner):
        Path("tsformats.yaml").write_text(
            "overlap:\n"
            "  include_examples: false\n"
            "  extra_probes:\n"
            "    - '05-06-25 14:30:15'\n"
        )

        result = runner.invoke(overlaps, ["-f", "json", "-q"])

        assert result.exit_code == 0
        pairs = {(r["first"], r["second"]) for r in json.loads(result.output)}
        assert ("SHORT_EU_DATETIME", "SHORT_US_DATETIME") in pairs

    def test_summary_and_category_counts(self, runner):
        result = runner.invoke(overlaps, [])

        assert result.exit_code == 0
        assert "overlapping pairs over" in result.output
        assert "0 unexpected" in result.output
        assert "Overlaps between categories:" in result.output
