"""
Functional tests for the check CLI command.
"""

import importlib

import pytest

from tsformats.cli.commands.check import check
from tsformats.core.catalog import FormatSpec, build_catalog
from tsformats.core.types import FormatCategory


@pytest.fixture
def patch_catalog(monkeypatch):
    """Point the check command at a custom catalog."""
    module = importlib.import_module("tsformats.cli.commands.check")

    def _patch(specs):
        catalog = build_catalog(specs)
        monkeypatch.setattr(module, "get_catalog", lambda: catalog)
        return catalog

    return _patch


class TestCheckCommand:
    """Tests for catalog validation."""

    def test_shipped_catalog_passes(self, runner):
        result = runner.invoke(check, [])

        assert result.exit_code == 0
        assert result.output.startswith("OK: ")
        assert "all definitions valid" in result.output

    def test_quiet(self, runner):
        result = runner.invoke(check, ["-q"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_rejected_definition_fails(self, runner, patch_catalog):
        patch_catalog([
            FormatSpec("GOOD", FormatCategory.SPECIAL, r"^a$", "a"),
            FormatSpec("BROKEN", FormatCategory.SPECIAL, r"^(a$", "a"),
        ])

        result = runner.invoke(check, [])

        assert result.exit_code == 1
        assert "Error: BROKEN: rejected (invalid pattern" in result.output

    def test_example_mismatch_fails(self, runner, patch_catalog):
        patch_catalog([
            FormatSpec("WRONG_EXAMPLE", FormatCategory.SPECIAL, r"^\d{4}$", "12345"),
        ])

        result = runner.invoke(check, [])

        assert result.exit_code == 1
        assert "WRONG_EXAMPLE: example '12345' does not match its pattern" in result.output
