"""
Tests for tsformats.core.types.
"""

import pytest

from tsformats.core.types import ClassificationResult, FormatCategory


class TestFormatCategory:
    """Tests for FormatCategory enum."""

    def test_values_are_lowercase(self):
        for category in FormatCategory:
            assert category.value == category.value.lower()

    def test_lookup_by_value(self):
        assert FormatCategory("unix_epoch") is FormatCategory.UNIX_EPOCH

    def test_is_str(self):
        assert FormatCategory.RFC == "rfc"


class TestClassificationResult:
    """Tests for ClassificationResult."""

    def test_defaults(self):
        result = ClassificationResult(value="x")
        assert result.formats == frozenset()
        assert result.matched is False
        assert result.is_ambiguous is False

    def test_single_format(self):
        result = ClassificationResult(
            value="2025-05-19",
            formats=frozenset({"ISO_DATE"}),
            categories=frozenset({FormatCategory.ISO8601}),
        )
        assert result.matched is True
        assert result.is_ambiguous is False
        assert result.to_dict() == {
            "value": "2025-05-19",
            "formats": ["ISO_DATE"],
            "categories": ["iso8601"],
            "ambiguous": False,
        }

    def test_frozen(self):
        result = ClassificationResult(value="x")
        with pytest.raises(AttributeError):
            result.value = "y"
