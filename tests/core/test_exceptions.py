"""
Tests for the tsformats exception hierarchy.
"""

import pytest

from tsformats.core.exceptions import CatalogError, ConfigurationError, TsFormatsError


class TestTsFormatsError:
    """Tests for the base exception."""

    def test_message_only(self):
        error = TsFormatsError("Something failed")
        assert str(error) == "Something failed"
        assert error.context is None
        assert error.details == {}

    def test_with_context_and_details(self):
        error = TsFormatsError(
            "Something failed",
            context="building catalog",
            details={"count": 2},
        )
        assert str(error) == "Something failed. Context: building catalog. Details: count=2"


class TestCatalogError:
    """Tests for CatalogError."""

    def test_names_in_details(self):
        error = CatalogError("2 rejected", names=["A", "B"])
        assert error.names == ["A", "B"]
        assert error.details == {"names": ["A", "B"]}
        assert "names=['A', 'B']" in str(error)

    def test_without_names(self):
        error = CatalogError("rejected")
        assert error.names == []
        assert error.details == {}

    def test_is_base_error(self):
        with pytest.raises(TsFormatsError):
            raise CatalogError("rejected", names=["A"])


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_config_path(self):
        error = ConfigurationError("bad file", config_path="/tmp/tsformats.yaml")
        assert error.config_path == "/tmp/tsformats.yaml"
        assert error.details["config_path"] == "/tmp/tsformats.yaml"
        assert isinstance(error, TsFormatsError)
