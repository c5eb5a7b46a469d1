"""
Fixtures for CLI command tests.
"""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _keep_root_logger(restore_root_logger):
    """The top-level group reconfigures logging on every invocation."""
    yield
