"""Pytest configuration for dataknobs_schema tests."""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    """The instant returned by the fixed clock."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2024-01-01T12:00:00Z."""
    return lambda: FIXED_NOW


@pytest.fixture
def schema_dir(tmp_path):
    """Temporary directory for schema files."""
    directory = tmp_path / "schemas"
    directory.mkdir()
    return directory
