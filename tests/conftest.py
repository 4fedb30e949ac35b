"""Root-level pytest fixtures for the ensure test suite.

Provides filesystem fixtures for the path checks and a customised
message catalogue for the schema tests.
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from ensure.schemas import DefaultMessages


# =============================================================================
# Directory Fixtures
# =============================================================================

@pytest.fixture
def temp_dir():
    """Temporary directory that is cleaned up after test."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def existing_file(temp_dir):
    """A regular file inside temp_dir."""
    path = temp_dir / "data.txt"
    path.write_text("payload")
    return path


@pytest.fixture
def missing_path(temp_dir):
    """A path inside temp_dir that does not exist."""
    return temp_dir / "missing" / "nothing.txt"


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def make_messages():
    """Factory fixture for custom message catalogues.

    Examples
    --------
    >>> def test_custom_wording(make_messages):
    ...     messages = make_messages(not_null="name is required")
    ...     assert messages.not_null == "name is required"
    """
    def _make(**overrides):
        return DefaultMessages(**overrides)

    return _make
