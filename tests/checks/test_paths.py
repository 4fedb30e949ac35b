"""Tests for filesystem checks: ensure_exists, ensure_not_exists, ensure_directory."""

import pytest

pytestmark = pytest.mark.unit

from ensure.checks import (
    AssumptionViolation,
    ensure_directory,
    ensure_exists,
    ensure_not_exists,
)


class TestEnsureExists:
    """Test ensure_exists."""

    def test_returns_existing_path(self, existing_file):
        assert ensure_exists(existing_file) is existing_file

    def test_accepts_str_and_keeps_type(self, existing_file):
        path = str(existing_file)
        assert ensure_exists(path) is path

    def test_directory_exists(self, temp_dir):
        assert ensure_exists(temp_dir) is temp_dir

    def test_default_message_includes_path(self, missing_path):
        with pytest.raises(AssumptionViolation) as excinfo:
            ensure_exists(missing_path)
        assert str(excinfo.value) == f'Path "{missing_path}" doesn\'t exist'

    def test_custom_message(self, missing_path):
        with pytest.raises(AssumptionViolation, match="^input missing: nothing.txt$"):
            ensure_exists(missing_path, "input missing: %s", missing_path.name)

    def test_none_path_fails(self):
        with pytest.raises(AssumptionViolation, match="^value must not be None$"):
            ensure_exists(None)


class TestEnsureNotExists:
    """Test ensure_not_exists."""

    def test_returns_missing_path(self, missing_path):
        assert ensure_not_exists(missing_path) is missing_path

    def test_default_message_includes_path(self, existing_file):
        with pytest.raises(AssumptionViolation) as excinfo:
            ensure_not_exists(existing_file)
        assert str(excinfo.value) == f'Path "{existing_file}" already exists'

    def test_custom_message(self, existing_file):
        with pytest.raises(AssumptionViolation, match="^failed 1$"):
            ensure_not_exists(existing_file, "failed %s", 1)

    def test_none_path_fails(self):
        with pytest.raises(AssumptionViolation, match="^value must not be None$"):
            ensure_not_exists(None, "failed %s", 1)


class TestEnsureDirectory:
    """Test ensure_directory."""

    def test_returns_directory(self, temp_dir):
        assert ensure_directory(temp_dir) is temp_dir

    def test_regular_file_is_not_directory(self, existing_file):
        with pytest.raises(AssumptionViolation) as excinfo:
            ensure_directory(existing_file)
        assert str(excinfo.value) == f'Path "{existing_file}" is not a directory'

    def test_missing_path_is_not_directory(self, missing_path):
        with pytest.raises(AssumptionViolation, match="is not a directory"):
            ensure_directory(str(missing_path))

    def test_custom_message(self, existing_file):
        with pytest.raises(AssumptionViolation, match="^output dir data.txt is a file$"):
            ensure_directory(existing_file, "output dir %s is a file", existing_file.name)

    def test_none_path_fails(self):
        with pytest.raises(AssumptionViolation, match="^value must not be None$"):
            ensure_directory(None)
