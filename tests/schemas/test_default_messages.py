"""Tests for the DefaultMessages catalogue."""

import pytest
from pydantic import ValidationError

pytestmark = pytest.mark.unit

from ensure.schemas import DEFAULT_MESSAGES, DefaultMessages


class TestDefaultMessages:
    """Test default message catalogue validation."""

    def test_defaults(self):
        assert DEFAULT_MESSAGES.not_null == "Given value must not be None"
        assert DEFAULT_MESSAGES.not_empty_string == "Given string must not be empty"
        assert DEFAULT_MESSAGES.not_empty_collection == "Given collection must not be empty"
        assert DEFAULT_MESSAGES.exists == 'Path "%s" doesn\'t exist'
        assert DEFAULT_MESSAGES.one == "Given collection must contain exactly one element"

    def test_catalogue_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_MESSAGES.not_null = "changed"

    def test_overrides(self, make_messages):
        messages = make_messages(not_null="name is required")
        assert messages.not_null == "name is required"
        assert messages.null == DEFAULT_MESSAGES.null

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError, match="extra"):
            DefaultMessages(not_nul="typo")

    def test_rejects_empty_template(self):
        with pytest.raises(ValidationError):
            DefaultMessages(null="   ")

    def test_path_template_needs_one_placeholder(self):
        with pytest.raises(ValidationError, match="exactly one"):
            DefaultMessages(exists="File is missing")

    def test_type_template_needs_two_placeholders(self):
        with pytest.raises(ValidationError, match="exactly two"):
            DefaultMessages(instance_of="expected %s")

    def test_valid_path_override(self, make_messages):
        messages = make_messages(directory='File "%s" isn\'t a directory')
        assert messages.directory % ("/tmp/x",) == 'File "/tmp/x" isn\'t a directory'
