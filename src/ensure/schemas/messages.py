"""DefaultMessages: the catalogue of default failure messages.

Every check that is called without a template raises with one of these
messages. This is the single source of truth for default wording; check
functions never hard-code their own text.

The catalogue is frozen. Build a customised copy with
``DefaultMessages(**overrides)`` and pass its templates explicitly.
"""

from pydantic import ConfigDict, Field, field_validator
from ensure.schemas.base import EnsureBaseModel


class DefaultMessages(EnsureBaseModel):
    """Default message templates, rendered with ``template % args``."""

    model_config = ConfigDict(frozen=True)

    # Bare conditions and None checks
    true: str = Field("Given condition must be true", min_length=1)
    false: str = Field("Given condition must be false", min_length=1)
    not_null: str = Field("Given value must not be None", min_length=1)
    null: str = Field("Given value must be None", min_length=1)

    # Equality
    equals: str = Field("Given value must match the expected value", min_length=1)
    not_equals: str = Field("Given value must differ from expected value", min_length=1)

    # Containers
    not_empty_string: str = Field("Given string must not be empty", min_length=1)
    not_empty_collection: str = Field("Given collection must not be empty", min_length=1)
    not_empty_map: str = Field("Given map must not be empty", min_length=1)
    empty_string: str = Field("Given string must be empty", min_length=1)
    empty_collection: str = Field("Given collection must be empty", min_length=1)
    empty_map: str = Field("Given map must be empty", min_length=1)
    one: str = Field("Given collection must contain exactly one element", min_length=1)
    collection_not_null: str = Field("collection must not be None", min_length=1)

    # Types and optionals
    instance_of: str = Field('Given value must be of type "%s" but found "%s"', min_length=1)
    type_not_null: str = Field("type_ must not be None", min_length=1)
    type_not_type: str = Field("type_ must be a type but found %r", min_length=1)
    optional: str = Field("Optional has no value", min_length=1)

    # Filesystem
    path_not_null: str = Field("value must not be None", min_length=1)
    exists: str = Field('Path "%s" doesn\'t exist', min_length=1)
    not_exists: str = Field('Path "%s" already exists', min_length=1)
    directory: str = Field('Path "%s" is not a directory', min_length=1)

    @field_validator("exists", "not_exists", "directory")
    @classmethod
    def require_path_placeholder(cls, v):
        """Path templates are rendered with the path as their only argument."""
        if v.count("%s") != 1:
            raise ValueError(f"path template must contain exactly one '%s' placeholder: {v!r}")
        return v

    @field_validator("instance_of")
    @classmethod
    def require_type_placeholders(cls, v):
        """Rendered with the expected and the actual type name."""
        if v.count("%s") != 2:
            raise ValueError(f"type template must contain exactly two '%s' placeholders: {v!r}")
        return v


DEFAULT_MESSAGES = DefaultMessages()
