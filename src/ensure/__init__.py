"""`ensure` - fail-fast runtime checks for internal assumptions.

Subpackages:
- checks: Check functions and the AssumptionViolation error
- schemas: Default message catalogue (Pydantic)
"""

from ensure.checks import (
    AssumptionViolation,
    fail,
    ensure_true,
    ensure_false,
    ensure_not_null,
    ensure_null,
    ensure_equals,
    ensure_not_equals,
    ensure_not_empty,
    ensure_empty,
    ensure_instance_of,
    ensure_optional,
    ensure_one,
    ensure_exists,
    ensure_not_exists,
    ensure_directory,
    CHECK_INVARIANTS,
)
from ensure.schemas import DEFAULT_MESSAGES, DefaultMessages

__version__ = "0.1.0"

__all__ = [
    "AssumptionViolation",
    "fail",
    "ensure_true",
    "ensure_false",
    "ensure_not_null",
    "ensure_null",
    "ensure_equals",
    "ensure_not_equals",
    "ensure_not_empty",
    "ensure_empty",
    "ensure_instance_of",
    "ensure_optional",
    "ensure_one",
    "ensure_exists",
    "ensure_not_exists",
    "ensure_directory",
    "CHECK_INVARIANTS",
    "DEFAULT_MESSAGES",
    "DefaultMessages",
]
