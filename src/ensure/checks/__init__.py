"""Runtime checks: fail-fast enforcement of internal assumptions.

Checks fail immediately and loudly when an assumption about program state
does not hold. They catch programmer errors; they are not meant for
validating user input, where failure is an expected outcome.

Key principle:
- Pydantic validates config correctness
- Checks validate assumptions inside the code
"""

from ensure.checks.failure import AssumptionViolation
from ensure.checks.base import ensure_false, ensure_true, fail
from ensure.checks.values import (
    ensure_equals,
    ensure_instance_of,
    ensure_not_equals,
    ensure_not_null,
    ensure_null,
    ensure_optional,
)
from ensure.checks.containers import ensure_empty, ensure_not_empty, ensure_one
from ensure.checks.paths import ensure_directory, ensure_exists, ensure_not_exists
from ensure.checks.invariants import CHECK_INVARIANTS, PASS_THROUGH_CHECKS

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
    "PASS_THROUGH_CHECKS",
]
