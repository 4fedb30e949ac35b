"""Checks on containers: emptiness and single-element collections.

Strings, sequences, sets, mappings, numpy arrays and pandas objects are all
accepted; see ``ensure.checks.measure`` for how their size is taken.
"""

from typing import Any, Optional, TypeVar

from ensure.checks.base import ensure_true
from ensure.checks.measure import container_kind, size_of, sole_element
from ensure.checks.values import ensure_equals, ensure_not_null
from ensure.schemas.messages import DEFAULT_MESSAGES

T = TypeVar("T")


def ensure_not_empty(value: Optional[T], template: Optional[str] = None, *args: Any) -> T:
    """Ensure value is not None and has a non-zero size, and return it.

    The default message depends on the container kind, e.g.
    "Given string must not be empty" or "Given map must not be empty".
    """
    if template is None:
        template = getattr(DEFAULT_MESSAGES, f"not_empty_{container_kind(value)}")
    ensure_true(value is not None and size_of(value) != 0, template, *args)
    return value


def ensure_empty(value: Optional[T], template: Optional[str] = None, *args: Any) -> Optional[T]:
    """Ensure value is None or has zero size, and return it."""
    if template is None:
        template = getattr(DEFAULT_MESSAGES, f"empty_{container_kind(value)}")
    ensure_true(value is None or size_of(value) == 0, template, *args)
    return value


def ensure_one(collection: Any, template: Optional[str] = None, *args: Any) -> Any:
    """Ensure collection holds exactly one element and return that element.

    Parameters
    ----------
    collection : sized container
        Must not be None. For a mapping the single key is returned; for a
        numpy array or pandas object the single stored value.

    template : str, optional
        Message template. Defaults to
        "Given collection must contain exactly one element".

    Returns
    -------
    The sole element.

    Raises
    ------
    AssumptionViolation
        If collection is None or its size is not exactly 1.

    Examples
    --------
    >>> row = ensure_one(rows, "expected one row for id %s", row_id)
    """
    ensure_not_null(collection, DEFAULT_MESSAGES.collection_not_null)
    ensure_equals(1, size_of(collection), DEFAULT_MESSAGES.one if template is None else template, *args)
    return sole_element(collection)
