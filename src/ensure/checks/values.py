"""Checks on single values: None-ness, equality, type membership, optionals.

Every check that validates a value returns that value unchanged, so it can
be used inline:

>>> self.name = ensure_not_null(name)
>>> port = ensure_instance_of(int, settings["port"])
"""

import types
from typing import Any, Optional, Type, TypeVar, Union

from ensure.checks.base import ensure_false, ensure_true
from ensure.checks.measure import values_equal
from ensure.schemas.messages import DEFAULT_MESSAGES

T = TypeVar("T")


def _type_name(type_: Union[type, tuple]) -> str:
    if isinstance(type_, tuple):
        return " | ".join(_type_name(t) for t in type_)
    return getattr(type_, "__qualname__", repr(type_))


def _is_type_spec(type_: Any) -> bool:
    """True for anything ``isinstance`` accepts as its second argument."""
    if isinstance(type_, tuple):
        return all(_is_type_spec(t) for t in type_)
    return isinstance(type_, (type, types.UnionType))


def ensure_not_null(value: Optional[T], template: Optional[str] = None, *args: Any) -> T:
    """Ensure value is not None and return it."""
    ensure_true(value is not None, DEFAULT_MESSAGES.not_null if template is None else template, *args)
    return value


def ensure_null(value: Any, template: Optional[str] = None, *args: Any) -> None:
    """Ensure value is None."""
    ensure_true(value is None, DEFAULT_MESSAGES.null if template is None else template, *args)


def ensure_equals(expected: Any, value: T, template: Optional[str] = None, *args: Any) -> T:
    """Ensure value equals expected and return value.

    Two None values are equal. Otherwise the comparison is ``expected == value``,
    with numpy arrays and pandas objects compared as a whole.
    """
    if template is None:
        template = DEFAULT_MESSAGES.equals
    if expected is None:
        ensure_true(value is None, template, *args)
    else:
        ensure_true(values_equal(expected, value), template, *args)
    return value


def ensure_not_equals(expected: Any, value: T, template: Optional[str] = None, *args: Any) -> T:
    """Ensure value differs from expected and return value. Negation of ``ensure_equals``."""
    if template is None:
        template = DEFAULT_MESSAGES.not_equals
    if expected is None:
        ensure_false(value is None, template, *args)
    else:
        ensure_false(values_equal(expected, value), template, *args)
    return value


def ensure_instance_of(type_: Type[T], value: Any, template: Optional[str] = None, *args: Any) -> T:
    """Ensure value is an instance of ``type_`` (or a subclass) and return it.

    Parameters
    ----------
    type_ : type, tuple of types or ``X | Y`` union
        Expected type. Passing None or anything that is not a type is a
        misconfigured check and fails regardless of value.

    value : Any
        Value to check. None is never an instance.

    template : str, optional
        Message template. The default names the expected and actual types,
        e.g. ``Given value must be of type "str" but found "int"``.

    Returns
    -------
    The value, unchanged.

    Raises
    ------
    AssumptionViolation
        If type_ is None or not a type, value is None, or value has the
        wrong type.
    """
    ensure_not_null(type_, DEFAULT_MESSAGES.type_not_null)
    ensure_true(_is_type_spec(type_), DEFAULT_MESSAGES.type_not_type, type_)
    if template is None:
        template = DEFAULT_MESSAGES.instance_of
        actual = "None" if value is None else _type_name(type(value))
        args = (_type_name(type_), actual)
    ensure_true(value is not None and isinstance(value, type_), template, *args)
    return value


def ensure_optional(value: Optional[T], template: Optional[str] = None, *args: Any) -> T:
    """Ensure an optional value is present and return it."""
    ensure_true(value is not None, DEFAULT_MESSAGES.optional if template is None else template, *args)
    return value
