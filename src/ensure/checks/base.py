"""Base check primitives.

``ensure_true`` is the single enforcement mechanism: every other check
evaluates its predicate and hands the result to ``ensure_true`` or
``ensure_false``. ``fail`` is the only place that raises.
"""

import logging
from typing import Any, NoReturn, Optional

from ensure.checks.failure import AssumptionViolation
from ensure.schemas.messages import DEFAULT_MESSAGES

logger = logging.getLogger(__name__)


def render_message(template: str, args: tuple) -> str:
    """Substitute ``args`` into ``template`` printf-style.

    A template without arguments is returned verbatim, so a literal ``%``
    needs no escaping. Mismatched arguments raise the ``TypeError`` or
    ``ValueError`` of the ``%`` operator.
    """
    if not args:
        return template
    return template % args


def fail(template: str, *args: Any) -> NoReturn:
    """Raise ``AssumptionViolation`` unconditionally.

    Use in branches that must never be reached, e.g. the final ``else``
    of an exhaustive ``if``/``elif`` chain.

    Parameters
    ----------
    template : str
        Message template, rendered with ``template % args``.

    *args
        Positional arguments for the template.

    Raises
    ------
    AssumptionViolation
        Always.

    Examples
    --------
    >>> fail("unreachable case %s", kind)
    """
    message = render_message(template, args)
    logger.debug("Assumption violated: %s", message)
    raise AssumptionViolation(message)


def ensure_true(condition: Any, template: Optional[str] = None, *args: Any) -> None:
    """Ensure a condition holds.

    Parameters
    ----------
    condition : Any
        The assumption that must be true. If falsy, AssumptionViolation is raised.

    template : str, optional
        Message template. Defaults to "Given condition must be true".

    *args
        Positional arguments for the template.

    Raises
    ------
    AssumptionViolation
        If condition is falsy. This indicates a bug in the caller.

    Examples
    --------
    >>> ensure_true(len(rows) == expected, "got %d rows, expected %d", len(rows), expected)
    """
    if not condition:
        fail(DEFAULT_MESSAGES.true if template is None else template, *args)


def ensure_false(condition: Any, template: Optional[str] = None, *args: Any) -> None:
    """Ensure a condition does not hold. Exact negation of ``ensure_true``."""
    if condition:
        fail(DEFAULT_MESSAGES.false if template is None else template, *args)
