"""The single failure type raised by every check.

Checks fail fast, loud, and once. All violations raise the same
exception type, so callers handle broken assumptions uniformly.
"""


class AssumptionViolation(RuntimeError):
    """Raised when an assumption about program state is violated.

    This indicates a bug in the calling code, not bad user input or an
    expected runtime condition. There is no sub-taxonomy: the cause is
    described by the message and by which check raised it.

    Key distinction:
    - ValueError: User/config error (handled by Pydantic)
    - AssumptionViolation: Programmer error
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
