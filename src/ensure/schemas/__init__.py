"""Pydantic configuration schemas for ensure.

Exports
-------
DefaultMessages : class
    Frozen catalogue of default failure messages
DEFAULT_MESSAGES : DefaultMessages
    The catalogue instance read by every check
EnsureBaseModel : class
    Strict base model for ensure schemas
"""

from ensure.schemas.base import EnsureBaseModel
from ensure.schemas.messages import DefaultMessages, DEFAULT_MESSAGES

__all__ = [
    'EnsureBaseModel',
    'DefaultMessages',
    'DEFAULT_MESSAGES',
]
