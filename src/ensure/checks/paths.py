"""Filesystem checks.

Each check accepts a ``str`` or any ``os.PathLike`` and returns the object it
was given, so ``self.root = ensure_directory(root)`` keeps the caller's type.
The default messages interpolate the path itself.
"""

import os
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from ensure.checks.base import ensure_false, ensure_true
from ensure.checks.values import ensure_not_null
from ensure.schemas.messages import DEFAULT_MESSAGES

PathT = TypeVar("PathT", bound=Union[str, os.PathLike])


def ensure_exists(path: PathT, template: Optional[str] = None, *args: Any) -> PathT:
    """Ensure a filesystem entry exists at path and return path.

    Raises
    ------
    AssumptionViolation
        If path is None ("value must not be None") or nothing exists there
        (default: 'Path "<path>" doesn't exist').
    """
    ensure_not_null(path, DEFAULT_MESSAGES.path_not_null)
    if template is None:
        template, args = DEFAULT_MESSAGES.exists, (path,)
    ensure_true(Path(path).exists(), template, *args)
    return path


def ensure_not_exists(path: PathT, template: Optional[str] = None, *args: Any) -> PathT:
    """Ensure nothing exists at path and return path."""
    ensure_not_null(path, DEFAULT_MESSAGES.path_not_null)
    if template is None:
        template, args = DEFAULT_MESSAGES.not_exists, (path,)
    ensure_false(Path(path).exists(), template, *args)
    return path


def ensure_directory(path: PathT, template: Optional[str] = None, *args: Any) -> PathT:
    """Ensure path is an existing directory and return path."""
    ensure_not_null(path, DEFAULT_MESSAGES.path_not_null)
    if template is None:
        template, args = DEFAULT_MESSAGES.directory, (path,)
    ensure_true(Path(path).is_dir(), template, *args)
    return path
