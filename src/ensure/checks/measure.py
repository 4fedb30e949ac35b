"""Size and equality queries shared by the checks.

Plain Python containers are measured with ``len`` and compared with ``==``.
numpy arrays and pandas objects get their own handling: an array's length
is not its size (a ``(5, 0)`` array is empty), and ``==`` on arrays is
elementwise, so its truth value is ambiguous.
"""

from collections.abc import Mapping
from typing import Any

import numpy as np
import pandas as pd

PANDAS_TYPES = (pd.Series, pd.DataFrame, pd.Index)


def size_of(value: Any) -> int:
    """Number of elements in value.

    ``.size`` for numpy arrays and pandas objects, ``len()`` for everything
    else. Values without a length raise ``TypeError``.
    """
    if isinstance(value, (np.ndarray,) + PANDAS_TYPES):
        return int(value.size)
    return len(value)


def container_kind(value: Any) -> str:
    """Classify value as "string", "map" or "collection" for default messages."""
    if isinstance(value, (str, bytes, bytearray)):
        return "string"
    if isinstance(value, Mapping):
        return "map"
    return "collection"


def sole_element(value: Any) -> Any:
    """First stored element of a container already known to have size 1."""
    if isinstance(value, np.ndarray):
        return value.flat[0]
    if isinstance(value, pd.DataFrame):
        return value.iat[0, 0]
    if isinstance(value, pd.Series):
        return value.iloc[0]
    return next(iter(value))


def values_equal(expected: Any, value: Any) -> bool:
    """Whole-value equality of expected and value.

    Neither side may be None; None handling belongs to the caller.
    A pandas operand on either side decides with its own ``.equals``, which
    requires the other side to be a pandas object of the same type, so a
    Series never equals a list or an ndarray.
    """
    if isinstance(expected, PANDAS_TYPES):
        return bool(expected.equals(value))
    if isinstance(value, PANDAS_TYPES):
        return bool(value.equals(expected))
    if isinstance(expected, np.ndarray) or isinstance(value, np.ndarray):
        return bool(np.array_equal(expected, value))
    return bool(expected == value)
