"""Type predicates for endpoint parameters.

All predicates are total: they never raise and always return a bool.
"""
from __future__ import annotations

import datetime
import math
import re
from collections.abc import Mapping
from typing import Any

from .enums import ParamKind

# an optional sign, digits with an optional fraction (or a bare fraction), an optional exponent
_NUMERIC = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_string_empty(value: Any) -> bool:
    """True for None, non-strings and ``""``.

    Wrong type and empty are deliberately not told apart: both surface as
    ``"<param> must be of type: String"``.
    """
    return not is_string(value) or len(value) == 0


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_array_of_strings(value: Any) -> bool:
    return is_array(value) and all(is_string(item) for item in value)


def is_number(value: Any) -> bool:
    """True for finite ints/floats and strings that parse entirely as one.

    ``"5"`` and ``"2.5"`` pass; ``"3abc"``, ``"nan"``, ``"inf"``, ``""`` and
    booleans do not.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if is_string(value):
        return _NUMERIC.fullmatch(value) is not None and math.isfinite(float(value))
    return False


def is_date(value: Any) -> bool:
    return isinstance(value, (datetime.datetime, datetime.date))


def is_timestamp(value: Any) -> bool:
    """A Unix timestamp (seconds) or a date/datetime to be converted to one."""
    return is_number(value) or is_date(value)


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


_PREDICATES = {
    ParamKind.STRING: is_string,
    ParamKind.NON_EMPTY_STRING: lambda value: not is_string_empty(value),
    ParamKind.NUMBER: is_number,
    ParamKind.TIMESTAMP: is_timestamp,
    ParamKind.ARRAY_OF_STRING: is_array_of_strings,
    ParamKind.OBJECT: is_object,
}


def check(kind: ParamKind, value: Any) -> bool:
    """Run the predicate declared for ``kind``."""
    return _PREDICATES[kind](value)
