"""Structural equality that looks inside containers and plain objects."""

import datetime
import enum
import math
import re
from collections.abc import Mapping


def deep_equals(first, second):
    """Return True when both values have the same type and equal contents.

    NaN equals NaN. Lists and tuples compare element-wise, sets by
    membership, mappings by key set and then by deep value. Exceptions match
    on type and args, compiled patterns on source and flags. Any other object
    with a __dict__ compares its attributes deeply; the rest fall back to ==.
    """
    if first is second:
        return True
    if type(first) is not type(second):
        return False
    if isinstance(first, float):
        return (math.isnan(first) and math.isnan(second)) or first == second
    if isinstance(first, (list, tuple)):
        return _sequence_equals(first, second)
    if isinstance(first, (set, frozenset)):
        return first == second
    if isinstance(first, Mapping):
        return _mapping_equals(first, second)
    if isinstance(first, BaseException):
        return first.args == second.args
    if isinstance(first, re.Pattern):
        return first.pattern == second.pattern and first.flags == second.flags
    if isinstance(first, (enum.Enum, datetime.date, datetime.time, bytes, bytearray, str, int, complex)):
        return first == second
    if hasattr(first, "__dict__"):
        return _mapping_equals(vars(first), vars(second))
    return first == second


def _sequence_equals(first, second):
    if len(first) != len(second):
        return False
    return all(deep_equals(a, b) for a, b in zip(first, second))


def _mapping_equals(first, second):
    if set(first.keys()) != set(second.keys()):
        return False
    return all(deep_equals(first[key], second[key]) for key in first)
