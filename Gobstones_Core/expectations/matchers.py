"""Predicates behind every Expectation method.

Each matcher takes the value under test first and answers a bool. Matchers
for a specific kind of value answer False for anything of another kind
instead of raising.
"""

import math
import re
from collections.abc import Mapping, Sequence

from ..utils.deep_equals import deep_equals

_TYPE_NAMES = {
    "number": lambda v: _is_number(v),
    "string": lambda v: isinstance(v, str),
    "boolean": lambda v: isinstance(v, bool),
    "list": lambda v: isinstance(v, (list, tuple)),
    "dict": lambda v: isinstance(v, Mapping),
    "function": callable,
    "none": lambda v: v is None,
}


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _both_numbers(*values):
    return all(_is_number(value) for value in values)


def _is_sequence(value):
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _keys_of(value):
    if isinstance(value, Mapping):
        return list(value.keys())
    if hasattr(value, "__dict__"):
        return list(vars(value).keys())
    return None


# Generic


def to_be(actual, expected):
    if _is_number(actual) and _is_number(expected):
        return actual == expected
    if isinstance(actual, str) and isinstance(expected, str):
        return actual == expected
    return actual is expected


def to_be_like(actual, expected):
    return deep_equals(actual, expected)


def to_be_none(actual):
    return actual is None


def to_be_defined(actual):
    return actual is not None


def to_be_truthy(actual):
    return bool(actual)


def to_be_falsy(actual):
    return not actual


def to_have_type(actual, type_name):
    check = _TYPE_NAMES.get(type_name)
    return check(actual) if check else False


def to_be_instance_of(actual, cls):
    return isinstance(actual, cls)


# Numbers


def to_be_greater_than(actual, expected):
    return _both_numbers(actual, expected) and actual > expected


def to_be_greater_than_or_equal(actual, expected):
    return _both_numbers(actual, expected) and actual >= expected


def to_be_lower_than(actual, expected):
    return _both_numbers(actual, expected) and actual < expected


def to_be_lower_than_or_equal(actual, expected):
    return _both_numbers(actual, expected) and actual <= expected


def to_be_between(actual, low, high):
    return _both_numbers(actual, low, high) and low <= actual <= high


def to_be_infinity(actual):
    return _is_number(actual) and math.isinf(actual)


def to_be_nan(actual):
    return _is_number(actual) and math.isnan(actual)


def to_be_close_to(actual, expected, digits):
    return _both_numbers(actual, expected) and abs(expected - actual) < 10 ** -digits / 10


# Strings


def to_have_substring(actual, substring):
    return isinstance(actual, str) and substring in actual


def to_start_with(actual, prefix):
    return isinstance(actual, str) and actual.startswith(prefix)


def to_end_with(actual, suffix):
    return isinstance(actual, str) and actual.endswith(suffix)


def to_match(actual, pattern):
    return isinstance(actual, str) and re.search(pattern, actual) is not None


# Sequences


def to_have_length(actual, length):
    return _is_sequence(actual) and len(actual) == length


def to_contain(actual, value):
    return _is_sequence(actual) and value in actual


def to_have_at_position(actual, value, position):
    return _is_sequence(actual) and 0 <= position < len(actual) and actual[position] == value


def all_to_satisfy(actual, criteria):
    return _is_sequence(actual) and all(criteria(item) for item in actual)


def any_to_satisfy(actual, criteria):
    return _is_sequence(actual) and any(criteria(item) for item in actual)


def amount_to_satisfy(actual, amount, criteria):
    return _is_sequence(actual) and sum(1 for item in actual if criteria(item)) == amount


# Mappings and objects


def to_have_property_count(actual, count):
    keys = _keys_of(actual)
    return keys is not None and len(keys) == count


def to_have_at_least(actual, keys):
    present = _keys_of(actual)
    return present is not None and all(key in present for key in keys)


def to_have_no_other_than(actual, keys):
    present = _keys_of(actual)
    return present is not None and all(key in keys for key in present)


def to_have_property(actual, name):
    present = _keys_of(actual)
    return present is not None and name in present
