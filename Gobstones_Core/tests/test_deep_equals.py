"""Structural equality helper."""

import datetime
import re

from Gobstones_Core.Color import Color
from Gobstones_Core.utils.deep_equals import deep_equals


class _Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


def test_primitives_and_types():
    assert deep_equals(1, 1)
    assert not deep_equals(1, 1.0)
    assert deep_equals("a", "a")
    assert deep_equals(float("nan"), float("nan"))
    assert not deep_equals(None, 0)
    assert deep_equals(Color.RED, Color.RED)


def test_containers():
    assert deep_equals([1, {"a": [2, 3]}], [1, {"a": [2, 3]}])
    assert not deep_equals([1, 2], [2, 1])
    assert not deep_equals([1, 2], (1, 2))
    assert deep_equals({1, 2}, {2, 1})
    assert not deep_equals({"a": 1}, {"a": 1, "b": 2})


def test_objects():
    assert deep_equals(_Point(1, [2]), _Point(1, [2]))
    assert not deep_equals(_Point(1, 2), _Point(2, 1))
    assert deep_equals(ValueError("x"), ValueError("x"))
    assert not deep_equals(ValueError("x"), KeyError("x"))
    assert deep_equals(re.compile("a+", re.I), re.compile("a+", re.I))
    assert not deep_equals(re.compile("a+"), re.compile("a+", re.I))
    assert deep_equals(datetime.date(2024, 1, 2), datetime.date(2024, 1, 2))
