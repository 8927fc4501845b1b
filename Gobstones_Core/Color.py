"""Stone colors, their fixed cyclic order, and iteration helpers."""

from enum import Enum


class Color(Enum):
    """The four stone colors, ordered Blue, Black, Red, Green.

    Values are the one-letter codes used in board definitions.
    """

    BLUE = "a"
    BLACK = "n"
    RED = "r"
    GREEN = "v"

    @classmethod
    def min(cls):
        return cls.BLUE

    @classmethod
    def max(cls):
        return cls.GREEN

    @classmethod
    def next(cls, color):
        """Next color in order; Green wraps around to Blue."""
        return _NEXT[color]

    @classmethod
    def previous(cls, color):
        """Previous color in order; Blue wraps around to Green."""
        return _PREVIOUS[color]

    @classmethod
    def foreach(cls, f):
        """Call f once per color, from min() to max() inclusive."""
        current = cls.min()
        while current is not cls.max():
            f(current)
            current = cls.next(current)
        f(current)

    @classmethod
    def from_key(cls, key):
        """Resolve a color from a member, its one-letter code, or its name."""
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            lowered = key.lower()
            for color in cls:
                if lowered in (color.value, color.name.lower()):
                    return color
        raise ValueError(f"Unknown color: {key!r}")


_NEXT = {
    Color.BLUE: Color.BLACK,
    Color.BLACK: Color.RED,
    Color.RED: Color.GREEN,
    Color.GREEN: Color.BLUE,
}
_PREVIOUS = {after: before for before, after in _NEXT.items()}
