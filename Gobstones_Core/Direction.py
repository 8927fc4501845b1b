"""Cardinal directions in clockwise order (North, East, South, West)."""

from enum import Enum


class Direction(Enum):
    NORTH = "n"
    EAST = "e"
    SOUTH = "s"
    WEST = "w"

    @classmethod
    def min(cls):
        return cls.NORTH

    @classmethod
    def max(cls):
        return cls.WEST

    @classmethod
    def next(cls, direction):
        """Clockwise neighbor; West wraps around to North."""
        return _NEXT[direction]

    @classmethod
    def previous(cls, direction):
        """Counter-clockwise neighbor; North wraps around to West."""
        return _PREVIOUS[direction]

    @classmethod
    def opposite(cls, direction):
        return _NEXT[_NEXT[direction]]

    @classmethod
    def is_vertical(cls, direction):
        return direction in (cls.NORTH, cls.SOUTH)

    @classmethod
    def is_horizontal(cls, direction):
        return not cls.is_vertical(direction)

    @classmethod
    def foreach(cls, f):
        """Call f once per direction, from min() to max() inclusive."""
        current = cls.min()
        while current is not cls.max():
            f(current)
            current = cls.next(current)
        f(current)

    @classmethod
    def from_key(cls, key):
        """Resolve a direction from a member, its one-letter code, or its name."""
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            lowered = key.lower()
            for direction in cls:
                if lowered in (direction.value, direction.name.lower()):
                    return direction
        raise ValueError(f"Unknown direction: {key!r}")

    def delta(self, amount=1):
        """(dx, dy) for moving `amount` steps; North grows y, East grows x."""
        return {
            Direction.NORTH: (0, amount),
            Direction.EAST: (amount, 0),
            Direction.SOUTH: (0, -amount),
            Direction.WEST: (-amount, 0),
        }[self]


_NEXT = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}
_PREVIOUS = {after: before for before, after in _NEXT.items()}
