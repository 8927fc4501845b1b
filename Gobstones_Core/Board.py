"""Board state container: a grid of cells, a movable head, and resizing."""

import logging

from .Cell import Cell
from .Color import Color
from .Direction import Direction
from .errors import (
    CellReadingAttempt,
    InvalidBoardDescription,
    InvalidCellReading,
    InvalidSizeChange,
    LocationChangeAttempt,
    LocationFallsOutsideBoard,
    SizeChangeAttempt,
)
from .events import EventEmitter, HeadMoved, SizeChanged
from .expectations import expect, expect_all
from .utils.matrix import matrix

LOGGER = logging.getLogger(__name__)

BOARD_FORMAT = "GBB/1.0"
DEFAULT_WIDTH = 4
DEFAULT_HEIGHT = 4
DEFAULT_HEAD = (0, 0)


class Board(EventEmitter):
    """A width x height grid of Cells plus a head location.

    Coordinates are (x, y) with (0, 0) at the South-West corner; x grows to
    the East and y grows to the North. Cells are stored column-major, and
    every cell always knows its own (x, y). Failed operations raise before
    mutating anything.

    Events: HeadMoved when the head is set or moved, SizeChanged after any
    resize (which may also relocate the head without a HeadMoved event).
    """

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, head=DEFAULT_HEAD, initial_stones=None):
        super().__init__()
        head = _as_location(head)
        if head is None:
            raise InvalidBoardDescription(width, height, (None, None))
        expect_all(
            expect(width).to_be_instance_of(int).to_be_greater_than(0),
            expect(height).to_be_instance_of(int).to_be_greater_than(0),
            expect(head[0]).to_be_instance_of(int).to_be_greater_than_or_equal(0).to_be_lower_than(width),
            expect(head[1]).to_be_instance_of(int).to_be_greater_than_or_equal(0).to_be_lower_than(height),
        ).or_throw(InvalidBoardDescription(width, height, head))

        self._width = width
        self._height = height
        self._head_x, self._head_y = head
        # Duplicate coordinates: the later record overwrites the earlier one.
        records = {}
        for record in initial_stones or []:
            location, stones = self._parse_stones_record(record)
            records[location] = stones
        self._columns = matrix(width, height, lambda i, j: Cell(self, i, j, records.get((i, j))))
        LOGGER.debug("Created %dx%d board with head at %s", width, height, head)

    def _parse_stones_record(self, record):
        try:
            x, y = record["x"], record["y"]
            stones = {Color.from_key(k): v for k, v in record.items() if k not in ("x", "y")}
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidBoardDescription(
                self._width, self._height, self.head, message=f"Invalid cell record {record!r}: {exc}"
            ) from exc
        if not self.in_bounds(x, y):
            raise InvalidBoardDescription(
                self._width, self._height, self.head,
                message=f"Cell record at [{x}, {y}] falls outside a {self._width}x{self._height} board",
            )
        for color, amount in stones.items():
            if not isinstance(amount, int) or amount < 0:
                raise InvalidBoardDescription(
                    self._width, self._height, self.head,
                    message=f"Cell record at [{x}, {y}] has an invalid amount of {color.name.lower()} stones: {amount!r}",
                )
        return (x, y), stones

    # ------------------------------------------------------------------
    # Definitions and cloning
    # ------------------------------------------------------------------
    @classmethod
    def from_definition(cls, definition):
        """Build a board from a definition mapping.

        Accepts the full form produced by to_definition() (a "board" key with
        width columns of height {a, n, r, v} dicts) or the compact form with a
        "cells" list of {x, y, <color>: amount} records.
        """
        if not isinstance(definition, dict):
            raise InvalidBoardDescription(None, None, (None, None), message="A board definition must be a mapping")
        width = definition.get("width", DEFAULT_WIDTH)
        height = definition.get("height", DEFAULT_HEIGHT)
        head = definition.get("head", DEFAULT_HEAD)
        if "board" in definition:
            columns = definition["board"]
            if (
                not isinstance(columns, list)
                or len(columns) != width
                or any(not isinstance(column, list) or len(column) != height for column in columns)
            ):
                raise InvalidBoardDescription(
                    width, height, head or (None, None),
                    message=f"The board data does not describe a {width}x{height} board",
                )
            records = [
                dict(info, x=x, y=y) for x, column in enumerate(columns) for y, info in enumerate(column)
            ]
        else:
            records = definition.get("cells") or []
        return cls(width, height, head, records)

    def to_definition(self):
        return {
            "format": self.format,
            "width": self._width,
            "height": self._height,
            "head": [self._head_x, self._head_y],
            "board": [[cell.info for cell in column] for column in self._columns],
        }

    def clone(self):
        """Independent copy with the same size, head and stones; listeners are not copied."""
        records = [dict(cell.stones, x=cell.x, y=cell.y) for cell in self]
        return Board(self._width, self._height, self.head, records)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def format(self):
        return BOARD_FORMAT

    @property
    def width(self):
        return self._width

    @width.setter
    def width(self, value):
        self._change_size(value, self._height, False, SizeChangeAttempt.RESIZE)

    @property
    def height(self):
        return self._height

    @height.setter
    def height(self, value):
        self._change_size(self._width, value, False, SizeChangeAttempt.RESIZE)

    @property
    def head(self):
        return (self._head_x, self._head_y)

    @head.setter
    def head(self, value):
        self._set_head_location(value, LocationChangeAttempt.SET_LOCATION)

    @property
    def head_x(self):
        return self._head_x

    @property
    def head_y(self):
        return self._head_y

    @property
    def size(self):
        return (self._width, self._height)

    def in_bounds(self, x, y):
        return 0 <= x < self._width and 0 <= y < self._height

    # ------------------------------------------------------------------
    # Querying
    # ------------------------------------------------------------------
    def get_cell(self, x=None, y=None):
        """Cell at (x, y); either coordinate defaults to the head's."""
        x = self._head_x if x is None else x
        y = self._head_y if y is None else y
        expect_all(
            expect(x).to_be_instance_of(int).to_be_greater_than_or_equal(0).to_be_lower_than(self._width),
            expect(y).to_be_instance_of(int).to_be_greater_than_or_equal(0).to_be_lower_than(self._height),
        ).or_throw(InvalidCellReading(CellReadingAttempt.READ_CELL, (x, y)))
        return self._columns[x][y]

    def get_column(self, column):
        expect(column).to_be_instance_of(int).to_be_greater_than_or_equal(0).to_be_lower_than(self._width).or_throw(
            InvalidCellReading(CellReadingAttempt.READ_COLUMN, (column, 0))
        )
        return list(self._columns[column])

    def get_row(self, row):
        """Cells of one row, West to East. Slower than get_column."""
        expect(row).to_be_instance_of(int).to_be_greater_than_or_equal(0).to_be_lower_than(self._height).or_throw(
            InvalidCellReading(CellReadingAttempt.READ_ROW, (0, row))
        )
        return [column[row] for column in self._columns]

    def get_columns(self):
        return [list(column) for column in self._columns]

    def get_rows(self):
        return [self.get_row(row) for row in range(self._height)]

    def __iter__(self):
        # Column-major: every row of column 0, then column 1, ...
        for column in self._columns:
            yield from column

    def fold_cells(self, f, initial):
        """Reduce over the cells in column-major order starting at (0, 0)."""
        value = initial
        for cell in self:
            value = f(value, cell)
        return value

    def map_cells(self, f):
        """Column-major matrix of f(cell), indexed as result[x][y]."""
        def place(result, cell):
            result[cell.x][cell.y] = f(cell)
            return result

        return self.fold_cells(place, matrix(self._width, self._height))

    def filter_cells(self, f):
        def keep(found, cell):
            if f(cell):
                found.append(cell)
            return found

        return self.fold_cells(keep, [])

    def foreach_cells(self, f):
        def visit(_, cell):
            f(cell)

        self.fold_cells(visit, None)

    def clean(self):
        """Empty every cell."""
        self.foreach_cells(lambda cell: cell.empty())

    # ------------------------------------------------------------------
    # Head
    # ------------------------------------------------------------------
    def move_head_to(self, direction):
        """Move the head one step; raises LocationFallsOutsideBoard off the edge."""
        dx, dy = direction.delta()
        self._set_head_location((self._head_x + dx, self._head_y + dy), LocationChangeAttempt.MOVE)

    def move_head_to_edge_at(self, direction):
        """Jump the head to the border in `direction`. Never fails."""
        if direction is Direction.NORTH:
            target = (self._head_x, self._height - 1)
        elif direction is Direction.SOUTH:
            target = (self._head_x, 0)
        elif direction is Direction.EAST:
            target = (self._width - 1, self._head_y)
        else:
            target = (0, self._head_y)
        self._set_head_location(target, LocationChangeAttempt.MOVE)

    def _set_head_location(self, location, attempt):
        target = _as_location(location)
        if target is None:
            raise LocationFallsOutsideBoard(attempt, (None, None), self.head)
        expect_all(
            expect(target[0]).to_be_instance_of(int).to_be_greater_than_or_equal(0).to_be_lower_than(self._width),
            expect(target[1]).to_be_instance_of(int).to_be_greater_than_or_equal(0).to_be_lower_than(self._height),
        ).or_throw(LocationFallsOutsideBoard(attempt, target, self.head))
        previous = self.head
        self._head_x, self._head_y = target
        self.emit(HeadMoved(self.head, previous))

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------
    def change_size_to(self, width, height, from_origin_corner=False):
        """Resize the board.

        Rows and columns are added or dropped at the far edges (North and
        East), or at the origin edges (South and West) when
        `from_origin_corner` is set. Stones travel with their cells.
        """
        self._change_size(width, height, from_origin_corner, SizeChangeAttempt.RESIZE)

    def add_column(self, direction=Direction.EAST):
        self.add_columns(1, direction)

    def add_columns(self, amount, direction=Direction.EAST):
        _require_horizontal(direction)
        self._change_size(
            self._width + amount, self._height, direction is Direction.WEST, SizeChangeAttempt.ADD_COLUMN
        )

    def remove_column(self, direction=Direction.EAST):
        self.remove_columns(1, direction)

    def remove_columns(self, amount, direction=Direction.EAST):
        _require_horizontal(direction)
        self._change_size(
            self._width - amount, self._height, direction is Direction.WEST, SizeChangeAttempt.REMOVE_COLUMN
        )

    def add_row(self, direction=Direction.NORTH):
        self.add_rows(1, direction)

    def add_rows(self, amount, direction=Direction.NORTH):
        _require_vertical(direction)
        self._change_size(
            self._width, self._height + amount, direction is Direction.SOUTH, SizeChangeAttempt.ADD_ROW
        )

    def remove_row(self, direction=Direction.NORTH):
        self.remove_rows(1, direction)

    def remove_rows(self, amount, direction=Direction.NORTH):
        _require_vertical(direction)
        self._change_size(
            self._width, self._height - amount, direction is Direction.SOUTH, SizeChangeAttempt.REMOVE_ROW
        )

    def _change_size(self, width, height, from_origin_corner, attempt):
        expect_all(
            expect(width).to_be_instance_of(int).to_be_greater_than(0),
            expect(height).to_be_instance_of(int).to_be_greater_than(0),
        ).or_throw(InvalidSizeChange(attempt, self._width, self._height, width, height, self.head))

        previous_size = self.size
        previous_head = self.head
        # Shift applied to surviving cells: the amount added (or removed, when
        # negative) at the origin edges.
        shift_x = width - self._width if from_origin_corner else 0
        shift_y = height - self._height if from_origin_corner else 0
        old_columns = self._columns

        def relocate(i, j):
            old_x, old_y = i - shift_x, j - shift_y
            if 0 <= old_x < len(old_columns) and 0 <= old_y < len(old_columns[old_x]):
                cell = old_columns[old_x][old_y]
                cell.x, cell.y = i, j
                return cell
            return Cell(self, i, j)

        self._columns = matrix(width, height, relocate)
        self._width = width
        self._height = height
        self._head_x = _clamp(previous_head[0] + shift_x, width)
        self._head_y = _clamp(previous_head[1] + shift_y, height)
        LOGGER.debug(
            "Resized board %s -> %s (from origin: %s), head %s -> %s",
            previous_size, self.size, from_origin_corner, previous_head, self.head,
        )
        self.emit(SizeChanged(self.size, self.head, from_origin_corner, previous_size, previous_head))

    # ------------------------------------------------------------------
    # Debug rendering
    # ------------------------------------------------------------------
    def __repr__(self):
        return f"Board(width={self._width}, height={self._height}, head={self.head})"

    def __str__(self):
        def is_head(column, row):
            return 0 <= row < self._height and column[row].is_head_location()

        def border(upper, lower):
            # Solid segments frame the head cell.
            return "  " + "".join(
                "-----------" if is_head(column, upper) or is_head(column, lower) else "- - - - - -"
                for column in self._columns
            )

        def contents(row, first, second, labels):
            parts = []
            for column in self._columns:
                cell = column[row]
                sep = "|" if cell.is_head_location() else ":"
                parts.append(
                    f"{sep} {cell.get_stones_of(first)} {labels[0]} {cell.get_stones_of(second)} {labels[1]} {sep}"
                )
            return "".join(parts)

        lines = []
        for row in range(self._height - 1, -1, -1):
            lines.append(border(row + 1, row))
            lines.append("  " + contents(row, Color.BLUE, Color.BLACK, "BK"))
            lines.append(f"{row} " + contents(row, Color.RED, Color.GREEN, "RG"))
        lines.append(border(0, -1))
        lines.append("  " + "".join(f"     {column}     " for column in range(self._width)))
        return "\n".join(lines)


def _as_location(value):
    try:
        x, y = value
    except (TypeError, ValueError):
        return None
    return (x, y)


def _clamp(value, size):
    return max(0, min(value, size - 1))


def _require_horizontal(direction):
    if not isinstance(direction, Direction) or not Direction.is_horizontal(direction):
        raise ValueError(f"Columns can only be added or removed at East or West, got {direction}")


def _require_vertical(direction):
    if not isinstance(direction, Direction) or not Direction.is_vertical(direction):
        raise ValueError(f"Rows can only be added or removed at North or South, got {direction}")
