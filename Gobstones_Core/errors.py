"""Errors raised by Board and Cell when an invalid operation is attempted."""

from enum import Enum


class CellReadingAttempt(str, Enum):
    READ_CELL = "ReadCell"
    READ_COLUMN = "ReadColumn"
    READ_ROW = "ReadRow"


class LocationChangeAttempt(str, Enum):
    MOVE = "Move"
    SET_LOCATION = "SetLocation"


class SizeChangeAttempt(str, Enum):
    RESIZE = "Resize"
    ADD_ROW = "AddRow"
    ADD_COLUMN = "AddColumn"
    REMOVE_ROW = "RemoveRow"
    REMOVE_COLUMN = "RemoveColumn"


class StonesChangeAttempt(str, Enum):
    ADD_STONES = "AddStones"
    REMOVE_STONES = "RemoveStones"
    SET_STONES = "SetStones"


class BoardError(Exception):
    """Base class for every error raised by the board model."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidBoardDescription(BoardError):
    """The width, height, head or initial cells given to a board are invalid."""

    def __init__(self, width, height, head, message=None):
        super().__init__(
            message
            or f"The values used to create the board are invalid. "
            f"width: {width}, height: {height}, head: {tuple(head)}"
        )
        self.width = width
        self.height = height
        self.head = tuple(head)


class InvalidSizeChange(InvalidBoardDescription):
    """Resizing would leave the board with a non-positive width or height."""

    def __init__(self, attempt, previous_width, previous_height, new_width, new_height, head):
        super().__init__(
            new_width,
            new_height,
            head,
            message=(
                f"The attempt of changing size by {attempt.value} from width {previous_width} "
                f"and height {previous_height} ends in an invalid board of width "
                f"{new_width} and height {new_height}."
            ),
        )
        self.attempt = attempt
        self.previous_width = previous_width
        self.previous_height = previous_height
        self.new_width = new_width
        self.new_height = new_height


class InvalidCellReading(BoardError):
    """A cell, column or row was requested outside the board."""

    def __init__(self, attempt, failing_coordinate):
        x, y = failing_coordinate
        super().__init__(f"The attempt of {attempt.value} failed for coordinate [{x}, {y}].")
        self.attempt = attempt
        self.failing_coordinate = (x, y)


class LocationFallsOutsideBoard(BoardError):
    """The head was moved or set to a location outside the board."""

    def __init__(self, attempt, failing_coordinate, previous_coordinate):
        fx, fy = failing_coordinate
        px, py = previous_coordinate
        super().__init__(
            f"The attempt of {attempt.value} from [{px}, {py}] falls outside "
            f"the board on coordinate [{fx}, {fy}]."
        )
        self.attempt = attempt
        self.failing_coordinate = (fx, fy)
        self.previous_coordinate = (px, py)


class InvalidStonesAmount(BoardError):
    """A stone counter would be set to a negative amount, or changed by a non-positive one."""

    def __init__(self, attempt, color, amount, previous_cell_state):
        action = attempt.value if attempt is not None else "changing stones"
        super().__init__(f"The attempt of {action} failed for color {color.name.lower()} given {amount}.")
        self.attempt = attempt
        self.color = color
        self.amount = amount
        self.previous_cell_state = dict(previous_cell_state)
