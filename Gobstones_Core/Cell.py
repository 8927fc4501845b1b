"""A single board location holding stone counters for every color."""

import weakref

from .Color import Color
from .Direction import Direction
from .errors import InvalidStonesAmount, StonesChangeAttempt
from .events import EventEmitter, StonesChanged
from .expectations import expect

NEIGHBOR_MODES = ("orthogonal", "diagonal", "both")


class Cell(EventEmitter):
    """Stone counters at one (x, y) of a Board.

    Cells are created and relocated only by their Board. The cell keeps a weak
    reference back to it, used to answer head and border questions and to
    reach neighbors. The reference does not keep the board alive: once the
    board is gone, any query that needs it raises ReferenceError, so hold on
    to the board while using its cells (`Board(...).get_cell()` on a
    temporary board gives a cell that cannot answer is_head_location).

    Counters are non-negative Python ints, so they are not bounded in size.
    Every counter change emits a StonesChanged event. The a, n, r and v
    properties read and set the blue, black, red and green counters.
    """

    def __init__(self, board, x, y, stones=None):
        super().__init__()
        self._board = weakref.ref(board)
        self.x = x
        self.y = y
        self._stones = {color: 0 for color in Color}
        for key, amount in (stones or {}).items():
            self._stones[Color.from_key(key)] = amount

    @property
    def board(self):
        board = self._board()
        if board is None:
            raise ReferenceError("The board owning this cell no longer exists")
        return board

    @property
    def location(self):
        return (self.x, self.y)

    @property
    def stones(self):
        """Snapshot of the counters as {Color: amount}."""
        return dict(self._stones)

    @property
    def info(self):
        """Counters keyed by one-letter color code, as in board definitions."""
        return {color.value: amount for color, amount in self._stones.items()}

    @property
    def a(self):
        return self._stones[Color.BLUE]

    @a.setter
    def a(self, value):
        self.set_stones_of(Color.BLUE, value)

    @property
    def n(self):
        return self._stones[Color.BLACK]

    @n.setter
    def n(self, value):
        self.set_stones_of(Color.BLACK, value)

    @property
    def r(self):
        return self._stones[Color.RED]

    @r.setter
    def r(self, value):
        self.set_stones_of(Color.RED, value)

    @property
    def v(self):
        return self._stones[Color.GREEN]

    @v.setter
    def v(self, value):
        self.set_stones_of(Color.GREEN, value)

    # ------------------------------------------------------------------
    # Stones
    # ------------------------------------------------------------------
    def get_stones_of(self, color):
        return self._stones[color]

    def has_stones_of(self, color):
        return self._stones[color] > 0

    def set_stones_of(self, color, amount):
        """Replace the counter of `color`; negative amounts are rejected."""
        self._set_stones(color, amount, StonesChangeAttempt.SET_STONES)

    def add_stones(self, color, amount=1):
        expect(amount).to_be_greater_than(0).or_throw(
            InvalidStonesAmount(StonesChangeAttempt.ADD_STONES, color, amount, self._stones)
        )
        self._set_stones(color, self._stones[color] + amount, None)

    def remove_stones(self, color, amount=1):
        """Take `amount` stones of `color`; fails if fewer are present."""
        expect(amount).to_be_greater_than(0).or_throw(
            InvalidStonesAmount(StonesChangeAttempt.REMOVE_STONES, color, amount, self._stones)
        )
        self._set_stones(color, self._stones[color] - amount, StonesChangeAttempt.REMOVE_STONES)

    def is_empty(self):
        return all(amount == 0 for amount in self._stones.values())

    def has_stones(self):
        return not self.is_empty()

    def get_stones_amount(self):
        return sum(self._stones.values())

    def empty(self):
        """Zero every counter. No event is emitted."""
        for color in Color:
            self._stones[color] = 0

    def _set_stones(self, color, amount, attempt):
        # attempt is None only when the caller already validated the amount
        expect(amount).to_be_greater_than_or_equal(0).or_throw(
            InvalidStonesAmount(attempt, color, amount, self._stones)
        )
        previous = self.stones
        self._stones[color] = amount
        self.emit(StonesChanged(self.location, self.stones, previous))

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------
    def is_head_location(self):
        board = self.board
        return board.head_x == self.x and board.head_y == self.y

    def is_at_border_at(self, direction):
        board = self.board
        if direction is Direction.NORTH:
            return self.y == board.height - 1
        if direction is Direction.SOUTH:
            return self.y == 0
        if direction is Direction.EAST:
            return self.x == board.width - 1
        return self.x == 0

    def neighbor_to(self, direction):
        """Adjacent cell towards `direction`, or None at that border."""
        if self.is_at_border_at(direction):
            return None
        dx, dy = direction.delta()
        return self.board.get_cell(self.x + dx, self.y + dy)

    def neighbor_diagonal_to(self, vertical, horizontal):
        if not Direction.is_vertical(vertical) or not Direction.is_horizontal(horizontal):
            raise ValueError(f"Expected a vertical and a horizontal direction, got {vertical}, {horizontal}")
        if self.is_at_border_at(vertical) or self.is_at_border_at(horizontal):
            return None
        _, dy = vertical.delta()
        dx, _ = horizontal.delta()
        return self.board.get_cell(self.x + dx, self.y + dy)

    def neighbors(self, mode="orthogonal"):
        """Existing neighbors, clockwise from North.

        "orthogonal": N, E, S, W. "diagonal": NE, SE, SW, NW. "both"
        interleaves them: N, NE, E, SE, S, SW, W, NW. Missing neighbors at
        the borders are skipped.
        """
        if mode not in NEIGHBOR_MODES:
            raise ValueError(f"mode must be one of {NEIGHBOR_MODES}, got {mode!r}")
        found = []

        def collect(direction):
            following = Direction.next(direction)
            if mode != "diagonal" and not self.is_at_border_at(direction):
                found.append(self.neighbor_to(direction))
            if mode != "orthogonal":
                vertical, horizontal = (
                    (direction, following) if Direction.is_vertical(direction) else (following, direction)
                )
                diagonal = self.neighbor_diagonal_to(vertical, horizontal)
                if diagonal is not None:
                    found.append(diagonal)

        Direction.foreach(collect)
        return found

    def __repr__(self):
        return f"Cell(x={self.x}, y={self.y}, stones={self.info})"

    def __str__(self):
        return f"x: {self.x} y: {self.y} > {self.a} B  {self.n} K  {self.r} R  {self.v} G"
