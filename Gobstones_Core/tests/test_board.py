"""Board construction, queries, head movement, resizing and definitions."""

import pytest

from Gobstones_Core.Board import Board
from Gobstones_Core.Color import Color
from Gobstones_Core.Direction import Direction
from Gobstones_Core.errors import (
    CellReadingAttempt,
    InvalidBoardDescription,
    InvalidCellReading,
    InvalidSizeChange,
    LocationChangeAttempt,
    LocationFallsOutsideBoard,
    SizeChangeAttempt,
)
from Gobstones_Core.events import EventKind


def _scenario_board():
    """5x7 board, head at (2, 3): red along row 0, green along column 0, 8 stones at the head."""
    stones = [{"x": 0, "y": 0, Color.RED: 1, Color.GREEN: 1}]
    stones += [{"x": x, "y": 0, Color.RED: 1} for x in range(1, 5)]
    stones += [{"x": 0, "y": y, Color.GREEN: 1} for y in range(1, 7)]
    stones.append({"x": 2, "y": 3, Color.BLUE: 5, Color.BLACK: 3})
    return Board(5, 7, (2, 3), stones)


def _sum_of(color):
    return lambda acc, cell: acc + cell.get_stones_of(color)


def _assert_consistent(board):
    for x in range(board.width):
        for y in range(board.height):
            cell = board.get_cell(x, y)
            assert (cell.x, cell.y) == (x, y)
    assert 0 <= board.head_x < board.width
    assert 0 <= board.head_y < board.height


def test_defaults():
    board = Board()
    assert board.size == (4, 4)
    assert board.head == (0, 0)
    assert board.format == "GBB/1.0"
    assert all(cell.is_empty() for cell in board)
    _assert_consistent(board)


def test_scenario_fold_sums():
    board = _scenario_board()
    assert board.fold_cells(_sum_of(Color.RED), 0) == 5
    assert board.fold_cells(_sum_of(Color.GREEN), 0) == 7
    assert board.fold_cells(lambda acc, cell: acc + cell.get_stones_amount(), 0) == 20
    assert board.get_cell().get_stones_amount() == 8


def test_fold_visits_column_major():
    board = Board(2, 3)
    order = board.fold_cells(lambda acc, cell: acc + [cell.location], [])
    assert order == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
    assert [cell.location for cell in board] == order


def test_map_filter_foreach():
    board = _scenario_board()
    mapped = board.map_cells(lambda cell: cell.r)
    assert len(mapped) == 5 and len(mapped[0]) == 7
    assert mapped[3][0] == 1 and mapped[3][1] == 0
    red = board.filter_cells(lambda cell: cell.has_stones_of(Color.RED))
    assert [cell.location for cell in red] == [(x, 0) for x in range(5)]
    visited = []
    board.foreach_cells(visited.append)
    assert len(visited) == 35


def test_columns_and_rows():
    board = Board(3, 2)
    assert [cell.location for cell in board.get_column(1)] == [(1, 0), (1, 1)]
    assert [cell.location for cell in board.get_row(1)] == [(0, 1), (1, 1), (2, 1)]
    assert len(board.get_columns()) == 3
    rows = board.get_rows()
    assert len(rows) == 2 and rows[1][2] is board.get_cell(2, 1)
    board.get_column(0).clear()
    assert len(board.get_column(0)) == 2


def test_invalid_reads():
    board = Board(3, 2)
    with pytest.raises(InvalidCellReading) as cell:
        board.get_cell(3, 0)
    assert cell.value.attempt is CellReadingAttempt.READ_CELL
    assert cell.value.failing_coordinate == (3, 0)
    with pytest.raises(InvalidCellReading) as column:
        board.get_column(5)
    assert column.value.attempt is CellReadingAttempt.READ_COLUMN
    with pytest.raises(InvalidCellReading) as row:
        board.get_row(-1)
    assert row.value.attempt is CellReadingAttempt.READ_ROW


def test_clean():
    board = _scenario_board()
    board.clean()
    assert all(cell.is_empty() for cell in board)


@pytest.mark.parametrize(
    "width, height, head",
    [(0, 3, (0, 0)), (3, -1, (0, 0)), (3, 3, (3, 0)), (3, 3, (0, -1)), (3, 3, None)],
)
def test_invalid_construction(width, height, head):
    with pytest.raises(InvalidBoardDescription):
        Board(width, height, head)


def test_invalid_initial_records():
    with pytest.raises(InvalidBoardDescription):
        Board(2, 2, (0, 0), [{"x": 2, "y": 0, Color.RED: 1}])
    with pytest.raises(InvalidBoardDescription):
        Board(2, 2, (0, 0), [{"x": 0, "y": 0, Color.RED: -1}])
    with pytest.raises(InvalidBoardDescription):
        Board(2, 2, (0, 0), [{"y": 0}])


def test_duplicate_initial_records_last_wins():
    board = Board(2, 2, (0, 0), [{"x": 1, "y": 1, "a": 2}, {"x": 1, "y": 1, "r": 3}])
    assert board.get_cell(1, 1).info == {"a": 0, "n": 0, "r": 3, "v": 0}


def test_move_head():
    board = Board(3, 3, (1, 1))
    events = []
    board.subscribe(EventKind.HEAD_MOVED, events.append)
    board.move_head_to(Direction.NORTH)
    board.move_head_to(Direction.WEST)
    assert board.head == (0, 2)
    assert [(e.previous_location, e.location) for e in events] == [((1, 1), (1, 2)), ((1, 2), (0, 2))]


def test_move_head_off_the_board_fails_without_change():
    board = Board(3, 3, (0, 2))
    with pytest.raises(LocationFallsOutsideBoard) as info:
        board.move_head_to(Direction.NORTH)
    assert info.value.attempt is LocationChangeAttempt.MOVE
    assert info.value.failing_coordinate == (0, 3)
    assert info.value.previous_coordinate == (0, 2)
    assert board.head == (0, 2)


def test_move_head_to_edge_never_fails_and_always_notifies():
    board = Board(4, 5, (1, 1))
    events = []
    board.subscribe(EventKind.HEAD_MOVED, events.append)
    board.move_head_to_edge_at(Direction.NORTH)
    assert board.head == (1, 4)
    board.move_head_to_edge_at(Direction.EAST)
    assert board.head == (3, 4)
    board.move_head_to_edge_at(Direction.EAST)
    assert board.head == (3, 4)
    board.move_head_to_edge_at(Direction.SOUTH)
    board.move_head_to_edge_at(Direction.WEST)
    assert board.head == (0, 0)
    assert len(events) == 5


def test_set_head():
    board = Board(3, 3)
    board.head = (2, 1)
    assert (board.head_x, board.head_y) == (2, 1)
    assert board.get_cell(2, 1).is_head_location()
    with pytest.raises(LocationFallsOutsideBoard) as info:
        board.head = (3, 1)
    assert info.value.attempt is LocationChangeAttempt.SET_LOCATION
    assert board.head == (2, 1)


def test_resize_at_far_edge_keeps_head_and_stones():
    board = _scenario_board()
    board.change_size_to(6, 8)
    assert board.size == (6, 8)
    assert board.head == (2, 3)
    assert board.get_cell(0, 0).info == {"a": 0, "n": 0, "r": 1, "v": 1}
    assert board.get_cell(5, 7).is_empty()
    _assert_consistent(board)


def test_resize_from_origin_shifts_head_and_stones():
    board = _scenario_board()
    board.change_size_to(6, 8, True)
    assert board.head == (3, 4)
    assert board.get_cell(0, 0).is_empty()
    assert board.get_cell(1, 1).info == {"a": 0, "n": 0, "r": 1, "v": 1}
    assert board.get_cell(3, 4).get_stones_amount() == 8
    _assert_consistent(board)


def test_shrink_clamps_head():
    board = Board(5, 7, (4, 6))
    board.change_size_to(3, 3)
    assert board.head == (2, 2)
    _assert_consistent(board)


def test_remove_columns_at_west_clamps_head():
    board = _scenario_board()
    board.remove_columns(3, Direction.WEST)
    assert board.width == 2
    assert board.head_x == 0
    # former column 3 is now column 0
    assert board.get_cell(0, 0).info == {"a": 0, "n": 0, "r": 1, "v": 0}
    _assert_consistent(board)


def test_add_and_remove_rows_and_columns():
    board = Board(2, 2, (1, 1))
    board.add_column()
    assert board.size == (3, 2) and board.head == (1, 1)
    board.add_column(Direction.WEST)
    assert board.size == (4, 2) and board.head == (2, 1)
    board.add_rows(2, Direction.SOUTH)
    assert board.size == (4, 4) and board.head == (2, 3)
    board.add_row()
    assert board.size == (4, 5)
    board.remove_row(Direction.SOUTH)
    assert board.size == (4, 4) and board.head == (2, 2)
    board.remove_column()
    assert board.size == (3, 4) and board.head == (2, 2)
    _assert_consistent(board)


def test_add_in_wrong_axis_is_rejected():
    board = Board(2, 2)
    with pytest.raises(ValueError):
        board.add_column(Direction.NORTH)
    with pytest.raises(ValueError):
        board.remove_rows(1, Direction.EAST)
    with pytest.raises(ValueError):
        board.add_row("n")


def test_width_and_height_setters():
    board = Board(2, 2, (1, 1))
    board.width = 4
    board.height = 1
    assert board.size == (4, 1)
    assert board.head == (1, 0)


@pytest.mark.parametrize(
    "change, attempt",
    [
        (lambda b: setattr(b, "width", 0), SizeChangeAttempt.RESIZE),
        (lambda b: setattr(b, "height", -2), SizeChangeAttempt.RESIZE),
        (lambda b: b.change_size_to(0, 3), SizeChangeAttempt.RESIZE),
        (lambda b: b.remove_rows(3), SizeChangeAttempt.REMOVE_ROW),
        (lambda b: b.remove_columns(3, Direction.WEST), SizeChangeAttempt.REMOVE_COLUMN),
        (lambda b: b.add_columns(-5), SizeChangeAttempt.ADD_COLUMN),
        (lambda b: b.add_rows(-5, Direction.SOUTH), SizeChangeAttempt.ADD_ROW),
    ],
)
def test_invalid_size_changes(change, attempt):
    board = Board(3, 3, (1, 1))
    with pytest.raises(InvalidSizeChange) as info:
        change(board)
    assert info.value.attempt is attempt
    assert isinstance(info.value, InvalidBoardDescription)
    assert board.size == (3, 3)
    assert board.head == (1, 1)


def test_size_changed_event():
    board = Board(3, 3, (2, 2))
    events = []
    board.subscribe(EventKind.SIZE_CHANGED, events.append)
    board.change_size_to(2, 4, True)
    event = events[0]
    assert event.size == (2, 4)
    assert event.head == (1, 3)
    assert event.from_origin_corner is True
    assert event.previous_size == (3, 3)
    assert event.previous_head == (2, 2)


def test_clone_is_independent():
    board = _scenario_board()
    copy = board.clone()
    assert copy.size == board.size
    assert copy.head == board.head
    assert [cell.info for cell in copy] == [cell.info for cell in board]
    copy.get_cell(4, 6).add_stones(Color.BLUE)
    copy.move_head_to(Direction.EAST)
    assert board.get_cell(4, 6).is_empty()
    assert board.head == (2, 3)


def test_definition_round_trip():
    board = _scenario_board()
    definition = board.to_definition()
    assert definition["format"] == "GBB/1.0"
    assert definition["head"] == [2, 3]
    assert definition["board"][2][3] == {"a": 5, "n": 3, "r": 0, "v": 0}
    rebuilt = Board.from_definition(definition)
    assert rebuilt.to_definition() == definition


def test_compact_definition():
    board = Board.from_definition(
        {"width": 3, "height": 2, "head": [1, 0], "cells": [{"x": 2, "y": 1, "blue": 4, "v": 1}]}
    )
    assert board.size == (3, 2)
    assert board.head == (1, 0)
    assert board.get_cell(2, 1).info == {"a": 4, "n": 0, "r": 0, "v": 1}


@pytest.mark.parametrize(
    "definition",
    [
        ["not", "a", "mapping"],
        {"width": 2, "height": 2, "board": [[{}]]},
        {"width": 2, "height": 2, "cells": [{"x": 0, "y": 0, "pink": 1}]},
        {"width": 0, "height": 2},
    ],
)
def test_invalid_definitions(definition):
    with pytest.raises(InvalidBoardDescription):
        Board.from_definition(definition)


def test_str_marks_the_head():
    board = Board(2, 1, (1, 0))
    board.get_cell(1, 0).add_stones(Color.RED, 2)
    text = str(board)
    lines = text.splitlines()
    assert len(lines) == 5
    assert "| 2 R 0 G |" in lines[2]
    assert ": 0 R 0 G :" in lines[2]
    assert repr(board) == "Board(width=2, height=1, head=(1, 0))"


@pytest.mark.parametrize("head", [(1.0, 0), (0, "1"), (True, 0.5)])
def test_non_integer_head_is_rejected(head):
    board = Board(3, 3)
    with pytest.raises(LocationFallsOutsideBoard) as info:
        board.head = head
    assert info.value.attempt is LocationChangeAttempt.SET_LOCATION
    assert board.head == (0, 0)
    assert board.get_cell() is board.get_cell(0, 0)


def test_non_integer_sizes_are_rejected():
    board = Board(3, 3)
    with pytest.raises(InvalidSizeChange) as info:
        board.width = 2.5
    assert info.value.attempt is SizeChangeAttempt.RESIZE
    with pytest.raises(InvalidSizeChange):
        board.change_size_to(3, "4")
    assert board.size == (3, 3)
    with pytest.raises(InvalidBoardDescription):
        Board(2.0, 3)
    with pytest.raises(InvalidBoardDescription):
        Board(3, 3, (1.0, 0))


def test_non_integer_reads_are_rejected():
    board = Board(3, 3)
    with pytest.raises(InvalidCellReading):
        board.get_cell(1.0, 0)
    with pytest.raises(InvalidCellReading):
        board.get_column(0.5)
    with pytest.raises(InvalidCellReading):
        board.get_row(1.0)
