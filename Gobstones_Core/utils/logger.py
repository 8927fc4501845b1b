"""Lightweight logging utilities for board changes and debugging."""

import datetime

from ..events import EventKind


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def describe_event(event):
    """One line summary of a board or cell event."""
    if event.kind is EventKind.HEAD_MOVED:
        return f"head moved {list(event.previous_location)} -> {list(event.location)}"
    if event.kind is EventKind.SIZE_CHANGED:
        (w0, h0), (w1, h1) = event.previous_size, event.size
        corner = " from origin" if event.from_origin_corner else ""
        return f"board resized{corner} {w0}x{h0} -> {w1}x{h1}, head at {list(event.head)}"
    changes = [
        f"{color.name.lower()} {event.previous_stones[color]} -> {amount}"
        for color, amount in event.stones.items()
        if event.previous_stones[color] != amount
    ]
    return f"stones at {list(event.location)}: {', '.join(changes) or 'unchanged'}"


def follow_board(board, logger=log_event):
    """Report every change of `board` and its cells through `logger`.

    Cells created by a later resize are not followed. Returns the
    subscriptions so the caller can cancel them.
    """
    def report(event):
        logger(describe_event(event))

    subscriptions = [
        board.subscribe(EventKind.HEAD_MOVED, report),
        board.subscribe(EventKind.SIZE_CHANGED, report),
    ]
    for cell in board:
        subscriptions.append(cell.subscribe(EventKind.STONES_CHANGED, report))
    return subscriptions
