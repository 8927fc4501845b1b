"""Gobstones_Core package exports."""

__version__ = "0.1.0"

from .Color import Color
from .Direction import Direction
from .Cell import Cell
from .Board import Board
from .errors import (
    BoardError,
    CellReadingAttempt,
    InvalidBoardDescription,
    InvalidCellReading,
    InvalidSizeChange,
    InvalidStonesAmount,
    LocationChangeAttempt,
    LocationFallsOutsideBoard,
    SizeChangeAttempt,
    StonesChangeAttempt,
)
from .events import EventKind, HeadMoved, SizeChanged, StonesChanged, Subscription
from .expectations import expect, expect_all, expect_any
from .translations import Translator

# Subpackages
from . import expectations, translations, utils

__all__ = [
    "Board",
    "Cell",
    "Color",
    "Direction",
    "BoardError",
    "CellReadingAttempt",
    "InvalidBoardDescription",
    "InvalidCellReading",
    "InvalidSizeChange",
    "InvalidStonesAmount",
    "LocationChangeAttempt",
    "LocationFallsOutsideBoard",
    "SizeChangeAttempt",
    "StonesChangeAttempt",
    "EventKind",
    "HeadMoved",
    "SizeChanged",
    "StonesChanged",
    "Subscription",
    "expect",
    "expect_all",
    "expect_any",
    "Translator",
    "expectations",
    "translations",
    "utils",
]
