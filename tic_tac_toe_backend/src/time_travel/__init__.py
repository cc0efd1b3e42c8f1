"""Two-player tic-tac-toe with a rewindable move history."""

from .game import (
    EMPTY_BOARD,
    WINNING_LINES,
    InvalidCellError,
    InvalidStepError,
    Mark,
    MoveEntry,
    Snapshot,
    TimeTravelGame,
    evaluate,
    winning_line,
)

__version__ = "0.1.0"
