import logging
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class Mark(str, Enum):
    """A cell mark. X always moves first."""
    X = "X"
    O = "O"


# 9 cells, row-major. None means empty.
Snapshot = Tuple[Optional[Mark], ...]

BOARD_CELLS = 9
EMPTY_BOARD: Snapshot = (None,) * BOARD_CELLS

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # Rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # Cols
    (0, 4, 8), (2, 4, 6),             # Diagonals
)


class InvalidStepError(IndexError):
    """Raised when jumping to a step that is not in the history."""


class InvalidCellError(ValueError):
    """Raised when a move targets something other than a cell index 0..8."""


# PUBLIC_INTERFACE
class MoveEntry(NamedTuple):
    """One entry of the navigable move list."""
    step: int
    label: str
    snapshot: Snapshot


# PUBLIC_INTERFACE
def winning_line(snapshot: Snapshot) -> Optional[Tuple[int, int, int]]:
    """Returns the first line held by a single mark, in WINNING_LINES order."""
    for line in WINNING_LINES:
        a, b, c = line
        if snapshot[a] is not None and snapshot[a] == snapshot[b] == snapshot[c]:
            return line
    return None


# PUBLIC_INTERFACE
def evaluate(snapshot: Snapshot) -> Optional[Mark]:
    """Returns the winning mark, or None. A full board without a line is also None."""
    line = winning_line(snapshot)
    if line is None:
        return None
    return snapshot[line[0]]


def mark_for_step(step: int) -> Mark:
    """X moves from even steps, O from odd ones."""
    return Mark.X if step % 2 == 0 else Mark.O


def describe_step(step: int) -> str:
    return "Move #%d" % step if step else "Game start"


# PUBLIC_INTERFACE
class TimeTravelGame:
    """
    Two-player tic-tac-toe with a rewindable history.

    The only mutable state is the list of snapshots and the step pointer
    into it. Whose turn it is and who has won are always derived from
    the snapshot at the pointer, never stored.
    """

    def __init__(self):
        self._history: List[Snapshot] = [EMPTY_BOARD]
        self._step_number = 0

    @property
    def history(self) -> Tuple[Snapshot, ...]:
        return tuple(self._history)

    @property
    def step_number(self) -> int:
        return self._step_number

    def __len__(self) -> int:
        return len(self._history)

    # PUBLIC_INTERFACE
    def current_snapshot(self) -> Snapshot:
        return self._history[self._step_number]

    # PUBLIC_INTERFACE
    def current_turn(self) -> Mark:
        return mark_for_step(self._step_number)

    # PUBLIC_INTERFACE
    def current_winner(self) -> Optional[Mark]:
        return evaluate(self.current_snapshot())

    # PUBLIC_INTERFACE
    def move_list(self) -> List[MoveEntry]:
        """Every snapshot in history, labelled for a jump-to-step list."""
        return [
            MoveEntry(step=step, label=describe_step(step), snapshot=snapshot)
            for step, snapshot in enumerate(self._history)
        ]

    # PUBLIC_INTERFACE
    def status(self) -> str:
        winner = self.current_winner()
        if winner is not None:
            return "Winner: " + winner.value
        return "Next player: " + self.current_turn().value

    # PUBLIC_INTERFACE
    def apply_move(self, cell: int) -> bool:
        """
        Place the current player's mark on `cell`.

        Returns False and leaves everything untouched if the viewed board
        already has a winner or the cell is taken. Otherwise any snapshots
        after the viewed step are discarded before the new one is appended.
        """
        if isinstance(cell, bool) or not isinstance(cell, int) or not 0 <= cell < BOARD_CELLS:
            raise InvalidCellError("cell must be an int in [0, 8], got %r" % (cell,))

        current = self.current_snapshot()
        if evaluate(current) is not None:
            logger.debug("Ignoring move at %d: game already won at step %d", cell, self._step_number)
            return False
        if current[cell] is not None:
            logger.debug("Ignoring move at %d: cell already holds %s", cell, current[cell].value)
            return False

        mark = self.current_turn()
        dropped = len(self._history) - self._step_number - 1
        if dropped:
            logger.debug("Discarding %d future snapshot(s) after step %d", dropped, self._step_number)
        del self._history[self._step_number + 1:]

        squares = list(current)
        squares[cell] = mark
        self._history.append(tuple(squares))
        self._step_number = len(self._history) - 1
        logger.debug("%s took cell %d, now at step %d", mark.value, cell, self._step_number)
        return True

    # PUBLIC_INTERFACE
    def jump_to(self, step: int) -> None:
        """Move the step pointer. History is left as it is."""
        if isinstance(step, bool) or not isinstance(step, int) or not 0 <= step < len(self._history):
            raise InvalidStepError(
                "step must be in [0, %d], got %r" % (len(self._history) - 1, step)
            )
        self._step_number = step
        logger.debug("Jumped to step %d of %d", step, len(self._history) - 1)
