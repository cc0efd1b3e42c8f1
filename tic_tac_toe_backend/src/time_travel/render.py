"""
Stateless rendering of a game into the view models clients draw from.

Nothing in here mutates a game; each function only reads its query surface.
"""

from typing import List, Optional, Sequence

from .game import Snapshot, TimeTravelGame, winning_line
from .schemas import GameView, MoveView, SquareView


def _value(mark) -> Optional[str]:
    return None if mark is None else mark.value


# PUBLIC_INTERFACE
def render_board(snapshot: Snapshot, highlight: Optional[Sequence[int]] = None) -> List[List[SquareView]]:
    """Lays the 9 cells out as 3 rows of 3 squares."""
    highlight = highlight or ()
    return [
        [
            SquareView(index=i, value=_value(snapshot[i]), highlighted=i in highlight)
            for i in range(row * 3, row * 3 + 3)
        ]
        for row in range(3)
    ]


# PUBLIC_INTERFACE
def render_moves(game: TimeTravelGame) -> List[MoveView]:
    return [
        MoveView(step=entry.step, description=entry.label, current=entry.step == game.step_number)
        for entry in game.move_list()
    ]


# PUBLIC_INTERFACE
def render_game(game_id: int, game: TimeTravelGame) -> GameView:
    snapshot = game.current_snapshot()
    line = winning_line(snapshot)
    winner = game.current_winner()
    return GameView(
        id=game_id,
        rows=render_board(snapshot, line),
        squares=[_value(mark) for mark in snapshot],
        status=game.status(),
        next_player=game.current_turn().value,
        winner=_value(winner),
        winning_line=list(line) if line else None,
        step_number=game.step_number,
        history_length=len(game),
        moves=render_moves(game),
    )


# PUBLIC_INTERFACE
def render_text(snapshot: Snapshot) -> str:
    """Plain-text grid, handy in log lines."""
    rows = []
    for row in range(3):
        cells = [_value(snapshot[i]) or " " for i in range(row * 3, row * 3 + 3)]
        rows.append(" " + " | ".join(cells) + " ")
    return "\n---+---+---\n".join(rows)
