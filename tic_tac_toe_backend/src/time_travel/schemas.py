from typing import List, Literal, Optional

from pydantic import BaseModel, Field

MarkValue = Literal["X", "O"]


# PUBLIC_INTERFACE
class SquareView(BaseModel):
    """A single board square as drawn by a client."""
    index: int = Field(..., ge=0, le=8, description="Board index (0-8)")
    value: Optional[MarkValue] = Field(None, description="Mark in the square, null when empty")
    highlighted: bool = Field(False, description="True if the square is part of the winning line")


# PUBLIC_INTERFACE
class MoveView(BaseModel):
    """An entry of the jump-to-step list."""
    step: int = Field(..., ge=0, description="Step index into the history")
    description: str = Field(..., description='"Game start" or "Move #k"')
    current: bool = Field(..., description="True for the step currently on the board")


# PUBLIC_INTERFACE
class GameView(BaseModel):
    """Everything a client needs to draw a game."""
    id: int = Field(..., description="Game id")
    rows: List[List[SquareView]] = Field(..., description="3 rows of 3 squares")
    squares: List[Optional[MarkValue]] = Field(..., description="Flat row-major board")
    status: str = Field(..., description='"Winner: X" or "Next player: O"')
    next_player: MarkValue = Field(..., description="Mark that moves next from the current step")
    winner: Optional[MarkValue] = Field(None, description="Winning mark at the current step, null if none")
    winning_line: Optional[List[int]] = Field(None, description="Board indices of the winning line")
    step_number: int = Field(..., ge=0, description="Step currently on the board")
    history_length: int = Field(..., ge=1, description="Number of recorded steps, including the empty board")
    moves: List[MoveView] = Field(..., description="Jump-to-step list")


# PUBLIC_INTERFACE
class GameListItem(BaseModel):
    """Summary of a game held by the server."""
    id: int = Field(..., description="Game id")
    status: str = Field(..., description='"Winner: X" or "Next player: O"')
    step_number: int = Field(..., ge=0, description="Step currently on the board")
    history_length: int = Field(..., ge=1, description="Number of recorded steps, including the empty board")


# PUBLIC_INTERFACE
class MoveRequest(BaseModel):
    cell: int = Field(..., ge=0, le=8, description="Board index for the move (0-8)")


# PUBLIC_INTERFACE
class JumpRequest(BaseModel):
    step: int = Field(..., ge=0, description="History step to jump to")
