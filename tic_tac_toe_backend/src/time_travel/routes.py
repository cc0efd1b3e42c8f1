import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from .game import TimeTravelGame
from .render import render_game, render_moves, render_text
from .schemas import GameListItem, GameView, JumpRequest, MoveRequest, MoveView
from .store import GameNotFoundError, GameStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_game(game_id: int, store: GameStore) -> TimeTravelGame:
    try:
        return store.get(game_id)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")


# --- REST Endpoints ---

# PUBLIC_INTERFACE
@router.post("/games", response_model=GameView, status_code=201, summary="Create new game", tags=["Game"])
async def create_game(store: GameStore = Depends(get_store)):
    """Starts a new game on an empty board with X to move."""
    game_id, game = store.create()
    return render_game(game_id, game)


# PUBLIC_INTERFACE
@router.get("/games", response_model=List[GameListItem], summary="List games", tags=["Game"])
async def list_games(store: GameStore = Depends(get_store)):
    """Lists every game currently held by the server."""
    return [
        GameListItem(
            id=game_id,
            status=game.status(),
            step_number=game.step_number,
            history_length=len(game),
        )
        for game_id, game in store.list()
    ]


# PUBLIC_INTERFACE
@router.get("/games/{game_id}", response_model=GameView, summary="Get game state", tags=["Game"])
async def get_game_state(game_id: int, store: GameStore = Depends(get_store)):
    """Get the board at the current step, whose turn it is and the move list."""
    return render_game(game_id, _get_game(game_id, store))


# PUBLIC_INTERFACE
@router.post("/games/{game_id}/move", response_model=GameView, summary="Make move", tags=["Game"])
async def make_move(game_id: int, request: MoveRequest, store: GameStore = Depends(get_store)):
    """
    Marks a cell for the player whose turn it is at the current step.

    Moves on a taken cell or on a board that is already won are ignored
    and the unchanged game is returned. A move made after jumping back
    discards every later step.
    """
    game = _get_game(game_id, store)
    if game.apply_move(request.cell) and game.current_winner() is not None:
        logger.info(
            "Game %d won by %s at step %d\n%s",
            game_id, game.current_winner().value, game.step_number, render_text(game.current_snapshot()),
        )
    return render_game(game_id, game)


# PUBLIC_INTERFACE
@router.post("/games/{game_id}/jump", response_model=GameView, summary="Jump to step", tags=["Game"])
async def jump_to_step(game_id: int, request: JumpRequest, store: GameStore = Depends(get_store)):
    """Shows the board as it was after `step` moves. History is kept until the next move."""
    game = _get_game(game_id, store)
    if request.step >= len(game):
        raise HTTPException(
            status_code=400,
            detail=f"step must be between 0 and {len(game) - 1}",
        )
    game.jump_to(request.step)
    return render_game(game_id, game)


# PUBLIC_INTERFACE
@router.get("/games/{game_id}/moves", response_model=List[MoveView], summary="List moves", tags=["Game"])
async def list_moves(game_id: int, store: GameStore = Depends(get_store)):
    """Lists every step of the history, starting with the empty board."""
    return render_moves(_get_game(game_id, store))


# PUBLIC_INTERFACE
@router.delete("/games/{game_id}", status_code=204, summary="End game", tags=["Game"])
async def end_game(game_id: int, store: GameStore = Depends(get_store)):
    """Ends the game and forgets it."""
    try:
        store.delete(game_id)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")
    return Response(status_code=204)
