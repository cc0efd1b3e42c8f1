import itertools
import logging
from collections import OrderedDict
from typing import List, Optional, Tuple

from .config import get_settings
from .game import TimeTravelGame

logger = logging.getLogger(__name__)


class GameNotFoundError(KeyError):
    """Raised when a game id is not in the store."""


# PUBLIC_INTERFACE
class GameStore:
    """
    Holds the games of this process in memory.

    Nothing is saved: a game lives until it is deleted, evicted to make
    room for a newer one, or the process exits.
    """

    def __init__(self, max_games: int = 0):
        self.max_games = max_games
        self._games: "OrderedDict[int, TimeTravelGame]" = OrderedDict()
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, game_id: int) -> bool:
        return game_id in self._games

    def create(self) -> Tuple[int, TimeTravelGame]:
        if self.max_games and len(self._games) >= self.max_games:
            evicted, _ = self._games.popitem(last=False)
            logger.info("Evicted game %d (limit of %d games reached)", evicted, self.max_games)
        game_id = next(self._ids)
        game = TimeTravelGame()
        self._games[game_id] = game
        logger.info("Created game %d", game_id)
        return game_id, game

    def get(self, game_id: int) -> TimeTravelGame:
        try:
            return self._games[game_id]
        except KeyError:
            raise GameNotFoundError(game_id) from None

    def delete(self, game_id: int) -> None:
        if self._games.pop(game_id, None) is None:
            raise GameNotFoundError(game_id)
        logger.info("Ended game %d", game_id)

    def list(self) -> List[Tuple[int, TimeTravelGame]]:
        return list(self._games.items())


_store: Optional[GameStore] = None


# Dependency for getting the game store in FastAPI
# PUBLIC_INTERFACE
async def get_store() -> GameStore:
    """Returns the process-wide game store, creating it on first use."""
    global _store
    if _store is None:
        _store = GameStore(max_games=get_settings().max_games)
    return _store
