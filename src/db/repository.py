"""What the service needs from persistence. SQLGameRepository is the one real implementation, tests use an in-memory dict."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    def get_game(self, game_id: UUID) -> GameModel | None:
        """None if no game is stored under the id."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a new game, hand back the stored state and the id it got."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the stored state. None if the id is unknown."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Forget the game. Returns the last stored state, or None if the id is unknown."""
        ...
