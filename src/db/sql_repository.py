"""GameRepository backed by a SQL database (SQLAlchemy ORM)"""

from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame


class SQLGameRepository:
    """One row in the `games` table per mentor game. Commits after every write."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        row = self._fetch_row(game_id)
        return self._to_model(row) if row else None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Insert a row under a fresh UUID. Returns what was actually stored, plus the id."""
        row = DBGame(id=uuid4())
        self._copy_into(row, game)
        self.db.add(row)
        self._commit(row)
        return self._to_model(row), row.id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the stored state. Unknown id: nothing happens, None is returned."""
        row = self._fetch_row(game_id)
        if row is None:
            return None
        self._copy_into(row, game)
        self._commit(row)
        return self._to_model(row)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Returns the state as it was right before deleting (None for an unknown id)."""
        row = self._fetch_row(game_id)
        if row is None:
            return None
        removed = self._to_model(row)
        self.db.delete(row)
        self.db.commit()
        return removed

    # -- helpers --
    def _fetch_row(self, game_id: UUID) -> DBGame | None:
        return self.db.scalar(select(DBGame).where(DBGame.id == game_id))

    def _commit(self, row: DBGame) -> None:
        self.db.commit()
        self.db.refresh(row)

    @staticmethod
    def _copy_into(row: DBGame, game: GameModel) -> None:
        row.current_fen = game.current_fen
        # JSON columns only notice re-assignment, so hand over fresh lists
        row.history_fen = list(game.history_fen)
        row.moves = list(game.moves)
        row.difficulty = game.difficulty
        row.status = game.status
        row.last_explanation = game.last_explanation

    @staticmethod
    def _to_model(row: DBGame) -> GameModel:
        return GameModel(
            current_fen=row.current_fen,
            history_fen=list(row.history_fen),
            moves=list(row.moves),
            difficulty=row.difficulty,
            status=row.status,
            last_explanation=row.last_explanation,
        )
