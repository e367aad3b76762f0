"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    HintRequest,
    HintResponse,
    MoveRequest,
    MoveResponse,
    PossibleMovesRequest,
    PossibleMovesResponse,
    StrategyTipResponse,
    StrategyTipsRequest,
)
from src.chess.game import ENGINE_COLOR, Game
from src.chess.moves import Move
from src.chess.square import Position
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import PlayerColor
from src.db.repository import GameRepository
from src.mentor.strategies import (
    StrategyTip,
    random_strategy,
    strategies_by_difficulty,
    strategies_by_phase,
)

logger = logging.getLogger(__name__)


class ChessMentorService:
    """Orchestration of layers for a game against the mentor engine."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Player requested to start a new game."""

        # Use info in CreateGameRequest to create a new Game, and convert into GameModel
        new_game = Game.new_game(
            difficulty=request.difficulty, starting_fen=request.starting_fen
        )
        # the engine plays black: a position with black to move gets its reply straight away
        if new_game.color_to_move == ENGINE_COLOR and not new_game.is_over:
            new_game.play_ai_move()
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        # Return a GameResponse
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def possible_moves(self, request: PossibleMovesRequest) -> PossibleMovesResponse:
        """Legal destinations of the selected piece (for highlighting)."""

        game = Game.from_model(self._fetch_game(request.game_id))
        destinations = game.possible_moves(Position.from_algebraic(request.square))
        return PossibleMovesResponse(
            game_id=request.game_id,
            square=request.square,
            destinations=[position.to_algebraic() for position in destinations],
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        Make a move attempt. If the game goes on, the engine answers right away.
        """

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Parse data in MoveRequest
        move = Move(
            Position.from_algebraic(request.from_square),
            Position.from_algebraic(request.to_square),
        )

        # Create a new Game instance from the retrieved GameModel, and attempt the move
        game = Game.from_model(stored_model)
        game.make_move(move)

        # the engine answers
        ai_result = None
        if not game.is_over:
            ai_result = game.play_ai_move()

        # Capture updated state in GameModel and store in repository
        after_move = game.to_model()
        self.repo.update_game(request.game_id, after_move)

        return MoveResponse(
            game=self._create_game_response(request.game_id, after_move),
            player_move=move.to_notation(),
            ai_move=ai_result.move.to_notation() if ai_result else None,
            ai_explanation=game.last_explanation if ai_result else None,
            ai_strategy=(
                self._tip_response(ai_result.strategy)
                if ai_result and ai_result.strategy
                else None
            ),
        )

    def hint(self, request: HintRequest) -> HintResponse:
        """Suggest a move for the player. Nothing gets stored: a hint is never applied."""

        game = Game.from_model(self._fetch_game(request.game_id))
        suggestion = game.suggest()
        return HintResponse(
            game_id=request.game_id,
            move=suggestion.move.to_notation(),
            from_square=suggestion.move.from_position.to_algebraic(),
            to_square=suggestion.move.to_position.to_algebraic(),
            explanation=suggestion.explanation,
            strategy=self._tip_response(suggestion.strategy_applied),
        )

    def strategy_tips(self, request: StrategyTipsRequest) -> list[StrategyTipResponse]:
        """Browse the strategy catalog."""
        if request.phase is not None:
            tips = strategies_by_phase(request.phase, request.count)
        elif request.difficulty is not None:
            tips = strategies_by_difficulty(request.difficulty, request.count)
        else:
            tips = [random_strategy()]
        return [self._tip_response(tip) for tip in tips]

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""

        # Before the first turn gets played, the starting FEN equals the current FEN. Otherwise get it as first recorded FEN in history.
        starting_fen = (
            model.history_fen[0] if len(model.history_fen) > 0 else model.current_fen
        )
        active_color = model.current_fen.split(" ")[1]
        return GameResponse(
            game_id=game_id,
            fen_state=model.current_fen,
            starting_state=starting_fen,
            color_to_move=PlayerColor.WHITE if active_color == "w" else PlayerColor.BLACK,
            difficulty=model.difficulty,
            status=model.status,
            move_history=model.moves,
            last_explanation=model.last_explanation,
        )

    def _tip_response(self, tip: StrategyTip) -> StrategyTipResponse:
        return StrategyTipResponse.model_validate(tip, from_attributes=True)

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
