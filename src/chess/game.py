"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating everything required to play a turn: the human plays white, the engine plays black.
It passes this information to the service layer, which can then pass it onwards to the API layer.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.board import Board
from src.chess.fen import FENState
from src.chess.moves import Move
from src.chess.pieces import Color, is_piece_of_player, opponent
from src.chess.rules import (
    check_game_status,
    legal_destinations,
    legal_moves,
    make_move,
)
from src.chess.square import Position
from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import Difficulty, GameStatus
from src.mentor.selector import (
    AIMoveResult,
    Suggestion,
    generate_ai_move,
    get_ai_move_explanation,
    get_suggestion,
)

logger = logging.getLogger(__name__)

HUMAN_COLOR = Color.WHITE
ENGINE_COLOR = Color.BLACK
TERMINAL_STATUSES = (GameStatus.CHECKMATE, GameStatus.STALEMATE, GameStatus.DRAW)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    color_to_move: Color
    difficulty: Difficulty
    moves: list[Move] = field(default_factory=list)
    history: list[str] = field(default_factory=list)  # list of FEN strings
    status: GameStatus = GameStatus.PLAYING
    last_explanation: str = ""

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in GameStatus.__members__.values():
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in GameStatus)}"
            )
        if model.difficulty not in Difficulty.__members__.values():
            raise GameStateError(
                f"Invalid difficulty: {model.difficulty!r}. \nPick one from {','.join(level.value for level in Difficulty)}"
            )

        state = FENState.from_fen(model.current_fen)
        return cls(
            board=Board.from_fen(state.position),
            color_to_move=state.color_to_move,
            difficulty=Difficulty(model.difficulty),
            moves=[Move.from_notation(notation) for notation in model.moves],
            history=list(model.history_fen),
            status=GameStatus(model.status),
            last_explanation=model.last_explanation,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            current_fen=self.fen,
            history_fen=list(self.history),
            moves=[move.to_notation() for move in self.moves],
            difficulty=self.difficulty.value,
            status=self.status.value,
            last_explanation=self.last_explanation,
        )

    @classmethod
    def new_game(
        cls,
        difficulty: Difficulty = Difficulty.BEGINNER,
        starting_fen: Optional[str] = None,
    ) -> Self:
        """Start a new game. Without a starting FEN the canonical starting position is used (white, the human, to move)."""

        state = (
            FENState.from_fen(starting_fen)
            if starting_fen
            else FENState.starting_position()
        )
        board = Board.from_fen(state.position)
        game = cls(
            board=board,
            color_to_move=state.color_to_move,
            difficulty=Difficulty(difficulty),
        )
        game._update_game_status()
        logger.info("New %s game started (%s)", game.difficulty, game.fen)
        return game

    @property
    def fen(self) -> str:
        return FENState(self.board.to_fen(), self.color_to_move).to_fen()

    @property
    def is_over(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def winner(self) -> Optional[Color]:
        """
        For now only works for checkmate.
        Given we know it is checkmate, the side that is requested to move just got mated and the opponent must be the winner
        """
        if self.status != GameStatus.CHECKMATE:
            return None
        return opponent(self.color_to_move)

    def possible_moves(self, square: Position) -> list[Position]:
        """
        Legal destinations for the piece on the square (used to highlight squares).
        Empty squares and the pieces of the side not to move have none.
        """
        self._assert_in_progress()
        if not square.is_within_bounds():
            return []
        if not is_piece_of_player(self.board.piece(square), self.color_to_move):
            return []
        return legal_destinations(self.board, square)

    def make_move(self, move: Move) -> None:
        """
        Attempt a move for the human player
        -----

        1. make sure the game is still running and it is white's turn
        2. check the move against the legal moves
        3. update the board, moves, history and status
        """
        self._assert_in_progress()
        self._assert_turn(HUMAN_COLOR)

        if move not in legal_moves(self.board, HUMAN_COLOR):
            raise IllegalMoveError(f"Move not allowed: {move.to_notation()}")

        self._commit(move)

    def play_ai_move(self, rng: Optional[random.Random] = None) -> AIMoveResult:
        """Let the engine (black) answer. The explanation is kept as `last_explanation`."""
        self._assert_in_progress()
        self._assert_turn(ENGINE_COLOR)

        board_before = self.board
        result = generate_ai_move(board_before, self.difficulty, rng=rng)
        self.last_explanation = get_ai_move_explanation(board_before, result, rng=rng)
        self._commit(result.move)
        return result

    def suggest(self) -> Suggestion:
        """Hint for the human player. Never changes the game."""
        self._assert_in_progress()
        self._assert_turn(HUMAN_COLOR)
        return get_suggestion(self.board, self.difficulty)

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.is_over:
            raise GameStateError(f"Game is over. status: {self.status}")

    def _assert_turn(self, color: Color) -> None:
        if self.color_to_move != color:
            raise NotYourTurnError(
                f"It is not {color.name.lower()}'s turn. Waiting for {self.color_to_move.name.lower()} to make a move first."
            )

    def _commit(self, move: Move) -> None:
        """Commit the FEN before the move to the history, then update board / moves / side to move / status"""
        self.history.append(self.fen)
        self.board = make_move(self.board, move)
        self.moves.append(move)
        self.color_to_move = opponent(self.color_to_move)
        self._update_game_status()
        logger.debug(
            "Played %s, %s to move, status %s",
            move.to_notation(),
            self.color_to_move.name.lower(),
            self.status,
        )

    def _update_game_status(self) -> None:
        """Status for the side that is about to move."""
        self.status = check_game_status(self.board, self.color_to_move)
        if self.is_over:
            logger.info("Game over: %s", self.status)
