"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.chess.fen import is_valid_fen, is_valid_square
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Difficulty, GameStatus, Phase, PlayerColor


def _validate_square_name(value: str) -> str:
    if not is_valid_square(value) or len(value) != 2:
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a valid square name."
        )
    return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    difficulty: Difficulty = Difficulty.BEGINNER
    starting_fen: Optional[str] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        if not is_valid_fen(value.strip()):
            raise InvalidRequestError(
                "Position must be '<placement> <w|b>', ex. 'rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w'."
            )
        return value.strip()


class GetGameRequest(BaseModel):
    game_id: UUID


class PossibleMovesRequest(BaseModel):
    game_id: UUID
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


class HintRequest(BaseModel):
    game_id: UUID


class StrategyTipsRequest(BaseModel):
    """Filter by phase OR by difficulty. Neither given: a single random tip."""

    phase: Optional[Phase] = None
    difficulty: Optional[Difficulty] = None
    count: int = Field(default=3, ge=1)


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    fen_state: str
    starting_state: str
    color_to_move: PlayerColor
    difficulty: Difficulty
    status: GameStatus
    move_history: list[str]
    last_explanation: str


class PossibleMovesResponse(BaseModel):
    game_id: UUID
    square: str
    destinations: list[str]


class StrategyTipResponse(BaseModel):
    id: str
    name: str
    description: str
    phase: Phase
    difficulty_level: Difficulty


class MoveResponse(BaseModel):
    game: GameResponse
    player_move: str
    ai_move: Optional[str] = None
    ai_explanation: Optional[str] = None
    ai_strategy: Optional[StrategyTipResponse] = None


class HintResponse(BaseModel):
    game_id: UUID
    move: str
    from_square: str
    to_square: str
    explanation: str
    strategy: StrategyTipResponse
