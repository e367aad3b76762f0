"""
Move selection for the engine (black) and move suggestions for the player (white).

Single-ply only: every legal move is applied once and the resulting board is scored statically.
Each difficulty tier is a ScoringProfile, i.e. a set of weights for the same scoring terms.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from src.chess.board import Board
from src.chess.moves import NULL_MOVE, Move
from src.chess.pieces import Color, Piece, PieceType, is_piece_of_player, opponent
from src.chess.rules import (
    has_legal_move,
    is_capture,
    is_king_in_check,
    legal_moves,
    make_move,
)
from src.chess.square import BOARD_DIMENSIONS, Position
from src.core.shared_types import Difficulty
from src.mentor.evaluation import (
    PIECE_VALUES,
    PIECE_VALUES_WITH_KING,
    board_control,
    capture_value,
    is_center_square,
    mobility,
    pawn_structure,
)
from src.mentor.strategies import StrategyTip, strategy_by_id

logger = logging.getLogger(__name__)

ENGINE_COLOR = Color.BLACK
PLAYER_COLOR = Color.WHITE

# Suggested when white has nothing better to go on: e2-e4
FALLBACK_SUGGESTION = Move(Position(6, 4), Position(4, 4))

PIECE_EXPLANATIONS: dict[PieceType, tuple[str, ...]] = {
    PieceType.PAWN: (
        "I moved my pawn forward to control more space on the board.",
        "Advancing this pawn helps me develop my pieces.",
        "This pawn move helps control important central squares.",
    ),
    PieceType.ROOK: (
        "I moved my rook to control this file.",
        "Rooks work best on open files where they can move freely.",
        "I positioned my rook to attack your pieces along this line.",
    ),
    PieceType.KNIGHT: (
        "Knights are powerful when placed in the center of the board.",
        "My knight now controls several important squares.",
        "Knights can jump over pieces, making them valuable in closed positions.",
    ),
    PieceType.BISHOP: (
        "Bishops are effective along diagonals.",
        "This bishop now controls a long diagonal.",
        "I've developed my bishop to influence the center.",
    ),
    PieceType.QUEEN: (
        "The queen is powerful but needs to be used carefully.",
        "My queen is now positioned to threaten multiple squares.",
        "I've moved my queen to a more active position.",
    ),
    PieceType.KING: (
        "King safety is important in chess.",
        "I've moved my king to a safer square.",
        "This move helps protect my king.",
    ),
}


@dataclass(frozen=True)
class AIMoveResult:
    move: Move
    strategy: Optional[StrategyTip] = None
    explanation: Optional[str] = None


@dataclass(frozen=True)
class Suggestion:
    move: Move
    explanation: str
    strategy_applied: StrategyTip


@dataclass(frozen=True)
class ScoringProfile:
    """Weights of the scoring terms. A weight of 0 switches a term off."""

    capture_weight: float
    piece_values: dict[PieceType, int]
    center_weight: float = 0
    development_weight: float = 0
    check_weight: float = 0
    checkmate_bonus: float = 0
    positional: bool = False


SCORING_PROFILES: dict[Difficulty, ScoringProfile] = {
    Difficulty.INTERMEDIATE: ScoringProfile(
        capture_weight=10,
        piece_values=PIECE_VALUES,
        center_weight=2,
        development_weight=3,
        check_weight=1,
    ),
    Difficulty.ADVANCED: ScoringProfile(
        capture_weight=15,
        piece_values=PIECE_VALUES_WITH_KING,
        check_weight=5,
        checkmate_bonus=1000,
        positional=True,
    ),
}


@dataclass(frozen=True)
class MoveFeatures:
    """Everything the scoring and the explanations need to know about one move."""

    move: Move
    piece: Piece
    captured: Piece
    captured_value: int
    is_center: bool
    is_development: bool
    gives_check: bool
    gives_checkmate: bool
    board_control: float = 0
    mobility: float = 0
    pawn_structure: float = 0

    @property
    def is_capture(self) -> bool:
        return not self.captured.is_empty


@dataclass(frozen=True)
class ScoredMove:
    features: MoveFeatures
    score: float

    @property
    def move(self) -> Move:
        return self.features.move


# --- SCORING ---
def _home_row(color: Color) -> int:
    return BOARD_DIMENSIONS[0] - 1 if color == Color.WHITE else 0


def _is_development(piece: Piece, move: Move) -> bool:
    """A knight or bishop leaving its back rank"""
    home = _home_row(piece.color)
    return (
        piece.type in (PieceType.KNIGHT, PieceType.BISHOP)
        and move.from_position.row == home
        and move.to_position.row != home
    )


def analyse_move(
    board: Board, move: Move, player: Color, profile: ScoringProfile
) -> MoveFeatures:
    """Apply the move once and collect the features. Positional terms are turned into the player's perspective."""
    piece = board.piece(move.from_position)
    new_board = make_move(board, move)
    other = opponent(player)

    gives_check = is_king_in_check(new_board, other)
    # the mate test is the expensive part: only done when the profile rewards it
    gives_checkmate = (
        bool(profile.checkmate_bonus)
        and gives_check
        and not has_legal_move(new_board, other)
    )

    positional: dict[str, float] = {}
    if profile.positional:
        sign = 1 if player == Color.BLACK else -1
        positional = {
            "board_control": sign * board_control(new_board),
            "mobility": sign * mobility(new_board),
            "pawn_structure": sign * pawn_structure(new_board),
        }

    return MoveFeatures(
        move=move,
        piece=piece,
        captured=board.piece(move.to_position),
        captured_value=capture_value(board, move, profile.piece_values),
        is_center=is_center_square(move.to_position),
        is_development=_is_development(piece, move),
        gives_check=gives_check,
        gives_checkmate=gives_checkmate,
        **positional,
    )


def score_features(features: MoveFeatures, profile: ScoringProfile) -> float:
    score = profile.capture_weight * features.captured_value
    if features.is_center:
        score += profile.center_weight
    if features.is_development:
        score += profile.development_weight
    if features.gives_check:
        score += profile.check_weight
    if features.gives_checkmate:
        score += profile.checkmate_bonus
    if profile.positional:
        score += features.board_control + features.mobility + features.pawn_structure
    return score


def score_moves(
    board: Board, player: Color, profile: ScoringProfile
) -> list[ScoredMove]:
    """
    Score every legal move of `player`, best first.

    NOTE: the sort is stable, so equal scores keep the enumeration order (row-major board scan, then per-piece order).
    """
    scored = [
        ScoredMove(features, score_features(features, profile))
        for features in (
            analyse_move(board, move, player, profile)
            for move in legal_moves(board, player)
        )
    ]
    return sorted(scored, key=lambda scored_move: scored_move.score, reverse=True)


# --- STRATEGY TAGS + RATIONALE ---
def _strategy_for(features: MoveFeatures, profile: ScoringProfile) -> Optional[StrategyTip]:
    """Tip of the first scoring feature that fired (in scoring order). Positional themes only count for the advanced profile."""
    if features.gives_checkmate:
        return strategy_by_id("general-checks")
    if features.is_capture:
        return strategy_by_id("general-captures")
    if features.is_center:
        return strategy_by_id("opening-center")
    if features.is_development:
        return strategy_by_id("opening-develop")
    if features.gives_check:
        return strategy_by_id("general-checks")
    if profile.positional:
        if features.pawn_structure > 0:
            return strategy_by_id("middlegame-pawnstructure")
        if features.board_control > 0:
            return strategy_by_id("opening-center")
        if features.mobility > 0:
            return strategy_by_id("middlegame-activity")
    return None


def _piece_name(piece: Piece) -> str:
    return piece.type.name.lower()


def _engine_rationale(features: MoveFeatures, profile: ScoringProfile) -> str:
    piece = _piece_name(features.piece)
    if features.gives_checkmate:
        return "Checkmate! This move leaves your king with no escape."
    if features.is_capture:
        return f"I captured your {_piece_name(features.captured)} to gain material advantage."
    if features.is_center:
        return f"I moved my {piece} to a central square to control the center."
    if features.is_development:
        return f"I developed my {piece} off the back rank to get it into the game."
    if features.gives_check:
        return "I put your king in check to limit your options."
    if profile.positional and (
        features.board_control + features.mobility + features.pawn_structure > 0
    ):
        return f"I moved my {piece} to improve my overall position."
    return f"I moved my {piece} to keep my position solid."


def _suggestion_rationale(features: MoveFeatures) -> str:
    if features.gives_checkmate:
        return "This move checkmates your opponent's king!"
    if features.is_capture:
        return f"This move captures your opponent's {_piece_name(features.captured)}, which is usually a good idea in chess."
    if features.is_center:
        return "This move helps control the center of the board, which is a key chess principle."
    if features.is_development:
        return "This move develops one of your pieces, getting them into the game. Development is important in the opening."
    if features.gives_check:
        return "This move puts your opponent's king in check."
    return "This looks like a solid move that improves your position."


# --- ENGINE ---
def _beginner_move(
    board: Board, moves: list[Move], rng: Optional[random.Random]
) -> AIMoveResult:
    """Random capture if there is one, otherwise any random legal move."""
    chooser = rng or random
    captures = [
        move
        for move in moves
        if is_piece_of_player(board.piece(move.to_position), opponent(ENGINE_COLOR))
    ]
    if captures:
        move = chooser.choice(captures)
        captured = _piece_name(board.piece(move.to_position))
        return AIMoveResult(
            move=move,
            strategy=strategy_by_id("general-captures"),
            explanation=f"I'm capturing your {captured} to win material.",
        )

    return AIMoveResult(
        move=chooser.choice(moves),
        explanation="I'm making a random move to explore the board.",
    )


def generate_ai_move(
    board: Board,
    difficulty: Difficulty = Difficulty.BEGINNER,
    rng: Optional[random.Random] = None,
) -> AIMoveResult:
    """
    Pick a move for black.
    ---

    * beginner: random capture, else random move
    * intermediate/advanced: the single best scored move (ties go to the first one enumerated)

    If black has no legal move (the caller should have checked the game status first) a fallback result is returned:
    the first pseudo-legal move, or the null move.
    """
    difficulty = Difficulty(difficulty)
    moves = legal_moves(board, ENGINE_COLOR)
    if not moves:
        candidates = board.generate_candidate_moves(ENGINE_COLOR)
        logger.warning("No legal moves for black, returning a fallback move")
        return AIMoveResult(
            move=candidates[0] if candidates else NULL_MOVE,
            explanation="No legal moves available.",
        )

    if difficulty == Difficulty.BEGINNER:
        result = _beginner_move(board, moves, rng)
        logger.debug("beginner engine picked %s", result.move.to_notation())
        return result

    profile = SCORING_PROFILES[difficulty]
    best = score_moves(board, ENGINE_COLOR, profile)[0]
    logger.debug(
        "%s engine picked %s (score %.2f)",
        difficulty,
        best.move.to_notation(),
        best.score,
    )
    return AIMoveResult(
        move=best.move,
        strategy=_strategy_for(best.features, profile),
        explanation=_engine_rationale(best.features, profile),
    )


def get_ai_move_explanation(
    board: Board, result: AIMoveResult, rng: Optional[random.Random] = None
) -> str:
    """
    Sentence shown to the player after the engine moved. `board` is the position BEFORE the move.

    Capture / check remarks are added only if the rationale does not already mention them.
    """
    move = result.move
    if move == NULL_MOVE:
        return result.explanation
    piece = board.piece(move.from_position)
    rationale = result.explanation
    if not rationale and not piece.is_empty:
        rationale = (rng or random).choice(PIECE_EXPLANATIONS[piece.type])
    rationale = rationale or ""

    parts = [rationale] if rationale else []
    if result.strategy is not None:
        parts.append(f"Strategy: {result.strategy.name}.")
    if is_capture(board, move) and "captur" not in rationale.lower():
        parts.append("This also involves a capture.")
    if (
        is_king_in_check(make_move(board, move), opponent(ENGINE_COLOR))
        and "check" not in rationale.lower()
    ):
        parts.append("Your king is now in check!")
    return " ".join(parts)


# --- PLAYER HINTS ---
def get_suggestion(
    board: Board, difficulty: Difficulty = Difficulty.INTERMEDIATE
) -> Suggestion:
    """
    Hint for white, scored the same way the engine scores its own moves.

    Beginner hints use the intermediate weights (a hint should never be random).
    Falls back to e2-e4 if white has no legal move at all.
    """
    difficulty = Difficulty(difficulty)
    profile = SCORING_PROFILES.get(difficulty, SCORING_PROFILES[Difficulty.INTERMEDIATE])
    scored = score_moves(board, PLAYER_COLOR, profile)
    if not scored:
        logger.warning("No legal moves for white, suggesting the default opening move")
        return Suggestion(
            move=FALLBACK_SUGGESTION,
            explanation="Try pushing your king's pawn two squares to claim the center.",
            strategy_applied=strategy_by_id("opening-center"),
        )

    best = scored[0]
    strategy = _strategy_for(best.features, profile) or strategy_by_id(
        "general-think-ahead"
    )
    return Suggestion(
        move=best.move,
        explanation=_suggestion_rationale(best.features),
        strategy_applied=strategy,
    )
