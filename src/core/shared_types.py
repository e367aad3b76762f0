"""
Type definitions used across layers
"""

from enum import StrEnum


class GameStatus(StrEnum):
    PLAYING = "playing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    # NOTE: reserved. There is no repetition / fifty-move / insufficient material logic, so nothing produces it (yet).
    DRAW = "draw"


class Difficulty(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Phase(StrEnum):
    """Coarse game phase. Only used to filter the strategy catalog, never derived from the board."""

    OPENING = "opening"
    MIDDLEGAME = "middlegame"
    ENDGAME = "endgame"
    GENERAL = "general"


# --- Player colors as seen by the API layer. The domain uses its own Color enum in src/chess/pieces.py
class PlayerColor(StrEnum):
    WHITE = "white"
    BLACK = "black"
