"""
Catalog of strategy tips.

Static data: built once at import time, never mutated. Lookups hand out the shared StrategyTip instances (no copies).
"""

import random
from dataclasses import dataclass
from typing import Optional, TypeVar

from src.core.shared_types import Difficulty, Phase

T = TypeVar("T")


@dataclass(frozen=True)
class StrategyTip:
    id: str
    name: str
    description: str
    phase: Phase
    difficulty_level: Difficulty


# --- OPENING ---
OPENING_STRATEGIES: tuple[StrategyTip, ...] = (
    StrategyTip(
        id="opening-center",
        name="Control the Center",
        description="Try to control the central squares (d4, d5, e4, e5) with your pawns and pieces. The center is crucial for mobility and attacking options.",
        phase=Phase.OPENING,
        difficulty_level=Difficulty.BEGINNER,
    ),
    StrategyTip(
        id="opening-develop",
        name="Develop Your Pieces",
        description="Move your knights and bishops out early to prepare for attack and defense. Aim to have all minor pieces developed before making major attacks.",
        phase=Phase.OPENING,
        difficulty_level=Difficulty.BEGINNER,
    ),
    StrategyTip(
        id="opening-castle",
        name="Castle Early",
        description="Move your king to safety by castling as soon as possible, ideally within the first 6-10 moves.",
        phase=Phase.OPENING,
        difficulty_level=Difficulty.BEGINNER,
    ),
    StrategyTip(
        id="opening-tempo",
        name="Don't Waste Tempo",
        description="Avoid moving the same piece multiple times in the opening. Each move should contribute to development or control.",
        phase=Phase.OPENING,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="opening-queen",
        name="Don't Bring Queen Out Early",
        description="Avoid moving your queen out too early as it can become a target for enemy pieces and waste valuable development time.",
        phase=Phase.OPENING,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
)

# --- MIDDLEGAME ---
MIDDLEGAME_STRATEGIES: tuple[StrategyTip, ...] = (
    StrategyTip(
        id="middlegame-activity",
        name="Maximize Piece Activity",
        description="Position your pieces where they control the most squares and coordinate well with other pieces.",
        phase=Phase.MIDDLEGAME,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="middlegame-pawnstructure",
        name="Pawn Structure",
        description="Pay attention to your pawn structure. Avoid isolated or doubled pawns when possible, and look for opportunities to create passed pawns.",
        phase=Phase.MIDDLEGAME,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="middlegame-weakpoints",
        name="Exploit Weak Squares",
        description="Identify and occupy weak squares in your opponent's position, especially those that cannot be defended by pawns.",
        phase=Phase.MIDDLEGAME,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="middlegame-outposts",
        name="Knight Outposts",
        description="Knights are powerful when placed in central positions protected by pawns, especially when they can't be attacked by enemy pawns.",
        phase=Phase.MIDDLEGAME,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="middlegame-bishops",
        name="Bishop Pairs",
        description="Try to keep both of your bishops, as they work well together covering different colored squares. The bishop pair is especially strong in open positions.",
        phase=Phase.MIDDLEGAME,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="middlegame-open-files",
        name="Rooks on Open Files",
        description="Place your rooks on files (columns) with no pawns to maximize their effectiveness and potentially penetrate to the seventh rank.",
        phase=Phase.MIDDLEGAME,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
)

# --- ENDGAME ---
ENDGAME_STRATEGIES: tuple[StrategyTip, ...] = (
    StrategyTip(
        id="endgame-king",
        name="Activate Your King",
        description="In the endgame, your king becomes a strong piece. Bring it to the center or toward the action when safe to do so.",
        phase=Phase.ENDGAME,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="endgame-passed-pawns",
        name="Create Passed Pawns",
        description="A passed pawn (one with no opposing pawns in front of it or on adjacent files) can become a queen and win the game.",
        phase=Phase.ENDGAME,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="endgame-opposition",
        name="Use the Opposition",
        description="When kings face each other, the player who doesn't have to move often has the advantage (the opposition).",
        phase=Phase.ENDGAME,
        difficulty_level=Difficulty.ADVANCED,
    ),
    StrategyTip(
        id="endgame-zugzwang",
        name="Create Zugzwang",
        description="Force your opponent into a position where any move will worsen their position. This is particularly effective in endgames.",
        phase=Phase.ENDGAME,
        difficulty_level=Difficulty.ADVANCED,
    ),
)

# --- GENERAL: applies to all phases ---
GENERAL_STRATEGIES: tuple[StrategyTip, ...] = (
    StrategyTip(
        id="general-threats",
        name="Respond to Threats",
        description="Always check what your opponent is threatening with their last move and respond appropriately.",
        phase=Phase.GENERAL,
        difficulty_level=Difficulty.BEGINNER,
    ),
    StrategyTip(
        id="general-captures",
        name="Analyze All Captures",
        description="Before moving, consider all possible captures and exchanges to ensure you're not missing tactical opportunities.",
        phase=Phase.GENERAL,
        difficulty_level=Difficulty.BEGINNER,
    ),
    StrategyTip(
        id="general-checks",
        name="Consider All Checks",
        description="Checks force your opponent to respond in limited ways. Always look for checking opportunities that can disrupt their plans.",
        phase=Phase.GENERAL,
        difficulty_level=Difficulty.BEGINNER,
    ),
    StrategyTip(
        id="general-think-ahead",
        name="Think Ahead",
        description="Try to anticipate what your opponent will do after your move, and have a plan ready.",
        phase=Phase.GENERAL,
        difficulty_level=Difficulty.BEGINNER,
    ),
    StrategyTip(
        id="general-forks",
        name="Watch for Forks",
        description="Be on the lookout for opportunities where one piece can attack two or more of your opponent's pieces simultaneously.",
        phase=Phase.GENERAL,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="general-pins",
        name="Create Pins",
        description="A pin restricts an enemy piece's movement because moving would expose a more valuable piece behind it.",
        phase=Phase.GENERAL,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="general-skewers",
        name="Look for Skewers",
        description="A skewer is like a pin in reverse: it attacks a valuable piece that, when moved, exposes a less valuable piece behind it.",
        phase=Phase.GENERAL,
        difficulty_level=Difficulty.INTERMEDIATE,
    ),
    StrategyTip(
        id="general-material",
        name="Count Material",
        description="Regularly assess the material balance. A typical value system is: pawn=1, knight/bishop=3, rook=5, queen=9.",
        phase=Phase.GENERAL,
        difficulty_level=Difficulty.BEGINNER,
    ),
)

STRATEGIES_BY_PHASE: dict[Phase, tuple[StrategyTip, ...]] = {
    Phase.OPENING: OPENING_STRATEGIES,
    Phase.MIDDLEGAME: MIDDLEGAME_STRATEGIES,
    Phase.ENDGAME: ENDGAME_STRATEGIES,
    Phase.GENERAL: GENERAL_STRATEGIES,
}

ALL_STRATEGIES: tuple[StrategyTip, ...] = (
    OPENING_STRATEGIES + MIDDLEGAME_STRATEGIES + ENDGAME_STRATEGIES + GENERAL_STRATEGIES
)

_STRATEGIES_BY_ID: dict[str, StrategyTip] = {tip.id: tip for tip in ALL_STRATEGIES}


def _shuffled(items: tuple[T, ...], rng: Optional[random.Random]) -> list[T]:
    """Fisher-Yates shuffle (random.shuffle) of a copy. The catalog itself never gets reordered."""
    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled


def strategies_by_phase(
    phase: Phase, count: int = 3, rng: Optional[random.Random] = None
) -> list[StrategyTip]:
    """Shuffle the tips of a phase and take the first `count`"""
    return _shuffled(STRATEGIES_BY_PHASE[phase], rng)[:count]


def strategies_by_difficulty(
    level: Difficulty, count: int = 3, rng: Optional[random.Random] = None
) -> list[StrategyTip]:
    matching = tuple(tip for tip in ALL_STRATEGIES if tip.difficulty_level == level)
    return _shuffled(matching, rng)[:count]


def random_strategy(rng: Optional[random.Random] = None) -> StrategyTip:
    return (rng or random).choice(ALL_STRATEGIES)


def strategy_by_id(tip_id: str) -> StrategyTip:
    """Raises KeyError for an unknown id. The tip ids used by the move selector are fixed, so that would be a programming error."""
    return _STRATEGIES_BY_ID[tip_id]
