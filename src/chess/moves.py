"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define pseudo-legal move sets for each piece type.

Legality (not leaving your own king in check) is checked later, in src/chess/rules.py
"""

from dataclasses import dataclass
from typing import Callable, Protocol, Self

from src.chess.pieces import Color, Piece, PieceType, is_piece_of_player, opponent
from src.chess.square import BOARD_DIMENSIONS, Position


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, position: Position) -> Piece: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made. No promotion / castling / en passant flags: promotion is inferred when applying."""

    from_position: Position
    to_position: Position

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """
        Simplified coordinate notation
        ---

        examples:
        * "e2-e4": move the piece that was on e2 to e4
        * "g8-f6": (knight) jumps from g8 to f6

        NOTE: there are no capture / check / promotion suffixes.
        """
        from_sq, to_sq = notation.split("-")
        return cls(Position.from_algebraic(from_sq), Position.from_algebraic(to_sq))

    def to_notation(self) -> str:
        return f"{self.from_position.to_algebraic()}-{self.to_position.to_algebraic()}"


# Sentinel handed out when a side has no move at all (a8 to a8).
NULL_MOVE = Move(Position(0, 0), Position(0, 0))


def move_to_algebraic(move: Move) -> str:
    """"<from>-<to>", without disambiguation, check, or capture annotation."""
    return move.to_notation()


# --- MOVEMENT RULES ---
def _is_available(target: Piece, player_color: Color) -> bool:
    """A square can be moved onto if it is empty or holds an opponent's piece."""
    return target.is_empty or is_piece_of_player(target, opponent(player_color))


def raycasting_move(
    position: Position, board: Board, directions: list[Vector]
) -> list[Move]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.

    The first occupied square is included only if it holds an opponent's piece (a capture).
    """

    player_color = board.piece(position).color
    moves: list[Move] = []
    for d_row, d_col in directions:
        target = position.offset(d_row, d_col)
        while target.is_within_bounds():
            piece_found = board.piece(target)
            if not piece_found.is_empty:
                # only need to add the first occupied square found if it is the opponent's: then it can be captured.
                if is_piece_of_player(piece_found, opponent(player_color)):
                    moves.append(Move(position, target))
                break

            moves.append(Move(position, target))
            target = target.offset(d_row, d_col)
    return moves


def single_step_move(
    position: Position, board: Board, deltas: list[Vector]
) -> list[Move]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just can move a single step along a direction"""
    player_color = board.piece(position).color
    moves: list[Move] = []
    for d_row, d_col in deltas:
        target = position.offset(d_row, d_col)
        if not target.is_within_bounds():
            continue

        if _is_available(board.piece(target), player_color):
            moves.append(Move(position, target))

    return moves


def pawn_direction(color: Color) -> int:
    """White moves UP the board (towards row 0), black moves DOWN"""
    return -1 if color == Color.WHITE else 1


def pawn_home_row(color: Color) -> int:
    return BOARD_DIMENSIONS[0] - 2 if color == Color.WHITE else 1


def candidate_pawn_moves(position: Position, board: Board) -> list[Move]:
    """
    A pawn:
    - moves by a single square forward (only onto an empty square).
    - It can move by two in their first move (so when on their starting rank), if both squares are empty
    - takes diagonally

    NOTE: No en passant. Promotion is decided when the move gets applied.
    """
    color = board.piece(position).color
    direction = pawn_direction(color)
    moves: list[Move] = []

    one_forward = position.offset(direction, 0)
    if one_forward.is_within_bounds() and board.piece(one_forward).is_empty:
        moves.append(Move(position, one_forward))

        two_forward = position.offset(2 * direction, 0)
        if (
            position.row == pawn_home_row(color)
            and two_forward.is_within_bounds()
            and board.piece(two_forward).is_empty
        ):
            moves.append(Move(position, two_forward))

    # pawns take diagonally:
    for d_col in (-1, 1):
        target = position.offset(direction, d_col)
        if target.is_within_bounds() and is_piece_of_player(
            board.piece(target), opponent(color)
        ):
            moves.append(Move(position, target))
    return moves


KNIGHT_DELTAS: list[Vector] = [
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
]

# right, left, down, up
STRAIGHTS: list[Vector] = [(0, 1), (0, -1), (1, 0), (-1, 0)]
# down-right, down-left, up-right, up-left
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]

KING_DELTAS: list[Vector] = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]


def candidate_knight_moves(position: Position, board: Board) -> list[Move]:
    """Knights always move such that |delta_row| + |delta_col| = 3"""
    return single_step_move(position, board, KNIGHT_DELTAS)


def candidate_bishop_moves(position: Position, board: Board) -> list[Move]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(position, board, DIAGONALS)


def candidate_rook_moves(position: Position, board: Board) -> list[Move]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(position, board, STRAIGHTS)


def candidate_queen_moves(position: Position, board: Board) -> list[Move]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_move(position, board, STRAIGHTS + DIAGONALS)


def candidate_king_moves(position: Position, board: Board) -> list[Move]:
    """
    The king can move by a single square at the time.

    No castling: it is never generated.
    """
    return single_step_move(position, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Position, Board], list[Move]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def candidate_piece_moves(board: Board, position: Position) -> list[Move]:
    """Pseudo-legal moves of whatever stands on the square. Empty or off-board square: no moves."""
    if not position.is_within_bounds():
        return []
    piece = board.piece(position)
    if piece.is_empty:
        return []
    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(position, board)


def get_possible_moves(board: Board, position: Position) -> list[Position]:
    """
    Pseudo-legal destinations for the piece on the given square.

    Does NOT filter out moves that leave your own king in check.
    """
    return [move.to_position for move in candidate_piece_moves(board, position)]
