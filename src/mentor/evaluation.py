"""
Static evaluation primitives.

By convention every score is seen from black's side (the engine): positive favours black, negative favours white.
Callers scoring for white flip the sign.
"""

from src.chess.board import Board
from src.chess.moves import Move, candidate_piece_moves
from src.chess.pieces import PIECE_POINTS, Color, Piece, PieceType, is_piece_of_player
from src.chess.square import BOARD_DIMENSIONS, Position

# Value of the piece being captured. The king is worth nothing ...
PIECE_VALUES: dict[PieceType, int] = {**PIECE_POINTS, PieceType.KING: 0}

# ... except for the advanced engine, where taking it outranks everything else.
PIECE_VALUES_WITH_KING: dict[PieceType, int] = {**PIECE_VALUES, PieceType.KING: 100}

CENTER_SQUARES: tuple[Position, ...] = (
    Position(3, 3),
    Position(3, 4),
    Position(4, 3),
    Position(4, 4),
)

# The ring of 12 squares around the center (c3-f3, c6-f6 and the c/f squares in between)
EXTENDED_CENTER_SQUARES: tuple[Position, ...] = (
    Position(2, 2),
    Position(2, 3),
    Position(2, 4),
    Position(2, 5),
    Position(3, 2),
    Position(3, 5),
    Position(4, 2),
    Position(4, 5),
    Position(5, 2),
    Position(5, 3),
    Position(5, 4),
    Position(5, 5),
)

CENTER_WEIGHT = 3
EXTENDED_CENTER_WEIGHT = 1
MOBILITY_WEIGHT = 0.1
DOUBLED_PAWN_PENALTY = 0.5
ISOLATED_PAWN_PENALTY = 0.5
PASSED_PAWN_BONUS = 1

WHITE_PAWN = Piece(PieceType.PAWN, Color.WHITE)
BLACK_PAWN = Piece(PieceType.PAWN, Color.BLACK)


def _side_sign(piece: Piece) -> int:
    """+1 for a black piece, -1 for a white one, 0 for an empty square"""
    if is_piece_of_player(piece, Color.BLACK):
        return 1
    if is_piece_of_player(piece, Color.WHITE):
        return -1
    return 0


def capture_value(board: Board, move: Move, values: dict[PieceType, int]) -> int:
    """Value of whatever sits on the target square (0 if nothing gets captured)"""
    target = board.piece(move.to_position)
    if target.is_empty:
        return 0
    return values[target.type]


def is_center_square(position: Position) -> bool:
    return position in CENTER_SQUARES


def board_control(board: Board) -> float:
    """Occupation of the center (3 points per square) and the extended center (1 point per square)"""
    score = 0
    for square in CENTER_SQUARES:
        score += CENTER_WEIGHT * _side_sign(board.piece(square))
    for square in EXTENDED_CENTER_SQUARES:
        score += EXTENDED_CENTER_WEIGHT * _side_sign(board.piece(square))
    return score


def mobility(board: Board) -> float:
    """0.1 x (number of black pseudo-legal moves - number of white pseudo-legal moves)"""
    balance = 0
    for position, piece in board.squares():
        if piece.is_empty:
            continue
        balance += _side_sign(piece) * len(candidate_piece_moves(board, position))
    return MOBILITY_WEIGHT * balance


def _pawns_per_file(board: Board, pawn: Piece) -> list[int]:
    counts = [0] * BOARD_DIMENSIONS[1]
    for position, piece in board.squares():
        if piece == pawn:
            counts[position.col] += 1
    return counts


def _is_isolated(counts: list[int], col: int) -> bool:
    left = counts[col - 1] if col > 0 else 0
    right = counts[col + 1] if col < len(counts) - 1 else 0
    return counts[col] > 0 and left == 0 and right == 0


def _is_passed(board: Board, position: Position, blocker: Piece, direction: int) -> bool:
    """No `blocker` pawn anywhere ahead of the pawn, on its own file or an adjacent one"""
    num_rows, num_cols = BOARD_DIMENSIONS
    row = position.row + direction
    while 0 <= row < num_rows:
        for col in range(max(0, position.col - 1), min(num_cols - 1, position.col + 1) + 1):
            if board.piece(Position(row, col)) == blocker:
                return False
        row += direction
    return True


def pawn_structure(board: Board) -> float:
    """
    Pawn weaknesses and strengths
    ----

    * doubled pawns (per file with more than one pawn): bad for whoever has them
    * isolated pawns (per file, no friendly pawn on the adjacent files): bad for whoever has them
    * passed pawns (per pawn, no opposing pawn ahead on the same or adjacent files): good for whoever has them

    NOTE: pawns on the first/last row are not looked at for passed pawns.
    """
    score = 0.0
    white_files = _pawns_per_file(board, WHITE_PAWN)
    black_files = _pawns_per_file(board, BLACK_PAWN)

    for col in range(BOARD_DIMENSIONS[1]):
        if white_files[col] > 1:
            score += DOUBLED_PAWN_PENALTY
        if black_files[col] > 1:
            score -= DOUBLED_PAWN_PENALTY

    for col in range(BOARD_DIMENSIONS[1]):
        if _is_isolated(white_files, col):
            score += ISOLATED_PAWN_PENALTY
        if _is_isolated(black_files, col):
            score -= ISOLATED_PAWN_PENALTY

    for position, piece in board.squares():
        if not 0 < position.row < BOARD_DIMENSIONS[0] - 1:
            continue
        # white pawns run towards row 0, black pawns towards row 7
        if piece == WHITE_PAWN and _is_passed(board, position, BLACK_PAWN, -1):
            score -= PASSED_PAWN_BONUS
        elif piece == BLACK_PAWN and _is_passed(board, position, WHITE_PAWN, 1):
            score += PASSED_PAWN_BONUS
    return score


def evaluate_position(board: Board) -> float:
    """All positional terms added up (no material)."""
    return board_control(board) + mobility(board) + pawn_structure(board)
