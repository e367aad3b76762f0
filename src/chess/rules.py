"""
Rules that need the whole board: finding the king, check detection, legality, and the game status.

All functions are pure. Boards are never mutated, odd positions (no king, no pieces) never raise.
"""

from typing import Optional

from src.chess.board import Board
from src.chess.moves import Move, candidate_piece_moves
from src.chess.pieces import Color, Piece, PieceType, opponent
from src.chess.square import Position
from src.core.shared_types import GameStatus


def make_move(board: Board, move: Move) -> Board:
    """Apply the move (auto-promoting pawns to queens) and return the new board. No legality check."""
    return board.move_piece(move)


def is_capture(board: Board, move: Move) -> bool:
    return not board.piece(move.to_position).is_empty


def get_king_position(board: Board, player: Color) -> Optional[Position]:
    king = Piece(PieceType.KING, player)
    return next(
        (position for position, piece in board.squares() if piece == king), None
    )


def is_king_in_check(board: Board, player: Color) -> bool:
    """
    True if any opponent piece could move onto the king's square (pseudo-legally).

    NOTE: A board without the player's king counts as 'not in check'.
    """
    king_position = get_king_position(board, player)
    if king_position is None:
        return False

    return any(
        move.to_position == king_position
        for move in board.generate_candidate_moves(opponent(player))
    )


def is_legal(board: Board, move: Move, player: Color) -> bool:
    """A pseudo-legal move is legal if it does not leave (or put) your own king in check"""
    return not is_king_in_check(make_move(board, move), player)


def legal_moves(board: Board, player: Color) -> list[Move]:
    """
    List of legal moves for the player with the 'color' pieces
    ----

    1. generate candidate moves, using the basic movement rules for all pieces (the board does this calculation)
    2. remove illegal options --> a move that would put you in check or you are in check and the move does not get you out of it.

    Every place that offers or commits a move goes through here.
    """
    return [
        move
        for move in board.generate_candidate_moves(player)
        if is_legal(board, move, player)
    ]


def legal_destinations(board: Board, position: Position) -> list[Position]:
    """Legal target squares for the piece standing on `position` (for highlighting)."""
    if not position.is_within_bounds():
        return []
    piece = board.piece(position)
    if piece.is_empty:
        return []
    return [
        move.to_position
        for move in candidate_piece_moves(board, position)
        if is_legal(board, move, piece.color)
    ]


def has_legal_move(board: Board, player: Color) -> bool:
    """Stops at the first legal move found."""
    return any(
        is_legal(board, move, player)
        for move in board.generate_candidate_moves(player)
    )


def check_game_status(board: Board, player: Color) -> GameStatus:
    """
    Status of the game for the player about to move.

    | has legal move | in check | status    |
    |----------------|----------|-----------|
    | yes            | yes      | check     |
    | yes            | no       | playing   |
    | no             | yes      | checkmate |
    | no             | no       | stalemate |
    """
    in_check = is_king_in_check(board, player)
    if not has_legal_move(board, player):
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
    return GameStatus.CHECK if in_check else GameStatus.PLAYING
