"""Unit tests for /src/chess/pieces.py"""

import pytest

from src.chess.pieces import (
    EMPTY_SQUARE,
    FEN_TO_PIECE,
    PIECE_TO_FEN,
    Color,
    Piece,
    PieceType,
    is_piece_of_player,
    opponent,
)


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.WHITE


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.BLACK


@pytest.mark.parametrize(
    "piece_type",
    [piece_type for piece_type in PieceType if piece_type != PieceType.EMPTY],
)
def test_pieces_to_fen(piece_type: PieceType) -> None:
    assert Piece(piece_type, Color.WHITE).to_fen() == PIECE_TO_FEN[piece_type].upper()
    assert Piece(piece_type, Color.BLACK).to_fen() == PIECE_TO_FEN[piece_type].lower()


@pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
def test_promotion_to_queen(color: Color) -> None:
    """Promotion hands back a new piece: same color, new type, original untouched"""
    pawn = Piece(PieceType.PAWN, color)
    queen = pawn.promoted_to(PieceType.QUEEN)
    assert queen == Piece(PieceType.QUEEN, color)
    assert pawn.type == PieceType.PAWN


def test_points() -> None:
    assert Piece(PieceType.QUEEN, Color.BLACK).points == 9
    assert Piece(PieceType.KING, Color.WHITE).points == 0
    assert EMPTY_SQUARE.points == 0


@pytest.mark.parametrize("player", [Color.WHITE, Color.BLACK])
def test_empty_square_belongs_to_nobody(player: Color) -> None:
    assert not is_piece_of_player(EMPTY_SQUARE, player)


def test_piece_of_player() -> None:
    white_rook = Piece.from_fen("R")
    black_rook = Piece.from_fen("r")
    assert is_piece_of_player(white_rook, Color.WHITE)
    assert not is_piece_of_player(white_rook, Color.BLACK)
    assert is_piece_of_player(black_rook, Color.BLACK)
    assert not is_piece_of_player(black_rook, Color.WHITE)


def test_opponent() -> None:
    assert opponent(Color.WHITE) == Color.BLACK
    assert opponent(Color.BLACK) == Color.WHITE
