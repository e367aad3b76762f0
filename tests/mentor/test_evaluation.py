"""Unit tests for src/mentor/evaluation.py"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.moves import Move
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Position
from src.mentor.evaluation import (
    CENTER_SQUARES,
    EXTENDED_CENTER_SQUARES,
    PIECE_VALUES,
    PIECE_VALUES_WITH_KING,
    board_control,
    capture_value,
    evaluate_position,
    is_center_square,
    mobility,
    pawn_structure,
)

BoardFactory = Callable[[dict[str, str]], Board]


@pytest.mark.parametrize("piece_type", [t for t in PieceType if t != PieceType.EMPTY])
def test_piece_values_agree_with_material_points(piece_type: PieceType) -> None:
    assert PIECE_VALUES[piece_type] == Piece(piece_type, Color.WHITE).points
    assert PIECE_VALUES_WITH_KING[piece_type] == (100 if piece_type == PieceType.KING else PIECE_VALUES[piece_type])


def test_center_squares() -> None:
    assert {square.to_algebraic() for square in CENTER_SQUARES} == {"d4", "d5", "e4", "e5"}
    assert len(EXTENDED_CENTER_SQUARES) == 12
    assert not set(CENTER_SQUARES) & set(EXTENDED_CENTER_SQUARES)
    assert is_center_square(Position.from_algebraic("e4"))
    assert not is_center_square(Position.from_algebraic("c3"))


def test_starting_position_is_balanced() -> None:
    board = Board.initial()
    assert board_control(board) == 0
    assert mobility(board) == pytest.approx(0)
    assert pawn_structure(board) == 0
    assert evaluate_position(board) == pytest.approx(0)


# --- CAPTURES ---
def test_capture_value(board_from_pieces: BoardFactory) -> None:
    board = board_from_pieces({"d4": "N", "e6": "q", "c6": "k"})
    assert capture_value(board, Move.from_notation("d4-e6"), PIECE_VALUES) == 9
    assert capture_value(board, Move.from_notation("d4-f5"), PIECE_VALUES) == 0


def test_capturing_the_king(board_from_pieces: BoardFactory) -> None:
    board = board_from_pieces({"d4": "N", "c6": "k"})
    move = Move.from_notation("d4-c6")
    assert capture_value(board, move, PIECE_VALUES) == 0
    assert capture_value(board, move, PIECE_VALUES_WITH_KING) == 100


# --- BOARD CONTROL ---
def test_board_control_signs(board_from_pieces: BoardFactory) -> None:
    """Black pieces count positive, white pieces negative"""
    assert board_control(board_from_pieces({"e4": "P"})) == -3
    assert board_control(board_from_pieces({"d5": "p"})) == 3
    assert board_control(board_from_pieces({"c6": "n"})) == 1
    assert board_control(board_from_pieces({"f3": "N"})) == -1
    assert board_control(board_from_pieces({"a1": "R", "h8": "r"})) == 0


def test_board_control_adds_up(board_from_pieces: BoardFactory) -> None:
    board = board_from_pieces({"e4": "P", "d5": "p", "c6": "n", "f6": "b", "c3": "N"})
    assert board_control(board) == -3 + 3 + 1 + 1 - 1


# --- MOBILITY ---
def test_mobility(board_from_pieces: BoardFactory) -> None:
    """white rook on d4: 14 moves, black knight on a1: 2 moves"""
    board = board_from_pieces({"d4": "R", "a1": "n"})
    assert mobility(board) == pytest.approx(0.1 * (2 - 14))


# --- PAWN STRUCTURE ---
def test_lone_white_pawn(board_from_pieces: BoardFactory) -> None:
    """isolated (+0.5 for black) and passed (-1 for black)"""
    assert pawn_structure(board_from_pieces({"e4": "P"})) == pytest.approx(-0.5)


def test_lone_black_pawn(board_from_pieces: BoardFactory) -> None:
    assert pawn_structure(board_from_pieces({"d5": "p"})) == pytest.approx(0.5)


def test_facing_pawn_chains_are_neutral(board_from_pieces: BoardFactory) -> None:
    board = board_from_pieces({"a2": "P", "b2": "P", "a7": "p", "b7": "p"})
    assert pawn_structure(board) == 0


def test_doubled_white_pawns(board_from_pieces: BoardFactory) -> None:
    """Nothing isolated or passed, just white's doubled e-pawns"""
    board = board_from_pieces(
        {"d2": "P", "e2": "P", "e3": "P", "c7": "p", "d7": "p", "e7": "p", "f7": "p"}
    )
    assert pawn_structure(board) == pytest.approx(0.5)


def test_doubled_black_pawns(board_from_pieces: BoardFactory) -> None:
    board = board_from_pieces(
        {"d7": "p", "e7": "p", "e6": "p", "c2": "P", "d2": "P", "e2": "P", "f2": "P"}
    )
    assert pawn_structure(board) == pytest.approx(-0.5)


def test_passed_pawn_is_blocked_by_adjacent_file(board_from_pieces: BoardFactory) -> None:
    """White a5 and black b7 stand in each other's way, so neither is passed. Both are isolated."""
    board = board_from_pieces({"a5": "P", "b7": "p"})
    assert pawn_structure(board) == pytest.approx(0.5 - 0.5)


# --- TOTAL ---
def test_evaluate_position_sums_the_terms(board_from_pieces: BoardFactory) -> None:
    board = board_from_pieces({"d4": "R", "a1": "n"})
    expected = board_control(board) + mobility(board) + pawn_structure(board)
    assert evaluate_position(board) == pytest.approx(expected)
    assert evaluate_position(board) == pytest.approx(-3 - 1.2)
