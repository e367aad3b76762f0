"""Unit tests for src/chess/fen.py"""

import pytest

from src.chess.fen import (
    STARTING_FEN,
    FENState,
    InvalidFENError,
    is_valid_color_code,
    is_valid_fen,
    is_valid_position,
    is_valid_square,
)
from src.chess.pieces import Color


@pytest.mark.parametrize(
    "position, is_valid",
    [
        ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", True),
        ("8/8/8/8/8/8/8/8", True),
        ("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR", True),
        # only 7 ranks
        ("rnbqkbnr/pppppppp/8/8/8/PPPPPPPP/RNBQKBNR", False),
        # rank too long
        ("rnbqkbnr/ppppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", False),
        # rank too short
        ("rnbqkbnr/ppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", False),
        # unknown piece letter
        ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX", False),
        ("", False),
    ],
)
def test_is_valid_position(position: str, is_valid: bool) -> None:
    assert is_valid_position(position) == is_valid


@pytest.mark.parametrize(
    "color_code, is_valid",
    [("w", True), ("b", True), ("W", False), ("white", False), ("-", False)],
)
def test_is_valid_color_code(color_code: str, is_valid: bool) -> None:
    assert is_valid_color_code(color_code) == is_valid


@pytest.mark.parametrize(
    "square, is_valid",
    [
        ("a1", True),
        ("h8", True),
        ("e4", True),
        ("i1", False),
        ("a9", False),
        ("a0", False),
        ("E4", False),
        ("e", False),
        ("", False),
        ("ee", False),
    ],
)
def test_is_valid_square(square: str, is_valid: bool) -> None:
    assert is_valid_square(square) == is_valid


@pytest.mark.parametrize(
    "fen, is_valid",
    [
        (STARTING_FEN, True),
        ("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b", True),
        # placement only
        ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", False),
        # castling / en passant / counters are not part of the encoding
        ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", False),
        ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x", False),
        ("not a fen", False),
    ],
)
def test_is_valid_fen(fen: str, is_valid: bool) -> None:
    assert is_valid_fen(fen) == is_valid


def test_fen_state_from_fen() -> None:
    state = FENState.from_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b")
    assert state.position == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"
    assert state.color_to_move == Color.BLACK


@pytest.mark.parametrize(
    "fen",
    [STARTING_FEN, "8/8/8/8/8/8/8/k6K b", "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b"],
)
def test_fen_state_roundtrip(fen: str) -> None:
    assert FENState.from_fen(fen).to_fen() == fen


def test_starting_position() -> None:
    state = FENState.starting_position()
    assert state.color_to_move == Color.WHITE
    assert state.to_fen() == STARTING_FEN


def test_invalid_fen_raises() -> None:
    with pytest.raises(InvalidFENError):
        FENState.from_fen("rnbqkbnr/pppppppp w")
