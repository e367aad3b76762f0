"""
Text encoding of a position: the board placement + the side to move.

Only the first two fields of a regular FEN string are used. There is no castling, en passant, or move counter state to encode.
"""

from dataclasses import dataclass
from string import ascii_lowercase
from typing import Self

from src.chess.pieces import FEN_TO_PIECE, Color
from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidFENError

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"


def is_valid_fen(fen: str) -> bool:
    """
    Check if given string follows the (shortened) FEN notation: "<placement> <w|b>"
    """

    # there should be 2 parts to the string
    parts = fen.split(" ")
    if len(parts) != 2:
        return False

    position, color = parts
    return is_valid_position(position) and is_valid_color_code(color)


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_rows, num_cols = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_rows:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if character.isdigit():
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if file_count != num_cols:
            return False
    return True


def is_valid_color_code(color: str) -> bool:
    return color in {"w", "b"}


def is_valid_square(square: str) -> bool:
    """Valid square should be a letter for the file + a number for the rank"""
    num_rows, num_cols = BOARD_DIMENSIONS
    if len(square) < 2:
        return False

    # NOTE: The following works as long as we do not go beyond 26 files.
    file_char, rank_char = square[0], square[1:]
    if file_char not in ascii_lowercase[:num_cols]:
        return False

    if not rank_char.isdigit():
        return False

    return 1 <= int(rank_char) <= num_rows


@dataclass
class FENState:
    """
    Data that can be constructed from a (shortened) FEN string.
    ----

    <board position string> <active color>

    * The string to describe the board position is described in the Board class
    * The active color is either "w" or "b"

    ex) The standard starting position is
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w
    """

    position: str
    color_to_move: Color

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Parse the FEN into data"""

        # raise an exception if invalid FEN:
        if not is_valid_fen(fen):
            raise InvalidFENError(f"Cannot interpret supplied string as FEN: {fen}")

        position, active_color = fen.split(" ")
        color_to_move = Color.WHITE if active_color == "w" else Color.BLACK
        return cls(position, color_to_move)

    def to_fen(self) -> str:
        """reverse operation: write a FEN from the given data"""
        active_color = "w" if self.color_to_move == Color.WHITE else "b"
        return f"{self.position} {active_color}"

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_FEN)
