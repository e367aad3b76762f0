"""The Game board implements all rules that effect the `position` (in chess: the configuration of pieces on the board)"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Self

from src.chess.moves import Move, candidate_piece_moves, pawn_direction
from src.chess.pieces import (
    EMPTY_SQUARE,
    PLAYER_COLORS,
    Color,
    Piece,
    PieceType,
    is_piece_of_player,
)
from src.chess.square import BOARD_DIMENSIONS, Position

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

Grid = tuple[tuple[Piece, ...], ...]


@dataclass(frozen=True)
class Board:
    """
    8x8 grid of pieces, row 0 (black's back rank) first.

    Boards are values: moving a piece returns a new Board, so older boards in a game's history stay valid.
    """

    grid: Grid

    @classmethod
    def initial(cls) -> Self:
        return cls.from_fen(STARTING_POSITION_FEN)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using a given FEN string.

        That is, we supply the first part of the FEN string that denotes the board position
        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 0), starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank (row 7) are the white pieces.

        NOTE: no validation happens here. Use src.chess.fen.is_valid_position() at the boundary.
        """
        rows: list[tuple[Piece, ...]] = []
        for fen_one_rank in fen_str.split("/"):
            row: list[Piece] = []
            for character in fen_one_rank:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    row.append(Piece.from_fen(character))
                else:
                    # A number denotes the amount of empty squares after each other
                    row.extend([EMPTY_SQUARE] * int(character))
            rows.append(tuple(row))
        return cls(tuple(rows))

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in self.grid)

    def _row_to_fen(self, row: tuple[Piece, ...]) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if not piece.is_empty:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, position: Position) -> Piece:
        return self.grid[position.row][position.col]

    def squares(self) -> Iterator[tuple[Position, Piece]]:
        """Row-major scan: a8, b8, ..., h8, a7, ..., h1"""
        for row in range(BOARD_DIMENSIONS[0]):
            for col in range(BOARD_DIMENSIONS[1]):
                yield Position(row, col), self.grid[row][col]

    def locate_color(self, color: Color) -> list[Position]:
        return [
            position
            for position, piece in self.squares()
            if is_piece_of_player(piece, color)
        ]

    def generate_candidate_moves(self, color: Color) -> list[Move]:
        """
        Before knowing the set of legal moves, we use raycasting to find candidate moves, which will later be tested for legality
        (making sure it does not put yourself in check.)

        Order is the row-major board scan, then the per-piece generation order.
        """
        candidate_moves: list[Move] = []
        for starting_square in self.locate_color(color):
            candidate_moves.extend(candidate_piece_moves(self, starting_square))
        return candidate_moves

    def move_piece(self, move: Move) -> Self:
        """
        Return the position after the move
        ---

        * The destination's content (if any) is discarded: that is how captures happen.
        * A pawn reaching the far end of the board always becomes a queen.
        * Nothing is checked: an illegal move gets executed just as happily.
        """
        piece_that_moved = self.piece(move.from_position)
        if self._reaches_promotion_row(piece_that_moved, move.to_position):
            piece_that_moved = piece_that_moved.promoted_to(PieceType.QUEEN)

        rows = [list(row) for row in self.grid]
        rows[move.to_position.row][move.to_position.col] = piece_that_moved
        rows[move.from_position.row][move.from_position.col] = EMPTY_SQUARE
        return type(self)(tuple(tuple(row) for row in rows))

    def move_pieces(self, moves: list[Move]) -> Self:
        """convenience method to apply multiple moves (if you quickly want to start a board in a given position reached after some moves)"""
        board = self
        for move in moves:
            board = board.move_piece(move)
        return board

    def _reaches_promotion_row(self, piece: Piece, target: Position) -> bool:
        if piece.type != PieceType.PAWN:
            return False
        last_row = 0 if pawn_direction(piece.color) < 0 else BOARD_DIMENSIONS[0] - 1
        return target.row == last_row

    def count_pieces(self) -> int:
        return sum(1 for _, piece in self.squares() if not piece.is_empty)

    def count_material(self) -> dict[Color, int]:
        """Tally the points of material each player has on the board"""
        return {color: self._count_material_player(color) for color in PLAYER_COLORS}

    def _count_material_player(self, color: Color) -> int:
        """Tally the points of material for a specific player"""
        return sum(
            piece.points
            for _, piece in self.squares()
            if is_piece_of_player(piece, color)
        )
