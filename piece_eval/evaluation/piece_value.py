"""
Single-piece valuation.

A piece is worth its base material value plus the piece-square table entry
for the square it stands on:

    value = base_value(type) + table(type, color)[y][x]

Pawn, rook, bishop and king consult a color-specific table; knight and queen
share one table for both colors.
"""

import logging
from typing import Optional

import chess

from piece_eval.board.coordinates import square_to_coordinates, validate_coordinates
from piece_eval.evaluation.pieces import resolve_piece_type
from piece_eval.evaluation.tables import PieceSquareTables

logger = logging.getLogger(__name__)


class PieceValueEvaluator:
    """
    Value a single piece from its type, color and board coordinates.

    Stateless apart from the read-only tables it was created with, so one
    instance can be shared between threads.

    Attributes:
        tables: PieceSquareTables consulted for base values and bonuses
    """

    def __init__(self, tables: Optional[PieceSquareTables] = None):
        self.tables = tables if tables is not None else PieceSquareTables.default()

    def square_bonus(self, piece, is_white: bool, x: int, y: int) -> int:
        """
        Return only the piece-square table entry for the piece at (x, y).

        Raises:
            UnrecognizedPieceType: If piece is not one of the six piece types
            CoordinateOutOfRange: If x or y is outside [0, 7]
        """
        piece_type = resolve_piece_type(piece)
        x, y = validate_coordinates(x, y)
        return int(self.tables.table_for(piece_type, bool(is_white))[y, x])

    def evaluate(self, piece, is_white: bool, x: int, y: int) -> int:
        """
        Value a piece standing on (x, y).

        Args:
            piece: chess.Piece, piece type, piece symbol, or any object whose
                ``type`` is one of those
            is_white: True for White, False for Black
            x: File index (0-7), 0 is the A-file
            y: Row index (0-7), 0 is rank 8

        Returns:
            int: Base material value plus the square bonus

        Raises:
            UnrecognizedPieceType: If piece is not one of the six piece types
            CoordinateOutOfRange: If x or y is outside [0, 7]
        """
        try:
            piece_type = resolve_piece_type(piece)
            x, y = validate_coordinates(x, y)
        except ValueError as exc:
            logger.debug("Rejected evaluation of %r at (%r, %r): %s", piece, x, y, exc)
            raise

        table = self.tables.table_for(piece_type, bool(is_white))
        return self.tables.base_value(piece_type) + int(table[y, x])

    def evaluate_square(self, piece, is_white: bool, square: chess.Square) -> int:
        """Value a piece on a python-chess square index (0=A1, 63=H8)."""
        x, y = square_to_coordinates(square)
        return self.evaluate(piece, is_white, x, y)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


_default_evaluator = PieceValueEvaluator()


def evaluate(piece, is_white: bool, x: int, y: int) -> int:
    """Value a piece with the built-in tables. See PieceValueEvaluator.evaluate."""
    return _default_evaluator.evaluate(piece, is_white, x, y)
