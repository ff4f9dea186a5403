"""
Classical Board Evaluation

Sums the value of every piece on the board using PieceValueEvaluator:
White pieces add their value, Black pieces subtract theirs.

Only static material and placement are scored. Checkmate, stalemate and other
game-state questions are left to the caller.
"""

from typing import Dict, Optional

import chess

from piece_eval.evaluation.base import Evaluator
from piece_eval.evaluation.piece_value import PieceValueEvaluator
from piece_eval.evaluation.tables import PieceSquareTables


class ClassicalEvaluator(Evaluator):
    """
    Material + piece-square table evaluation of a whole board.

    Attributes:
        piece_evaluator: PieceValueEvaluator used for each piece
    """

    def __init__(self, tables: Optional[PieceSquareTables] = None):
        self.piece_evaluator = PieceValueEvaluator(tables)

    def piece_values(self, board: chess.Board) -> Dict[chess.Square, int]:
        """
        Value of each occupied square, signed from White's perspective.

        Args:
            board: Chess board to analyze

        Returns:
            Dict mapping square index to the piece's signed value
        """
        values = {}
        for square, piece in board.piece_map().items():
            value = self.piece_evaluator.evaluate_square(piece, piece.color == chess.WHITE, square)
            values[square] = value if piece.color == chess.WHITE else -value
        return values

    def evaluate(self, board: chess.Board) -> int:
        """
        Evaluate position using material + PST.

        Args:
            board: Chess board to evaluate

        Returns:
            int: Sum of signed piece values (White's perspective)
        """
        return sum(self.piece_values(board).values())
