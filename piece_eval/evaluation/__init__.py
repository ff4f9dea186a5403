"""
Evaluation Module

This module values chess pieces and positions with material values and
piece-square tables.

Key Components:
    - PieceValueEvaluator: Value of one piece on one square
    - PieceSquareTables: Read-only base values and tables (defaults or loaded)
    - Evaluator (ABC): Interface for whole-board evaluators
    - ClassicalEvaluator: Sum of signed piece values over a board

Data Flow:
    (piece, is_white, x, y) → PieceValueEvaluator.evaluate() → int
    chess.Board → ClassicalEvaluator.evaluate() → int
                                          Positive = White advantage
                                          Negative = Black advantage
"""

from piece_eval.evaluation.base import Evaluator
from piece_eval.evaluation.classical import ClassicalEvaluator
from piece_eval.evaluation.piece_value import PieceValueEvaluator, evaluate
from piece_eval.evaluation.pieces import resolve_piece_type
from piece_eval.evaluation.tables import PIECE_VALUES, PieceSquareTables

__all__ = [
    'ClassicalEvaluator',
    'Evaluator',
    'PIECE_VALUES',
    'PieceSquareTables',
    'PieceValueEvaluator',
    'evaluate',
    'resolve_piece_type',
]
