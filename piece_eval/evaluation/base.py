"""
Abstract Evaluator Interface

This module defines the abstract base class for board evaluators. Anything
that scores a whole position (for example a search routine) can depend on
this interface and stay agnostic of how pieces are valued.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always returns a score from White's perspective
    3. Positive = White advantage, Negative = Black advantage

Convention:
    - Scores use the same unit as the base material values (pawn = 10)
    - Return 0 for perfectly balanced positions
"""

from abc import ABC, abstractmethod

import chess


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Methods:
        evaluate(board): Returns position score from White's perspective
    """

    @abstractmethod
    def evaluate(self, board: chess.Board) -> int:
        """
        Evaluate a chess position from White's perspective.

        Args:
            board: python-chess Board object to evaluate

        Returns:
            int: Score in material units (pawn = 10)
        """
        pass

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
