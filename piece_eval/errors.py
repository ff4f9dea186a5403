"""
Evaluation Errors

All failures raised by the package derive from EvaluationError,
which is itself a ValueError so callers validating user input can catch
either one.

Hierarchy:
    EvaluationError
        ├── UnrecognizedPieceType  (piece is not pawn/knight/bishop/rook/queen/king)
        ├── CoordinateOutOfRange   (x or y outside 0-7)
        └── TableError             (malformed piece-square table configuration)
"""


class EvaluationError(ValueError):
    """Base class for piece evaluation errors."""


class UnrecognizedPieceType(EvaluationError):
    """Raised when a piece descriptor does not name one of the six piece types."""

    def __init__(self, piece):
        self.piece = piece
        super().__init__(f"Unknown piece type: {piece!r}")


class CoordinateOutOfRange(EvaluationError):
    """Raised when a board coordinate is not an integer in [0, 7]."""

    def __init__(self, axis: str, value):
        self.axis = axis
        self.value = value
        super().__init__(f"Coordinate {axis}={value!r} is outside the board (expected 0-7)")


class TableError(EvaluationError):
    """Raised when piece-square table data is missing or malformed."""
