"""
Board Module

Coordinate utilities shared by the evaluators.

Key Components:
    - validate_coordinates: Reject (x, y) pairs that fall off the board
    - square_to_coordinates / coordinates_to_square: python-chess square
      index <-> (x, y) table coordinates

Data Flow:
    chess.Square (0-63) → square_to_coordinates() → (x, y) → table[y][x]
"""

from piece_eval.board.coordinates import (
    BOARD_SIZE,
    coordinates_to_square,
    square_to_coordinates,
    validate_coordinates,
)

__all__ = [
    'BOARD_SIZE',
    'coordinates_to_square',
    'square_to_coordinates',
    'validate_coordinates',
]
