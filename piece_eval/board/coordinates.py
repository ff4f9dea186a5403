"""
Board Coordinates

This module maps between python-chess square indices and the (x, y)
coordinates used to index piece-square tables.

Board Orientation:
    - y = 0 = Rank 8 (Black's back rank)
    - y = 7 = Rank 1 (White's back rank)
    - x = 0 = A-file
    - x = 7 = H-file

Tables are indexed as table[y][x], so a table literal reads like a board
diagram seen from White's side.
"""

import chess
import numpy as np
from typing import Tuple

from piece_eval.errors import CoordinateOutOfRange

BOARD_SIZE = 8


def _check_axis(axis: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise CoordinateOutOfRange(axis, value)
    if not 0 <= value < BOARD_SIZE:
        raise CoordinateOutOfRange(axis, value)


def validate_coordinates(x, y) -> Tuple[int, int]:
    """
    Check that (x, y) addresses a square on the 8x8 board.

    Args:
        x: File index (0-7), 0 is the A-file
        y: Row index (0-7), 0 is rank 8

    Returns:
        Tuple of (x, y) as plain ints

    Raises:
        CoordinateOutOfRange: If either value is not an integer in [0, 7]
    """
    _check_axis("x", x)
    _check_axis("y", y)
    return int(x), int(y)


def square_to_coordinates(square: int) -> Tuple[int, int]:
    """
    Convert python-chess square index to (x, y) table coordinates.

    Args:
        square: Square index (0-63) where 0=A1, 63=H8

    Returns:
        Tuple of (x, y) where:
            - x 0 = A-file, x 7 = H-file
            - y 0 = rank 8, y 7 = rank 1
    """
    if isinstance(square, bool) or not isinstance(square, (int, np.integer)) or square not in chess.SQUARES:
        raise CoordinateOutOfRange("square", square)
    square = int(square)
    x = chess.square_file(square)
    y = 7 - chess.square_rank(square)
    return x, y


def coordinates_to_square(x: int, y: int) -> int:
    """
    Convert (x, y) table coordinates to python-chess square index.

    Args:
        x: File index (0-7) where 0 is A-file
        y: Row index (0-7) where 0 is rank 8

    Returns:
        Square index (0-63)
    """
    x, y = validate_coordinates(x, y)
    return chess.square(x, 7 - y)
