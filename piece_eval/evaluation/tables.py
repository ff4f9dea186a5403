"""
Piece-Square Tables

This module holds the constant data used to value a single piece:
    1. Base material values (pawn = 10)
    2. Piece-Square Tables (positional bonuses/penalties)

Evaluation Components:
    - Material: P=10, N=30, B=30, R=50, Q=90, K=900
    - Position: PST bonus added to the material value

Tables are written from White's perspective (row 0 = rank 8, row 7 = rank 1)
and indexed as table[y][x]. Pawn, rook, bishop and king tables are color
specific: the Black variant is the White table flipped vertically. Knight and
queen tables are shared by both colors.

Default values follow the Simplified Evaluation Function scaled to pawn = 10,
with half points rounded away from zero.

Reference:
    Simplified Evaluation Function
    https://www.chessprogramming.org/Simplified_Evaluation_Function
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

import chess
import numpy as np

from piece_eval.errors import TableError

logger = logging.getLogger(__name__)

#fmt: off
# ============================================================================
# Material Values
# ============================================================================

PIECE_VALUES = MappingProxyType({
    chess.PAWN: 10,
    chess.KNIGHT: 30,
    chess.BISHOP: 30,
    chess.ROOK: 50,
    chess.QUEEN: 90,
    chess.KING: 900,
})

# Pieces whose table differs between White and Black
COLOR_SPECIFIC = frozenset({chess.PAWN, chess.ROOK, chess.BISHOP, chess.KING})


def _frozen(rows) -> np.ndarray:
    table = np.array(rows, dtype=np.int64)
    table.setflags(write=False)
    return table


# ============================================================================
# Piece-Square Tables
# ============================================================================

# Pawn: reward advanced and central pawns
PAWN_TABLE_WHITE = _frozen([
    [ 0,  0,  0,  0,  0,  0,  0,  0],  # Rank 8
    [ 5,  5,  5,  5,  5,  5,  5,  5],  # Rank 7
    [ 1,  1,  2,  3,  3,  2,  1,  1],  # Rank 6
    [ 1,  1,  1,  3,  3,  1,  1,  1],  # Rank 5
    [ 0,  0,  0,  2,  2,  0,  0,  0],  # Rank 4
    [ 1, -1, -1,  0,  0, -1, -1,  1],  # Rank 3
    [ 1,  1,  1, -2, -2,  1,  1,  1],  # Rank 2
    [ 0,  0,  0,  0,  0,  0,  0,  0],  # Rank 1
])

# Knight: "Knights on the rim are dim"
KNIGHT_TABLE = _frozen([
    [-5, -4, -3, -3, -3, -3, -4, -5],
    [-4, -2,  0,  0,  0,  0, -2, -4],
    [-3,  0,  1,  2,  2,  1,  0, -3],
    [-3,  1,  2,  2,  2,  2,  1, -3],
    [-3,  0,  2,  2,  2,  2,  0, -3],
    [-3,  1,  1,  2,  2,  1,  1, -3],
    [-4, -2,  0,  1,  1,  0, -2, -4],
    [-5, -4, -3, -3, -3, -3, -4, -5],
])

# Bishop: avoid corners and borders
BISHOP_TABLE_WHITE = _frozen([
    [-2, -1, -1, -1, -1, -1, -1, -2],
    [-1,  0,  0,  0,  0,  0,  0, -1],
    [-1,  0,  1,  1,  1,  1,  0, -1],
    [-1,  1,  1,  1,  1,  1,  1, -1],
    [-1,  0,  1,  1,  1,  1,  0, -1],
    [-1,  1,  1,  1,  1,  1,  1, -1],
    [-1,  1,  0,  0,  0,  0,  1, -1],
    [-2, -1, -1, -1, -1, -1, -1, -2],
])

# Rook: seventh rank, centralize on the back rank
ROOK_TABLE_WHITE = _frozen([
    [ 0,  0,  0,  0,  0,  0,  0,  0],
    [ 1,  1,  1,  1,  1,  1,  1,  1],
    [-1,  0,  0,  0,  0,  0,  0, -1],
    [-1,  0,  0,  0,  0,  0,  0, -1],
    [-1,  0,  0,  0,  0,  0,  0, -1],
    [-1,  0,  0,  0,  0,  0,  0, -1],
    [-1,  0,  0,  0,  0,  0,  0, -1],
    [ 0,  0,  0,  1,  1,  0,  0,  0],
])

# Queen: mild preference for the center
QUEEN_TABLE = _frozen([
    [-2, -1, -1, -1, -1, -1, -1, -2],
    [-1,  0,  0,  0,  0,  0,  0, -1],
    [-1,  0,  1,  1,  1,  1,  0, -1],
    [-1,  0,  1,  1,  1,  1,  0, -1],
    [ 0,  0,  1,  1,  1,  1,  0, -1],
    [-1,  1,  1,  1,  1,  1,  0, -1],
    [-1,  0,  1,  0,  0,  0,  0, -1],
    [-2, -1, -1, -1, -1, -1, -1, -2],
])

# King (middlegame): stay behind the pawn shield
KING_TABLE_WHITE = _frozen([
    [-3, -4, -4, -5, -5, -4, -4, -3],
    [-3, -4, -4, -5, -5, -4, -4, -3],
    [-3, -4, -4, -5, -5, -4, -4, -3],
    [-3, -4, -4, -5, -5, -4, -4, -3],
    [-2, -3, -3, -4, -4, -3, -3, -2],
    [-1, -2, -2, -2, -2, -2, -2, -1],
    [ 2,  2,  0,  0,  0,  0,  2,  2],
    [ 2,  3,  1,  0,  0,  1,  3,  2],
])
#fmt: on

PAWN_TABLE_BLACK = _frozen(np.flipud(PAWN_TABLE_WHITE))
BISHOP_TABLE_BLACK = _frozen(np.flipud(BISHOP_TABLE_WHITE))
ROOK_TABLE_BLACK = _frozen(np.flipud(ROOK_TABLE_WHITE))
KING_TABLE_BLACK = _frozen(np.flipud(KING_TABLE_WHITE))

DEFAULT_TABLES = MappingProxyType({
    chess.PAWN: PAWN_TABLE_WHITE,
    chess.KNIGHT: KNIGHT_TABLE,
    chess.BISHOP: BISHOP_TABLE_WHITE,
    chess.ROOK: ROOK_TABLE_WHITE,
    chess.QUEEN: QUEEN_TABLE,
    chess.KING: KING_TABLE_WHITE,
})


def _piece_type_for_name(name: str) -> int:
    try:
        return chess.PIECE_NAMES.index(name.lower())
    except (AttributeError, ValueError):
        raise TableError(f"Unknown piece name in table data: {name!r}") from None


def _as_table(name: str, grid: Any) -> np.ndarray:
    try:
        table = np.array(grid)
    except ValueError as exc:
        raise TableError(f"Table for {name} is not a rectangular grid") from exc

    if table.shape != (8, 8):
        raise TableError(f"Table for {name} has shape {table.shape}, expected (8, 8)")
    if not np.issubdtype(table.dtype, np.integer):
        raise TableError(f"Table for {name} must contain integers, got {table.dtype}")

    return _frozen(table)


def _as_value(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TableError(f"Base value for {name} must be an integer, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class PieceSquareTables:
    """
    Read-only set of base values and piece-square tables.

    Attributes:
        values: Base material value per piece type
        white: Table per piece type used for White
        black: Table per piece type used for Black (same object as the White
            table for knight and queen)
    """

    values: Mapping[int, int]
    white: Mapping[int, np.ndarray]
    black: Mapping[int, np.ndarray]

    @classmethod
    def build(cls, values: Mapping[int, int], tables: Mapping[int, np.ndarray]) -> "PieceSquareTables":
        """
        Build a table set from base values and White tables.

        Black tables are derived by flipping the White table vertically for
        color-specific pieces; knight and queen share one table.
        """
        missing = [chess.piece_name(pt) for pt in chess.PIECE_TYPES if pt not in values or pt not in tables]
        if missing:
            raise TableError(f"Missing table data for: {', '.join(missing)}")

        white = {pt: tables[pt] for pt in chess.PIECE_TYPES}
        black = {
            pt: _frozen(np.flipud(table)) if pt in COLOR_SPECIFIC else table
            for pt, table in white.items()
        }
        return cls(
            values=MappingProxyType({pt: int(values[pt]) for pt in chess.PIECE_TYPES}),
            white=MappingProxyType(white),
            black=MappingProxyType(black),
        )

    @classmethod
    def default(cls) -> "PieceSquareTables":
        """Return the built-in tables."""
        return _DEFAULT

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PieceSquareTables":
        """
        Build tables from plain data, merged onto the defaults.

        Expected layout (every key optional):
            {
                "values": {"pawn": 10, "knight": 30, ...},
                "tables": {"pawn": [[...8 ints...], ...8 rows...], ...}
            }

        Table entries replace the White table; Black is derived as usual.

        Raises:
            TableError: On unknown piece names, non-integer values, or grids
                that are not 8x8 integers
        """
        if not isinstance(data, Mapping):
            raise TableError(f"Table data must be a mapping, got {type(data).__name__}")

        unknown = set(data) - {"values", "tables"}
        if unknown:
            raise TableError(f"Unknown table data keys: {', '.join(sorted(unknown))}")
        for key in ("values", "tables"):
            if not isinstance(data.get(key, {}), Mapping):
                raise TableError(f"'{key}' must map piece names to data")

        values: Dict[int, int] = dict(PIECE_VALUES)
        for name, value in data.get("values", {}).items():
            values[_piece_type_for_name(name)] = _as_value(name, value)

        tables: Dict[int, np.ndarray] = dict(DEFAULT_TABLES)
        for name, grid in data.get("tables", {}).items():
            tables[_piece_type_for_name(name)] = _as_table(name, grid)

        logger.debug("Built piece-square tables (overrides: %s)", sorted(data.get("tables", {})))
        return cls.build(values, tables)

    def base_value(self, piece_type: int) -> int:
        return self.values[piece_type]

    def table_for(self, piece_type: int, is_white: bool) -> np.ndarray:
        """Return the table consulted for this piece type and color."""
        return self.white[piece_type] if is_white else self.black[piece_type]


_DEFAULT = PieceSquareTables(
    values=PIECE_VALUES,
    white=DEFAULT_TABLES,
    black=MappingProxyType({
        chess.PAWN: PAWN_TABLE_BLACK,
        chess.KNIGHT: KNIGHT_TABLE,
        chess.BISHOP: BISHOP_TABLE_BLACK,
        chess.ROOK: ROOK_TABLE_BLACK,
        chess.QUEEN: QUEEN_TABLE,
        chess.KING: KING_TABLE_BLACK,
    }),
)
