"""
Piece type resolution.

Callers describe pieces in several ways; all of them are narrowed to one of
the six python-chess piece types before any table is touched:

    chess.Piece(chess.KNIGHT, chess.WHITE)  → chess.KNIGHT
    chess.KNIGHT (int 2)                    → chess.KNIGHT
    "n" / "N"                               → chess.KNIGHT
    obj with obj.type == "n"                → chess.KNIGHT
    {"type": "n"}                           → chess.KNIGHT
"""

from collections.abc import Mapping

import chess
import numpy as np

from piece_eval.errors import UnrecognizedPieceType


def _resolve_tag(tag):
    # Symbol or piece-type integer; None when tag is neither
    if isinstance(tag, str):
        if len(tag) == 1 and tag.lower() in chess.PIECE_SYMBOLS[1:]:
            return chess.PIECE_SYMBOLS.index(tag.lower())
        return None
    if isinstance(tag, (int, np.integer)) and not isinstance(tag, bool):
        return int(tag) if tag in chess.PIECE_TYPES else None
    return None


def resolve_piece_type(piece) -> int:
    """
    Return the python-chess piece type described by piece.

    A descriptor's ``type`` is unwrapped once and must itself be a symbol or
    piece-type integer.

    Raises:
        UnrecognizedPieceType: If piece does not name pawn, knight, bishop,
            rook, queen or king
    """
    if isinstance(piece, chess.Piece):
        return piece.piece_type

    if isinstance(piece, (str, int, np.integer)):
        piece_type = _resolve_tag(piece)
        if piece_type is None:
            raise UnrecognizedPieceType(piece)
        return piece_type

    if isinstance(piece, Mapping):
        kind = piece.get("type")
    else:
        kind = getattr(piece, "type", None)
    if kind is None:
        raise UnrecognizedPieceType(piece)

    piece_type = _resolve_tag(kind)
    if piece_type is None:
        raise UnrecognizedPieceType(kind)
    return piece_type
