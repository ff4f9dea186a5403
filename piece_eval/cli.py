"""
Command line interface.

Usage:
    python -m piece_eval piece knight 3 3
    python -m piece_eval piece p 0 6 --black
    python -m piece_eval board "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
    python -m piece_eval board --breakdown --tables my_tables.json
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

import chess

from piece_eval.config import EvaluationConfig, load_tables
from piece_eval.errors import EvaluationError
from piece_eval.evaluation import ClassicalEvaluator, PieceValueEvaluator

logger = logging.getLogger(__name__)

EXIT_EVALUATION_ERROR = 2


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _piece_argument(text: str) -> str:
    # Accept full names ("knight") as well as symbols ("n", "N")
    name = text.lower()
    if name in chess.PIECE_NAMES[1:]:
        return chess.piece_symbol(chess.PIECE_NAMES.index(name))
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="piece-eval",
        description="Value chess pieces with material values and piece-square tables",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--tables",
        type=str,
        default=None,
        help="JSON file overriding base values and piece-square tables",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    piece_parser = subparsers.add_parser("piece", help="Value a single piece on a square")
    piece_parser.add_argument("piece", type=_piece_argument, help="Piece name or symbol (p, n, b, r, q, k)")
    piece_parser.add_argument("x", type=int, help="File index 0-7 (0 = a-file)")
    piece_parser.add_argument("y", type=int, help="Row index 0-7 (0 = rank 8)")
    piece_parser.add_argument("--black", action="store_true", help="Use Black's tables")

    board_parser = subparsers.add_parser("board", help="Sum piece values over a position")
    board_parser.add_argument("fen", nargs="?", default=chess.STARTING_FEN, help="Position in FEN")
    board_parser.add_argument("--breakdown", action="store_true", help="Print the value of every piece")

    return parser


def _run_piece(args, tables) -> None:
    evaluator = PieceValueEvaluator(tables)
    score = evaluator.evaluate(args.piece, not args.black, args.x, args.y)
    print(score)


def _run_board(args, tables) -> None:
    try:
        board = chess.Board(args.fen)
    except ValueError as exc:
        raise EvaluationError(f"Invalid FEN {args.fen!r}: {exc}") from exc

    evaluator = ClassicalEvaluator(tables)
    values = evaluator.piece_values(board)

    if args.breakdown:
        for square in sorted(values):
            print(f"{chess.square_name(square)} {board.piece_at(square).symbol()} {values[square]:+d}")
    print(sum(values.values()))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``python -m piece_eval`` and the ``piece-eval`` script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        tables = load_tables(EvaluationConfig(tables_path=args.tables))
        if args.command == "piece":
            _run_piece(args, tables)
        else:
            _run_board(args, tables)
    except FileNotFoundError as exc:
        logger.debug("Tables file not found", exc_info=True)
        print(f"error: tables file not found: {exc.filename}", file=sys.stderr)
        return EXIT_EVALUATION_ERROR
    except EvaluationError as exc:
        logger.debug("Evaluation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_EVALUATION_ERROR

    return 0
