"""
Main entry point for running the piece evaluator from the command line.

Usage:
    python -m piece_eval --help
"""

import sys

from piece_eval.cli import main

if __name__ == "__main__":
    sys.exit(main())
