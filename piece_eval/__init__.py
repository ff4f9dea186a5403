"""
piece-eval

Static valuation of chess pieces from material values and piece-square
tables.

## Architecture

1. **evaluation**: Piece and position evaluation
   - PieceValueEvaluator: base value + table[y][x] for one piece
   - PieceSquareTables: read-only base values and tables
   - ClassicalEvaluator: signed sum over a python-chess Board

2. **board**: Coordinate utilities
   - (x, y) validation and python-chess square conversion

3. **config**: Optional JSON table overrides

## Quick Start

```python
import chess
from piece_eval import evaluate, ClassicalEvaluator

evaluate("n", True, 3, 3)                 # knight on d5 for White -> 32
ClassicalEvaluator().evaluate(chess.Board())  # 0
```

### From the command line

```bash
python -m piece_eval piece knight 3 3
```
"""

__version__ = "0.1.0"
__license__ = "MIT"

from piece_eval.errors import (
    CoordinateOutOfRange,
    EvaluationError,
    TableError,
    UnrecognizedPieceType,
)
from piece_eval.evaluation import ClassicalEvaluator, PieceSquareTables, PieceValueEvaluator, evaluate

__all__ = [
    'ClassicalEvaluator',
    'CoordinateOutOfRange',
    'EvaluationError',
    'PieceSquareTables',
    'PieceValueEvaluator',
    'TableError',
    'UnrecognizedPieceType',
    'evaluate',
]
