"""
Evaluation configuration.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from piece_eval.errors import TableError
from piece_eval.evaluation.tables import PieceSquareTables

logger = logging.getLogger(__name__)


@dataclass
class EvaluationConfig:
    """Where the piece-square tables come from.

    Tables are loaded once with load_tables() and then shared read-only.
    """

    tables_path: Optional[Path] = None
    """JSON file overriding base values and/or tables; None uses the built-in tables"""

    def __post_init__(self):
        if self.tables_path is not None:
            self.tables_path = Path(self.tables_path)


def load_tables(config: Optional[EvaluationConfig] = None) -> PieceSquareTables:
    """
    Load piece-square tables described by config.

    Args:
        config: EvaluationConfig; None means the built-in tables

    Returns:
        PieceSquareTables ready to hand to PieceValueEvaluator

    Raises:
        FileNotFoundError: If tables_path does not exist
        TableError: If the file cannot be read, is not UTF-8 JSON, or holds
            malformed tables
    """
    if config is None or config.tables_path is None:
        return PieceSquareTables.default()

    path = config.tables_path
    logger.debug("Loading piece-square tables from %s", path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise TableError(f"Cannot read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise TableError(f"{path} is not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise TableError(f"Invalid JSON in {path}: {exc}") from exc

    return PieceSquareTables.from_mapping(data)
