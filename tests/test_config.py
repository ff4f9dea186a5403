"""
Unit Tests for evaluation configuration
"""

import json

import chess
import pytest

from piece_eval import PieceSquareTables, TableError
from piece_eval.config import EvaluationConfig, load_tables


@pytest.fixture
def tables_file(tmp_path):
    """Write a JSON table override and return its path."""
    path = tmp_path / "tables.json"
    path.write_text(json.dumps({
        "values": {"queen": 95},
        "tables": {"knight": [[1] * 8 for _ in range(8)]},
    }))
    return path


class TestLoadTables:

    def test_defaults_without_config(self):
        assert load_tables() is PieceSquareTables.default()
        assert load_tables(EvaluationConfig()) is PieceSquareTables.default()

    def test_loads_overrides(self, tables_file):
        tables = load_tables(EvaluationConfig(tables_path=tables_file))

        assert tables.base_value(chess.QUEEN) == 95
        assert tables.base_value(chess.ROOK) == 50
        assert int(tables.table_for(chess.KNIGHT, False)[0, 0]) == 1

    def test_path_given_as_string(self, tables_file):
        config = EvaluationConfig(tables_path=str(tables_file))

        assert config.tables_path == tables_file
        assert load_tables(config).base_value(chess.QUEEN) == 95

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_tables(EvaluationConfig(tables_path=tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(TableError, match="Invalid JSON"):
            load_tables(EvaluationConfig(tables_path=path))

    def test_directory_path(self, tmp_path):
        with pytest.raises(TableError, match="Cannot read"):
            load_tables(EvaluationConfig(tables_path=tmp_path))

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'\xff{"values": {}}')

        with pytest.raises(TableError, match="not UTF-8"):
            load_tables(EvaluationConfig(tables_path=path))

