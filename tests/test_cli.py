"""
Unit Tests for the command line interface
"""

import json

import pytest

from piece_eval.cli import EXIT_EVALUATION_ERROR, main


class TestPieceCommand:

    def test_white_knight(self, capsys):
        assert main(["piece", "n", "3", "3"]) == 0
        assert capsys.readouterr().out.strip() == "32"

    def test_piece_name(self, capsys):
        assert main(["piece", "King", "6", "0", "--black"]) == 0
        assert capsys.readouterr().out.strip() == "903"

    def test_unknown_piece(self, capsys):
        assert main(["piece", "x", "0", "0"]) == EXIT_EVALUATION_ERROR
        assert "Unknown piece type" in capsys.readouterr().err

    def test_off_board(self, capsys):
        assert main(["piece", "k", "8", "0"]) == EXIT_EVALUATION_ERROR
        assert "outside the board" in capsys.readouterr().err

    def test_custom_tables(self, capsys, tmp_path):
        path = tmp_path / "tables.json"
        path.write_text(json.dumps({"values": {"pawn": 100}}))

        assert main(["--tables", str(path), "piece", "p", "0", "1"]) == 0
        assert capsys.readouterr().out.strip() == "105"

    def test_missing_tables_file(self, capsys, tmp_path):
        missing = tmp_path / "missing.json"

        assert main(["--tables", str(missing), "piece", "p", "0", "0"]) == EXIT_EVALUATION_ERROR
        assert "not found" in capsys.readouterr().err

    def test_tables_path_is_directory(self, capsys, tmp_path):
        assert main(["--tables", str(tmp_path), "piece", "p", "0", "0"]) == EXIT_EVALUATION_ERROR
        assert "Cannot read" in capsys.readouterr().err

    def test_tables_file_not_utf8(self, capsys, tmp_path):
        path = tmp_path / "tables.json"
        path.write_bytes(b"\xff")

        assert main(["--tables", str(path), "piece", "p", "0", "0"]) == EXIT_EVALUATION_ERROR
        assert "not UTF-8" in capsys.readouterr().err


class TestBoardCommand:

    def test_starting_position(self, capsys):
        assert main(["board"]) == 0
        assert capsys.readouterr().out.strip() == "0"

    def test_fen(self, capsys):
        assert main(["board", "rnb1kbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"]) == 0
        assert capsys.readouterr().out.strip() == "89"

    def test_breakdown(self, capsys):
        assert main(["board", "4k3/8/8/8/8/8/8/4K3 w - - 0 1", "--breakdown"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()

        assert lines == ["e1 K +900", "e8 k -900", "0"]

    def test_invalid_fen(self, capsys):
        assert main(["board", "not a fen"]) == EXIT_EVALUATION_ERROR
        assert "Invalid FEN" in capsys.readouterr().err

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            main([])
