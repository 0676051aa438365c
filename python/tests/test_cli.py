"""Command-line wrapper and the two path printers."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from eightpuzzle.errors import InvalidBoardError
from eightpuzzle.models.board import Board
from main import app, parse_board

runner = CliRunner()


# -- board parsing ------------------------------------------------------------


@pytest.mark.parametrize("raw", ["123456708", "1,2,3,4,5,6,7,0,8", "1 2 3 4 5 6 7 0 8"])
def test_parse_board_formats(raw: str) -> None:
    assert parse_board(raw) == Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])


@pytest.mark.parametrize("raw", ["12345", "12345678x"])
def test_parse_board_rejects(raw: str) -> None:
    with pytest.raises(InvalidBoardError):
        parse_board(raw)


# -- commands -----------------------------------------------------------------


def test_solve_plain() -> None:
    result = runner.invoke(app, ["123456708"])
    assert result.exit_code == 0, result.output
    assert "Solved in 1 moves" in result.output
    assert "blank right" in result.output


def test_solve_rich() -> None:
    result = runner.invoke(app, ["123456708", "-f", "rich"])
    assert result.exit_code == 0, result.output
    assert "Solved in 1 moves" in result.output


def test_already_solved() -> None:
    result = runner.invoke(app, ["123456780"])
    assert result.exit_code == 0, result.output
    assert "Already solved" in result.output


def test_scramble_with_seed() -> None:
    result = runner.invoke(app, ["--scramble", "8", "--seed", "4", "--mode", "additive"])
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output


def test_invalid_board_exit_code() -> None:
    result = runner.invoke(app, ["123456789"])
    assert result.exit_code == 2


def test_missing_board_exit_code() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 2


def test_unsolvable_board_hits_limit() -> None:
    result = runner.invoke(app, ["123456870", "--max-iterations", "100"])
    assert result.exit_code == 1
