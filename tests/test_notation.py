"""
Tests for coordinate notation and board rendering.
"""
import pytest
from inversi.core.board import Board
from inversi.core.notation import (
    format_legal_moves,
    parse_coordinate,
    render_board,
    to_notation,
)


@pytest.mark.parametrize("move, text", [
    ((0, 0), "A1"),
    ((0, 7), "H1"),
    ((7, 0), "A8"),
    ((7, 7), "H8"),
    ((3, 2), "C4"),
])
def test_to_notation(move, text):
    """Columns are letters, rows are 1-based digits."""
    assert to_notation(move) == text
    assert parse_coordinate(text) == move


def test_parse_is_case_insensitive():
    """Test lowercase coordinates."""
    assert parse_coordinate("c4") == (3, 2)
    assert parse_coordinate("h8") == (7, 7)


def test_parse_takes_first_token_in_free_text():
    """The first coordinate in the text wins."""
    assert parse_coordinate("I would play B2, or maybe C3.") == (1, 1)
    assert parse_coordinate("'F6'\n") == (5, 5)


@pytest.mark.parametrize("text", ["Z9", "I9", "A0", "", "pass", "no idea"])
def test_parse_rejects_malformed(text):
    """Text without an A-H/1-8 token yields nothing."""
    assert parse_coordinate(text) is None


def test_parse_non_string():
    """Non-text answers are treated as unparseable."""
    assert parse_coordinate(None) is None
    assert parse_coordinate(42) is None


def test_render_initial_board():
    """Test the text diagram of the starting position."""
    text = render_board(Board())
    lines = text.splitlines()

    assert lines[0] == "  A B C D E F G H"
    assert lines[-1] == lines[0]
    assert len(lines) == 10
    assert lines[1] == "1 . . . . . . . . 1"
    assert lines[4] == "4 . . . ○ ● . . . 4"
    assert lines[5] == "5 . . . ● ○ . . . 5"


def test_format_legal_moves():
    """Moves are comma joined in the given order."""
    assert format_legal_moves([(2, 2), (0, 0), (7, 7)]) == "C3, A1, H8"
    assert format_legal_moves([]) == "none"
