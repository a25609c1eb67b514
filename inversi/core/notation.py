"""
Coordinate notation and text rendering.

Columns are letters A-H (col 0-7), rows are digits 1-8 (row 0-7), so
the top-left corner is "A1".
"""
import re

from .board import Player

COLUMNS = "ABCDEFGH"

_COORD_RE = re.compile(r"([A-H])([1-8])", re.IGNORECASE)

_SYMBOLS = {
    int(Player.BLACK): "●",
    int(Player.WHITE): "○",
    0: ".",
}


def to_notation(move):
    """Convert (row, col) to a string like 'A1'."""
    row, col = move
    return f"{COLUMNS[col]}{row + 1}"


def parse_coordinate(text):
    """
    Extract the first coordinate token from free text.

    Args:
        text (str): e.g. "I'd play c4." or "A1"

    Returns:
        tuple or None: (row, col), or None if no token is found
    """
    if not isinstance(text, str):
        return None
    match = _COORD_RE.search(text)
    if match is None:
        return None
    col = COLUMNS.index(match.group(1).upper())
    row = int(match.group(2)) - 1
    return (row, col)


def render_board(board):
    """
    Render the board as text with coordinates on every side.

    Returns:
        str: Multi-line board diagram
    """
    header = "  " + " ".join(COLUMNS[:board.size])
    lines = [header]
    for row in range(board.size):
        cells = " ".join(_SYMBOLS[board.get(row, col)] for col in range(board.size))
        lines.append(f"{row + 1} {cells} {row + 1}")
    lines.append(header)
    return "\n".join(lines) + "\n"


def format_legal_moves(moves):
    """Join moves as 'A1, B2, ...'; 'none' when empty."""
    if not moves:
        return "none"
    return ", ".join(to_notation(move) for move in moves)
