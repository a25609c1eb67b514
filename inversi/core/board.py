"""
Board implementation for Inversi (reverse Othello).
"""
from enum import IntEnum

import numpy as np

BOARD_SIZE = 8
EMPTY = 0


class Player(IntEnum):
    """The two sides. Values match what is stored in the board array."""
    BLACK = 1
    WHITE = -1

    @property
    def opponent(self):
        return Player(-self.value)

    @property
    def label(self):
        return "Black" if self is Player.BLACK else "White"


class Board:
    """
    Represents an 8x8 Inversi board.

    Board state representation:
    - 0: empty cell
    - 1: black piece
    - -1: white piece
    """

    def __init__(self, empty=False):
        """
        Initialize a board with the standard starting layout.

        Args:
            empty (bool): Skip the four centre pieces (used for synthetic positions)
        """
        self.size = BOARD_SIZE
        self.state = np.zeros((self.size, self.size), dtype=np.int8)
        if not empty:
            self._place_initial_pieces()

    def _place_initial_pieces(self):
        center = self.size // 2
        self.state[center - 1, center - 1] = Player.WHITE
        self.state[center - 1, center] = Player.BLACK
        self.state[center, center - 1] = Player.BLACK
        self.state[center, center] = Player.WHITE

    @classmethod
    def from_rows(cls, rows):
        """
        Build a board from a text diagram.

        Args:
            rows (list[str]): Eight strings of eight characters each,
                'B' for black, 'W' for white, anything else empty.
                Whitespace is ignored.

        Returns:
            Board: New board with exactly the given pieces
        """
        board = cls(empty=True)
        assert len(rows) == board.size, "expected one string per row"
        for row, line in enumerate(rows):
            cells = line.replace(" ", "")
            assert len(cells) == board.size, f"row {row} must have {board.size} cells"
            for col, char in enumerate(cells):
                if char in "Bb":
                    board.state[row, col] = Player.BLACK
                elif char in "Ww":
                    board.state[row, col] = Player.WHITE
        return board

    def in_bounds(self, row, col):
        """Return whether (row, col) lies on the board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col):
        """
        Get the state of a cell.

        Returns:
            int: 0 for empty, 1 for black, -1 for white
        """
        assert self.in_bounds(row, col), f"({row}, {col}) is off the board"
        return int(self.state[row, col])

    def is_empty(self, row, col):
        return self.get(row, col) == EMPTY

    def set(self, row, col, player):
        """
        Place a piece. Only the turn controller mutates the board.

        Args:
            row (int): Row position (0-7)
            col (int): Column position (0-7)
            player (Player): Owner of the new piece
        """
        assert self.in_bounds(row, col), f"({row}, {col}) is off the board"
        self.state[row, col] = int(player)

    def count_pieces(self):
        """
        Count pieces of each colour.

        Returns:
            dict: {'black': int, 'white': int}
        """
        return {
            'black': int(np.count_nonzero(self.state == Player.BLACK)),
            'white': int(np.count_nonzero(self.state == Player.WHITE)),
        }

    def copy(self):
        """Return an independent copy of this board."""
        board = Board(empty=True)
        board.state = self.state.copy()
        return board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.state, other.state)

    __hash__ = None
