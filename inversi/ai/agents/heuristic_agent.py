"""
Heuristic agent for Inversi.
"""
import random

CORNERS = ((0, 0), (0, 7), (7, 0), (7, 7))


class HeuristicAgent:
    """
    An agent that prefers board positions by a fixed static ranking.

    Priority order:
    1. Corner - first corner in row-major order
    2. Edge - first cell on row 0, row 7, col 0 or col 7 in row-major order
    3. Anything else - uniformly at random

    This is also the fallback for OracleAgent, so it must never fail.
    """

    def __init__(self, seed=None, board_size=8):
        """
        Initialize the heuristic agent.

        Args:
            seed (int, optional): Random seed for reproducible choices
            board_size (int): Board size used to find edges
        """
        self.rng = random.Random(seed)
        self.board_size = board_size

    def select_action(self, game):
        """
        Select a move for the side to play.

        Args:
            game: Game instance with current board state

        Returns:
            tuple: (row, col) of selected move, or None if no legal moves
        """
        return self.choose(game.get_legal_moves())

    async def select_move(self, board, player, legal_moves):
        """Policy signature shared with OracleAgent; board and player are unused."""
        return self.choose(legal_moves)

    def choose(self, legal_moves):
        """
        Pick a move from an already computed legal move list.

        Args:
            legal_moves (list): (row, col) tuples in row-major order

        Returns:
            tuple or None: Chosen move, None if the list is empty
        """
        if not legal_moves:
            return None

        for move in legal_moves:
            if move in CORNERS:
                return move

        for move in legal_moves:
            if self._is_edge(move):
                return move

        return self.rng.choice(list(legal_moves))

    def _is_edge(self, move):
        row, col = move
        last = self.board_size - 1
        return row in (0, last) or col in (0, last)
