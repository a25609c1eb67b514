"""
Random agent for Inversi.

Baseline opponent for scripts/evaluate_agents.py. It speaks the same
policy interface as HeuristicAgent and OracleAgent, so it can also sit
in a Session or serve as an OracleAgent fallback.
"""
import random


class RandomAgent:
    """Picks uniformly among the legal moves, ignoring the position."""

    def __init__(self, seed=None):
        """
        Args:
            seed (int, optional): Random seed for reproducible games
        """
        self.rng = random.Random(seed)

    def choose(self, legal_moves):
        """
        Pick from an already computed legal move list.

        Returns:
            tuple or None: (row, col), None if the list is empty
        """
        if not legal_moves:
            return None
        return self.rng.choice(list(legal_moves))

    async def select_move(self, board, player, legal_moves):
        """Session policy entry point; board and player are unused."""
        return self.choose(legal_moves)

    def select_action(self, game):
        """Pick for the side to move in a Game; None once it has ended."""
        return self.choose(game.get_legal_moves())
