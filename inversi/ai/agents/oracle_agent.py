"""
Oracle-backed agent for Inversi.

This is the automated opponent: it asks an external oracle first and
falls back to HeuristicAgent whenever the oracle fails or answers with
something unusable.
"""
import logging

from ...core.notation import parse_coordinate, to_notation
from ..oracle import OracleRequest
from .heuristic_agent import HeuristicAgent

logger = logging.getLogger(__name__)


class OracleAgent:
    """
    Decision order:
    1. Ask the oracle (if one is configured)
    2. Accept its answer if the first coordinate token is a legal move
    3. Otherwise use the heuristic, which cannot fail
    """

    def __init__(self, oracle=None, fallback=None, seed=None):
        """
        Args:
            oracle (Oracle, optional): Move suggestion service
            fallback (HeuristicAgent, optional): Heuristic used on oracle failure
            seed (int, optional): Seed for the default fallback
        """
        self.oracle = oracle
        self.fallback = fallback if fallback is not None else HeuristicAgent(seed=seed)

    async def select_move(self, board, player, legal_moves):
        """
        Choose a move for the automated side.

        Args:
            board: Board to decide on (not modified)
            player (Player): Side to move
            legal_moves (list): Legal moves for player in row-major order

        Returns:
            tuple or None: (row, col), None iff legal_moves is empty
        """
        if not legal_moves:
            return None

        if self.oracle is not None:
            move = await self._ask_oracle(board, player, legal_moves)
            if move is not None:
                return move

        return self.fallback.choose(legal_moves)

    async def _ask_oracle(self, board, player, legal_moves):
        request = OracleRequest.from_position(board, player, legal_moves)
        try:
            answer = await self.oracle.decide(request)
        except Exception as e:
            logger.warning("Oracle failed, using heuristic: %s", e)
            return None

        move = parse_coordinate(answer)
        if move is None:
            logger.warning("Oracle answer %r has no coordinate, using heuristic", answer)
            return None
        if move not in legal_moves:
            logger.warning("Oracle suggested illegal move %s, using heuristic", to_notation(move))
            return None

        logger.debug("Oracle chose %s", to_notation(move))
        return move

    async def select_action(self, game):
        """Same as select_move for the side to play in a Game."""
        return await self.select_move(game.board, game.current_player, game.get_legal_moves())
