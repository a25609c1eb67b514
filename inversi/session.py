"""
Top-level session controller.

Owns the application mode (menu or playing), the current Game, and the
automated opponent's turn. Presenters forward user intents here and
render from Game.subscribe() or Game.get_state().
"""
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from .core.board import Player
from .core.game import Game
from .ai.agents.oracle_agent import OracleAgent
from .ai.oracle import create_oracle

logger = logging.getLogger(__name__)


class Mode(Enum):
    TWO_PLAYER = 'two_player'
    VS_AI = 'vs_ai'


@dataclass(frozen=True)
class MainMenu:
    pass


@dataclass(frozen=True)
class Playing:
    mode: Mode


class Session:
    """
    One interactive session.

    While the automated player is deciding, `thinking` is set and every
    presenter intent (click, pass, reset excepted) is ignored. At most
    one automated decision is pending at a time.
    """

    def __init__(self,
                 policy: Optional[OracleAgent] = None,
                 ai_player: Player = Player.WHITE,
                 delay: Optional[Callable[[], Awaitable]] = None):
        """
        Args:
            policy: Automated opponent, defaults to a heuristic-only OracleAgent
            ai_player: Side played by the policy in VS_AI mode
            delay: Optional coroutine factory awaited before each automated
                decision (cosmetic "thinking" pause owned by the presenter)
        """
        self.policy = policy if policy is not None else OracleAgent()
        self.ai_player = Player(ai_player)
        self.delay = delay

        self.app_mode = MainMenu()
        self.game: Optional[Game] = None
        self.thinking = False
        self._task: Optional[asyncio.Task] = None
        self._generation = 0

    @classmethod
    def from_config(cls, config):
        """Build a session (not yet started) from an InversiConfig."""
        config.validate()
        policy = OracleAgent(oracle=create_oracle(config), seed=config.seed)
        delay = None
        if config.think_delay > 0:
            def delay():
                return asyncio.sleep(config.think_delay)
        ai_player = Player.BLACK if config.ai_player == 'black' else Player.WHITE
        return cls(policy=policy, ai_player=ai_player, delay=delay)

    @property
    def mode(self):
        """Current Mode, or None while on the main menu."""
        return self.app_mode.mode if isinstance(self.app_mode, Playing) else None

    def start(self, mode):
        """Leave the menu (or the current game) and start a fresh game."""
        self._discard_pending()
        self.app_mode = Playing(Mode(mode))
        self.game = Game()
        logger.info("Started %s game", self.app_mode.mode.value)
        return self.game

    def back_to_menu(self):
        self._discard_pending()
        self.app_mode = MainMenu()
        self.game = None

    def is_automated_turn(self):
        return (
            self.mode is Mode.VS_AI
            and self.game is not None
            and not self.game.ended
            and self.game.current_player == self.ai_player
        )

    def _accepts_input(self):
        return (
            self.game is not None
            and not self.game.ended
            and not self.thinking
            and not self.is_automated_turn()
        )

    def click(self, row, col):
        """
        Human move intent.

        Returns:
            bool: True if the move was played
        """
        if not self._accepts_input():
            return False
        return self.game.make_move(row, col)

    def pass_turn(self):
        """
        Human pass intent. Only allowed when the side to move has no legal move.

        Returns:
            bool: True if the pass was recorded
        """
        if not self._accepts_input() or not self.game.can_pass():
            return False
        return self.game.explicit_pass()

    def reset(self):
        """Start the current game over. Discards any pending automated decision."""
        if self.game is None:
            return
        self._discard_pending()
        self.game.reset()

    def _discard_pending(self):
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.thinking = False

    async def play_automated_turn(self):
        """
        Let the automated side make one move (or pass if it has none).

        Returns:
            bool: True if the game was changed, False if the request was rejected
        """
        if self.thinking or not self.is_automated_turn():
            return False

        game = self.game
        generation = self._generation
        self.thinking = True
        try:
            if self.delay is not None:
                await self.delay()
                if generation != self._generation:
                    return False

            legal_moves = game.get_legal_moves()
            if not legal_moves:
                return game.explicit_pass()

            move = await self.policy.select_move(game.board.copy(), game.current_player, legal_moves)
            if generation != self._generation:
                # Reset while deciding
                return False
            return game.make_move(*move)
        finally:
            if generation == self._generation:
                self.thinking = False

    async def run_automated_turns(self):
        """
        Play automated turns until it is a human's turn or the game ends.

        Returns:
            int: Number of automated turns played
        """
        played = 0
        while self.is_automated_turn() and not self.thinking:
            if not await self.play_automated_turn():
                break
            played += 1
        return played

    def request_automated_turn(self):
        """
        Schedule run_automated_turns() on the running event loop.

        Returns:
            asyncio.Task or None: None if a decision is already pending or
            it is not the automated side's turn
        """
        if self.thinking or (self._task is not None and not self._task.done()):
            return None
        if not self.is_automated_turn():
            return None
        self._task = asyncio.ensure_future(self.run_automated_turns())
        return self._task
