"""
Game implementation for Inversi.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .board import Board, Player
from . import rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot handed to presenters and observers."""
    board: Board
    current_player: Player
    consecutive_passes: int
    ended: bool
    winner: Optional[Player]
    counts: Dict[str, int]

    @property
    def is_draw(self):
        return self.ended and self.winner is None


class Game:
    """
    Manages an Inversi game session.

    Handles turn management, passes and end-of-game detection. The board
    is owned here; rules and agents only ever read it.
    """

    def __init__(self):
        """Initialize a new game with the standard four-piece layout."""
        self._observers = []
        self._start()

    def _start(self):
        self.board = Board()
        self.current_player = Player.BLACK  # Black moves first
        self.consecutive_passes = 0
        self.ended = False
        self._winner = None
        self.move_history = []

    @property
    def game_state(self):
        """
        Get the current game state.

        Returns:
            str: One of 'ongoing', 'win', 'draw'
        """
        if not self.ended:
            return 'ongoing'
        return 'win' if self._winner is not None else 'draw'

    @property
    def winner(self):
        """
        Get the winner of the game.

        Returns:
            Player or None: Winner, or None while ongoing or on a draw
        """
        return self._winner

    def make_move(self, row, col):
        """
        Place a piece for the current player.

        Args:
            row (int): Row position (0-7)
            col (int): Column position (0-7)

        Returns:
            bool: True if the move was played, False if illegal or game over
        """
        if self.ended:
            return False
        if not self.board.in_bounds(row, col):
            return False
        if not rules.is_legal_move(self.board, row, col, self.current_player):
            return False

        player = self.current_player
        self.board.set(row, col, player)
        self.consecutive_passes = 0
        self.move_history.append((player, (row, col)))
        logger.debug("%s plays (%d, %d)", player.label, row, col)

        self._switch_player()
        self._end_of_turn_check()
        self._notify()
        return True

    def explicit_pass(self):
        """
        Pass the turn voluntarily.

        Whether a pass is sensible while legal moves exist is left to the
        caller; see can_pass().

        Returns:
            bool: True if the pass was recorded, False if the game is over
        """
        if self.ended:
            return False

        self.consecutive_passes += 1
        self.move_history.append((self.current_player, None))
        logger.debug("%s passes", self.current_player.label)

        self._switch_player()
        self._end_of_turn_check()
        self._notify()
        return True

    def can_pass(self):
        """Return whether a presenter should offer the pass action."""
        return not self.ended and not self.get_legal_moves()

    def _switch_player(self):
        self.current_player = self.current_player.opponent

    def _end_of_turn_check(self):
        # Runs after every switch. A player with no moves is passed for;
        # if the other side is stuck as well the game ends at once.
        if self.consecutive_passes >= 2:
            self._end_game()
            return

        if rules.legal_moves(self.board, self.current_player):
            return

        self.consecutive_passes += 1
        logger.debug("%s has no legal moves, forced pass", self.current_player.label)
        if self.consecutive_passes >= 2:
            self._end_game()
            return

        self._switch_player()
        if not rules.legal_moves(self.board, self.current_player):
            self._end_game()

    def _end_game(self):
        self.ended = True
        counts = self.board.count_pieces()
        if counts['black'] > counts['white']:
            self._winner = Player.BLACK
        elif counts['white'] > counts['black']:
            self._winner = Player.WHITE
        else:
            self._winner = None
        logger.debug("Game over %s, result: %s", counts, self.game_state)

    def reset(self):
        """Discard the current game and start again. Observers are kept."""
        self._start()
        self._notify()

    def get_legal_moves(self, player=None):
        """
        Get the legal moves for a player.

        Args:
            player (Player, optional): Defaults to the side to move

        Returns:
            list: (row, col) tuples in row-major order, empty once the game ended
        """
        if self.ended:
            return []
        if player is None:
            player = self.current_player
        return rules.legal_moves(self.board, player)

    def get_counts(self):
        """Return {'black': int, 'white': int}."""
        return self.board.count_pieces()

    def get_state(self):
        """Return an immutable GameState snapshot."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            consecutive_passes=self.consecutive_passes,
            ended=self.ended,
            winner=self._winner,
            counts=self.get_counts(),
        )

    def subscribe(self, callback):
        """
        Register a render callback, called with a GameState after every change.

        Returns:
            callable: Call it to unsubscribe
        """
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _notify(self):
        if not self._observers:
            return
        state = self.get_state()
        for callback in list(self._observers):
            callback(state)
