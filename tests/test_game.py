"""
Tests for Game class (turn state machine).
"""
import numpy as np
import pytest
from inversi.core.game import Game, GameState
from inversi.core.board import Board, Player
from inversi.ai.agents.random_agent import RandomAgent


# White's only empty cell brackets (0, 1) against (0, 2), so White is
# stuck once Black fills (7, 7). Black can still play (0, 0).
WHITE_STUCK_AFTER_H8 = [
    ".BWBBBBB",
    "BBBBBBBB",
    "BBBBBBBB",
    "BBBBBBBB",
    "BBBBBBBB",
    "BBBBBBBB",
    "BBBBBBBB",
    "BBBBBBB.",
]


def _swap_colours(rows):
    table = str.maketrans("BW", "WB")
    return [row.translate(table) for row in rows]


def test_game_initialization():
    """Test that a game is initialized correctly."""
    game = Game()

    assert isinstance(game.board, Board)
    assert game.current_player == Player.BLACK
    assert game.consecutive_passes == 0
    assert game.ended is False
    assert game.game_state == 'ongoing'
    assert game.winner is None
    assert game.get_counts() == {'black': 2, 'white': 2}
    assert game.move_history == []


def test_valid_move_processing():
    """Test that a legal move is placed and the turn switches."""
    game = Game()

    result = game.make_move(2, 2)
    assert result is True
    assert game.board.get(2, 2) == Player.BLACK
    assert game.current_player == Player.WHITE
    assert game.consecutive_passes == 0
    assert game.get_counts() == {'black': 3, 'white': 2}
    assert game.move_history == [(Player.BLACK, (2, 2))]


def test_illegal_move_rejection():
    """Illegal moves are a no-op."""
    game = Game()
    before = game.get_state()

    assert game.make_move(2, 3) is False   # Would flip (3, 3)
    assert game.make_move(0, 0) is False   # Not adjacent
    assert game.make_move(3, 3) is False   # Occupied
    assert game.make_move(-1, 5) is False  # Off the board
    assert game.make_move(8, 0) is False   # Off the board

    after = game.get_state()
    assert after.board == before.board
    assert after.current_player == Player.BLACK
    assert game.move_history == []


def test_move_changes_only_target_cell():
    """Placing never flips anything."""
    game = Game()
    before = game.board.state.copy()

    game.make_move(5, 5)

    changed = np.argwhere(game.board.state != before)
    assert [tuple(map(int, cell)) for cell in changed] == [(5, 5)]


def test_no_flips_over_whole_random_game():
    """Every move in a full game changes exactly one empty cell."""
    game = Game()
    agent = RandomAgent(seed=7)

    while not game.ended:
        before = game.board.state.copy()
        move = agent.select_action(game)
        assert move is not None, "Ongoing game must offer a move to the side to play"
        player = game.current_player

        assert game.make_move(*move)

        diff = np.argwhere(game.board.state != before)
        assert len(diff) == 1
        assert tuple(map(int, diff[0])) == move
        assert before[move] == 0
        assert game.board.get(*move) == player

    counts = game.get_counts()
    if counts['black'] > counts['white']:
        assert game.winner == Player.BLACK
    elif counts['white'] > counts['black']:
        assert game.winner == Player.WHITE
    else:
        assert game.game_state == 'draw'


def test_two_explicit_passes_end_in_draw():
    """Two consecutive passes end the game; 2-2 is a draw."""
    game = Game()

    assert game.explicit_pass() is True
    assert game.consecutive_passes == 1
    assert game.current_player == Player.WHITE
    assert not game.ended

    assert game.explicit_pass() is True
    assert game.ended
    assert game.game_state == 'draw'
    assert game.winner is None
    assert game.get_state().is_draw


def test_move_resets_pass_counter():
    """A placement after a pass resets consecutive passes."""
    game = Game()

    game.explicit_pass()
    assert game.consecutive_passes == 1

    assert game.make_move(2, 2)  # White's move
    assert game.consecutive_passes == 0
    assert game.current_player == Player.BLACK


def test_forced_pass_when_opponent_stuck():
    """White has no moves, so the turn returns to Black without ending."""
    game = Game()
    game.board = Board.from_rows(WHITE_STUCK_AFTER_H8)

    assert game.make_move(7, 7)

    assert not game.ended
    assert game.current_player == Player.BLACK
    assert game.consecutive_passes == 1
    assert game.get_legal_moves() == [(0, 0)]


def test_both_stuck_ends_immediately():
    """Filling the last cell ends the game on the forced-pass look-ahead."""
    game = Game()
    game.board = Board.from_rows(WHITE_STUCK_AFTER_H8)
    game.make_move(7, 7)

    assert game.make_move(0, 0)

    assert game.ended
    assert game.consecutive_passes == 1
    assert game.winner == Player.BLACK
    assert game.get_counts() == {'black': 63, 'white': 1}


def test_white_wins_resolution():
    """Same position with colours swapped is a White win."""
    game = Game()
    game.board = Board.from_rows(_swap_colours(WHITE_STUCK_AFTER_H8))
    game.current_player = Player.WHITE

    assert game.make_move(7, 7)
    assert game.current_player == Player.WHITE
    assert game.consecutive_passes == 1

    assert game.make_move(0, 0)
    assert game.ended
    assert game.game_state == 'win'
    assert game.winner == Player.WHITE


def test_forced_pass_then_explicit_pass_ends_game():
    """A forced pass followed by a voluntary pass makes two in a row."""
    game = Game()
    game.board = Board.from_rows(WHITE_STUCK_AFTER_H8)
    game.make_move(7, 7)

    assert game.explicit_pass()
    assert game.ended
    assert game.winner == Player.BLACK


def test_no_actions_after_game_end():
    """Ended games accept nothing."""
    game = Game()
    game.explicit_pass()
    game.explicit_pass()
    state = game.get_state()

    assert game.make_move(2, 2) is False
    assert game.explicit_pass() is False
    assert game.get_legal_moves() == []
    assert game.can_pass() is False
    assert game.get_state().current_player == state.current_player
    assert game.get_state().consecutive_passes == state.consecutive_passes


def test_can_pass_only_without_moves():
    """The pass action is offered only when the side to move is stuck."""
    game = Game()
    assert game.can_pass() is False

    game.board = Board.from_rows(WHITE_STUCK_AFTER_H8)
    game.board.set(7, 7, Player.BLACK)
    game.current_player = Player.WHITE
    assert game.get_legal_moves() == []
    assert game.can_pass() is True


def test_get_legal_moves_idempotent():
    """Repeated queries without mutation return the same sequence."""
    game = Game()

    first = game.get_legal_moves()
    assert game.get_legal_moves() == first
    assert game.get_legal_moves() == first
    assert game.get_legal_moves(Player.WHITE) == game.get_legal_moves(Player.WHITE)
    assert game.get_legal_moves(Player.BLACK) == first


def test_get_state_snapshot():
    """Snapshots are detached from the live board."""
    game = Game()
    state = game.get_state()

    assert isinstance(state, GameState)
    assert state.current_player == Player.BLACK
    assert state.counts == {'black': 2, 'white': 2}
    assert not state.ended

    game.make_move(2, 2)
    assert state.board.is_empty(2, 2)
    with pytest.raises(AttributeError):
        state.ended = True


def test_subscribe_notifies_observers():
    """Observers get a snapshot after every change and can unsubscribe."""
    game = Game()
    seen = []
    unsubscribe = game.subscribe(seen.append)

    game.make_move(2, 2)
    game.make_move(2, 3)  # Flips nothing for White
    game.make_move(0, 0)  # Illegal, no notification

    assert len(seen) == 2
    assert seen[0].current_player == Player.WHITE
    assert seen[1].counts == {'black': 3, 'white': 3}

    unsubscribe()
    game.explicit_pass()
    assert len(seen) == 2


def test_reset():
    """Reset restores the starting position and keeps observers."""
    game = Game()
    seen = []
    game.subscribe(seen.append)

    game.make_move(2, 2)
    game.explicit_pass()
    game.reset()

    assert game.board == Board()
    assert game.current_player == Player.BLACK
    assert game.consecutive_passes == 0
    assert not game.ended
    assert game.move_history == []
    assert len(seen) == 3
