"""
Move legality for Inversi.

Standard Othello lets you move only where you bracket opponent pieces.
Inversi turns that around: a move is legal only when it would bracket
nothing. Pieces are therefore never flipped and placing one is a pure
insertion.
"""
from .board import EMPTY, Player

# N, NE, E, SE, S, SW, W, NW
DIRECTIONS = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)


def opponent(player):
    """Return the other side."""
    return Player(player).opponent


def is_adjacent_to_occupied(board, row, col):
    """
    Check whether any of the 8 neighbours of (row, col) holds a piece.

    Args:
        board: Board instance
        row (int): Row position
        col (int): Column position

    Returns:
        bool: True if at least one in-bounds neighbour is occupied
    """
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        if board.in_bounds(r, c) and board.state[r, c] != EMPTY:
            return True
    return False


def would_flip_in_direction(board, row, col, player, dr, dc):
    """
    Check whether placing at (row, col) would bracket opponent pieces
    along one direction.

    The walk must meet one or more contiguous opponent pieces followed
    by one of the player's own. Running off the board or reaching an
    empty cell first means nothing is bracketed.
    """
    enemy = int(opponent(player))
    r, c = row + dr, col + dc
    seen_enemy = False
    while board.in_bounds(r, c) and board.state[r, c] == enemy:
        seen_enemy = True
        r, c = r + dr, c + dc
    return seen_enemy and board.in_bounds(r, c) and board.state[r, c] == int(player)


def would_flip(board, row, col, player):
    """
    Check whether placing at (row, col) would flip pieces in any direction.

    Returns:
        bool: True if at least one direction brackets opponent pieces
    """
    return any(
        would_flip_in_direction(board, row, col, player, dr, dc)
        for dr, dc in DIRECTIONS
    )


def is_legal_move(board, row, col, player):
    """
    Check whether a move is legal under the reversed capture rule.

    A cell is legal when it is empty, touches an occupied cell, and
    captures nothing.

    Args:
        board: Board instance
        row (int): Row position (0-7)
        col (int): Column position (0-7)
        player (Player): Side to move

    Returns:
        bool: True if the move may be played
    """
    if not board.is_empty(row, col):
        return False
    if not is_adjacent_to_occupied(board, row, col):
        return False
    return not would_flip(board, row, col, player)


def legal_moves(board, player):
    """
    List all legal moves for a player in row-major order.

    The order is relied upon for tie-breaking by the opponent policy.

    Returns:
        list: (row, col) tuples, row 0..7 then col 0..7
    """
    moves = []
    for row in range(board.size):
        for col in range(board.size):
            if is_legal_move(board, row, col, player):
                moves.append((row, col))
    return moves
