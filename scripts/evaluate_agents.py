#!/usr/bin/env python3
"""
Simple evaluation script for testing agents against each other.
"""
import sys
import time
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from inversi.core.board import Player
from inversi.core.game import Game
from inversi.ai.agents.random_agent import RandomAgent
from inversi.ai.agents.heuristic_agent import HeuristicAgent


def play_game(agent1, agent2, show_progress=False):
    """
    Play a single game between two agents.

    Forced passes are handled by the game itself, so every turn has a move.

    Args:
        agent1: Agent playing black (goes first)
        agent2: Agent playing white
        show_progress: Whether to print move-by-move progress

    Returns:
        int: Winner (1 for agent1/black, -1 for agent2/white, 0 for draw)
    """
    game = Game()
    move_count = 0

    while game.game_state == 'ongoing' and move_count < 60:  # 60 empty cells at start
        current_agent = agent1 if game.current_player == Player.BLACK else agent2

        move = current_agent.choose(game.get_legal_moves())
        if move is None:
            break  # Cannot happen while ongoing

        if show_progress:
            print(f"Move {move_count + 1}: {game.current_player.label} plays {move}")

        if not game.make_move(*move):
            print(f"ERROR: Invalid move {move} by {game.current_player.label}")
            break

        move_count += 1

    if show_progress:
        print(f"Game ended after {move_count} moves: {game.game_state} {game.get_counts()}")

    return int(game.winner) if game.winner is not None else 0


def evaluate_agents(agent1_name, agent1, agent2_name, agent2, num_games=100, swap_colors=True):
    """
    Evaluate two agents by playing multiple games.

    Returns:
        dict: Results summary
    """
    results = {
        'agent1_wins': 0,
        'agent2_wins': 0,
        'draws': 0,
    }

    print(f"Evaluating {agent1_name} vs {agent2_name}")
    print(f"Playing {num_games} games{' with color swapping' if swap_colors else ''}...")
    print()

    start_time = time.time()

    for i in range(num_games):
        if swap_colors and i % 2 == 1:
            winner = play_game(agent2, agent1)
            winner = -winner  # Report from agent1's point of view
        else:
            winner = play_game(agent1, agent2)

        if winner == 1:
            results['agent1_wins'] += 1
        elif winner == -1:
            results['agent2_wins'] += 1
        else:
            results['draws'] += 1

    elapsed = time.time() - start_time

    total_games = num_games
    agent1_win_rate = results['agent1_wins'] / total_games * 100 if total_games > 0 else 0
    agent2_win_rate = results['agent2_wins'] / total_games * 100 if total_games > 0 else 0
    draw_rate = results['draws'] / total_games * 100 if total_games > 0 else 0

    print(f"=== Results after {total_games} games ({elapsed:.1f}s) ===")
    print(f"{agent1_name}: {results['agent1_wins']} wins ({agent1_win_rate:.1f}%)")
    print(f"{agent2_name}: {results['agent2_wins']} wins ({agent2_win_rate:.1f}%)")
    print(f"Draws: {results['draws']} ({draw_rate:.1f}%)")

    results.update({
        'total_games': total_games,
        'agent1_win_rate': agent1_win_rate,
        'agent2_win_rate': agent2_win_rate,
        'draw_rate': draw_rate,
        'elapsed_time': elapsed,
    })
    return results


def main():
    """Main evaluation function."""
    print("Inversi Agent Evaluation")
    print("========================")
    print()

    return evaluate_agents(
        "HeuristicAgent", HeuristicAgent(seed=42),
        "RandomAgent", RandomAgent(seed=123),
        num_games=200,
        swap_colors=True,
    )


if __name__ == "__main__":
    main()
