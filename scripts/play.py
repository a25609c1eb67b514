#!/usr/bin/env python3
"""
CLI interface for playing Inversi (reverse Othello) against a human or the AI.
"""
import argparse
import asyncio
import sys
import os

# Add the parent directory to Python path so we can import inversi
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from inversi.config import ConfigError, InversiConfig
from inversi.core.board import Player
from inversi.core.notation import format_legal_moves, parse_coordinate, render_board
from inversi.log import setup_logging
from inversi.session import Mode, Session


def display_state(state):
    """Render a GameState snapshot to the terminal."""
    print()
    print(render_board(state.board))
    counts = state.counts
    print(f"Black ●: {counts['black']}   White ○: {counts['white']}")


def get_player_name(player, session):
    """Get display name for player."""
    symbol = "●" if player == Player.BLACK else "○"
    if session.mode is Mode.VS_AI:
        who = "AI" if player == session.ai_player else "You"
        return f"{who} ({player.label} {symbol})"
    return f"{player.label} ({symbol})"


def select_game_mode():
    """
    Let user select game mode.

    Returns:
        Mode or None if the user quit
    """
    print("\nSelect Game Mode:")
    print("1. Player vs Player")
    print("2. Player vs AI")

    while True:
        try:
            choice = input("\nEnter your choice (1-2): ").strip()
        except (KeyboardInterrupt, EOFError):
            return None

        if choice == '1':
            return Mode.TWO_PLAYER
        elif choice == '2':
            return Mode.VS_AI
        print("Invalid choice! Please enter 1 or 2.")


def get_human_command(session):
    """
    Read one command from the human player.

    Returns:
        tuple: ('move', (row, col)), ('pass', None), ('reset', None),
            ('menu', None) or ('quit', None)
    """
    game = session.game
    while True:
        try:
            name = get_player_name(game.current_player, session)
            text = input(f"{name}, enter a move (e.g. 'C4'), 'pass', 'reset', 'menu' or 'quit': ").strip()
        except (KeyboardInterrupt, EOFError):
            return ('quit', None)

        command = text.lower()
        if command in ('quit', 'exit', 'q'):
            return ('quit', None)
        if command in ('pass', 'reset', 'menu'):
            return (command, None)

        move = parse_coordinate(text)
        if move is None:
            print("Invalid input! Enter a coordinate like 'C4'.")
            continue
        return ('move', move)


async def play_game(session):
    """
    Run one game until it ends or the user leaves.

    Returns:
        str: 'ended', 'menu' or 'quit'
    """
    game = session.game
    game.subscribe(display_state)
    display_state(game.get_state())

    while not game.ended:
        if session.is_automated_turn():
            print(f"{get_player_name(session.ai_player, session)} is thinking...")
            await session.run_automated_turns()
            continue

        legal = game.get_legal_moves()
        print(f"Legal moves: {format_legal_moves(legal)}")

        command, move = get_human_command(session)
        if command == 'quit':
            return 'quit'
        if command == 'menu':
            return 'menu'
        if command == 'reset':
            session.reset()
        elif command == 'pass':
            if not session.pass_turn():
                print("You cannot pass while you have legal moves.")
        elif not session.click(*move):
            print("Illegal move! A piece must touch another piece and flip nothing.")

    state = game.get_state()
    print("\n" + "=" * 60)
    if state.winner is None:
        print("GAME OVER - It's a draw!")
    else:
        print(f"GAME OVER - {get_player_name(state.winner, session)} wins!")
    print("=" * 60)
    return 'ended'


async def main_async(config):
    session = Session.from_config(config)

    while True:
        mode = select_game_mode()
        if mode is None:
            break
        session.start(mode)
        result = await play_game(session)
        session.back_to_menu()
        if result == 'quit':
            break

    print("\nThanks for playing!")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Play Inversi in the terminal")
    parser.add_argument('--config', help="JSON config file (defaults to INVERSI_* environment)")
    parser.add_argument('--oracle', choices=['none', 'scripted', 'http'])
    parser.add_argument('--oracle-url')
    parser.add_argument('--ai-player', choices=['black', 'white'])
    parser.add_argument('--think-delay', type=float)
    parser.add_argument('--seed', type=int)
    parser.add_argument('--log-level')
    args = parser.parse_args()

    try:
        config = InversiConfig.from_json(args.config) if args.config else InversiConfig.from_env()
        for key in ('oracle', 'oracle_url', 'ai_player', 'think_delay', 'seed', 'log_level'):
            value = getattr(args, key)
            if value is not None:
                setattr(config, key, value)
        config.validate()
    except ConfigError as e:
        parser.error(str(e))

    setup_logging(config.log_level)

    print("=" * 60)
    print("           INVERSI (Reverse Othello)")
    print("=" * 60)
    print("Rules: place a piece next to any existing piece,")
    print("but never where it would flip an opponent piece.")
    print("A player with no legal move passes; when neither side")
    print("can move, the player with more pieces wins.")
    print("=" * 60)

    asyncio.run(main_async(config))


if __name__ == "__main__":
    main()
