"""
cli.py - Command-line interface for the four-in-a-row engine

This module provides a CLI for playing a hot-seat game in the terminal,
replaying a sequence of column moves, analyzing a board position and
benchmarking the engine.
"""

import argparse
import random
import time
from typing import List, Optional

from four_in_a_row.debug import debug, DebugLevel, parse_level
from four_in_a_row.constants import COLUMNS, GameStatus, MoveStatus, PlayerColor
from four_in_a_row.game.board import (board_from_sequence, count_tokens, open_columns,
                                      render_board_ascii)
from four_in_a_row.game.engine import GameEngine, MoveResult
from four_in_a_row.game.evaluation import evaluate_board

QUIT = "quit"
RESTART = "restart"


class SimpleCLI:
    """Simple command-line interface for four-in-a-row."""

    def __init__(self):
        self.engine = GameEngine()
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        parser = argparse.ArgumentParser(prog='four-in-a-row',
                                         description='Four-in-a-row rules engine')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default=None,
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game in the terminal')

        replay_parser = subparsers.add_parser('replay', help='Play a sequence of columns')
        replay_parser.add_argument('--moves', required=True,
                                   help='Comma-separated column indices, e.g. 0,6,1,6')

        analyze_parser = subparsers.add_parser('analyze', help='Evaluate a board position')
        analyze_parser.add_argument('--position', required=True,
                                    help='42 comma-separated tokens (0 empty, 1 yellow, '
                                         '2 red), top row first')

        benchmark_parser = subparsers.add_parser('benchmark', help='Time random games')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Random seed')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        elif self.args.debug_level:
            debug.configure(level=parse_level(self.args.debug_level))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the command selected on the command line.

        Returns:
            Process exit code
        """
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'replay':
            return self.replay(self.args.moves)
        elif self.args.command == 'analyze':
            return self.analyze_position(self.args.position)
        elif self.args.command == 'benchmark':
            return self.benchmark(self.args.iterations, self.args.seed)

        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        """Play a hot-seat game until it ends or a player quits."""
        print("Starting a new four-in-a-row game!")
        print(f"Enter a column number (0-{COLUMNS - 1}) to move, 'r' to restart, 'q' to quit.")

        self.engine.reset()
        print(self.engine.render())

        result = None
        while not self.engine.status.is_game_over():
            move = self.get_human_move(self.engine.current_turn)

            if move is None:
                continue
            elif move == QUIT:
                print("Quitting game.")
                return 0
            elif move == RESTART:
                self.engine.reset()
                print("Game restarted.")
                print(self.engine.render())
                continue

            result = self.engine.play_move(move)
            if result.status == MoveStatus.INVALID:
                print(f"Column {move} is full, pick another one.")
                continue

            print(self.engine.render())

        print(self.describe_result(result))
        return 0

    def get_human_move(self, color: PlayerColor):
        """
        Read one move from the terminal.

        Returns:
            Column index, QUIT, RESTART, or None if the input was not usable
        """
        try:
            user_input = input(f"{color.value.capitalize()} to move: ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            return QUIT

        if user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART

        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

        if not 0 <= move < COLUMNS:
            print(f"Column must be between 0 and {COLUMNS - 1}.")
            return None

        return move

    def replay(self, moves: str) -> int:
        """Play a comma-separated column sequence and print every result."""
        try:
            columns = [int(part) for part in moves.split(',') if part.strip()]
        except ValueError as e:
            print(f"Error parsing moves: {e}")
            return 1

        self.engine.reset()
        result = None
        for column in columns:
            mover = self.engine.current_turn
            result = self.engine.play_move(column)
            print(f"{mover.value} -> column {column}: {result.status.value}")

        print(self.engine.render())
        print(f"Game status: {self.engine.status.value}")
        if result is not None and self.engine.status.is_game_over():
            print(self.describe_result(result))
        return 0

    def analyze_position(self, position: str) -> int:
        """Load a board from a token string and print its evaluation."""
        try:
            board = board_from_sequence(position.split(','))
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        print("Loaded position:")
        print(render_board_ascii(board))

        status, winner, win_line = evaluate_board(board)
        if status == MoveStatus.WIN:
            print(f"Win for {winner.value}: {win_line}")
        elif status == MoveStatus.DRAW:
            print("Board is full: draw")
        else:
            print("No win detected")
            print(f"Tokens on board: {count_tokens(board)}")
            print(f"Open columns: {open_columns(board)}")
        return 0

    def benchmark(self, iterations: int, seed: Optional[int] = None) -> int:
        """Play random games and report the engine's throughput."""
        rng = random.Random(seed)
        engine = GameEngine()
        outcomes = {GameStatus.WIN: 0, GameStatus.DRAW: 0}
        total_moves = 0

        start = time.perf_counter()
        for _ in range(iterations):
            engine.reset()
            while not engine.status.is_game_over():
                engine.play_move(rng.choice(engine.valid_columns()))
                total_moves += 1
            outcomes[engine.status] += 1
        elapsed = time.perf_counter() - start

        print(f"Played {iterations} games ({total_moves} moves) in {elapsed:.3f} seconds")
        print(f"Wins: {outcomes[GameStatus.WIN]}, draws: {outcomes[GameStatus.DRAW]}")
        if elapsed > 0:
            print(f"Moves per second: {total_moves / elapsed:.0f}")
        return 0

    @staticmethod
    def describe_result(result: MoveResult) -> str:
        if result.status == MoveStatus.WIN:
            return f"{result.winner.value.capitalize()} wins!"
        elif result.status == MoveStatus.DRAW:
            return "It's a draw!"
        return "Game in progress."


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    raise SystemExit(main())
