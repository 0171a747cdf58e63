"""
Sokoban Board Simple Example

This script demonstrates basic usage of the Sokoban board engine.
It shows how to start a game, take actions, undo them and watch the board.

Usage:
    python examples/sokoban_simple.py [levelset.txt]
"""

import logging
import sys
from pathlib import Path

from sokoban_board import SokobanGame, parse_levelset

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


def print_board(observation):
    """Print a visual representation of the Sokoban board."""
    height, width = observation.board_shape

    # Symbol mapping for visualization
    symbols = {
        ' ': '·',  # Empty floor
        '#': '█',  # Wall
        '$': '□',  # Box
        '.': '.',  # Goal
        '@': '@',  # Player
        '*': '▣',  # Box on goal
        '+': '+',  # Player on goal
    }

    print(f"\nLevel {observation.level_index + 1}/{observation.num_levels}:")
    print("─" * (width * 2))
    for row in observation.rows:
        print(' '.join(symbols.get(cell, '?') for cell in row.ljust(width)))
    print("─" * (width * 2))


def load_levels(argv):
    """Read the levelset named on the command line, if any."""
    if len(argv) < 2:
        return None
    path = Path(argv[1])
    try:
        return parse_levelset(path.read_text())
    except OSError as e:
        logger.error(f"Could not read levelset {path}: {e}, using the built-in level.")
        return None


def main():
    print("Sokoban Board Example")
    print("=" * 50)

    game = SokobanGame(load_levels(sys.argv), auto_advance=False)
    observation = game.observation()

    print(f"\nInitial State:")
    print(f"  Board size: {observation.board_shape}")
    print(f"  Number of boxes: {observation.num_boxes}")
    print(f"  Player position: {observation.player_position}")
    print(f"  Boxes on goals: {observation.boxes_on_goals}/{observation.num_boxes}")

    print_board(observation)

    # Example sequence of moves (you can customize this)
    example_moves = ["right", "right", "down", "right", "up", "undo", "left", "down"]

    for i, action in enumerate(example_moves, 1):
        print(f"\n--- Action {i}: {action.upper()} ---")
        if action == "undo":
            observation = game.undo()
        else:
            observation = game.step(action)
            print(f"Result: {observation.last_result.value}")

        print(f"Player position: {observation.player_position}")
        print(f"Boxes on goals: {observation.boxes_on_goals}/{observation.num_boxes}")
        print(f"Total moves: {observation.moves_count}")
        print(f"Total pushes: {observation.pushes_count}")

        print_board(observation)

        if observation.done:
            print("\n" + "=" * 50)
            print("CONGRATULATIONS! Puzzle solved!")
            print(f"Completed in {observation.moves_count} moves")
            print(f"Pushes: {observation.pushes_count}")
            print("=" * 50)
            break
    else:
        print("\n\nExample moves completed!")
        print(f"Current progress: {observation.boxes_on_goals}/{observation.num_boxes} boxes on goals")


if __name__ == "__main__":
    main()
