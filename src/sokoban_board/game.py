# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Sokoban Game Session.

Keeps the list of levels and the index of the current one. A level is
always played on a fresh Board: restarting or changing level replaces the
board wholesale, so no history survives across levels.
"""

import logging
from typing import List, Optional, Sequence, Union

from .engine.board import Board
from .engine.levels import DEFAULT_LEVEL
from .models import BoardObservation, Direction

logger = logging.getLogger(__name__)


class SokobanGame:
    """
    Sokoban game session over a list of levels.

    Each step or undo runs the action and the win check as a single unit.
    When the level is solved and auto_advance is set, the next level is
    loaded right after the observation for the winning action has been built.

    Example:
        >>> game = SokobanGame(["#####\\n#@$.#\\n#####\\n", "#####\\n#.$@#\\n#####\\n"])
        >>> obs = game.step("right")
        >>> obs.done, obs.last_result
        (True, <MoveResult.PUSHED: 'pushed'>)
        >>> game.level_index
        1
    """

    def __init__(self, levels: Optional[Sequence[str]] = None, auto_advance: bool = True):
        """
        Initialize the game session.

        Args:
            levels: Level texts to play in order (default: the built-in level)
            auto_advance: Load the next level as soon as one is solved (default: True)
        """
        self._levels: List[str] = list(levels) if levels is not None else [DEFAULT_LEVEL]
        if not self._levels:
            raise ValueError("SokobanGame needs at least one level.")
        self.auto_advance = auto_advance
        self.level_index = 0
        self.board = Board(self._levels[0])

        logger.info(f"SokobanGame initialized with {len(self._levels)} levels, auto_advance={auto_advance}")

    @property
    def num_levels(self) -> int:
        """Number of levels in the session."""
        return len(self._levels)

    def load_level(self, index: int) -> BoardObservation:
        """
        Start the level at the given index on a fresh board.

        Raises:
            IndexError: If index is not a valid level index
        """
        if not 0 <= index < len(self._levels):
            raise IndexError(f"Level index {index} out of range (0..{len(self._levels) - 1})")
        self.level_index = index
        self.board = Board(self._levels[index])
        logger.info(f"Starting level {index}...")
        return self.observation()

    def restart_level(self) -> BoardObservation:
        """Start the current level again on a fresh board."""
        return self.load_level(self.level_index)

    def next_level(self) -> BoardObservation:
        """Advance to the next level, restarting the last one if there is none."""
        return self.load_level(min(self.level_index + 1, len(self._levels) - 1))

    def previous_level(self) -> BoardObservation:
        """Go back one level, restarting the first one if there is none."""
        return self.load_level(max(self.level_index - 1, 0))

    def step(self, direction: Union[Direction, str]) -> BoardObservation:
        """
        Move the player one step.

        Args:
            direction: A Direction or its name ("up", "down", "left", "right")

        Returns:
            BoardObservation of the board after the move, with last_result set
            and done set if the move solved the level
        """
        if isinstance(direction, str):
            direction = Direction.from_name(direction)

        was_solved = self.board.has_won()
        result = self.board.move_direction(direction)
        observation = self.observation()
        observation.last_result = result
        return self._check_solved(observation, was_solved)

    def undo(self) -> BoardObservation:
        """
        Undo the last action on the current board.

        Undoing a push that took a box off its goal can solve the level,
        so the win check runs here as well.
        """
        was_solved = self.board.has_won()
        self.board.undo_move()
        return self._check_solved(self.observation(), was_solved)

    def _check_solved(self, observation: BoardObservation, was_solved: bool) -> BoardObservation:
        """Mark the observation done if the action solved the level, advancing if configured."""
        if was_solved or not observation.is_solved:
            return observation

        observation.done = True
        logger.info(
            f"Level {self.level_index} solved in {observation.moves_count} moves, "
            f"{observation.pushes_count} pushes."
        )
        if self.auto_advance:
            self.next_level()
        return observation

    def observation(self) -> BoardObservation:
        """Snapshot of the current board with session fields filled in."""
        observation = self.board.observation()
        observation.level_index = self.level_index
        observation.num_levels = len(self._levels)
        return observation
