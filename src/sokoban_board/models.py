# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Data models for the Sokoban board.

Sokoban is a classic puzzle game where the player pushes boxes to goal locations.
The player can move in four directions and push boxes (but not pull them).
Coordinates are (x, y) with x the column and y the row of the level text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Literal, Optional, Tuple


class Cell(str, Enum):
    """
    Contents of one board square, valued by its level-text character.

    Every symbol belongs to either the goal family (GOAL_*) or the
    non-goal family (PLAYER, BOX, EMPTY). WALL counts as non-goal.
    """

    PLAYER = "@"
    WALL = "#"
    EMPTY = " "
    BOX = "$"
    GOAL_EMPTY = "."
    GOAL_BOX = "*"
    GOAL_PLAYER = "+"


class Direction(Enum):
    """The four unit steps a player can take."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Look up a direction by name ("up", "down", "left", "right")."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


class MoveResult(Enum):
    """Outcome of an attempted player move."""

    MOVED = "moved"
    PUSHED = "pushed"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class HistoryEntry:
    """
    One recorded player action.

    Attributes:
        x: Player column before the action
        y: Player row before the action
        push: Whether the action pushed a box
    """

    x: int
    y: int
    push: bool = False


@dataclass(frozen=True)
class BoardEvent:
    """
    Notification sent to board listeners after a change is applied.

    Attributes:
        action: "move", "push" or "undo"
        entry: The history entry that was recorded or undone
        player_position: Player (x, y) after the change
    """

    action: Literal["move", "push", "undo"]
    entry: HistoryEntry
    player_position: Tuple[int, int]


@dataclass(kw_only=True)
class BoardObservation:
    """
    Snapshot of a board for rendering.

    Attributes:
        rows: Level-text rows of the current grid, top to bottom
        board_shape: Shape of the board (height, width)
        player_position: (x, y) position of the player, empty if there is none
        num_boxes: Total number of boxes on the board
        boxes_on_goals: Number of boxes currently on goal positions
        moves_count: Number of recorded actions (moves and pushes)
        pushes_count: Number of recorded pushes
        is_solved: Whether all boxes are on goals
        level_index: Index of the level in the session's level list
        num_levels: Number of levels in the session
        last_result: Outcome of the last attempted move, if any
        done: Whether the level was solved by the last action
    """

    rows: List[str]
    board_shape: List[int]
    player_position: List[int]
    num_boxes: int
    boxes_on_goals: int
    moves_count: int = 0
    pushes_count: int = 0
    is_solved: bool = False
    level_index: int = 0
    num_levels: int = 1
    last_result: Optional[MoveResult] = None
    done: bool = False
