# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Cell classification helpers.

All helpers accept either a Cell member or its level-text character, which
is what the board grid stores.
"""

from typing import Union

from ..models import Cell

CellLike = Union[Cell, str]

GOAL_CELLS = (Cell.GOAL_EMPTY, Cell.GOAL_PLAYER, Cell.GOAL_BOX)
EMPTY_CELLS = (Cell.EMPTY, Cell.GOAL_EMPTY)
PUSHABLE_CELLS = (Cell.BOX, Cell.GOAL_BOX)

# Counterparts across the goal/non-goal divide
_SWITCH = {
    Cell.PLAYER: Cell.GOAL_PLAYER,
    Cell.BOX: Cell.GOAL_BOX,
    Cell.EMPTY: Cell.GOAL_EMPTY,
    Cell.GOAL_PLAYER: Cell.PLAYER,
    Cell.GOAL_BOX: Cell.BOX,
    Cell.GOAL_EMPTY: Cell.EMPTY,
}


def to_cell(char: CellLike) -> Cell:
    """Convert a level-text character to a Cell, unknown characters become EMPTY."""
    try:
        return Cell(char)
    except ValueError:
        return Cell.EMPTY


def is_goal(cell: CellLike) -> bool:
    """Return True if the square is a goal, whatever occupies it."""
    return cell in GOAL_CELLS


def is_empty(cell: CellLike) -> bool:
    """Return True if a player or box may move onto the square."""
    return cell in EMPTY_CELLS


def is_pushable(cell: CellLike) -> bool:
    """Return True if the square holds a box."""
    return cell in PUSHABLE_CELLS


def switch_goal(cell: CellLike) -> Cell:
    """
    Return the counterpart of a cell on the other side of the goal divide.

    PLAYER <-> GOAL_PLAYER, BOX <-> GOAL_BOX, EMPTY <-> GOAL_EMPTY.
    Anything else (walls, unknown characters) maps to EMPTY.
    """
    try:
        return _SWITCH.get(Cell(cell), Cell.EMPTY)
    except ValueError:
        return Cell.EMPTY
