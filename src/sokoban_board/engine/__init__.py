# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Sokoban board engine: grid, movement rules, undo and levels."""

from .board import Board
from .cells import is_empty, is_goal, is_pushable, switch_goal
from .levels import DEFAULT_LEVEL, FALLBACK_LEVEL, parse_levelset

__all__ = [
    "Board",
    "DEFAULT_LEVEL",
    "FALLBACK_LEVEL",
    "is_empty",
    "is_goal",
    "is_pushable",
    "parse_levelset",
    "switch_goal",
]
