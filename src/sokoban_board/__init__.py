# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Sokoban Board - rules engine for the classic box-pushing puzzle."""

from .engine import Board, parse_levelset
from .game import SokobanGame
from .models import BoardEvent, BoardObservation, Cell, Direction, HistoryEntry, MoveResult

__all__ = [
    "Board",
    "BoardEvent",
    "BoardObservation",
    "Cell",
    "Direction",
    "HistoryEntry",
    "MoveResult",
    "SokobanGame",
    "parse_levelset",
]
