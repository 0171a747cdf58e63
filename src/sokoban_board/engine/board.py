# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Sokoban Board Implementation.

The board owns the grid, the player's position and the history of player
actions. It resolves moves and pushes, detects the win and undoes actions
one at a time.
"""

import logging
from collections import deque
from typing import Callable, Deque, List, Optional, Tuple

import numpy as np

from ..models import BoardEvent, BoardObservation, Cell, Direction, HistoryEntry, MoveResult
from .cells import is_empty, is_goal, is_pushable, switch_goal, to_cell
from .levels import DEFAULT_LEVEL

logger = logging.getLogger(__name__)

BoardListener = Callable[[BoardEvent], None]


class Board:
    """
    Sokoban board state machine.

    The grid is indexed (x, y) where x is the column and y the row of the
    level text. Every successful move or push is recorded at the front of
    the history so that undo_move() can reverse it exactly.

    Example:
        >>> board = Board("#####\\n#@$.#\\n#####\\n")
        >>> board.move_player(1, 0)
        True
        >>> board.has_won()
        True
        >>> board.undo_move()
        HistoryEntry(x=1, y=1, push=True)
        >>> board.has_won()
        False
    """

    def __init__(self, level_text: str):
        """
        Build the board from level text.

        Args:
            level_text: Rows of cell characters separated by newlines.
                Unknown characters are stored as empty floor.
        """
        self._history: Deque[HistoryEntry] = deque()
        self._listeners: List[BoardListener] = []
        self._player_pos: Optional[Tuple[int, int]] = None
        self._grid = self._parse(level_text)

    @classmethod
    def default(cls) -> "Board":
        """Build the built-in default level."""
        return cls(DEFAULT_LEVEL)

    def _parse(self, level_text: str) -> np.ndarray:
        rows = level_text.split("\n")
        if rows[-1] == "":
            # A trailing newline terminates the last row, it does not start one
            rows.pop()
        rows = [row[:-1] if row.endswith("\r") else row for row in rows]

        y_lim = len(rows)
        x_lim = max((len(row) for row in rows), default=0)
        grid = np.full((x_lim, y_lim), Cell.EMPTY.value, dtype="<U1")

        players: List[Tuple[int, int]] = []
        unknown = 0
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                cell = to_cell(char)
                if cell is Cell.EMPTY and char != Cell.EMPTY.value:
                    unknown += 1
                if cell in (Cell.PLAYER, Cell.GOAL_PLAYER):
                    players.append((x, y))
                grid[x, y] = cell.value

        if unknown:
            logger.warning(f"Level text has {unknown} unknown characters, stored as empty floor.")
        if not players:
            logger.warning("Level text has no player.")
        elif len(players) > 1:
            logger.warning(f"Level text has {len(players)} players, using the last one at {players[-1]}.")
        if players:
            self._player_pos = players[-1]

        logger.debug(f"Board built with x_lim={x_lim}, y_lim={y_lim}, player at {self._player_pos}")
        return grid

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def x_lim(self) -> int:
        """Number of columns (length of the longest row)."""
        return self._grid.shape[0]

    @property
    def y_lim(self) -> int:
        """Number of rows."""
        return self._grid.shape[1]

    @property
    def player_position(self) -> Optional[Tuple[int, int]]:
        """Current (x, y) of the player, None if the level had no player."""
        return self._player_pos

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        """Recorded actions, most recent first."""
        return tuple(self._history)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies inside the grid."""
        return 0 <= x < self.x_lim and 0 <= y < self.y_lim

    def get(self, x: int, y: int) -> Cell:
        """
        Return the cell at (x, y).

        Raises:
            IndexError: If (x, y) lies outside the grid
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the {self.x_lim}x{self.y_lim} board")
        return Cell(str(self._grid[x, y]))

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        x, y = position
        return self.get(x, y)

    def move_number(self) -> int:
        """Number of recorded actions since the board was built."""
        return len(self._history)

    def pushes_count(self) -> int:
        """Number of recorded pushes."""
        return sum(1 for entry in self._history if entry.push)

    def count_boxes(self) -> int:
        """Count boxes, on goals or not."""
        return int(np.count_nonzero(np.isin(self._grid, [Cell.BOX.value, Cell.GOAL_BOX.value])))

    def boxes_on_goals(self) -> int:
        """Count boxes sitting on goals."""
        return int(np.count_nonzero(self._grid == Cell.GOAL_BOX.value))

    def has_won(self) -> bool:
        """Return True if no box is left off a goal."""
        return not bool(np.any(self._grid == Cell.BOX.value))

    def rows(self) -> List[str]:
        """Level-text rows of the current grid, trailing floor stripped."""
        return ["".join(self._grid[:, y]).rstrip() for y in range(self.y_lim)]

    def render(self) -> str:
        """Render the current grid as level text."""
        return "".join(row + "\n" for row in self.rows())

    def observation(self) -> BoardObservation:
        """Create an observation from the current board state."""
        return BoardObservation(
            rows=self.rows(),
            board_shape=[self.y_lim, self.x_lim],
            player_position=list(self._player_pos) if self._player_pos else [],
            num_boxes=self.count_boxes(),
            boxes_on_goals=self.boxes_on_goals(),
            moves_count=self.move_number(),
            pushes_count=self.pushes_count(),
            is_solved=self.has_won(),
        )

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: BoardListener) -> None:
        """Register a callable that receives a BoardEvent after every change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: BoardListener) -> None:
        """Remove a previously registered listener."""
        self._listeners.remove(listener)

    def _notify(self, event: BoardEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def _require_player(self) -> Tuple[int, int]:
        """Return the player position, failing if the level had no player."""
        if self._player_pos is None:
            raise RuntimeError("Board has no player to move.")
        return self._player_pos

    def _cell_or_wall(self, x: int, y: int) -> str:
        """Grid character at (x, y), walls beyond the edges."""
        if not self.in_bounds(x, y):
            return Cell.WALL.value
        return str(self._grid[x, y])

    def _move_from_to(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """
        Move the occupant of (x0, y0) to (x1, y1), overwriting the destination.

        Both squares keep their goal or non-goal nature: the moved symbol is
        switched to the destination's family if needed and the source becomes
        empty floor of its own family.
        """
        source = str(self._grid[x0, y0])
        if is_goal(str(self._grid[x1, y1])) == is_goal(source):
            self._grid[x1, y1] = source
        else:
            self._grid[x1, y1] = switch_goal(source).value

        if is_goal(source):
            self._grid[x0, y0] = Cell.GOAL_EMPTY.value
        else:
            self._grid[x0, y0] = Cell.EMPTY.value

    def move(self, dx: int, dy: int) -> MoveResult:
        """
        Move the player one step, pushing a box if there is one.

        Args:
            dx: Column offset
            dy: Row offset

        Returns:
            MoveResult.MOVED, MoveResult.PUSHED or MoveResult.BLOCKED

        Raises:
            ValueError: If (dx, dy) is not one of the four unit steps
            RuntimeError: If the board has no player
        """
        if abs(dx) + abs(dy) != 1:
            raise ValueError(f"Move offset must be a single orthogonal step, got ({dx}, {dy})")
        pl_x, pl_y = self._require_player()
        x, y = pl_x + dx, pl_y + dy

        target = self._cell_or_wall(x, y)
        if is_empty(target):
            self._move_from_to(pl_x, pl_y, x, y)
            entry = HistoryEntry(pl_x, pl_y, push=False)
            result = MoveResult.MOVED
        elif is_pushable(target) and is_empty(self._cell_or_wall(x + dx, y + dy)):
            # Box first, so the player's square is still intact as a source
            self._move_from_to(x, y, x + dx, y + dy)
            self._move_from_to(pl_x, pl_y, x, y)
            entry = HistoryEntry(pl_x, pl_y, push=True)
            result = MoveResult.PUSHED
        else:
            logger.debug(f"Move ({dx}, {dy}) from ({pl_x}, {pl_y}) blocked by {target!r}")
            return MoveResult.BLOCKED

        self._history.appendleft(entry)
        self._player_pos = (x, y)
        logger.debug(f"Move {self.move_number()}: ({pl_x}, {pl_y}) -> ({x}, {y}), result={result.value}")
        self._notify(BoardEvent("push" if entry.push else "move", entry, (x, y)))
        return result

    def move_player(self, dx: int, dy: int) -> bool:
        """Move the player one step and return True if a box was pushed."""
        return self.move(dx, dy) is MoveResult.PUSHED

    def move_direction(self, direction: Direction) -> MoveResult:
        """Move the player one step in the given direction."""
        return self.move(direction.dx, direction.dy)

    def undo_move(self) -> Optional[HistoryEntry]:
        """
        Undo the most recent action.

        Returns:
            The history entry that was undone, or None if the history is empty
        """
        if not self._history:
            logger.debug("Undo requested with empty history.")
            return None

        pl_x, pl_y = self._require_player()
        entry = self._history.popleft()
        self._move_from_to(pl_x, pl_y, entry.x, entry.y)
        if entry.push:
            # The box sits one step beyond the player, away from its old square
            box_x = pl_x + (pl_x - entry.x)
            box_y = pl_y + (pl_y - entry.y)
            self._move_from_to(box_x, box_y, pl_x, pl_y)

        self._player_pos = (entry.x, entry.y)
        logger.debug(f"Undo: ({pl_x}, {pl_y}) -> ({entry.x}, {entry.y}), push={entry.push}")
        self._notify(BoardEvent("undo", entry, self._player_pos))
        return entry

    def __repr__(self) -> str:
        return f"Board(x_lim={self.x_lim}, y_lim={self.y_lim}, player={self._player_pos}, moves={self.move_number()})"
