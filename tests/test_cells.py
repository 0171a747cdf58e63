"""Tests for the cell classification helpers and small models."""

import unittest

from sokoban_board.engine.cells import is_empty, is_goal, is_pushable, switch_goal, to_cell
from sokoban_board.models import Cell, Direction


class TestClassification(unittest.TestCase):
    """Test the goal/empty/pushable predicates."""

    def test_is_goal(self):
        for cell in (Cell.GOAL_EMPTY, Cell.GOAL_BOX, Cell.GOAL_PLAYER):
            with self.subTest(cell=cell):
                self.assertTrue(is_goal(cell))
        for cell in (Cell.EMPTY, Cell.BOX, Cell.PLAYER, Cell.WALL):
            with self.subTest(cell=cell):
                self.assertFalse(is_goal(cell))

    def test_is_empty(self):
        self.assertTrue(is_empty(Cell.EMPTY))
        self.assertTrue(is_empty(Cell.GOAL_EMPTY))
        for cell in (Cell.WALL, Cell.BOX, Cell.GOAL_BOX, Cell.PLAYER, Cell.GOAL_PLAYER):
            with self.subTest(cell=cell):
                self.assertFalse(is_empty(cell))

    def test_is_pushable(self):
        self.assertTrue(is_pushable(Cell.BOX))
        self.assertTrue(is_pushable(Cell.GOAL_BOX))
        self.assertFalse(is_pushable(Cell.WALL))
        self.assertFalse(is_pushable(Cell.GOAL_EMPTY))

    def test_accepts_characters(self):
        self.assertTrue(is_goal("."))
        self.assertTrue(is_empty(" "))
        self.assertTrue(is_pushable("*"))
        self.assertFalse(is_goal("#"))


class TestSwitchGoal(unittest.TestCase):
    """Test switching a cell across the goal divide."""

    def test_pairs(self):
        pairs = [
            (Cell.PLAYER, Cell.GOAL_PLAYER),
            (Cell.BOX, Cell.GOAL_BOX),
            (Cell.EMPTY, Cell.GOAL_EMPTY),
        ]
        for plain, goal in pairs:
            with self.subTest(cell=plain):
                self.assertIs(switch_goal(plain), goal)
                self.assertIs(switch_goal(goal), plain)

    def test_wall_and_unknown_become_empty(self):
        self.assertIs(switch_goal(Cell.WALL), Cell.EMPTY)
        self.assertIs(switch_goal("x"), Cell.EMPTY)

    def test_unknown_characters_are_not_switched(self):
        for char in ["x", "?", "\t", "#"]:
            with self.subTest(char=char):
                self.assertIs(switch_goal(char), Cell.EMPTY)

    def test_character_input(self):
        self.assertIs(switch_goal("@"), Cell.GOAL_PLAYER)
        self.assertIs(switch_goal("+"), Cell.PLAYER)
        self.assertIs(switch_goal(" "), Cell.GOAL_EMPTY)
        self.assertIs(switch_goal("."), Cell.EMPTY)

    def test_to_cell_unknown(self):
        self.assertIs(to_cell("?"), Cell.EMPTY)
        self.assertIs(to_cell("$"), Cell.BOX)


class TestDirection(unittest.TestCase):

    def test_offsets(self):
        self.assertEqual((Direction.UP.dx, Direction.UP.dy), (0, -1))
        self.assertEqual((Direction.DOWN.dx, Direction.DOWN.dy), (0, 1))
        self.assertEqual((Direction.LEFT.dx, Direction.LEFT.dy), (-1, 0))
        self.assertEqual((Direction.RIGHT.dx, Direction.RIGHT.dy), (1, 0))

    def test_from_name(self):
        self.assertIs(Direction.from_name("up"), Direction.UP)
        self.assertIs(Direction.from_name("Right"), Direction.RIGHT)
        with self.assertRaises(ValueError):
            Direction.from_name("north")


if __name__ == "__main__":
    unittest.main(verbosity=2)
