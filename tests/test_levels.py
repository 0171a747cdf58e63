"""Tests for levelset splitting."""

import unittest

from sokoban_board.engine.board import Board
from sokoban_board.engine.levels import FALLBACK_LEVEL, parse_levelset

LEVELSET = """\
Microban sample

; 1
####
#@$.#
####

; 2
#####
#.$@#
#####"""


class TestParseLevelset(unittest.TestCase):

    def test_splits_levels(self):
        levels = parse_levelset(LEVELSET)
        self.assertEqual(levels, [
            "####\n#@$.#\n####\n",
            "#####\n#.$@#\n#####\n",
        ])

    def test_levels_build_boards(self):
        for text in parse_levelset(LEVELSET):
            with self.subTest(level=text):
                board = Board(text)
                self.assertIsNotNone(board.player_position)
                self.assertEqual(board.count_boxes(), 1)

    def test_adjacent_levels_need_a_separator(self):
        levels = parse_levelset("###\n#@#\n###\n\n\n###\n#@#\n###\n")
        self.assertEqual(len(levels), 2)

    def test_no_levels_falls_back(self):
        for text in ["", "just a title\n\n; and a comment\n"]:
            with self.subTest(text=text):
                with self.assertLogs("sokoban_board.engine.levels", level="WARNING"):
                    self.assertEqual(parse_levelset(text), [FALLBACK_LEVEL])


if __name__ == "__main__":
    unittest.main(verbosity=2)
