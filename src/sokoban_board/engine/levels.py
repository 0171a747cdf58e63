# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Built-in levels and levelset splitting.

Level text format:
  # = wall, ' ' = floor, . = goal, $ = box, @ = player,
  * = box on goal, + = player on goal
"""

import logging
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = (
    "############\n"
    "# @     ..#\n"
    "#    $$ ..#\n"
    "##### $####\n"
    "    # $   #\n"
    "    #     #\n"
    "    #######\n"
)

# Used when a levelset contains no level at all
FALLBACK_LEVEL = " @ $.\n"


def parse_levelset(text: str) -> List[str]:
    """
    Split a plain-text level pack into individual level strings.

    A level starts at the first line containing a wall and runs over the
    consecutive lines that contain one. Titles, comments and blank lines
    between levels are skipped.

    Args:
        text: Contents of a levelset file

    Returns:
        List of level strings, each row terminated by a newline
    """
    levels: List[str] = []
    current: List[str] = []

    for line in text.splitlines():
        if "#" in line:
            current.append(line + "\n")
        elif current:
            levels.append("".join(current))
            current = []

    if current:
        levels.append("".join(current))

    if not levels:
        logger.warning("Levelset contains no levels, using fallback level.")
        return [FALLBACK_LEVEL]

    logger.info(f"Parsed levelset with {len(levels)} levels.")
    return levels
