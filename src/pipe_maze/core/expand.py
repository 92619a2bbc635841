#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pipe Maze - Area Expander
=========================

Every coarse cell becomes a 3x3 block of fine cells. Loop cells are stamped
with the pipe's physical shape; everything else is open. At this resolution
two pipes that merely touch leave a one-cell gap between them, so a flood
fill can squeeze through where a coarse fill would stop.
"""

import numpy as np
from typing import Dict

from .types import FineGrid, Loop, PipeKind, Tile, assert_fine
from .grid import PipeGrid

SCALE = 3


def _bitmap(*rows: str) -> np.ndarray:
    """Build a blocked-cell mask from '#'/'.' rows."""
    return np.array([[ch == '#' for ch in row] for row in rows], dtype=bool)


# Blocked fine cells per pipe shape (row-major, '#' = pipe material)
STAMPS: Dict[PipeKind, np.ndarray] = {
    PipeKind.HORIZONTAL: _bitmap("...",
                                 "###",
                                 "..."),
    PipeKind.VERTICAL:   _bitmap(".#.",
                                 ".#.",
                                 ".#."),
    PipeKind.NORTH_EAST: _bitmap(".#.",
                                 ".##",
                                 "..."),
    PipeKind.SOUTH_EAST: _bitmap("...",
                                 ".##",
                                 ".#."),
    PipeKind.SOUTH_WEST: _bitmap("...",
                                 "##.",
                                 ".#."),
    PipeKind.NORTH_WEST: _bitmap(".#.",
                                 "##.",
                                 "..."),
}

for _stamp in STAMPS.values():
    _stamp.setflags(write=False)


def stamp_for(kind: PipeKind) -> np.ndarray:
    """3x3 blocked mask for a pipe kind (GROUND is fully open)."""
    if kind not in STAMPS:
        return np.zeros((SCALE, SCALE), dtype=bool)
    return STAMPS[kind].copy()


def expand_grid(grid: PipeGrid, loop: Loop) -> FineGrid:
    """
    Build the fine grid for a resolved maze.

    Args:
        grid: Maze with its start shape resolved
        loop: Loop path from resolve_loop

    Returns:
        (3H, 3W) int8 array of Tile codes; only loop cells are BLOCKED anywhere
    """
    fine = np.full((grid.height * SCALE, grid.width * SCALE), Tile.OPEN, dtype=np.int8)

    for x, y in loop:
        kind = grid.kind_at((x, y))
        assert kind in STAMPS, f"Loop cell {(x, y)} has no pipe ({kind.name})."
        block = fine[y * SCALE:(y + 1) * SCALE, x * SCALE:(x + 1) * SCALE]
        block[STAMPS[kind]] = Tile.BLOCKED

    assert_fine(fine, (grid.height * SCALE, grid.width * SCALE))
    return fine
