#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pipe Maze - Type Definitions
============================

Core types used throughout the maze solver:
- PipeKind: pipe segment occupying a coarse cell
- Direction: compass heading used while walking the loop
- Tile: state of a fine (3x scaled) cell
- Coord / Loop: (x, y) positions and the ordered loop path
- KindGrid / FineGrid: dense numpy arrays indexed [y, x]
"""

import numpy as np
from enum import IntEnum
from typing import Dict, FrozenSet, Tuple

# =============================================================================
# Core Types
# =============================================================================

class PipeKind(IntEnum):
    """Pipe segment occupying one cell of the maze."""
    GROUND = 0
    HORIZONTAL = 1
    VERTICAL = 2
    NORTH_EAST = 3
    SOUTH_EAST = 4
    SOUTH_WEST = 5
    NORTH_WEST = 6


class Direction(IntEnum):
    """Compass heading. North is decreasing y."""
    N = 0
    E = 1
    S = 2
    W = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) offset of one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> 'Direction':
        return Direction((self + 2) % 4)


class Tile(IntEnum):
    """State of a fine cell."""
    OPEN = 0
    BLOCKED = 1
    FILLED = 2


Coord = Tuple[int, int]            # (x, y)
Loop = Tuple[Coord, ...]           # starts at Start, closure implicit
KindGrid = np.ndarray              # dtype=int8, shape (H, W), PipeKind codes
FineGrid = np.ndarray              # dtype=int8, shape (3H, 3W), Tile codes

_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
}

# =============================================================================
# Connection Tables
# =============================================================================

# Compass points each pipe opens towards
CONNECTIONS: Dict[PipeKind, FrozenSet[Direction]] = {
    PipeKind.GROUND: frozenset(),
    PipeKind.HORIZONTAL: frozenset({Direction.E, Direction.W}),
    PipeKind.VERTICAL: frozenset({Direction.N, Direction.S}),
    PipeKind.NORTH_EAST: frozenset({Direction.N, Direction.E}),
    PipeKind.SOUTH_EAST: frozenset({Direction.S, Direction.E}),
    PipeKind.SOUTH_WEST: frozenset({Direction.S, Direction.W}),
    PipeKind.NORTH_WEST: frozenset({Direction.N, Direction.W}),
}

SYMBOLS: Dict[str, PipeKind] = {
    '|': PipeKind.VERTICAL,
    '-': PipeKind.HORIZONTAL,
    'L': PipeKind.NORTH_EAST,
    'J': PipeKind.NORTH_WEST,
    '7': PipeKind.SOUTH_WEST,
    'F': PipeKind.SOUTH_EAST,
    '.': PipeKind.GROUND,
}

START_SYMBOL = 'S'

KIND_SYMBOLS: Dict[PipeKind, str] = {kind: sym for sym, kind in SYMBOLS.items()}


def exit_direction(kind: PipeKind, heading: Direction):
    """
    Direction of travel when leaving a pipe entered while moving `heading`.

    Entering northwards means arriving through the cell's south side, so the
    pipe must open towards heading.opposite. Returns None if it does not.
    """
    ends = CONNECTIONS[PipeKind(kind)]
    entry = heading.opposite
    if entry not in ends:
        return None
    (out,) = ends - {entry}
    return out

# =============================================================================
# Type Utilities
# =============================================================================

def empty_kinds(height: int, width: int) -> KindGrid:
    """All-ground kind grid."""
    return np.full((height, width), PipeKind.GROUND, dtype=np.int8)

def assert_kinds(g: KindGrid):
    """Validate that g is a proper kind grid."""
    assert isinstance(g, np.ndarray) and g.dtype == np.int8 and g.ndim == 2, \
        "Kind grid must be 2D int8 ndarray."

def assert_fine(f: FineGrid, shape: Tuple[int,int] = None):
    """Validate that f is a proper fine grid."""
    assert isinstance(f, np.ndarray) and f.dtype == np.int8 and f.ndim == 2, \
        "Fine grid must be 2D int8 ndarray."
    if shape is not None:
        assert f.shape == shape, f"Fine grid shape {f.shape} doesn't match expected {shape}."
