#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pipe Maze - Loop Receipts & Verification
========================================

Every resolved loop carries checkable facts:
- Simple: no coordinate repeats
- Adjacent: consecutive cells (and last -> start) are grid neighbours
- Connected: each cell's pipe opens towards both of its loop neighbours
- Even: a closed walk on a square grid has even length
"""

from dataclasses import dataclass
from typing import Dict

from .types import Coord, Direction, Loop, CONNECTIONS
from .grid import PipeGrid

# =============================================================================
# Invariants Dataclass
# =============================================================================

@dataclass
class LoopInvariants:
    """Checked properties of a resolved loop."""
    length: int
    simple: bool
    adjacent: bool
    connected: bool
    even: bool

    @property
    def ok(self) -> bool:
        return self.simple and self.adjacent and self.connected and self.even

    def as_dict(self) -> Dict:
        return {
            "length": self.length,
            "simple": self.simple,
            "adjacent": self.adjacent,
            "connected": self.connected,
            "even": self.even,
        }

# =============================================================================
# Checks
# =============================================================================

def _direction_between(a: Coord, b: Coord):
    """Direction of the single step a -> b, or None if not neighbours."""
    delta = (b[0] - a[0], b[1] - a[1])
    for d in Direction:
        if d.delta == delta:
            return d
    return None


def loop_invariants(grid: PipeGrid, loop: Loop) -> LoopInvariants:
    """
    Compute loop invariants against a resolved grid.

    Args:
        grid: Maze with its start shape resolved
        loop: Loop path (start first, closure implicit)

    Returns:
        LoopInvariants
    """
    n = len(loop)
    simple = len(set(loop)) == n
    adjacent = True
    connected = True

    for i, pos in enumerate(loop):
        prev_pos = loop[i - 1]
        next_pos = loop[(i + 1) % n]
        to_prev = _direction_between(pos, prev_pos)
        to_next = _direction_between(pos, next_pos)
        if to_prev is None or to_next is None:
            adjacent = False
            connected = False
            continue
        if CONNECTIONS[grid.kind_at(pos)] != {to_prev, to_next}:
            connected = False

    return LoopInvariants(
        length=n,
        simple=simple,
        adjacent=adjacent,
        connected=connected,
        even=(n % 2 == 0),
    )


def verify_loop(grid: PipeGrid, loop: Loop) -> LoopInvariants:
    """Compute invariants and assert they all hold."""
    inv = loop_invariants(grid, loop)
    assert inv.ok, f"Loop through {grid.start} violates invariants: {inv.as_dict()}"
    return inv
