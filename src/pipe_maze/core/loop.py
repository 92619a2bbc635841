#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pipe Maze - Loop Resolver
=========================

The start cell's shape is unknown at parse time. Each of the six real shapes
is tried in turn: the walk leaves the start in a direction the shape allows
and follows the pipes until it either returns to the start (accepted) or
falls off the grid / hits a pipe that does not accept it (rejected).
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .types import Coord, Direction, Loop, PipeKind, CONNECTIONS, exit_direction
from .grid import PipeGrid
from .errors import UnresolvableLoop

# Tried in this order; the first shape that closes wins
START_CANDIDATES: Tuple[PipeKind, ...] = (
    PipeKind.VERTICAL,
    PipeKind.HORIZONTAL,
    PipeKind.NORTH_EAST,
    PipeKind.SOUTH_EAST,
    PipeKind.SOUTH_WEST,
    PipeKind.NORTH_WEST,
)

# Walks are abandoned after width*height*factor steps
DEFAULT_MAX_STEPS_FACTOR = 1

# =============================================================================
# Result
# =============================================================================

@dataclass
class LoopResult:
    """Resolved start shape and the loop path (start first, closure implicit)."""
    start_kind: PipeKind
    path: Loop

    @property
    def length(self) -> int:
        return len(self.path)

    @property
    def farthest(self) -> int:
        """Steps from start to the farthest point of the loop."""
        return self.length // 2

# =============================================================================
# Walking
# =============================================================================

def initial_direction(kind: PipeKind) -> Direction:
    """First heading out of the start cell for a candidate shape."""
    ends = CONNECTIONS[kind]
    if Direction.N in ends:
        return Direction.N
    if Direction.S in ends:
        return Direction.S
    return Direction.E


def step(grid: PipeGrid, pos: Coord, heading: Direction,
         start_kind: PipeKind) -> Optional[Tuple[Coord, Direction]]:
    """
    Move one cell from pos in direction heading.

    The start cell is read as start_kind so candidates can be tried without
    touching the grid.

    Returns:
        (next_pos, next_heading), or None if the move leaves the grid or the
        target pipe does not accept it
    """
    dx, dy = heading.delta
    nxt = (pos[0] + dx, pos[1] + dy)
    if not grid.in_bounds(nxt):
        return None
    kind = start_kind if nxt == grid.start else grid.kind_at(nxt)
    out = exit_direction(kind, heading)
    if out is None:
        return None
    return nxt, out


def walk_from_start(grid: PipeGrid, start_kind: PipeKind,
                    max_steps: Optional[int] = None) -> Optional[Loop]:
    """
    Walk the pipes from the start cell assuming it has shape start_kind.

    Returns:
        Loop path beginning at the start, or None if the walk does not close
    """
    if max_steps is None:
        max_steps = grid.width * grid.height * DEFAULT_MAX_STEPS_FACTOR

    pos = grid.start
    heading = initial_direction(start_kind)
    path: List[Coord] = [pos]

    for _ in range(max_steps):
        nxt = step(grid, pos, heading, start_kind)
        if nxt is None:
            return None
        pos, heading = nxt
        if pos == grid.start:
            return tuple(path)
        path.append(pos)

    return None


def resolve_loop(grid: PipeGrid,
                 candidates: Tuple[PipeKind, ...] = START_CANDIDATES,
                 max_steps: Optional[int] = None) -> LoopResult:
    """
    Find the start shape that closes the loop and record the loop path.

    Writes the accepted shape into the grid's start cell.

    Args:
        grid: Parsed maze (start may already be resolved)
        candidates: Shapes to try, in order
        max_steps: Safety bound on walk length (default: cell count)

    Returns:
        LoopResult

    Raises:
        UnresolvableLoop: no candidate closes a cycle through the start
    """
    for kind in candidates:
        path = walk_from_start(grid, kind, max_steps=max_steps)
        if path is not None:
            grid.set_start_kind(kind)
            return LoopResult(kind, path)

    raise UnresolvableLoop(
        f"No start shape closes a loop through {grid.start} "
        f"(tried {[k.name for k in candidates]})"
    )
