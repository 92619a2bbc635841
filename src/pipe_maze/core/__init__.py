"""Pipe Maze - Core Pipeline"""

from .types import (
    PipeKind, Direction, Tile, Coord, Loop, KindGrid, FineGrid,
    CONNECTIONS, SYMBOLS, START_SYMBOL, exit_direction,
)
from .errors import MazeError, MalformedInput, UnresolvableLoop, BoundaryViolation
from .grid import PipeGrid, parse_grid
from .loop import (
    START_CANDIDATES,
    LoopResult,
    initial_direction,
    step,
    walk_from_start,
    resolve_loop,
)
from .expand import SCALE, STAMPS, stamp_for, expand_grid
from .fill import (
    EXTERIOR_ORIGIN,
    flood_fill,
    count_open_centers,
    count_enclosed,
    naive_enclosed_count,
)
from .receipts import LoopInvariants, loop_invariants, verify_loop

__all__ = [
    # Types
    'PipeKind', 'Direction', 'Tile', 'Coord', 'Loop', 'KindGrid', 'FineGrid',
    'CONNECTIONS', 'SYMBOLS', 'START_SYMBOL', 'exit_direction',
    # Errors
    'MazeError', 'MalformedInput', 'UnresolvableLoop', 'BoundaryViolation',
    # Grid
    'PipeGrid', 'parse_grid',
    # Loop
    'START_CANDIDATES', 'LoopResult', 'initial_direction', 'step',
    'walk_from_start', 'resolve_loop',
    # Expansion
    'SCALE', 'STAMPS', 'stamp_for', 'expand_grid',
    # Fill
    'EXTERIOR_ORIGIN', 'flood_fill', 'count_open_centers', 'count_enclosed',
    'naive_enclosed_count',
    # Receipts
    'LoopInvariants', 'loop_invariants', 'verify_loop',
]
