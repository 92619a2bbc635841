"""
Pipe Maze Solver

Resolves the single pipe loop through the start marker of a character maze
and counts the cells it encloses, using a 3x fine grid and an exterior flood
fill.
"""

from .core import (
    PipeKind, Direction, Tile, Coord, Loop,
    MazeError, MalformedInput, UnresolvableLoop, BoundaryViolation,
    PipeGrid, parse_grid,
    START_CANDIDATES, LoopResult, resolve_loop,
    SCALE, STAMPS, expand_grid,
    flood_fill, count_open_centers, count_enclosed, naive_enclosed_count,
    LoopInvariants, loop_invariants, verify_loop,
)
from .utils import grid_sha, loop_sha, build_receipt, log_receipt
from .solver import (
    MazeInstance, SolveResult,
    solve, solve_grid, solve_instance,
    farthest_distance, enclosed_count,
    part1, part2,
)

__all__ = [
    # Types
    'PipeKind', 'Direction', 'Tile', 'Coord', 'Loop',

    # Errors
    'MazeError', 'MalformedInput', 'UnresolvableLoop', 'BoundaryViolation',

    # Pipeline
    'PipeGrid', 'parse_grid',
    'START_CANDIDATES', 'LoopResult', 'resolve_loop',
    'SCALE', 'STAMPS', 'expand_grid',
    'flood_fill', 'count_open_centers', 'count_enclosed', 'naive_enclosed_count',
    'LoopInvariants', 'loop_invariants', 'verify_loop',

    # Utils
    'grid_sha', 'loop_sha', 'build_receipt', 'log_receipt',

    # Solver
    'MazeInstance', 'SolveResult',
    'solve', 'solve_grid', 'solve_instance',
    'farthest_distance', 'enclosed_count',
    'part1', 'part2',
]
