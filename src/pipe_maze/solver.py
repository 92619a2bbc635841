#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Pipe Maze - Main Solver Harness"""

import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from .core.types import Loop, PipeKind
from .core.grid import PipeGrid, parse_grid
from .core.loop import resolve_loop
from .core.fill import count_enclosed
from .core.receipts import LoopInvariants, verify_loop
from .utils import build_receipt, log_receipt

@dataclass
class MazeInstance:
    """A named maze."""
    name: str
    text: str

@dataclass
class SolveResult:
    """Answers for one maze plus the facts they rest on."""
    name: str
    start_kind: PipeKind
    loop: Loop
    farthest: int
    enclosed: int
    invariants: LoopInvariants
    timing_ms: Dict[str, float] = field(default_factory=dict)

def _ms(t0: float) -> float:
    return round((time.perf_counter() - t0) * 1000.0, 3)

def solve_grid(grid: PipeGrid, name: str = "maze") -> SolveResult:
    """
    Resolve the loop of a parsed grid and count the cells it encloses.

    The grid's start cell is fixed to the resolved shape.
    """
    timing = {}

    t0 = time.perf_counter()
    res = resolve_loop(grid)
    inv = verify_loop(grid, res.path)
    timing["resolve"] = _ms(t0)

    t0 = time.perf_counter()
    enclosed = count_enclosed(grid, res.path)
    timing["fill"] = _ms(t0)

    return SolveResult(name, res.start_kind, res.path, res.farthest, enclosed, inv, timing)

def solve(text: str, name: str = "maze", out_dir: Optional[str] = None,
          verbose: bool = False) -> SolveResult:
    """
    Solve a maze: loop half-length and enclosed cell count.

    Args:
        text: Maze text
        name: Identifier used in receipts and progress output
        out_dir: If given, append a receipt to out_dir/receipts.jsonl
        verbose: Print a one-line summary

    Returns:
        SolveResult

    Raises:
        MalformedInput, UnresolvableLoop, BoundaryViolation
    """
    grid = parse_grid(text)
    result = solve_grid(grid, name)

    if out_dir is not None:
        log_receipt(build_receipt(name, text, grid, result), out_dir=out_dir)

    if verbose:
        print(f"[{name}] {grid.width}x{grid.height} start={grid.start} "
              f"shape={result.start_kind.name} loop={len(result.loop)} "
              f"farthest={result.farthest} enclosed={result.enclosed}")

    return result

def solve_instance(inst: MazeInstance, out_dir: Optional[str] = None,
                   verbose: bool = False) -> SolveResult:
    return solve(inst.text, inst.name, out_dir=out_dir, verbose=verbose)

# =============================================================================
# Single-answer queries
# =============================================================================

def farthest_distance(text: str) -> int:
    """Steps from the start to the farthest point on the loop."""
    grid = parse_grid(text)
    return resolve_loop(grid).farthest

def enclosed_count(text: str) -> int:
    """Number of cells strictly inside the loop."""
    grid = parse_grid(text)
    res = resolve_loop(grid)
    return count_enclosed(grid, res.path)

def part1(text: str) -> str:
    return str(farthest_distance(text))

def part2(text: str) -> str:
    return str(enclosed_count(text))
