#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pipe Maze - Grid Model
======================

Reads the character maze into a dense kind array plus the start coordinate.
The start cell holds GROUND until loop resolution fixes its true shape.
"""

from typing import List

from .types import (
    Coord, KindGrid, PipeKind,
    SYMBOLS, START_SYMBOL, KIND_SYMBOLS,
    empty_kinds, assert_kinds,
)
from .errors import MalformedInput

# =============================================================================
# Pipe Grid
# =============================================================================

class PipeGrid:
    """
    Rectangular maze of pipe kinds with one designated start cell.

    Implementation: H×W int8 array of PipeKind codes, indexed [y, x].
    """

    def __init__(self, kinds: KindGrid, start: Coord):
        assert_kinds(kinds)
        self.kinds = kinds
        self.height, self.width = kinds.shape
        self.start = start
        assert self.in_bounds(start), f"Start {start} outside {self.width}x{self.height} grid."

    @property
    def shape(self):
        return self.kinds.shape

    @property
    def start_kind(self) -> PipeKind:
        x, y = self.start
        return PipeKind(int(self.kinds[y, x]))

    def in_bounds(self, pos: Coord) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def kind_at(self, pos: Coord) -> PipeKind:
        """Pipe kind at (x, y). Caller checks bounds."""
        x, y = pos
        return PipeKind(int(self.kinds[y, x]))

    def set_start_kind(self, kind: PipeKind):
        """Fix the start cell's resolved shape."""
        x, y = self.start
        self.kinds[y, x] = kind

    def copy(self) -> 'PipeGrid':
        return PipeGrid(self.kinds.copy(), self.start)

    def to_text(self) -> str:
        """Render back to maze symbols, start shown as 'S'."""
        rows = []
        for y in range(self.height):
            row = [KIND_SYMBOLS[PipeKind(int(k))] for k in self.kinds[y]]
            if y == self.start[1]:
                row[self.start[0]] = START_SYMBOL
            rows.append(''.join(row))
        return '\n'.join(rows)

    def __repr__(self) -> str:
        return f"PipeGrid({self.width}x{self.height}, start={self.start})"

# =============================================================================
# Parsing
# =============================================================================

def _split_rows(text: str) -> List[str]:
    """Rows with trailing whitespace removed; blank rows at either end dropped."""
    rows = [line.rstrip() for line in text.splitlines()]
    while rows and not rows[0]:
        rows.pop(0)
    while rows and not rows[-1]:
        rows.pop()
    return rows


def parse_grid(text: str) -> PipeGrid:
    """
    Parse a maze into a PipeGrid.

    Args:
        text: One line per row, all rows the same length, symbols from
              | - L J 7 F . S

    Returns:
        PipeGrid with the start cell set to GROUND

    Raises:
        MalformedInput: empty input, ragged rows, missing/duplicate start,
                        unknown symbol
    """
    rows = _split_rows(text)
    if not rows:
        raise MalformedInput("Maze has no rows")

    width = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != width]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in maze\n"
            f"  Expected: {width} columns (from row 0)\n"
        )
        for row_idx, actual in mismatched:
            error_msg += f"    Row {row_idx}: {actual} columns - \"{rows[row_idx]}\"\n"
        raise MalformedInput(error_msg.rstrip())

    kinds = empty_kinds(len(rows), width)
    starts = []

    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == START_SYMBOL:
                starts.append((x, y))
            elif ch in SYMBOLS:
                kinds[y, x] = SYMBOLS[ch]
            else:
                raise MalformedInput(
                    f"Invalid maze symbol '{ch}' at row {y}, column {x}: \"{row}\""
                )

    if not starts:
        raise MalformedInput(f"No start marker '{START_SYMBOL}' in {width}x{len(rows)} maze")
    if len(starts) > 1:
        raise MalformedInput(f"Multiple start markers at {starts}")

    return PipeGrid(kinds, starts[0])
