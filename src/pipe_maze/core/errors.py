#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Pipe Maze - Error Taxonomy

Every error is fatal: the input violates the single-simple-loop contract.
"""


class MazeError(ValueError):
    """Base class for maze input errors."""


class MalformedInput(MazeError):
    """Empty grid, ragged rows, missing or duplicate start, unknown symbol."""


class UnresolvableLoop(MazeError):
    """No candidate start shape closes a cycle through the start cell."""


class BoundaryViolation(MazeError):
    """The flood-fill origin is not an open exterior cell."""
