"""
Utility functions for Pipe Maze.
"""

import json
import hashlib
from typing import Dict
from pathlib import Path
from datetime import datetime

from .core.grid import PipeGrid
from .core.types import Loop


# ==============================================================================
# Hash functions for receipts
# ==============================================================================

def grid_sha(text: str) -> str:
    """
    Compute SHA-256 hash of a maze for identification.

    Rows are normalised (surrounding blank lines and trailing spaces dropped)
    so the same maze hashes the same regardless of line endings.

    Args:
        text: Maze text

    Returns:
        Hex string of SHA-256 hash
    """
    rows = [line.rstrip() for line in text.strip('\n').splitlines()]
    payload = {"rows": rows}
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()


def loop_sha(loop: Loop) -> str:
    """
    Compute SHA-256 hash of a loop path.

    Args:
        loop: Loop path as (x, y) tuples

    Returns:
        Hex string of SHA-256 hash
    """
    payload = [list(pos) for pos in loop]
    return hashlib.sha256(json.dumps(payload).encode()).hexdigest()


# ==============================================================================
# Receipt records
# ==============================================================================

def build_receipt(name: str, text: str, grid: PipeGrid, result) -> Dict:
    """
    Build a JSON-serialisable receipt for a solved maze.

    Args:
        name: Maze identifier
        text: Original maze text
        grid: Resolved grid
        result: SolveResult

    Returns:
        Receipt record
    """
    return {
        "maze": name,
        "size": {"width": grid.width, "height": grid.height},
        "start": list(grid.start),
        "start_kind": result.start_kind.name,
        "farthest": result.farthest,
        "enclosed": result.enclosed,
        "invariants": result.invariants.as_dict(),
        "timing_ms": result.timing_ms,
        "hashes": {
            "grid_sha": grid_sha(text),
            "loop_sha": loop_sha(result.loop),
        },
    }


def log_receipt(record: Dict, out_dir: str = None) -> None:
    """
    Write receipt record to JSONL file.

    Args:
        record: Dictionary with receipt data
        out_dir: Output directory (default: runs/YYYY-MM-DD)
    """
    if out_dir is None:
        date_str = datetime.now().strftime("%Y-%m-%d")
        out_dir = f"runs/{date_str}"

    Path(out_dir).mkdir(parents=True, exist_ok=True)
    receipt_path = Path(out_dir) / "receipts.jsonl"

    with open(receipt_path, "a") as f:
        f.write(json.dumps(record, sort_keys=True) + "\n")
