"""Solutions to the tasks of weekly beta contest 25."""

import math
from collections.abc import Iterable, Sequence

_MOVES = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}


def count_below(scores: Iterable[int], x: int) -> int:
    """Count scores strictly below ``x``."""
    return sum(1 for score in scores if score < x)


def remaining_parcels(grid: Sequence[str], moves: str) -> int:
    """Return how many ``#`` parcels remain after walking ``moves`` from the top left.

    Moves are ``U``, ``D``, ``L`` and ``R``; a move that would leave the grid
    is ignored, as is any other character. Every visited cell is cleared,
    including the starting one.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    height, width = len(grid), len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same width")
    parcels = {
        (r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == "#"
    }
    row, col = 0, 0
    parcels.discard((row, col))
    for move in moves:
        dr, dc = _MOVES.get(move, (0, 0))
        row = min(max(row + dr, 0), height - 1)
        col = min(max(col + dc, 0), width - 1)
        parcels.discard((row, col))
    return len(parcels)


def largest_after_removal(distances: Iterable[int], m: int) -> int:
    """Return the largest distance left after removing the ``m`` largest; 0 if none."""
    if m < 0:
        raise ValueError("m must not be negative")
    ordered = sorted(distances, reverse=True)
    return ordered[m] if m < len(ordered) else 0


def telescope_after(positions: Sequence[int], start: int, steps: int) -> int:
    """Return the 1-based telescope reached after ``steps`` hops from ``start``.

    Each hop goes to the telescope nearest in position among the neighbours
    in position order; a tie goes to the smaller telescope number.
    """
    count = len(positions)
    if not 1 <= start <= count:
        raise ValueError(f"start {start} is out of range 1..{count}")
    if steps < 0:
        raise ValueError("steps must not be negative")
    order = sorted(range(count), key=lambda i: -positions[i])
    following = list(range(count))
    for rank, tid in enumerate(order):
        left = order[rank - 1] if rank > 0 else None
        right = order[rank + 1] if rank + 1 < count else None
        left_gap = abs(positions[left] - positions[tid]) if left is not None else math.inf
        right_gap = abs(positions[right] - positions[tid]) if right is not None else math.inf
        if left is None and right is None:
            continue
        if left_gap < right_gap:
            following[tid] = left
        elif left_gap == right_gap:
            following[tid] = min(left, right)
        else:
            following[tid] = right

    seen: dict[int, int] = {}
    path: list[int] = []
    node = start - 1
    taken = 0
    while taken != steps:
        if node in seen:
            loop_start = seen[node]
            period = taken - loop_start
            return path[loop_start + (steps - loop_start) % period] + 1
        seen[node] = taken
        path.append(node)
        node = following[node]
        taken += 1
    return node + 1