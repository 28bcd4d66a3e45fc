"""Solutions to the tasks of weekly beta contest 24."""

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


def _check_index(index: int, size: int) -> None:
    if not 1 <= index <= size:
        raise ValueError(f"index {index} is out of range 1..{size}")


def compare_strengths(
    strengths: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[bool]:
    """For each 1-based pair ``(a, b)``, tell whether ``a`` is strictly stronger."""
    answers: list[bool] = []
    for a, b in queries:
        _check_index(a, len(strengths))
        _check_index(b, len(strengths))
        answers.append(strengths[a - 1] > strengths[b - 1])
    return answers


def count_rumor_spread(n: int, k: int, meetings: Iterable[tuple[int, int]]) -> int:
    """Return how many of ``n`` people know the rumor after the meetings.

    People ``1..k`` know it at the start; a meeting between someone who knows
    and someone who does not passes it on.
    """
    knows = [i < k for i in range(n)]
    total = min(k, n) if k > 0 else 0
    for a, b in meetings:
        _check_index(a, n)
        _check_index(b, n)
        if knows[a - 1] != knows[b - 1]:
            knows[a - 1] = knows[b - 1] = True
            total += 1
    return total


def unique_letters(grid: Sequence[str]) -> str:
    """Return, in reading order, the letters unique in both their row and column."""
    if not grid:
        return ""
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same width")
    row_counts = [Counter(row) for row in grid]
    column_counts = [Counter(column) for column in zip(*grid)]
    return "".join(
        letter
        for row, counts in zip(grid, row_counts)
        for letter, column in zip(row, column_counts)
        if counts[letter] == 1 and column[letter] == 1
    )


def coverage_counts(n: int, w: int, starts: Iterable[int]) -> list[int]:
    """Return, for each of ``n`` cells, how many windows of width ``w`` cover it.

    Each window begins at a 1-based start and must lie within the cells.
    """
    signals = [0] * (n + 1)
    for start in starts:
        left = start - 1
        right = left + w
        if left < 0 or w < 1 or right > n:
            raise ValueError(f"window starting at {start} does not fit")
        signals[left] += 1
        signals[right] -= 1
    return list(accumulate(signals[:n]))