"""Solutions to the tasks of weekly beta contest 22."""

from collections.abc import Iterable, Sequence
from itertools import accumulate


def count_survivors(values: Iterable[int], d: int, k: int) -> int:
    """Count values still at least 1 after losing ``d * k``."""
    loss = d * k
    return sum(1 for x in values if x - loss >= 1)


def remedial_hours(scores: Iterable[int], m: int, t: int) -> int:
    """Assign make-up hours so every score reaches ``t`` from a budget of ``m``.

    Each student below ``t`` needs ``t - score`` hours. When the remaining
    budget cannot cover a student the running total becomes -1; students
    after that are still processed and keep adding to the total.
    """
    total = 0
    for score in scores:
        if score >= t:
            continue
        needed = t - score
        if m >= needed:
            m -= needed
            total += needed
        else:
            total = -1
    return total


def shock_queries(
    n: int,
    broken: Iterable[int],
    queries: Iterable[tuple[int, int]],
    t: int,
) -> list[bool]:
    """Answer whether each 1-based span ``[left, right]`` of a road of length
    ``n`` holds at least ``t`` broken spots."""
    road = [0] * (n + 1)
    for location in broken:
        if not 1 <= location <= n:
            raise ValueError(f"location {location} is off the road")
        road[location] = 1
    prefix = list(accumulate(road))
    answers: list[bool] = []
    for left, right in queries:
        if not 1 <= left <= right <= n:
            raise ValueError(f"bad span [{left}, {right}]")
        answers.append(prefix[right] - prefix[left - 1] >= t)
    return answers


def min_bulb_flips(bulbs: Sequence[int], k: int) -> int:
    """Return the fewest flips of ``k`` consecutive bulbs that clear every 1.

    Bulbs are scanned from the left and a window is flipped whenever its first
    bulb is 1. Returns -1 if a 1 remains.
    """
    state = list(bulbs)
    if not 1 <= k <= len(state):
        raise ValueError("window size must be between 1 and the bulb count")
    flips = 0
    for start in range(len(state) - k + 1):
        if state[start] == 1:
            flips += 1
            for j in range(start, start + k):
                state[j] = int(not state[j])
    if any(b == 1 for b in state[len(state) - k :]):
        return -1
    return flips