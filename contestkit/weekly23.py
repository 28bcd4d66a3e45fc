"""Solutions to the tasks of weekly beta contest 23."""

from collections.abc import Iterable, Sequence
from itertools import accumulate


def total_with_reward(values: Iterable[int], m: int, r: int) -> int:
    """Return the sum of ``values`` plus a reward of ``r`` for each of ``m`` items."""
    return sum(values) + r * m


def remaining_passengers(boarding: Sequence[int], leaving: Sequence[int]) -> int:
    """Return how many passengers remain after the last stop.

    ``boarding[i]`` passengers get on at stop ``i``; after every stop but the
    last, up to ``leaving[i]`` of those aboard get off.
    """
    if not boarding:
        raise ValueError("at least one stop is required")
    if len(leaving) != len(boarding) - 1:
        raise ValueError("leaving counts must cover every stop but the last")
    passengers = 0
    for on, off in zip(boarding, leaving):
        passengers += on
        passengers -= min(passengers, off)
    return passengers + boarding[-1]


def travel_times(
    durations: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Return the arrival time for each ``(start, left, right)`` query.

    The trip starts at time ``start`` and covers legs ``left`` to ``right``
    (1-based, inclusive).
    """
    prefix = [0, *accumulate(durations)]
    times: list[int] = []
    for start, left, right in queries:
        if not 1 <= left <= right <= len(durations):
            raise ValueError(f"bad leg range [{left}, {right}]")
        times.append(start + prefix[right] - prefix[left - 1])
    return times


def min_items_for_profit(
    items: Sequence[tuple[int, int, int]], capacity: int, target: int
) -> int:
    """Return the fewest items whose total profit reaches ``target``.

    Each item is ``(price, cost, weight)``; only items with positive profit
    that fit into ``capacity`` are considered, and each is used at most once.
    Returns -1 if no selection within ``capacity`` reaches ``target``.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    count = len(items)
    usable = [
        (weight, price - cost)
        for price, cost, weight in items
        if price - cost > 0 and weight <= capacity
    ]
    # best[k][w]: highest profit from exactly k items weighing exactly w
    best: list[list[int | None]] = [[None] * (capacity + 1) for _ in range(count + 1)]
    best[0][0] = 0
    for weight, profit in usable:
        for k in range(count, 0, -1):
            previous, current = best[k - 1], best[k]
            for total in range(weight, capacity + 1):
                base = previous[total - weight]
                if base is not None:
                    candidate = base + profit
                    if current[total] is None or candidate > current[total]:
                        current[total] = candidate
    for k, row in enumerate(best):
        if any(value is not None and value >= target for value in row):
            return k
    return -1