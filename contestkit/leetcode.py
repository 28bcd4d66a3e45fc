"""Index-pair search for two numbers that add up to a target."""

from collections.abc import Iterable


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Return ``[later, earlier]`` indices of two numbers summing to ``target``.

    The scan stops at the first index whose complement has already been seen.
    When a value occurs more than once, its first index is the one remembered.
    An empty list means no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        partner = target - num
        if partner in seen:
            return [index, seen[partner]]
        seen.setdefault(num, index)
    return []