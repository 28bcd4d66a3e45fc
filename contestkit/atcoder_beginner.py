"""Solutions to a set of introductory AtCoder Beginner Contest tasks."""

from collections.abc import Iterable

_PARITY_NAMES = ("Even", "Odd")


def count_marbles(s: str) -> int:
    """Count the squares marked ``1`` among the first three characters."""
    return s[:3].count("1")


def _twos(value: int) -> int:
    return (value & -value).bit_length() - 1


def shift_only(numbers: Iterable[int]) -> int:
    """Return how many times every number can be halved together."""
    values = list(numbers)
    if not values:
        raise ValueError("at least one number is required")
    if any(v == 0 for v in values):
        raise ValueError("zero can be halved forever")
    return min(_twos(v) for v in values)


def digit_sum(x: int) -> int:
    """Return the sum of decimal digits of ``x``; zero for non-positive ``x``."""
    total = 0
    while x > 0:
        x, digit = divmod(x, 10)
        total += digit
    return total


def some_sums(n: int, a: int, b: int) -> int:
    """Sum the integers 1..n whose digit sum lies in ``[a, b]``."""
    return sum(i for i in range(1, n + 1) if a <= digit_sum(i) <= b)


def kagami_mochi(diameters: Iterable[int]) -> int:
    """Return the number of distinct diameters, the tallest possible stack."""
    return len(set(diameters))


def product_parity(a: int, b: int) -> str:
    """Return ``"Even"`` or ``"Odd"`` for the product ``a * b``."""
    product = a * b
    return _PARITY_NAMES[product % 2]


def count_coin_ways(a: int, b: int, c: int, x: int) -> int:
    """Count ways to pay ``x`` with at most a 500s, b 100s and c 50s."""
    ways = 0
    for fives in range(a + 1):
        if fives * 500 > x:
            break
        for hundreds in range(b + 1):
            if hundreds * 100 > x:
                break
            rest = x - fives * 500 - hundreds * 100
            if rest >= 0 and rest % 50 == 0 and rest // 50 <= c:
                ways += 1
    return ways


def card_game_difference(cards: Iterable[int]) -> int:
    """Return Alice's minus Bob's score when both greedily take the largest card."""
    ordered = sorted(cards, reverse=True)
    return sum(ordered[0::2]) - sum(ordered[1::2])


def practice_sum(a: int, b: int, c: int, s: str) -> str:
    """Return the sum of three integers followed by the given word."""
    return f"{a + b + c} {s}"