"""Solutions to a set of Codeforces problems."""

from collections.abc import Iterable, Sequence
from itertools import pairwise

_VERDICTS = ("No", "Yes")


def social_experiment(n: int) -> int:
    """Return the answer for a group of ``n`` people: 2 or 3 for those sizes, else ``n % 2``."""
    if n in (2, 3):
        return n
    return n % 2


def next_round(scores: Iterable[int], k: int) -> int:
    """Count contestants who advance, given scores in non-increasing order.

    Everyone with a positive score in the first ``k`` places advances. After
    place ``k``, a positive score advances if it is at least the score in
    place ``k``. When that score is not positive, the bar stays at zero.
    """
    bar = 0
    advancing = 0
    for place, score in enumerate(scores, start=1):
        if score <= 0:
            continue
        if place == k:
            bar = score
        if place <= k or score >= bar:
            advancing += 1
    return advancing


def skibidus_length(s: str) -> int:
    """Return the shortest length reachable: 1 if two neighbours match, else ``len(s)``."""
    if any(a == b for a, b in pairwise(s)):
        return 1
    return len(s)


def divisible_permutation(n: int) -> list[int]:
    """Return a permutation of ``1..n`` whose i-th neighbour gap (1-based) is ``i``.

    The sequence is built backwards from ``[..., 1, n]``, preferring the larger
    candidate when it is still free and below ``n``.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    tail = [n, 1]
    used: set[int] = set()
    for gap in range(n - 2, 0, -1):
        after = tail[-1]
        higher = after + gap
        value = higher if 0 < higher < n and higher not in used else after - gap
        used.add(value)
        tail.append(value)
    return tail[::-1]


def table_pairs(h: int, l: int, values: Iterable[int]) -> int:
    """Return how many cells of an ``h`` by ``l`` table can be named by pairs of values.

    Each pair needs one value that fits the shorter side and another that fits
    the longer side.
    """
    short, long_ = sorted((h, l))
    fits_short = fits_long = 0
    for x in values:
        if 1 <= x <= short:
            fits_short += 1
        if 1 <= x <= long_:
            fits_long += 1
    return min(fits_short, fits_long // 2)


def reverse_permutation(p: Sequence[int]) -> list[int]:
    """Return the lexicographically largest permutation reachable by one reversal."""
    n = len(p)
    if sorted(p) != list(range(1, n + 1)):
        raise ValueError("p must be a permutation of 1..n")
    left = next((i for i, value in enumerate(p) if value != n - i), None)
    if left is None:
        return list(p)
    right = p.index(n - left)
    return [*p[:left], *reversed(p[left : right + 1]), *p[right + 1 :]]


def deletion_sort(a: Sequence[int]) -> int:
    """Return ``len(a)`` if ``a`` is non-decreasing, otherwise 1."""
    if all(x <= y for x, y in pairwise(a)):
        return len(a)
    return 1


def tower_of_boxes(n: int, m: int, d: int) -> int:
    """Return how many towers ``n`` boxes of weight ``m`` need with durability ``d``."""
    if n < 0 or m < 0 or d < 0:
        raise ValueError("n, m and d must not be negative")
    total = n * m
    if total <= 0:
        return 0
    for i in range(n + 1):
        if i * m < d:
            if i == n - 1:
                return 1
            continue
        step = (i + 1) * m if i * m == d else i * m
        return -(-total // step)
    return 0


def beautiful_number_moves(x: str | int) -> int:
    """Return the fewest digit changes that bring the digit sum of ``x`` to at most 9.

    A change lowers one digit to 0, or the leading digit to 1.
    """
    text = str(x)
    if not text or not text.isdigit():
        raise ValueError(f"not a decimal number: {x!r}")
    digits = [int(c) for c in text]
    remaining = sum(digits)
    if remaining <= 9:
        return 0
    savings = sorted([digits[0] - 1, *digits[1:]], reverse=True)
    moves = 0
    for saving in savings:
        remaining -= saving
        moves += 1
        if remaining <= 9:
            break
    return moves


def team_problems(votes: Iterable[Iterable[int]]) -> int:
    """Count problems that at least two of the three friends are sure about."""
    return sum(1 for vote in votes if sum(1 for v in vote if v) >= 2)


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Run the ``++``/``--`` statements on ``x = 0`` and return the final ``x``."""
    x = 0
    for statement in statements:
        if not statement:
            raise ValueError("empty statement")
        sign = statement[0] if statement[0] in "+-" else statement[-1]
        x += 1 if sign == "+" else -1
    return x


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first letter, count, last letter."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def watermelon(w: int) -> str:
    """Return ``"Yes"`` if ``w`` splits into two positive even parts, else ``"No"``."""
    splittable = w % 2 == 0 and w > 2
    return _VERDICTS[int(splittable)]