"""Command-line front end that reads contest-style input from standard input."""

import argparse
import sys
from collections.abc import Callable, Sequence

from contestkit.atcoder_beginner import practice_sum
from contestkit.codeforces import reverse_permutation
from contestkit.weekly23 import min_items_for_profit
from contestkit.weekly25 import telescope_after


class _Tokens:
    """Whitespace-separated tokens of the whole input."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError(f"negative count {count}")
        return [self.number() for _ in range(count)]


def _practice(tokens: _Tokens) -> list[str]:
    a, b, c = tokens.numbers(3)
    return [practice_sum(a, b, c, tokens.word())]


def _profit(tokens: _Tokens) -> list[str]:
    n, capacity, target = tokens.numbers(3)
    if n < 0:
        raise ValueError(f"negative item count {n}")
    items = [tuple(tokens.numbers(3)) for _ in range(n)]
    return [str(min_items_for_profit(items, capacity, target))]


def _telescope(tokens: _Tokens) -> list[str]:
    n, start, steps = tokens.numbers(3)
    positions = tokens.numbers(n)
    return [str(telescope_after(positions, start, steps))]


def _reverse(tokens: _Tokens) -> list[str]:
    cases = tokens.number()
    if cases < 0:
        raise ValueError(f"negative test case count {cases}")
    lines: list[str] = []
    for _ in range(cases):
        p = tokens.numbers(tokens.number())
        lines.append(" ".join(map(str, reverse_permutation(p))))
    return lines


_TASKS: dict[str, tuple[Callable[[_Tokens], list[str]], str]] = {
    "practice": (_practice, "print a + b + c followed by a word"),
    "profit": (_profit, "fewest deliveries reaching a profit target"),
    "telescope": (_telescope, "telescope reached after a number of hops"),
    "reverse": (_reverse, "largest permutation after one reversal"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the chosen task for the input on standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="contestkit",
        description="Solve a contest task reading its input from standard input.",
    )
    sub = parser.add_subparsers(dest="task", required=True)
    for name, (_, summary) in _TASKS.items():
        sub.add_parser(name, help=summary)
    args = parser.parse_args(argv)

    solve, _ = _TASKS[args.task]
    try:
        lines = solve(_Tokens(sys.stdin.read()))
    except ValueError as exc:
        print(f"contestkit: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())