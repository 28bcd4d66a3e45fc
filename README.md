# contestkit

A collection of solutions to well-known competitive-programming exercises.
Each solution is a small, documented Python function. It takes ordinary
Python values and returns the answer. It does not read or print text.

The problems come from beginner AtCoder contests, AtCoder weekly contests,
Codeforces rounds and LeetCode, along with a trial-division factoring exercise.

## Installation

```
pip install .
```

To install the test suite's requirements too and run it:

```
pip install ".[test]"
pytest
```

The package has no runtime dependencies beyond the standard library.

## Modules

| Module | Contents |
| --- | --- |
| `contestkit.leetcode` | `two_sum` |
| `contestkit.factors` | `prime_factors` |
| `contestkit.atcoder_beginner` | `count_marbles`, `shift_only`, `digit_sum`, `some_sums`, `kagami_mochi`, `product_parity`, `count_coin_ways`, `card_game_difference`, `practice_sum` |
| `contestkit.weekly21` | `count_high_scores`, `select_winners`, `best_investment` |
| `contestkit.weekly22` | `count_survivors`, `remedial_hours`, `shock_queries`, `min_bulb_flips` |
| `contestkit.weekly23` | `total_with_reward`, `remaining_passengers`, `travel_times`, `min_items_for_profit` |
| `contestkit.weekly24` | `compare_strengths`, `count_rumor_spread`, `unique_letters`, `coverage_counts` |
| `contestkit.weekly25` | `count_below`, `remaining_parcels`, `largest_after_removal`, `telescope_after` |
| `contestkit.codeforces` | `social_experiment`, `next_round`, `skibidus_length`, `divisible_permutation`, `table_pairs`, `reverse_permutation`, `deletion_sort`, `tower_of_boxes`, `beautiful_number_moves`, `team_problems`, `bit_plus_plus`, `abbreviate`, `watermelon` |
| `contestkit.cli` | `main`, the `contestkit` command |

## Using the library

Every solution is an ordinary function:

```python
from contestkit.leetcode import two_sum
from contestkit.atcoder_beginner import count_coin_ways, digit_sum
from contestkit.codeforces import abbreviate

two_sum([2, 7, 11, 15], 9)        # [1, 0]: later index first, then earlier
count_coin_ways(2, 2, 2, 100)     # 2
digit_sum(1234)                   # 10
abbreviate("localization")        # "l10n"
```

Results follow the conventions of each problem:

- `two_sum` returns an empty list when no pair reaches the target.
- Functions whose problem has an "impossible" answer return `-1`. These are
  `remedial_hours`, `min_bulb_flips` and `min_items_for_profit`.
- Yes/no answers come back as `bool` lists (`shock_queries`,
  `compare_strengths`), or as the strings the problem asks for
  (`product_parity`, `watermelon`).

Input that the problem does not allow raises `ValueError`. Examples are a
1-based index outside the data, a window that does not fit, a sequence that
is not a permutation, or an empty grid.

## Command line

The `contestkit` command solves four of the problems. It reads
contest-style, whitespace-separated input from standard input and prints
the answer:

```
contestkit --help
```

| Task | Input | Output |
| --- | --- | --- |
| `contestkit practice` | `a b c` then a word | `a+b+c` followed by the word |
| `contestkit profit` | `n capacity target`, then `n` lines of `price cost weight` | the fewest items reaching the profit target, or `-1` |
| `contestkit telescope` | `n start steps`, then `n` positions | the 1-based telescope reached |
| `contestkit reverse` | a case count, then for each case `n` and `n` values | the largest permutation after one reversal, one line per case |

For example:

```
echo "1 2 3 test" | contestkit practice
```

This prints `6 test`. Malformed input makes the command print a message
prefixed with `contestkit:` to standard error and exit with status 1.

## What the package does not do

Only the four tasks above can be run from the command line. Every other
solution is available only as a Python function, and you pass it values you
have already parsed.