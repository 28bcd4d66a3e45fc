import pytest

from contestkit.weekly25 import (
    count_below,
    largest_after_removal,
    remaining_parcels,
    telescope_after,
)


def test_count_below_basic():
    assert count_below([1, 5, 3], 4) == 2


def test_count_below_bounds():
    scores = [7, 2, 9, 2, 4]
    assert count_below(scores, min(scores)) == 0
    assert count_below(scores, max(scores) + 1) == len(scores)


def test_count_below_monotone():
    scores = [3, 8, 1, 6, 6, 2]
    counts = [count_below(scores, x) for x in range(0, 10)]
    assert counts == sorted(counts)


def test_parcels_start_cell_is_collected():
    assert remaining_parcels(["#"], "") == 0


def test_parcels_clamped_moves():
    assert remaining_parcels(["..#"], "RRRR") == 0
    assert remaining_parcels(["..#"], "LLLL") == "..#".count("#")


def test_parcels_never_exceed_initial():
    grid = ["#.#", ".#.", "##."]
    total = sum(row.count("#") for row in grid)
    for moves in ["", "R", "DD", "RDLU", "XYZ"]:
        assert 0 <= remaining_parcels(grid, moves) <= total


def test_parcels_ignores_unknown_moves():
    grid = ["#.#", ".#."]
    assert remaining_parcels(grid, "RXR") == remaining_parcels(grid, "RR")


def test_parcels_ragged_grid():
    with pytest.raises(ValueError):
        remaining_parcels(["#.", "#"], "")


def test_largest_after_removal_none_removed():
    assert largest_after_removal([3, 9, 5], 0) == 9


def test_largest_after_removal_one_removed():
    assert largest_after_removal([3, 9, 5], 1) == 5


def test_largest_after_removal_all_removed():
    assert largest_after_removal([3, 9, 5], 3) == 0


def test_largest_after_removal_negative():
    with pytest.raises(ValueError):
        largest_after_removal([1], -1)


@pytest.mark.parametrize("start", [1, 2, 3])
def test_telescope_zero_steps(start):
    assert telescope_after([4, 1, 9], start, 0) == start


def test_telescope_pair_alternates():
    positions = [1, 10]
    assert telescope_after(positions, 1, 1) == 2
    assert telescope_after(positions, 1, 2) == 1
    assert telescope_after(positions, 1, 1_000_001) == 2


def test_telescope_tie_goes_to_smaller_number():
    assert telescope_after([0, 5, 10], 2, 1) == 1


def test_telescope_single():
    assert telescope_after([42], 1, 10) == 1


def test_telescope_stays_in_range_and_is_consistent():
    positions = [3, 17, 8, 25, 1, 12]
    for steps in range(0, 40):
        here = telescope_after(positions, 4, steps)
        assert 1 <= here <= len(positions)
        assert telescope_after(positions, here, 1) == telescope_after(positions, 4, steps + 1)


def test_telescope_bad_start():
    with pytest.raises(ValueError):
        telescope_after([1, 2], 3, 1)
    with pytest.raises(ValueError):
        telescope_after([1, 2], 1, -1)