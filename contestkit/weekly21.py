"""Solutions to the tasks of weekly beta contest 21."""

from collections.abc import Iterable, Sequence


def count_high_scores(contests: Iterable[Iterable[int]], k: int) -> int:
    """Count scores of at least ``k`` across all contests."""
    return sum(1 for scores in contests for p in scores if p >= k)


def select_winners(
    scores: Sequence[int], groups: Iterable[Iterable[int]]
) -> list[int]:
    """Pick, for each group of 1-based applicant numbers, the winning applicant.

    The highest score wins; ties go to the smaller applicant number.
    A group with no applicants yields 0.
    """
    winners: list[int] = []
    for group in groups:
        best_score = -1
        winner = 0
        for applicant in group:
            if not 1 <= applicant <= len(scores):
                raise ValueError(f"unknown applicant {applicant}")
            score = scores[applicant - 1]
            if score > best_score or (score == best_score and applicant < winner):
                best_score = score
                winner = applicant
        winners.append(winner)
    return winners


def best_investment(
    centers: Iterable[tuple[int, Iterable[int]]], k: int
) -> int:
    """Return the largest total profit from choosing at most ``k`` centers.

    Each center is a ``(cost, benefits)`` pair; an unprofitable center counts
    as zero.
    """
    profits = sorted(
        (max(sum(benefits) - cost, 0) for cost, benefits in centers),
        reverse=True,
    )
    return sum(profits[: max(k, 0)])