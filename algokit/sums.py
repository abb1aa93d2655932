"""Problems about finding numbers that add up to a target."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _pairs(nums: Sequence[int], lo: int, target: int) -> Iterator[tuple[int, int]]:
    """Yield distinct pairs from sorted ``nums[lo:]`` that sum to ``target``."""
    hi = len(nums) - 1
    while lo < hi:
        total = nums[lo] + nums[hi]
        if total == target:
            yield nums[lo], nums[hi]
            lo += 1
            hi -= 1
            while lo < hi and nums[lo] == nums[lo - 1]:
                lo += 1
            while lo < hi and nums[hi] == nums[hi + 1]:
                hi -= 1
        elif total > target:
            hi -= 1
        else:
            lo += 1


def _triples(nums: Sequence[int], target: int) -> Iterator[tuple[int, int, int]]:
    """Yield distinct triples from sorted ``nums`` that sum to ``target``."""
    for i, first in enumerate(nums[:-2]):
        if i and first == nums[i - 1]:
            continue
        for second, third in _pairs(nums, i + 1, target - first):
            yield first, second, third


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Sum of three numbers that lies closest to ``target``.

    When several sums are equally close, the first one met wins.
    """
    if len(nums) < 3:
        raise ValueError("at least three numbers are needed")
    ordered = sorted(nums)
    best: int | None = None
    last = len(ordered) - 1
    for i, first in enumerate(ordered[:-2]):
        lo, hi = i + 1, last
        while lo < hi:
            total = first + ordered[lo] + ordered[hi]
            if total == target:
                return target
            if best is None or abs(target - total) < abs(target - best):
                best = total
            if total > target:
                hi -= 1
            else:
                lo += 1
    assert best is not None
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triples that sum to zero, in ascending order."""
    return [list(triple) for triple in _triples(sorted(nums), 0)]


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """All distinct sorted quadruples that sum to ``target``.

    Quadruples are grouped by their first number, groups with the larger
    first number coming first.
    """
    ordered = sorted(nums)
    groups = []
    for i, first in enumerate(ordered[:-3]):
        if i and first == ordered[i - 1]:
            continue
        groups.append(
            [[first, *triple] for triple in _triples(ordered[i + 1 :], target - first)]
        )
    return [quad for group in reversed(groups) for quad in group]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices ``[i, j]`` of the first pair summing to ``target``; empty if none."""
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                return [i, j]
    return []


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the given lines."""
    lo, hi = 0, len(height) - 1
    water = 0
    while lo < hi:
        water = max(water, min(height[lo], height[hi]) * (hi - lo))
        if height[lo] > height[hi]:
            hi -= 1
        else:
            lo += 1
    return water