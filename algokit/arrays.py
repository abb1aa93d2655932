"""Searching, scanning and in-place editing of integer arrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target``; ``[-1, -1]`` when it is absent."""
    first = next((i for i, value in enumerate(nums) if value == target), None)
    if first is None:
        return [-1, -1]
    last = next(i for i in range(len(nums) - 1, -1, -1) if nums[i] == target)
    return [first, last]


def jump(nums: Sequence[int]) -> int:
    """Fewest jumps from the first to the last index.

    Each value is the longest jump allowed from its position.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    last = len(nums) - 1
    jumps = 0
    reach_end = 0
    farthest = 0
    for index in range(last):
        if index > farthest:
            break
        farthest = max(farthest, index + nums[index])
        if index == reach_end:
            jumps += 1
            reach_end = farthest
            if reach_end >= last:
                return jumps
    if reach_end < last:
        raise ValueError("the last index cannot be reached")
    return jumps


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index can be reached from the first."""
    if not nums:
        raise ValueError("nums must not be empty")
    farthest = 0
    for index, step in enumerate(nums):
        if index > farthest:
            return False
        farthest = max(farthest, index + step)
    return True


def majority_element(nums: Sequence[int]) -> int:
    """Smallest value appearing in at least half (rounded up) of the positions."""
    threshold = (len(nums) + 1) // 2
    counts = Counter(nums)
    for value in sorted(counts):
        if counts[value] >= threshold and counts[value] > 0:
            return value
    raise ValueError("no majority element")


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Drop repeated values from a sorted list in place; return the new length."""
    unique: list[int] = []
    for value in nums:
        if not unique or unique[-1] != value:
            unique.append(value)
    nums[:] = unique
    return len(unique)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every ``val`` to the end in place; return how many others remain.

    The other values keep their order at the front of the list.
    """
    kept = [value for value in nums if value != val]
    nums[:] = kept + [val] * (len(nums) - len(kept))
    return len(kept)


def _pivot(nums: Sequence[int]) -> int:
    lo, hi = 0, len(nums) - 1
    if nums[lo] < nums[hi]:
        return 0
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[hi]:
            lo = mid + 1
        else:
            hi = mid
    return lo


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted list of distinct values, or -1."""
    if not nums:
        return -1
    size = len(nums)
    pivot = _pivot(nums)
    lo, hi = 0, size - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        real = (mid + pivot) % size
        if nums[real] == target:
            return real
        if nums[real] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of the first value not below ``target``; the length if none."""
    return next((i for i, value in enumerate(nums) if target <= value), len(nums))


def _format_range(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}->{end}"


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Describe runs of consecutive integers as ``"a->b"`` or ``"a"``."""
    ranges: list[str] = []
    start: int | None = None
    previous = 0
    for value in nums:
        if start is None:
            start = value
        elif value != previous + 1:
            ranges.append(_format_range(start, previous))
            start = value
        previous = value
    if start is not None:
        ranges.append(_format_range(start, previous))
    return ranges