"""Combinations, permutations and other enumerations."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from itertools import product

_PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """All combinations of candidates, each usable any number of times, summing to target.

    Combinations come out in depth-first order over the candidates as given.
    A target of zero yields no combinations.
    """
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")
    if target == 0:
        return []

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        for index in range(start, len(candidates)):
            value = candidates[index]
            if value == remaining:
                yield [*chosen, value]
            elif value < remaining:
                yield from search(index, remaining - value, [*chosen, value])

    return list(search(0, target, []))


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Distinct combinations using each candidate at most once, summing to target.

    Each combination is sorted; the list is in ascending lexicographic order.
    """
    ordered = sorted(candidates)

    def search(start: int, total: int, chosen: list[int]) -> Iterator[list[int]]:
        if total == target:
            yield list(chosen)
            return
        if total > target:
            return
        for index in range(start, len(ordered)):
            if index > start and ordered[index] == ordered[index - 1]:
                continue
            chosen.append(ordered[index])
            yield from search(index + 1, total + ordered[index], chosen)
            chosen.pop()

    return list(search(0, 0, []))


def generate_parentheses(n: int) -> list[str]:
    """All well-formed strings of n pairs of parentheses, in descending order."""
    if n < 0:
        raise ValueError("n must not be negative")

    def build(prefix: str, opens: int, closes: int) -> Iterator[str]:
        if opens == 0 and closes == 0:
            yield prefix
            return
        if closes > opens:
            yield from build(prefix + ")", opens, closes - 1)
        if opens > 0:
            yield from build(prefix + "(", opens - 1, closes)

    return list(build("", n, n))


def letter_combinations(digits: str) -> list[str]:
    """Letter strings a phone keypad can type for the digits 2-9."""
    if not digits:
        return []
    try:
        groups = [_PHONE_LETTERS[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"digit {exc.args[0]!r} has no letters") from None
    return ["".join(letters) for letters in product(*groups)]


def _permutations(items: list[int], skip_repeats: bool) -> Iterator[list[int]]:
    if not items:
        yield []
        return
    for index, value in enumerate(items):
        if skip_repeats and index and items[index - 1] == value:
            continue
        rest = items[:index] + items[index + 1 :]
        for tail in _permutations(rest, skip_repeats):
            yield [value, *tail]


def permute(nums: Sequence[int]) -> list[list[int]]:
    """All orderings of nums, by position; empty input gives no orderings."""
    if not nums:
        return []
    return list(_permutations(list(nums), skip_repeats=False))


def permute_unique(nums: Sequence[int]) -> list[list[int]]:
    """All distinct orderings of nums, in ascending lexicographic order."""
    if not nums:
        return []
    return list(_permutations(sorted(nums), skip_repeats=True))


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange nums in place into the next greater ordering.

    The greatest ordering wraps round to the smallest one.
    """
    pivot = len(nums) - 2
    while pivot >= 0 and nums[pivot] >= nums[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        nums[:] = sorted(nums)
        return
    swap = len(nums) - 1
    while nums[swap] <= nums[pivot]:
        swap -= 1
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = sorted(nums[pivot + 1 :])