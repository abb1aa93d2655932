"""String problems: palindromes, anagrams, matching and digit arithmetic."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from itertools import groupby

_CLOSERS = {"(": ")", "[": "]", "{": "}"}


def _expand(s: str, left: int, right: int) -> str:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return s[left + 1 : right]


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the first one found wins ties."""
    if len(s) <= 1:
        return s
    best = s[0]
    for center in range(len(s) - 1):
        for candidate in (_expand(s, center, center), _expand(s, center, center + 1)):
            if len(candidate) > len(best):
                best = candidate
    return best


def count_and_say(n: int) -> str:
    """The n-th term of the count-and-say sequence, starting from "1"."""
    term = "1"
    for _ in range(2, n + 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def find_first_occurrence(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle``; -1 if absent, 0 if empty."""
    if not needle:
        return 0
    return haystack.find(needle)


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group words that are anagrams of each other.

    Groups are ordered by their sorted letters; words keep their input order.
    """
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return [groups[key] for key in sorted(groups)]


def is_isomorphic(s: str, t: str) -> bool:
    """Whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        raise ValueError("strings must have the same length")
    mapping: dict[str, str] = {}
    used: set[str] = set()
    for source, target in zip(s, t):
        if source in mapping:
            if mapping[source] != target:
                return False
        elif target in used:
            return False
        else:
            mapping[source] = target
            used.add(target)
    return True


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string; empty for no strings."""
    if not strs:
        return ""
    first = strs[0]
    for index, char in enumerate(first):
        if any(index >= len(other) or other[index] != char for other in strs[1:]):
            return first[:index]
    return first


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    longest = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        longest = max(longest, index - start + 1)
    return longest


def is_valid_parentheses(s: str) -> bool:
    """Whether every bracket is closed by the matching bracket in order.

    Any character that is not an opening bracket is taken as a closer.
    """
    stack: list[str] = []
    for char in s:
        if char in _CLOSERS:
            stack.append(char)
        elif not stack or _CLOSERS[stack.pop()] != char:
            return False
    return not stack


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1:
        return s
    rows = [""] * min(num_rows, len(s))
    row, step = 0, -1
    for char in s:
        rows[row] += char
        if row == 0 or row == num_rows - 1:
            step = -step
        row += step
    return "".join(rows)


def edit_distance(word1: str, word2: str) -> int:
    """Fewest insertions, deletions and substitutions turning word1 into word2."""
    previous = list(range(len(word2) + 1))
    for i, char1 in enumerate(word1, start=1):
        current = [i]
        for j, char2 in enumerate(word2, start=1):
            if char1 == char2:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], current[j - 1], previous[j]) + 1)
        previous = current
    return previous[-1]


def is_match(s: str, p: str) -> bool:
    """Whether ``p`` matches all of ``s``; ``.`` is any character, ``*`` repeats."""
    if p.startswith("*"):
        raise ValueError("pattern cannot start with '*'")
    m, n = len(s), len(p)
    dp = [[False] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = True
    for j in range(2, n + 1):
        if p[j - 1] == "*":
            dp[0][j] = dp[0][j - 2]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if p[j - 1] == "*":
                repeated = p[j - 2]
                dp[i][j] = dp[i][j - 2] or (
                    dp[i - 1][j] and repeated in (s[i - 1], ".")
                )
            else:
                dp[i][j] = dp[i - 1][j - 1] and p[j - 1] in (s[i - 1], ".")
    return dp[m][n]


def _digits(num: str) -> list[int]:
    if not num or any(char not in "0123456789" for char in num):
        raise ValueError(f"not a non-negative decimal number: {num!r}")
    return [ord(char) - ord("0") for char in num]


def multiply_strings(num1: str, num2: str) -> str:
    """Product of two non-negative decimal numbers given as strings."""
    digits1, digits2 = _digits(num1), _digits(num2)
    product = [0] * (len(digits1) + len(digits2))
    for i, d1 in enumerate(reversed(digits1)):
        for j, d2 in enumerate(reversed(digits2)):
            product[i + j] += d1 * d2
    carry = 0
    for position, value in enumerate(product):
        carry, product[position] = divmod(value + carry, 10)
    text = "".join(str(digit) for digit in reversed(product)).lstrip("0")
    return text or "0"