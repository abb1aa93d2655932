import pytest

from algokit.text import (
    count_and_say,
    edit_distance,
    find_first_occurrence,
    group_anagrams,
    is_isomorphic,
    is_match,
    is_valid_parentheses,
    length_of_longest_substring,
    longest_common_prefix,
    longest_palindrome,
    multiply_strings,
    zigzag_convert,
)


@pytest.mark.parametrize("s", ["babad", "cbbd", "forgeeksskeegfor", "abacdfgdcaba", "aaaa"])
def test_longest_palindrome_is_palindromic_substring(s):
    result = longest_palindrome(s)
    assert result == result[::-1]
    assert result in s
    for i in range(len(s)):
        for j in range(i + len(result) + 1, len(s) + 1):
            assert s[i:j] != s[i:j][::-1]


def test_longest_palindrome_short_inputs():
    assert longest_palindrome("") == ""
    assert longest_palindrome("x") == "x"
    assert longest_palindrome("aaaa") == "aaaa"


def test_longest_palindrome_babad_length():
    assert len(longest_palindrome("babad")) == 3


def test_count_and_say_first_term():
    assert count_and_say(1) == "1"


@pytest.mark.parametrize("n", range(1, 10))
def test_count_and_say_next_term_describes_previous(n):
    current = count_and_say(n)
    following = count_and_say(n + 1)
    decoded = "".join(
        following[k + 1] * int(following[k]) for k in range(0, len(following), 2)
    )
    assert decoded == current


@pytest.mark.parametrize(
    "haystack, needle",
    [("sadbutsad", "sad"), ("hello", "ll"), ("mississippi", "issip"), ("aaa", "aaa")],
)
def test_find_first_occurrence_found(haystack, needle):
    index = find_first_occurrence(haystack, needle)
    assert haystack[index : index + len(needle)] == needle
    assert needle not in haystack[: index + len(needle) - 1]


def test_find_first_occurrence_missing_and_empty():
    assert find_first_occurrence("leetcode", "leeto") == -1
    assert find_first_occurrence("ab", "abc") == -1
    assert find_first_occurrence("abc", "") == 0


def test_group_anagrams_example():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    assert group_anagrams(words) == [["bat"], ["eat", "tea", "ate"], ["tan", "nat"]]


def test_group_anagrams_invariants():
    words = ["listen", "silent", "enlist", "google", "gooegl", "cat", "act", "tac", "x"]
    groups = group_anagrams(words)
    assert sorted(w for g in groups for w in g) == sorted(words)
    keys = ["".join(sorted(g[0])) for g in groups]
    assert keys == sorted(set(keys))
    for group in groups:
        assert len({"".join(sorted(w)) for w in group}) == 1


def test_group_anagrams_empty():
    assert group_anagrams([]) == []


@pytest.mark.parametrize(
    "s, t, expected",
    [("badc", "baba", False), ("egg", "add", True), ("foo", "bar", False), ("paper", "title", True)],
)
def test_is_isomorphic(s, t, expected):
    assert is_isomorphic(s, t) is expected


def test_is_isomorphic_length_mismatch():
    with pytest.raises(ValueError):
        is_isomorphic("ab", "a")


@pytest.mark.parametrize(
    "strs",
    [["flower", "flow", "flight"], ["dog", "racecar", "car"], ["interview", "internet", "interval"]],
)
def test_longest_common_prefix_invariant(strs):
    prefix = longest_common_prefix(strs)
    assert all(word.startswith(prefix) for word in strs)
    n = len(prefix)
    assert any(len(word) == n for word in strs) or len({word[n] for word in strs}) > 1


def test_longest_common_prefix_edges():
    assert longest_common_prefix([]) == ""
    assert longest_common_prefix(["alone"]) == "alone"
    assert longest_common_prefix(["ab", "a"]) == "a"


@pytest.mark.parametrize("s", ["", "a", "abcdef", "xyz"])
def test_length_of_longest_substring_distinct(s):
    assert length_of_longest_substring(s) == len(s)


def test_length_of_longest_substring_repeats():
    assert length_of_longest_substring("bbbbb") == 1
    assert length_of_longest_substring("abcabcbb") == len("abc")
    assert length_of_longest_substring("pwwkew") == len("wke")


@pytest.mark.parametrize(
    "s, expected",
    [("()", True), ("()[]{}", True), ("{[()]}", True), ("(]", False), ("([)]", False),
     ("(", False), (")", False), ("", True), ("(a)", False)],
)
def test_is_valid_parentheses(s, expected):
    assert is_valid_parentheses(s) is expected


@pytest.mark.parametrize("rows", [2, 3, 4, 5])
def test_zigzag_is_permutation(rows):
    s = "PAYPALISHIRING"
    result = zigzag_convert(s, rows)
    assert sorted(result) == sorted(s)
    assert result[0] == s[0]


def test_zigzag_trivial_cases():
    assert zigzag_convert("ABCDE", 1) == "ABCDE"
    assert zigzag_convert("ABC", 5) == "ABC"
    assert zigzag_convert("", 3) == ""
    assert zigzag_convert("ABCD", 2) == "ACBD"


def test_zigzag_invalid_rows():
    with pytest.raises(ValueError):
        zigzag_convert("abc", 0)


def test_edit_distance_example():
    assert edit_distance("horse", "ros") == 3


@pytest.mark.parametrize("a, b", [("kitten", "sitting"), ("intention", "execution"), ("", "abc")])
def test_edit_distance_properties(a, b):
    assert edit_distance(a, a) == 0
    assert edit_distance(a, b) == edit_distance(b, a)
    assert edit_distance("", b) == len(b)
    assert edit_distance(a, b) <= max(len(a), len(b))


@pytest.mark.parametrize(
    "s, p, expected",
    [("aa", "a*", True), ("aa", "a", False), ("ab", ".*", True), ("aab", "c*a*b", True),
     ("mississippi", "mis*is*p*.", False), ("", "a*b*", True), ("", "", True)],
)
def test_is_match(s, p, expected):
    assert is_match(s, p) is expected


def test_is_match_rejects_leading_star():
    with pytest.raises(ValueError):
        is_match("a", "*a")


@pytest.mark.parametrize(
    "a, b", [("6913259244", "71103343"), ("123", "456"), ("2", "3"), ("999", "999")]
)
def test_multiply_strings_matches_integer_product(a, b):
    assert multiply_strings(a, b) == str(int(a) * int(b))


def test_multiply_strings_zero():
    assert multiply_strings("0", "12345") == "0"
    assert multiply_strings("987", "0") == "0"


@pytest.mark.parametrize("a, b", [("", "1"), ("12a", "3"), ("-1", "2")])
def test_multiply_strings_invalid(a, b):
    with pytest.raises(ValueError):
        multiply_strings(a, b)