import pytest

from algokit.linked_list import (
    ListNode,
    add_two_numbers,
    build_list,
    get_intersection_node,
    merge_two_lists,
    remove_elements,
    remove_nth_from_end,
    rotate_right,
    swap_pairs,
)


def _values(head):
    return [] if head is None else list(head)


def _to_int(digits):
    return int("".join(str(d) for d in reversed(digits))) if digits else 0


def test_build_list_round_trip():
    assert list(build_list([1, 2, 3])) == [1, 2, 3]
    assert build_list([]) is None


def test_iter_single_node():
    assert list(ListNode(4)) == [4]


def test_add_two_numbers_example():
    result = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
    assert _values(result) == [7, 0, 8]


@pytest.mark.parametrize(
    "a, b",
    [([9, 9, 9, 9], [9, 9, 9]), ([0], [0]), ([5], [5]), ([1, 8], [0])],
)
def test_add_two_numbers_matches_integer_sum(a, b):
    result = _values(add_two_numbers(build_list(a), build_list(b)))
    assert _to_int(result) == _to_int(a) + _to_int(b)
    assert all(0 <= d <= 9 for d in result)


def test_add_two_numbers_both_empty():
    assert add_two_numbers(None, None) is None


def test_intersection_found():
    shared = build_list([8, 4, 5])
    a = build_list([4, 1])
    a.next.next = shared
    b = build_list([5, 6, 1])
    b.next.next.next = shared
    assert get_intersection_node(a, b) is shared


def test_intersection_disjoint_and_empty():
    assert get_intersection_node(build_list([1, 2]), build_list([1, 2])) is None
    assert get_intersection_node(None, build_list([1])) is None


@pytest.mark.parametrize(
    "a, b", [([1, 2, 4], [1, 3, 4]), ([], [0]), ([], []), ([5, 6], [1])]
)
def test_merge_two_lists_sorted(a, b):
    merged = merge_two_lists(build_list(a), build_list(b))
    assert _values(merged) == sorted(a + b)


def test_remove_elements_all_removed():
    assert remove_elements(build_list([7, 7, 7, 7]), 7) is None


def test_remove_elements_keeps_order():
    head = remove_elements(build_list([1, 2, 6, 3, 4, 5, 6]), 6)
    assert _values(head) == [1, 2, 3, 4, 5]


def test_remove_elements_empty():
    assert remove_elements(None, 1) is None


def test_remove_nth_from_end_middle():
    assert _values(remove_nth_from_end(build_list([1, 2, 3, 4, 5]), 2)) == [1, 2, 3, 5]


def test_remove_nth_from_end_edges():
    assert _values(remove_nth_from_end(build_list([1, 2, 3]), 1)) == [1, 2]
    assert _values(remove_nth_from_end(build_list([1, 2, 3]), 3)) == [2, 3]
    assert remove_nth_from_end(build_list([1]), 1) is None
    single = build_list([1])
    assert remove_nth_from_end(single, 0) is single


@pytest.mark.parametrize("n", [0, 4, -1])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2, 3]), n)


def test_remove_nth_from_end_empty():
    with pytest.raises(ValueError):
        remove_nth_from_end(None, 1)


def test_rotate_right_example():
    assert _values(rotate_right(build_list([1, 2, 3, 4, 5]), 2)) == [4, 5, 1, 2, 3]


def test_rotate_right_full_cycles_unchanged():
    assert _values(rotate_right(build_list([0, 1, 2]), 3)) == [0, 1, 2]
    assert _values(rotate_right(build_list([0, 1, 2]), -2)) == [0, 1, 2]


@pytest.mark.parametrize("k", [1, 2, 4])
def test_rotate_right_periodic(k):
    values = [1, 2, 3, 4, 5]
    a = _values(rotate_right(build_list(values), k))
    b = _values(rotate_right(build_list(values), k + len(values)))
    assert a == b
    assert sorted(a) == values


def test_swap_pairs():
    assert _values(swap_pairs(build_list([1, 2, 3, 4]))) == [2, 1, 4, 3]
    assert _values(swap_pairs(build_list([1, 2, 3]))) == [2, 1, 3]
    assert swap_pairs(None) is None


def test_swap_pairs_twice_restores():
    values = [1, 2, 3, 4, 5, 6]
    assert _values(swap_pairs(swap_pairs(build_list(values)))) == values