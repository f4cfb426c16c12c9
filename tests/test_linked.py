import pytest

from algokit.linked import (
    ListNode,
    add_two_numbers,
    build_list,
    is_palindrome_linked_list,
    merge_two_lists,
    reverse_list,
)


def test_build_list_one_element():
    assert build_list([1]) == ListNode(1)


def test_build_list_empty():
    assert build_list([]) is None


def test_build_list_five_elements():
    expected = ListNode(1, ListNode(2, ListNode(3, ListNode(4, ListNode(5)))))
    assert build_list([1, 2, 3, 4, 5]) == expected


def test_iteration_yields_values():
    assert list(build_list([3, 1, 2])) == [3, 1, 2]


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ([1, 2, 4], [1, 3, 4], [1, 1, 2, 3, 4, 4]),
        ([], [], []),
        ([], [0], [0]),
        ([1], [2], [1, 2]),
        ([1] * 16, [2, 3, 4], [1] * 16 + [2, 3, 4]),
    ],
)
def test_merge_two_lists(first, second, expected):
    actual = merge_two_lists(build_list(first), build_list(second))
    assert actual == build_list(expected)


def test_merge_prefers_second_on_tie():
    first = ListNode(1)
    second = ListNode(1)
    assert merge_two_lists(first, second) is second


def test_reverse_empty():
    assert reverse_list(None) is None


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1], [1]),
        ([1, 2], [2, 1]),
        ([1, 2, 3], [3, 2, 1]),
    ],
)
def test_reverse_list(values, expected):
    assert reverse_list(build_list(values)) == build_list(expected)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ([2, 4, 3], [5, 6, 4], [7, 0, 8]),
        ([0], [0], [0]),
        ([9, 9, 9, 9, 9, 9, 9], [9, 9, 9, 9], [8, 9, 9, 9, 0, 0, 0, 1]),
        (
            [1] + [0] * 29 + [1],
            [5, 6, 4],
            [6, 6, 4] + [0] * 27 + [1],
        ),
    ],
)
def test_add_two_numbers(first, second, expected):
    actual = add_two_numbers(build_list(first), build_list(second))
    assert actual == build_list(expected)


def test_add_two_numbers_rejects_missing_number():
    with pytest.raises(ValueError):
        add_two_numbers(None, ListNode(1))


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 2, 1], True),
        ([1], True),
        ([], True),
        ([1, 2], False),
        ([1, 2, 3, 2, 1], True),
    ],
)
def test_is_palindrome_linked_list(values, expected):
    assert is_palindrome_linked_list(build_list(values)) is expected