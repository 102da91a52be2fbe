"""Test merging sorted linked lists."""

import logging
import random

import pytest

from linkmerge import MergeOptions, merge, split_at_threshold, split_pair
from linkmerge.exception import (
    AliasedListError,
    ConsumedListError,
    EmptyListError,
    UnsortedListError,
)
from linkmerge.linked import LinkedList, Node


@pytest.mark.parametrize(
    "first,second,expected",
    [
        ([1, 3, 5, 7], [2, 4, 6, 8], [1, 2, 3, 4, 5, 6, 7, 8]),
        (
            [11, 33, 44, 88, 89, 90, 100],
            [1, 22, 30, 45],
            [1, 11, 22, 30, 33, 44, 45, 88, 89, 90, 100],
        ),
        ([], [5], [5]),
        ([5], [], [5]),
        ([], [], []),
        ([1, 1, 2], [1], [1, 1, 1, 2]),
        ([1, 2, 3], [4, 5, 6], [1, 2, 3, 4, 5, 6]),
        ([4, 5, 6], [1, 2, 3], [1, 2, 3, 4, 5, 6]),
    ],
)
def test_merge_scenarios(first, second, expected):
    """Test merging lists with known output."""
    out = merge(LinkedList.from_iterable(first), LinkedList.from_iterable(second))

    assert out.to_list() == expected
    assert [out.get(idx) for idx in range(len(expected))] == expected
    assert out.get(len(expected)) is None
    assert out.get(-1) is None


def test_merge_no_overlap():
    """Test merging two non-overlapping linked lists"""
    first = LinkedList()
    first.append(1)
    first.append(3)
    first.append(5)
    second = LinkedList()
    second.append(2)
    second.append(4)
    second.append(6)

    out = merge(first, second)

    assert out.head == Node(1, Node(2, Node(3, Node(4, Node(5, Node(6))))))
    assert out.tail == Node(6)
    assert str(out) == "1, 2, 3, 4, 5, 6"


def test_merge_overlap():
    """Test merging with some overlapping nodes."""
    first = LinkedList.from_iterable([1, 2, 3, 5])
    second = LinkedList.from_iterable([1, 2, 3, 4, 6])

    out = merge(first, second)

    assert out.head == Node(
        1, Node(1, Node(2, Node(2, Node(3, Node(3, Node(4, Node(5, Node(6))))))))
    )
    assert out.length == 9


def test_merge_strings():
    """Test merging lists of strings."""
    first = LinkedList.from_iterable(["A", "C", "E"])
    second = LinkedList.from_iterable(["B", "D"])

    out = merge(first, second)

    assert str(out) == "A, B, C, D, E"


def test_merge_relinks_nodes():
    """Test that merging moves the original nodes instead of copying them."""
    first = LinkedList.from_iterable([1, 3])
    second = LinkedList.from_iterable([2, 4])
    originals = {id(first.head), id(first.tail), id(second.head), id(second.tail)}

    out = merge(first, second)

    merged_ids = set()
    current = out.head
    while current is not None:
        merged_ids.add(id(current))
        current = current.next

    assert merged_ids == originals
    assert first.consumed
    assert second.consumed


def test_merge_with_empty_operand():
    """Test that merging with an empty list returns the other list's nodes."""
    values = LinkedList.from_iterable([1, 2, 3])
    head = values.head

    out = merge(LinkedList(), values)

    assert out.head is head
    assert out.to_list() == [1, 2, 3]
    assert values.consumed

    again = merge(out, LinkedList())

    assert again.head is head
    assert again.to_list() == [1, 2, 3]


@pytest.mark.parametrize("seed", range(20))
def test_merge_properties(seed):
    """Test length, order and content preservation on random inputs."""
    rng = random.Random(seed)
    first_values = sorted(rng.randint(-50, 50) for _ in range(rng.randint(0, 40)))
    second_values = sorted(rng.randint(-50, 50) for _ in range(rng.randint(0, 40)))

    out = merge(
        LinkedList.from_iterable(first_values), LinkedList.from_iterable(second_values)
    )

    assert len(out) == len(first_values) + len(second_values)
    assert out.is_sorted()
    assert out.to_list() == sorted(first_values + second_values)
    if len(out) > 0:
        assert out.tail.next is None
        assert out.tail.data == out.get(len(out) - 1)


def test_merge_consumes_operands():
    """Test that merged operands cannot be reused."""
    first = LinkedList.from_iterable([1])
    second = LinkedList.from_iterable([2])
    merge(first, second)

    with pytest.raises(ConsumedListError):
        merge(first, LinkedList())
    with pytest.raises(ConsumedListError):
        first.append(3)


def test_merge_same_list():
    """Test that a list cannot be merged with itself."""
    values = LinkedList.from_iterable([1, 2])

    with pytest.raises(AliasedListError):
        merge(values, values)

    assert values.to_list() == [1, 2]


def test_merge_check_sorted():
    """Test the optional sortedness check."""
    first = LinkedList.from_iterable([3, 1])
    second = LinkedList.from_iterable([2])

    with pytest.raises(UnsortedListError) as excinfo:
        merge(first, second, MergeOptions(check_sorted=True))

    assert str(excinfo.value) == "'list_a' is not sorted in ascending order: 3, 1"
    # Nothing is consumed when validation fails
    assert not first.consumed
    assert not second.consumed


def test_merge_logging(caplog):
    """Test the debug message emitted after a merge."""
    caplog.set_level(logging.DEBUG, logger="linkmerge.merge")
    merge(
        LinkedList.from_iterable([1, 3, 5, 7]), LinkedList.from_iterable([2, 4, 6, 8])
    )

    assert caplog.records[-1].levelname == "DEBUG"
    assert caplog.records[-1].message == "Merged 8 nodes in 7 runs"


def test_split_at_threshold():
    """Test carving a prefix off a list."""
    source = LinkedList.from_iterable([1, 2, 2, 5, 8])

    prefix, suffix = split_at_threshold(source, 2)

    assert prefix.to_list() == [1, 2, 2]
    assert prefix.tail.next is None
    assert suffix.to_list() == [5, 8]
    assert suffix.length == 2
    assert source.consumed


def test_split_at_threshold_edges():
    """Test splitting where nothing or everything goes into the prefix."""
    prefix, suffix = split_at_threshold(LinkedList.from_iterable([5, 6]), 1)

    assert prefix.length == 0
    assert prefix.head is None
    assert suffix.to_list() == [5, 6]

    prefix, suffix = split_at_threshold(LinkedList.from_iterable([5, 6]), 6)

    assert prefix.to_list() == [5, 6]
    assert suffix is None

    prefix, suffix = split_at_threshold(LinkedList(), 0)

    assert prefix.length == 0
    assert suffix is None


def test_split_pair_keeps_slots():
    """Test that the remainders are returned in the slot of their source."""
    first = LinkedList.from_iterable([10, 20])
    second = LinkedList.from_iterable([1, 2, 15])

    run, rem_first, rem_second = split_pair(first, second)

    assert run.to_list() == [1, 2]
    assert rem_first is first
    assert rem_second.to_list() == [15]

    run, rem_first, rem_second = split_pair(rem_first, rem_second)

    assert run.to_list() == [10]
    assert rem_first.to_list() == [20]
    assert rem_second.to_list() == [15]


def test_split_pair_exhausts_small_side():
    """Test extracting a run that empties one side."""
    run, rem_first, rem_second = split_pair(
        LinkedList.from_iterable([1, 2]), LinkedList.from_iterable([2, 3])
    )

    assert run.to_list() == [1, 2]
    assert rem_first is None
    assert rem_second.to_list() == [2, 3]


@pytest.mark.parametrize("first,second", [([], [1]), ([1], []), ([], [])])
def test_split_pair_empty(first, second):
    """Test that an empty operand is rejected."""
    with pytest.raises(EmptyListError):
        split_pair(LinkedList.from_iterable(first), LinkedList.from_iterable(second))


def test_split_pair_same_list():
    """Test that a run cannot be extracted from a list and itself."""
    values = LinkedList.from_iterable([1, 2])

    with pytest.raises(AliasedListError):
        split_pair(values, values)

    assert not values.consumed
    assert values.to_list() == [1, 2]
