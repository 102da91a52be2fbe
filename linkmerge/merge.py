"""Run-by-run merge of sorted linked lists.

Instead of moving one node at a time, the merge carves whole runs off one
operand: a run is the longest prefix whose values are all less than or equal to
the head of the other operand. Runs are spliced onto the result in constant
time, so every node is visited exactly once.
"""

from __future__ import annotations

import logging
from typing import Any

from linkmerge.config import MergeOptions
from linkmerge.exception import AliasedListError, EmptyListError, UnsortedListError
from linkmerge.linked import LinkedList

LOG = logging.getLogger(__name__)


def split_at_threshold(
    source: LinkedList, threshold: Any
) -> tuple[LinkedList, LinkedList | None]:
    """Split a list after its leading values that do not exceed a threshold.

    Parameters
    ----------
    source : linkmerge.linked.LinkedList
        The list to split. It is consumed.
    threshold : Any
        The inclusive upper bound for the prefix.

    Returns
    -------
    linkmerge.linked.LinkedList
        The prefix. It starts at the original head and may be empty.
    linkmerge.linked.LinkedList | None
        The remaining nodes, or ``None`` if every node went into the prefix.

    Raises
    ------
    linkmerge.exception.ConsumedListError
        Raised if ``source`` has already been consumed.
    """
    head, tail, length = source._release()

    end = None
    count = 0
    current = head
    while current is not None and current.data <= threshold:
        end = current
        count += 1
        current = current.next

    if end is None:
        prefix = LinkedList()
    else:
        # Detach the prefix from the rest of the chain
        end.next = None
        prefix = LinkedList._adopt(head, end, count)

    if current is None:
        return prefix, None

    return prefix, LinkedList._adopt(current, tail, length - count)


def split_pair(
    list_a: LinkedList, list_b: LinkedList
) -> tuple[LinkedList, LinkedList | None, LinkedList | None]:
    """Extract the next run from whichever list has the smaller head.

    The list with the smaller (or, on a tie, the first) head value is split at
    the head value of the other list. The other list is returned untouched.

    Parameters
    ----------
    list_a : linkmerge.linked.LinkedList
        The first non-empty list.
    list_b : linkmerge.linked.LinkedList
        The second non-empty list.

    Returns
    -------
    linkmerge.linked.LinkedList
        The extracted run.
    linkmerge.linked.LinkedList | None
        What is left of ``list_a``.
    linkmerge.linked.LinkedList | None
        What is left of ``list_b``.

    Raises
    ------
    linkmerge.exception.AliasedListError
        Raised if the same list is supplied twice.
    linkmerge.exception.EmptyListError
        Raised if either list is empty.
    """
    if list_a is list_b:
        raise AliasedListError("Cannot extract a run from a linked list and itself.")
    if list_a.head is None or list_b.head is None:
        raise EmptyListError("Both lists must be non-empty to extract a run.")

    if list_a.head.data <= list_b.head.data:
        run, rem_a = split_at_threshold(list_a, list_b.head.data)
        return run, rem_a, list_b

    run, rem_b = split_at_threshold(list_b, list_a.head.data)
    return run, list_a, rem_b


def merge(
    list_a: LinkedList, list_b: LinkedList, options: MergeOptions | None = None
) -> LinkedList:
    """Merge two sorted linked lists.

    Both lists are consumed. Their nodes are relinked into the returned list
    without being copied.

    Parameters
    ----------
    list_a : linkmerge.linked.LinkedList
        A list sorted in ascending order.
    list_b : linkmerge.linked.LinkedList
        A list sorted in ascending order.
    options : linkmerge.config.MergeOptions, optional (default None)
        Merge options. If not provided, the defaults are used.

    Returns
    -------
    linkmerge.linked.LinkedList
        A new sorted list holding every node of both inputs.

    Raises
    ------
    linkmerge.exception.AliasedListError
        Raised if the same list is supplied twice.
    linkmerge.exception.ConsumedListError
        Raised if either list has already been consumed.
    linkmerge.exception.UnsortedListError
        Raised if ``options.check_sorted`` is set and either list is not sorted.
    """
    options = options or MergeOptions()
    if list_a is list_b:
        raise AliasedListError("Cannot merge a linked list with itself.")
    # Raises for a consumed operand before either list is touched
    total = len(list_a) + len(list_b)
    if options.check_sorted:
        for name, operand in (("list_a", list_a), ("list_b", list_b)):
            if not operand.is_sorted():
                msg = f"'{name}' is not sorted in ascending order: {operand!s}"
                raise UnsortedListError(msg)

    if len(list_a) == 0 or len(list_b) == 0:
        merged = LinkedList()
        merged += list_a
        merged += list_b
        LOG.debug("Merged %d nodes with an empty operand", total)
        return merged

    rem_a: LinkedList | None
    rem_b: LinkedList | None
    merged, rem_a, rem_b = split_pair(list_a, list_b)
    runs = 1
    while rem_a is not None or rem_b is not None:
        if rem_a is None:
            merged += rem_b
            break
        if rem_b is None:
            merged += rem_a
            break
        run, rem_a, rem_b = split_pair(rem_a, rem_b)
        merged += run
        runs += 1

    LOG.debug("Merged %d nodes in %d runs", total, runs)

    return merged
