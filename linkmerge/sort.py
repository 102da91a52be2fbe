"""In-place exchange sort for mutable sequences.

This is a standalone utility. The merge engine does not depend on it.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def exchange_sort(array: MutableSequence[Any]) -> None:
    """Sort a sequence in ascending order, in place.

    Adjacent values are compared from the front. After a swap, the cursor steps
    back one position so the smaller value can keep moving towards the front.

    Parameters
    ----------
    array : collections.abc.MutableSequence
        The sequence to sort. Sequences of length 0 or 1 are left untouched.
    """
    checked = 0
    while checked < len(array) - 1:
        if array[checked + 1] < array[checked]:
            array[checked], array[checked + 1] = array[checked + 1], array[checked]
            if checked > 0:
                checked -= 1
                continue
        checked += 1
