"""
Merging two sorted lists
========================

In this tutorial, we will build two sorted linked lists and merge them into one.
"""

import logging

from linkmerge import LinkedList, MergeOptions, merge

logging.basicConfig(level=logging.DEBUG)

# %%
# First, let's create the two lists. Values must be appended in ascending order.

first = LinkedList.from_iterable([11, 33, 44, 88, 89, 90, 100])
second = LinkedList()
for value in [1, 22, 30, 45]:
    second.append(value)

print(f"first: {first}")
print(f"second: {second}")

# %%
# Next, merge them. The nodes of both lists are relinked into the result, so
# ``first`` and ``second`` can no longer be used afterwards.

merged = merge(first, second, MergeOptions(check_sorted=True))

print(f"merged: {merged}")
print(f"first is consumed: {first.consumed}")

# %%
# Finally, read individual values back. Reading past the end returns ``None``.

print(merged.get(0), merged.get(len(merged) - 1), merged.get(len(merged)))
