"""Main module."""

from linkmerge._meta import __version__  # noqa: F401
from linkmerge.config import MergeOptions
from linkmerge.linked import LinkedList, Node
from linkmerge.merge import merge, split_at_threshold, split_pair
from linkmerge.sort import exchange_sort

__all__: list[str] = [
    "LinkedList",
    "MergeOptions",
    "Node",
    "exchange_sort",
    "merge",
    "split_at_threshold",
    "split_pair",
]
