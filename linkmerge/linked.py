"""Singly-linked list with ownership transfer.

A :py:class:`LinkedList` owns the chain of :py:class:`Node` objects reachable
from its head. Operations that move a chain into another list (concatenation,
splitting and merging) consume the donor: it is cleared and flagged so that any
later use raises :py:class:`linkmerge.exception.ConsumedListError`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from attrs import define, field

from linkmerge.exception import AliasedListError, ConsumedListError


@define(eq=False, repr=False)
class Node:
    """Node for the linked list.

    Parameters
    ----------
    data : Any, optional (default None)
        The current data.
    next : Node | None, optional (default None)
        The next data in the chain.
    """

    data: Any = None
    next: Node | None = None

    def to_list(self) -> list[Any]:
        """Convert the chain starting at this node to a list.

        Returns
        -------
        list[Any]
            A standard list of data.
        """
        out: list[Any] = []
        current: Node | None = self
        while current is not None:
            out.append(current.data)
            current = current.next

        return out

    def __eq__(self, other: object) -> bool:
        """Compare the values of two chains, node by node."""
        if not isinstance(other, Node):
            return NotImplemented
        left: Node | None = self
        right: Node | None = other
        while left is not None and right is not None:
            if left is right:
                return True
            if left.data != right.data:
                return False
            left, right = left.next, right.next

        return left is None and right is None

    def __repr__(self) -> str:
        """Show the value without walking the rest of the chain."""
        return f"Node(data={self.data!r})"


@define(eq=False, repr=False)
class LinkedList:
    """The linked list.

    A new list is always empty; use :py:meth:`append`,
    :py:meth:`LinkedList.from_iterable` or :py:meth:`LinkedList.from_list` to
    populate it.
    """

    _head: Node | None = field(default=None, init=False)
    _tail: Node | None = field(default=None, init=False)
    _length: int = field(default=0, init=False)
    _consumed: bool = field(default=False, init=False)

    @property
    def head(self) -> Node | None:
        """The first node of the chain."""
        self._ensure_live()
        return self._head

    @property
    def tail(self) -> Node | None:
        """The last node of the chain."""
        self._ensure_live()
        return self._tail

    @property
    def length(self) -> int:
        """The number of nodes in the chain."""
        self._ensure_live()
        return self._length

    @property
    def consumed(self) -> bool:
        """Whether the nodes of this list have been moved to another list."""
        return self._consumed

    def append(self, data: Any) -> None:
        """Append a new node to the end of the list.

        Parameters
        ----------
        data : Any
            The new data.

        Raises
        ------
        linkmerge.exception.ConsumedListError
            Raised if the list has been consumed.
        """
        self._ensure_live()
        new = Node(data=data)
        if self._tail is None:
            self._head = new
        else:
            self._tail.next = new
        self._tail = new
        self._length += 1

    def get(self, index: int) -> Any | None:
        """Retrieve the value at a zero-based position.

        Parameters
        ----------
        index : int
            The position to read.

        Returns
        -------
        Any | None
            The value, or ``None`` if ``index`` is negative or past the end of the list.
        """
        self._ensure_live()
        if index < 0:
            return None
        current = self._head
        while current is not None:
            if index == 0:
                return current.data
            current = current.next
            index -= 1

        return None

    def concat(self, other: LinkedList) -> None:
        """Move every node of ``other`` onto the end of this list.

        This runs in constant time. ``other`` is consumed, even when it is empty.

        Parameters
        ----------
        other : linkmerge.linked.LinkedList
            The donor list.

        Raises
        ------
        TypeError
            Raised if ``other`` is not a linked list.
        linkmerge.exception.AliasedListError
            Raised if ``other`` is this list.
        linkmerge.exception.ConsumedListError
            Raised if either list has been consumed.
        """
        if not isinstance(other, LinkedList):
            msg = f"Cannot concatenate '{type(other).__name__}' onto a linked list"
            raise TypeError(msg)
        if other is self:
            raise AliasedListError("Cannot concatenate a linked list onto itself.")
        self._ensure_live()
        head, tail, length = other._release()
        if head is None:
            return
        if self._tail is None:
            self._head = head
        else:
            self._tail.next = head
        self._tail = tail
        self._length += length

    def is_sorted(self) -> bool:
        """Check whether the values are in nondecreasing order.

        Returns
        -------
        bool
            ``True`` if each value is less than or equal to its successor.
        """
        self._ensure_live()
        current = self._head
        while current is not None and current.next is not None:
            if not current.data <= current.next.data:
                return False
            current = current.next

        return True

    def to_list(self) -> list[Any]:
        """Convert the linked list to a standard list.

        Returns
        -------
        list[Any]
            A standard list of data.
        """
        return list(self)

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> LinkedList:
        """Build a linked list that keeps the order of ``values``."""
        out = cls()
        for val in values:
            out.append(val)

        return out

    @classmethod
    def from_list(cls, data: list[Any]) -> LinkedList:
        """Convert a standard list to a sorted linked list."""
        return cls.from_iterable(sorted(data))

    @classmethod
    def _adopt(cls, head: Node | None, tail: Node | None, length: int) -> LinkedList:
        """Wrap a detached chain in a new list."""
        out = cls()
        out._head = head
        out._tail = tail
        out._length = length

        return out

    def _release(self) -> tuple[Node | None, Node | None, int]:
        """Hand over the chain and invalidate this list.

        Returns
        -------
        tuple[Node | None, Node | None, int]
            The head, tail and length of the chain.
        """
        self._ensure_live()
        chain = (self._head, self._tail, self._length)
        self._head = None
        self._tail = None
        self._length = 0
        self._consumed = True

        return chain

    def _ensure_live(self) -> None:
        if self._consumed:
            raise ConsumedListError(
                "This linked list has been consumed. Its nodes now belong to another list."
            )

    def __iadd__(self, other: object) -> LinkedList:
        """Concatenate ``other`` in place."""
        if not isinstance(other, LinkedList):
            return NotImplemented
        self.concat(other)

        return self

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values."""
        self._ensure_live()
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        """Number of nodes in the list."""
        return self.length

    def __eq__(self, other: object) -> bool:
        """Compare the values of two lists.

        Raises
        ------
        linkmerge.exception.ConsumedListError
            Raised if either list has been consumed.
        """
        if not isinstance(other, LinkedList):
            return NotImplemented
        if len(self) != len(other):
            return False

        return all(left == right for left, right in zip(self, other))

    def __str__(self) -> str:
        """Comma-separated values, or an empty string for an empty list."""
        return ", ".join(str(val) for val in self)

    def __repr__(self) -> str:
        """Diagnostic representation."""
        if self._consumed:
            return "<consumed linkmerge.linked.LinkedList>"
        return f"LinkedList({self.to_list()!r})"
