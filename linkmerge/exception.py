"""Custom exceptions for linkmerge."""


class LinkmergeError(Exception):
    """Base exception for linkmerge errors."""


class ConsumedListError(LinkmergeError):
    """Raised when a list is used after its nodes have been moved to another list."""


class AliasedListError(LinkmergeError, ValueError):
    """Raised when the same list is supplied as both operands of a concat or merge."""


class EmptyListError(LinkmergeError, ValueError):
    """Raised when an empty list is supplied where a non-empty one is required."""


class UnsortedListError(LinkmergeError, ValueError):
    """Raised when a merge operand is not sorted in ascending order."""


class ConfigurationError(LinkmergeError):
    """Raised when the ``[tool.linkmerge]`` configuration is invalid."""
