"""Exception hierarchy shared by the binary search tree modules.

Every error raised by :mod:`bstree` derives from :class:`TreeError` and from
the builtin exception that best describes it, so callers may catch either the
package-specific type or the familiar builtin.
"""

from __future__ import annotations

__all__ = [
    "InvalidArgumentError",
    "NotFoundError",
    "TreeError",
    "TypeMismatchError",
    "UnsupportedTypeError",
]


class TreeError(Exception):
    """Base class for all binary search tree failures."""


class TypeMismatchError(TreeError, TypeError):
    """Raised when two values from different domains are compared."""


class UnsupportedTypeError(TreeError, TypeError):
    """Raised when a value has no recognised ordering."""


class InvalidArgumentError(TreeError, TypeError):
    """Raised when an operation receives an argument of the wrong shape."""


class NotFoundError(TreeError, LookupError):
    """Raised when a height or depth query targets an absent value."""
