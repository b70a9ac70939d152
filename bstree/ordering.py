"""Three-way orderings used by :class:`~bstree.tree.BinarySearchTree`.

An ordering is any callable ``compare(a, b)`` returning a negative number when
``a`` sorts before ``b``, zero when they are equivalent and a positive number
otherwise.  Trees store a single ordering for their whole lifetime.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

Ordering = Callable[[T, T], int]

__all__ = [
    "Ordering",
    "by_key",
    "natural_order",
    "reversed_order",
]


def natural_order(left: Any, right: Any) -> int:
    """Compare two values using their own ``<`` and ``>`` operators."""

    return (left > right) - (left < right)


def by_key(key: Callable[[Any], Any]) -> Ordering:
    """Return an ordering that compares ``key(value)`` naturally."""

    if not callable(key):
        raise TypeError("key must be callable")

    def compare(left: Any, right: Any) -> int:
        return natural_order(key(left), key(right))

    return compare


def reversed_order(ordering: Ordering) -> Ordering:
    """Return *ordering* flipped so larger values sort first."""

    if not callable(ordering):
        raise TypeError("ordering must be callable")

    def compare(left: Any, right: Any) -> int:
        return ordering(right, left)

    return compare
