"""Unbalanced binary search tree with a pluggable three-way ordering.

The tree keeps every value reachable from a single root and preserves the
search-tree invariant after each mutation:

* every value in a node's left subtree compares ``<=`` the node's value;
* every value in a node's right subtree compares ``>`` the node's value.

Equal values therefore always route to the left branch, which keeps repeated
insertions stable.  Nodes never leave the module: the public API accepts and
returns plain values only.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
import sys
from typing import Any, Deque, Generic, Iterable, Iterator, Optional, TextIO, TypeVar

from .ordering import Ordering, natural_order

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "BinarySearchTree",
    "Node",
]


@dataclass(slots=True, eq=False)
class Node(Generic[T]):
    """Single tree cell owning up to two children."""

    value: T
    left: Optional["Node[T]"] = None
    right: Optional["Node[T]"] = None


RemoveResult = tuple[Optional[Node[Any]], bool]


class BinarySearchTree(Generic[T]):
    """Ordered container supporting lookup, removal and traversal."""

    __slots__ = ("_root", "_compare")

    def __init__(self, ordering: Optional[Ordering] = None) -> None:
        if ordering is None:
            ordering = natural_order
        if not callable(ordering):
            raise TypeError("ordering must be a callable returning an int")
        self._root: Optional[Node[T]] = None
        self._compare: Ordering = ordering

    @property
    def ordering(self) -> Ordering:
        """Comparator used for every structural decision."""

        return self._compare

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, value: T) -> bool:
        """Insert *value* as a new leaf; always returns ``True``."""

        new_node: Node[T] = Node(value)
        if self._root is None:
            self._root = new_node
            return True

        node = self._root
        while True:
            if self._compare(value, node.value) <= 0:
                if node.left is None:
                    node.left = new_node
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return True
                node = node.right

    def extend(self, values: Iterable[T]) -> None:
        """Insert each of *values* in iteration order."""

        for value in values:
            self.insert(value)

    def remove(self, target: T) -> bool:
        """Remove one value comparing equal to *target*.

        Returns ``True`` when a match was found and spliced out.  A node with
        two children takes over its predecessor's value and the predecessor's
        original occurrence is removed from the left subtree instead.
        """

        self._root, removed = self._remove_from(self._root, target)
        if not removed:
            logger.debug("remove(%r) found no matching value", target)
        return removed

    def _remove_from(self, subtree: Optional[Node[T]], target: T) -> RemoveResult:
        parent: Optional[Node[T]] = None
        went_left = False
        node = subtree
        while node is not None:
            order = self._compare(target, node.value)
            if order == 0:
                break
            parent, went_left = node, order < 0
            node = node.left if went_left else node.right
        if node is None:
            return subtree, False

        replacement = self._splice(node)
        if parent is None:
            return replacement, True
        if went_left:
            parent.left = replacement
        else:
            parent.right = replacement
        return subtree, True

    def _splice(self, node: Node[T]) -> Optional[Node[T]]:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left

        predecessor = node.left
        while predecessor.right is not None:
            predecessor = predecessor.right
        node.value = predecessor.value
        node.left, _ = self._remove_from(node.left, predecessor.value)
        return node

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        return self._root is None

    def is_full(self) -> bool:
        """Linked trees have no fixed capacity."""

        return False

    def contains(self, target: T) -> bool:
        return self._find(target) is not None

    def get(self, target: T) -> Optional[T]:
        """Return the stored value comparing equal to *target*, or ``None``."""

        node = self._find(target)
        return None if node is None else node.value

    def _find(self, target: T) -> Optional[Node[T]]:
        node = self._root
        while node is not None:
            order = self._compare(target, node.value)
            if order == 0:
                return node
            node = node.left if order < 0 else node.right
        return None

    def min(self) -> Optional[T]:
        if self._root is None:
            return None
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> Optional[T]:
        if self._root is None:
            return None
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def size(self) -> int:
        """Count nodes as one plus the sizes of both subtrees.

        Subtree sizes are combined in postorder on an explicit stack, so deep
        trees do not exhaust the interpreter's call stack.
        """

        if self._root is None:
            return 0
        sizes: dict[int, int] = {}
        stack: Deque[tuple[Node[T], bool]] = deque([(self._root, False)])
        while stack:
            node, children_done = stack.pop()
            if children_done:
                left = sizes.pop(id(node.left), 0)
                right = sizes.pop(id(node.right), 0)
                sizes[id(node)] = 1 + left + right
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))
        return sizes[id(self._root)]

    def size_iterative(self) -> int:
        """Count nodes with an explicit stack, visiting each node once."""

        count = 0
        if self._root is None:
            return count
        stack: Deque[Node[T]] = deque([self._root])
        while stack:
            node = stack.pop()
            count += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return count

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def preorder(self) -> Iterator[T]:
        """Yield values as (node, left, right)."""

        return iter(self.subtree_preorder(self._root))

    def inorder(self) -> Iterator[T]:
        """Yield values in ascending order."""

        queue: Deque[T] = deque()
        stack: Deque[Node[T]] = deque()
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            queue.append(node.value)
            node = node.right
        return iter(queue)

    def postorder(self) -> Iterator[T]:
        """Yield values as (left, right, node)."""

        # Reversed (node, right, left) order.
        queue: Deque[T] = deque()
        stack: Deque[Node[T]] = deque()
        if self._root is not None:
            stack.append(self._root)
        while stack:
            node = stack.pop()
            queue.appendleft(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return iter(queue)

    # ------------------------------------------------------------------
    # Layout support
    # ------------------------------------------------------------------
    @property
    def root_node(self) -> Optional[Node[T]]:
        """Root cell, read by the layout and renderer modules."""

        return self._root

    def subtree_preorder(self, node: Optional[Node[T]]) -> Deque[T]:
        """Return the values below *node* (inclusive) in preorder."""

        queue: Deque[T] = deque()
        stack: Deque[Node[T]] = deque()
        if node is not None:
            stack.append(node)
        while stack:
            current = stack.pop()
            queue.append(current.value)
            if current.right is not None:
                stack.append(current.right)
            if current.left is not None:
                stack.append(current.left)
        return queue

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, sink: Optional[TextIO] = None) -> None:
        """Draw the tree as text lines on *sink* (``sys.stdout`` by default)."""

        from .renderer import TreeRenderer

        TreeRenderer(self).render(sys.stdout if sink is None else sink)

    def to_text(self) -> str:
        from .renderer import render_text

        return render_text(self)

    # ------------------------------------------------------------------
    # Python protocol helpers
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, target: object) -> bool:
        return self.contains(target)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.inorder())!r})"
