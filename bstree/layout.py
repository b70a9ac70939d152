"""Horizontal layout for text renderings of a :class:`BinarySearchTree`.

Every node receives an integer column relative to the root (column ``0``):
left-subtree nodes land on negative columns and right-subtree nodes on
positive ones.  Each step along the root-to-node path moves the node two
columns outward when it follows the subtree's side and two columns inward when
it doubles back.  A global *offset* pushes every non-root node further outward
so that no node doubles back across the root's column; the smallest sufficient
offset is searched in steps of two.

Coordinates are derived from values on every call and never stored on nodes,
so a layout always reflects the tree's current shape.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .tree import BinarySearchTree, Node

logger = logging.getLogger(__name__)

OFFSET_STEP = 2
COLUMN_STEP = 2

__all__ = [
    "COLUMN_STEP",
    "LayoutError",
    "OFFSET_STEP",
    "Position",
    "TreeLayout",
]


class LayoutError(LookupError):
    """Raised when a layout query cannot be answered for the current tree."""


@dataclass(frozen=True, slots=True)
class Position:
    """Column of a node together with the offset that made it non-negative."""

    column: int
    offset: int


class TreeLayout:
    """Column assignment for the nodes of a single tree."""

    def __init__(self, tree: "BinarySearchTree[Any]") -> None:
        self._tree = tree

    def _require_root(self) -> "Node[Any]":
        root = self._tree.root_node
        if root is None:
            raise LayoutError("cannot lay out an empty tree")
        return root

    def position_of(self, target: Any, offset: int = 0) -> Position:
        """Return the column of *target* when laid out with at least *offset*.

        The returned offset is the smallest value ``>= offset`` (in steps of
        :data:`OFFSET_STEP`) that keeps the node's outward distance
        non-negative.  The root always sits on column ``0``.
        """

        root = self._require_root()
        compare = self._tree.ordering
        side = -1 if compare(target, root.value) < 0 else 1

        travel = 0
        node: Optional["Node[Any]"] = root
        while True:
            if node is None:
                raise LayoutError(f"value {target!r} is not stored in the tree")
            order = compare(target, node.value)
            if order == 0:
                break
            if order < 0:
                node = node.left
                travel -= COLUMN_STEP * side
            else:
                node = node.right
                travel += COLUMN_STEP * side

        if node is root:
            return Position(column=0, offset=offset)

        distance = offset + travel
        while distance < 0:
            offset += OFFSET_STEP
            distance += OFFSET_STEP
        return Position(column=distance * side, offset=offset)

    def required_offset(self) -> int:
        """Smallest offset that places every non-root node without crossing."""

        self._require_root()
        offset = 0
        values = self._tree.preorder()
        next(values)  # root
        for value in values:
            offset = max(offset, self.position_of(value, offset).offset)
        if offset:
            logger.debug("Layout of %d nodes needs offset %d", self._tree.size(), offset)
        return offset

    def left_extent(self) -> int:
        """Most negative column used by the root's left subtree (``<= 0``)."""

        root = self._require_root()
        offset = self.required_offset()
        extent = 0
        for value in self._tree.subtree_preorder(root.left):
            extent = min(extent, self.position_of(value, offset).column)
        return extent

    @staticmethod
    def last_descendant(node: Optional["Node[Any]"]) -> Optional["Node[Any]"]:
        """Return the child enqueued last for *node*, preferring the right one."""

        if node is None:
            return None
        if node.right is not None:
            return node.right
        return node.left

