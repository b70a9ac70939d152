"""Breadth-first text renderer for :class:`~bstree.tree.BinarySearchTree`.

The renderer writes the root's label first and then, for each level of the
tree, one line of branch arrows (``/`` for a left child, ``\\`` for a right
child) followed by one line of labels.  Columns come from
:class:`~bstree.layout.TreeLayout`; the whole drawing is shifted right by the
width of the root's left subtree so nothing lands on a negative column.

A level is flushed as soon as the node tracked as the level's last descendant
has been enqueued.  The tracked node advances along
:meth:`TreeLayout.last_descendant`; once that chain runs out, every dequeued
node that contributed children is flushed on its own.

Labels are assumed to be one character wide.
"""

from __future__ import annotations

from collections import deque
import io
import logging
from typing import TYPE_CHECKING, Any, Deque, List, Optional, TextIO

from .layout import TreeLayout

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .tree import BinarySearchTree, Node

logger = logging.getLogger(__name__)

LEFT_ARROW = "/"
RIGHT_ARROW = "\\"

__all__ = [
    "LEFT_ARROW",
    "RIGHT_ARROW",
    "TreeRenderer",
    "render_text",
]


def _pad(width: int) -> str:
    return " " * width if width > 0 else ""


class TreeRenderer:
    """Draws one tree onto a text sink."""

    def __init__(self, tree: "BinarySearchTree[Any]") -> None:
        self._tree = tree
        self._layout = TreeLayout(tree)

    @property
    def layout(self) -> TreeLayout:
        return self._layout

    @staticmethod
    def arrow_positions(node: "Node[Any]", column_base: int, repetition: int) -> List[int]:
        """Arrow columns under a label drawn just before *column_base*."""

        columns: List[int] = []
        if node.left is not None:
            columns.append(column_base - 2 - repetition)
        if node.right is not None:
            columns.append(column_base + repetition)
        return columns

    def render(self, sink: TextIO) -> None:
        root = self._tree.root_node
        if root is None:
            return

        offset = self._layout.required_offset()
        indent = abs(self._layout.left_extent())
        sink.write(f"{_pad(indent)}{root.value}\n")

        arrow_columns: List[int] = []
        for repetition in range(offset + 1):
            arrow_columns.extend(self.arrow_positions(root, indent + 1, repetition))

        tracked = TreeLayout.last_descendant(root)
        printed: Optional["Node[Any]"] = None
        pending: List["Node[Any]"] = []
        arrows: List[str] = []
        levels = 0

        queue: Deque["Node[Any]"] = deque([root])
        while queue:
            current = queue.popleft()
            for child, glyph in ((current.left, LEFT_ARROW), (current.right, RIGHT_ARROW)):
                if child is not None:
                    queue.append(child)
                    pending.append(child)
                    arrows.append(glyph)
                    printed = child

            if printed is tracked or (pending and tracked is None):
                self._write_arrows(sink, arrow_columns, arrows)
                arrow_columns = self._write_labels(sink, pending, offset, indent)
                arrows.clear()
                pending.clear()
                tracked = TreeLayout.last_descendant(tracked)
                levels += 1

        logger.debug("Rendered %d flushes with offset %d and indent %d", levels, offset, indent)

    @staticmethod
    def _write_arrows(sink: TextIO, columns: List[int], arrows: List[str]) -> None:
        # Extra columns come from the root's repeated arrows; each left/right
        # pair of repetitions gets its own line.
        cursor = 0
        for index, column in enumerate(columns):
            slot = index % len(arrows)
            sink.write(_pad(column - cursor) + arrows[slot])
            cursor = column + 1
            if slot == 1 and len(columns) > len(arrows):
                cursor = 0
                sink.write("\n")
        if len(columns) == len(arrows):
            sink.write("\n")

    def _write_labels(
        self,
        sink: TextIO,
        nodes: List["Node[Any]"],
        offset: int,
        indent: int,
    ) -> List[int]:
        next_columns: List[int] = []
        cursor = 0
        for node in nodes:
            column = self._layout.position_of(node.value, offset).column + indent
            sink.write(_pad(column - cursor) + str(node.value))
            next_columns.extend(self.arrow_positions(node, column + 1, 0))
            cursor = column + 1
        sink.write("\n")
        return next_columns


def render_text(tree: "BinarySearchTree[Any]") -> str:
    """Return the rendering of *tree* as a string."""

    buffer = io.StringIO()
    TreeRenderer(tree).render(buffer)
    return buffer.getvalue()
