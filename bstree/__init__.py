"""Binary search tree container with a text-mode layout renderer."""

from .config import DEFAULT_DEMO_INPUTS, DemoConfigError, load_demo_inputs
from .layout import LayoutError, Position, TreeLayout
from .ordering import Ordering, by_key, natural_order, reversed_order
from .renderer import TreeRenderer, render_text
from .tree import BinarySearchTree, Node

__all__ = [
    "BinarySearchTree",
    "DEFAULT_DEMO_INPUTS",
    "DemoConfigError",
    "LayoutError",
    "Node",
    "Ordering",
    "Position",
    "TreeLayout",
    "TreeRenderer",
    "by_key",
    "load_demo_inputs",
    "natural_order",
    "render_text",
    "reversed_order",
]
