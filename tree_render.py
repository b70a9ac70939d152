"""Command line demonstration for the ``bstree`` text renderer.

Each input string seeds a fresh tree one character at a time (ties route
left) and the resulting shape is printed below a short header.  Inputs come
from the command line, from a JSON/YAML file passed with ``--inputs-file`` or,
by default, from :data:`bstree.config.DEFAULT_DEMO_INPUTS`.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from bstree import BinarySearchTree, DemoConfigError, load_demo_inputs

logger = logging.getLogger(__name__)


def build_tree(text: str) -> BinarySearchTree[str]:
    """Insert the characters of *text* into a new tree."""

    tree: BinarySearchTree[str] = BinarySearchTree()
    tree.extend(text)
    return tree


def _header(text: str) -> List[str]:
    return ["\n\n", f"Tree for input: {text}", "PRINT TREE"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render binary search trees seeded from sample strings.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        help="Strings to insert character by character. Overrides --inputs-file.",
    )
    parser.add_argument(
        "--inputs-file",
        type=Path,
        default=None,
        help="JSON or YAML file listing the input strings.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def _emit(texts: Iterable[str]) -> int:
    count = 0
    for text in texts:
        for line in _header(text):
            print(line)
        build_tree(text).render()
        count += 1
    return count


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render every configured input and return the process exit status."""

    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.inputs:
        texts = tuple(args.inputs)
    else:
        try:
            texts = load_demo_inputs(args.inputs_file)
        except DemoConfigError as exc:
            logger.error("Failed to load demo inputs: %s", exc)
            return 1

    rendered = _emit(texts)
    logger.info("Rendered %d trees", rendered)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
