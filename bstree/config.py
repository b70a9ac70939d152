"""Sample inputs for the ``tree-render`` demonstration.

The demo seeds one tree per input string, inserting the string's characters
one at a time.  Inputs default to :data:`DEFAULT_DEMO_INPUTS` and can be
replaced with a JSON or YAML file holding either a list of strings or a
mapping with an ``inputs`` list::

    inputs:
      - DBACGHJK
      - ABCDE
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_DEMO_INPUTS: Tuple[str, ...] = (
    "DBACGHJK",
    "DACBEFMLGHJK",
    "JABCDEFISRQPON",
    "NYUEMRACOPTB",
    "PROFESMDYLAGIVHUN",
    "GAQPEDCBMNTVX",
)

_YAML_SUFFIXES = {".yaml", ".yml"}

__all__ = [
    "DEFAULT_DEMO_INPUTS",
    "DemoConfigError",
    "load_demo_inputs",
]


class DemoConfigError(ValueError):
    """Raised when a demo input file is missing or malformed."""


def _parse(path: Path, text: str) -> Any:
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DemoConfigError(f"Invalid YAML in demo inputs {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DemoConfigError(f"Invalid JSON in demo inputs {path}: {exc}") from exc


def load_demo_inputs(path: Optional[Path]) -> Tuple[str, ...]:
    """Return the demo input strings stored at *path*.

    ``None`` selects the built-in defaults.
    """

    if path is None:
        return DEFAULT_DEMO_INPUTS

    path = Path(path)
    if not path.exists():
        raise DemoConfigError(f"Demo inputs file not found: {path}")

    data = _parse(path, path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("inputs")
    if not isinstance(data, Sequence) or isinstance(data, str):
        raise DemoConfigError("Demo inputs must be a list of strings or contain an 'inputs' list")

    inputs = []
    for index, entry in enumerate(data):
        if not isinstance(entry, str):
            raise DemoConfigError(f"Demo input #{index} must be a string, got {entry!r}")
        inputs.append(entry)

    logger.debug("Loaded %d demo inputs from %s", len(inputs), path)
    return tuple(inputs)
