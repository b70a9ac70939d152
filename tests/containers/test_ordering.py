from __future__ import annotations

import pytest

from bstree import by_key, natural_order, reversed_order


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [(1, 2, -1), (2, 2, 0), ("b", "a", 1)],
)
def test_natural_order(left, right, expected: int) -> None:
    assert natural_order(left, right) == expected


def test_by_key_compares_extracted_keys() -> None:
    compare = by_key(len)
    assert compare("aaa", "b") == 1
    assert compare("aa", "bb") == 0


def test_reversed_order_flips_sign() -> None:
    compare = reversed_order(natural_order)
    assert compare(1, 2) == 1
    assert compare(2, 1) == -1


def test_builders_reject_non_callables() -> None:
    with pytest.raises(TypeError):
        by_key("name")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        reversed_order(None)  # type: ignore[arg-type]
