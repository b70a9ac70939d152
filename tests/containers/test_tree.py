from __future__ import annotations

import random

import pytest

from bstree import BinarySearchTree, by_key, reversed_order


def _tree(values) -> BinarySearchTree:
    tree: BinarySearchTree = BinarySearchTree()
    tree.extend(values)
    return tree


def test_new_tree_is_empty() -> None:
    tree: BinarySearchTree[int] = BinarySearchTree()
    assert tree.is_empty()
    assert not tree
    assert tree.size() == 0
    assert tree.size_iterative() == 0
    assert tree.min() is None
    assert tree.max() is None
    assert list(tree.inorder()) == []
    assert tree.is_full() is False


def test_insert_always_succeeds_and_grows() -> None:
    tree: BinarySearchTree[int] = BinarySearchTree()
    assert tree.insert(5) is True
    assert tree.insert(5) is True
    assert tree.size() == 2
    assert len(tree) == 2


def test_inorder_of_sample_string_is_sorted() -> None:
    tree = _tree("DBACGHJK")
    assert "".join(tree.inorder()) == "ABCDGHJK"
    assert "".join(tree.preorder()) == "DBACGHJK"
    assert "".join(tree.postorder()) == "ACBKJHGD"


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
def test_inorder_is_non_decreasing_for_random_inserts(seed: int) -> None:
    rng = random.Random(seed)
    values = [rng.randint(0, 30) for _ in range(60)]
    tree = _tree(values)
    assert list(tree.inorder()) == sorted(values)
    assert tree.size() == tree.size_iterative() == len(values)
    assert tree.min() == min(values)
    assert tree.max() == max(values)


def test_duplicates_route_left() -> None:
    tree = _tree([5, 5, 5])
    root = tree._root
    assert root is not None
    assert root.right is None
    assert root.left is not None and root.left.left is not None


def test_contains_and_get() -> None:
    tree = _tree([8, 3, 10, 1, 6])
    assert tree.contains(6)
    assert 10 in tree
    assert not tree.contains(7)
    assert tree.get(3) == 3
    assert tree.get(99) is None


def test_get_returns_stored_value_for_equivalent_target() -> None:
    tree: BinarySearchTree[tuple[str, int]] = BinarySearchTree(by_key(lambda item: item[0]))
    tree.insert(("carol", 31))
    tree.insert(("alice", 42))
    assert tree.get(("alice", 0)) == ("alice", 42)
    assert tree.get(("bob", 0)) is None


def test_custom_ordering_reverses_traversal() -> None:
    tree: BinarySearchTree[int] = BinarySearchTree(reversed_order(lambda a, b: a - b))
    tree.extend([2, 9, 4, 1])
    assert list(tree) == [9, 4, 2, 1]
    assert tree.min() == 9
    assert tree.max() == 1


def test_non_callable_ordering_is_rejected() -> None:
    with pytest.raises(TypeError):
        BinarySearchTree(ordering=3)  # type: ignore[arg-type]


def test_strictly_increasing_inserts_build_right_chain() -> None:
    tree = _tree("ABCDE")
    node = tree._root
    seen = []
    while node is not None:
        assert node.left is None
        seen.append(node.value)
        node = node.right
    assert seen == list("ABCDE")


def test_remove_leaf_and_missing_value() -> None:
    tree = _tree([8, 3, 10])
    assert tree.remove(10) is True
    assert not tree.contains(10)
    assert tree.size() == 2

    before = list(tree.preorder())
    assert tree.remove(99) is False
    assert list(tree.preorder()) == before


def test_remove_root_without_left_child_keeps_right_child() -> None:
    tree = _tree("AB")
    assert tree.remove("A")
    assert list(tree.preorder()) == ["B"]


def test_remove_root_without_right_child_keeps_left_child() -> None:
    tree = _tree("BA")
    assert tree.remove("B")
    assert list(tree.preorder()) == ["A"]


def test_remove_two_child_node_promotes_predecessor() -> None:
    tree = _tree("DBACGHJK")
    assert tree.remove("D")
    assert list(tree.preorder()) == list("CBAGHJK")
    assert "".join(tree.inorder()) == "ABCGHJK"


def test_remove_deletes_one_occurrence_of_duplicates() -> None:
    tree = _tree([4, 2, 4, 6, 4])
    assert tree.remove(4)
    assert tree.size() == 4
    assert tree.contains(4)
    assert list(tree.inorder()) == [2, 4, 4, 6]


@pytest.mark.parametrize("seed", [3, 11, 99])
def test_removing_every_value_empties_tree(seed: int) -> None:
    rng = random.Random(seed)
    values = rng.sample(range(100), 40)
    tree = _tree(values)
    rng.shuffle(values)
    expected = sorted(values)
    for value in values:
        size = tree.size()
        assert tree.remove(value)
        expected.remove(value)
        assert tree.size() == size - 1
        assert tree.size_iterative() == size - 1
        assert not tree.contains(value)
        assert list(tree.inorder()) == expected
    assert tree.is_empty()


def test_traversal_is_a_snapshot() -> None:
    tree = _tree([2, 1, 3])
    values = tree.inorder()
    tree.insert(0)
    assert list(values) == [1, 2, 3]
    assert list(values) == []


def test_repr_lists_sorted_values() -> None:
    assert repr(_tree([2, 1])) == "BinarySearchTree([1, 2])"


DEEP = 1200


def test_deep_right_chain_supports_every_query() -> None:
    tree = _tree(range(DEEP))
    assert len(tree) == DEEP
    assert tree.size() == tree.size_iterative() == DEEP
    assert list(tree.inorder()) == list(range(DEEP))
    assert list(tree.preorder()) == list(range(DEEP))
    assert list(tree.postorder()) == list(reversed(range(DEEP)))

    assert tree.remove(DEEP // 2)
    assert tree.remove(DEEP - 1)
    assert tree.remove(0)
    assert len(tree) == DEEP - 3
    assert not tree.contains(DEEP // 2)

    lines = tree.to_text().splitlines()
    assert len(lines) == 1 + 2 * (DEEP - 4)
    assert lines[0] == "1"
    assert lines[-1] == " " * (2 * (DEEP - 4)) + str(DEEP - 2)


def test_deep_left_chain_supports_removal_and_traversal() -> None:
    tree = _tree(reversed(range(DEEP)))
    assert len(tree) == DEEP
    assert list(tree) == list(range(DEEP))
    assert tree.remove(DEEP - 1)
    assert tree.remove(3)
    assert tree.size() == DEEP - 2
    assert tree.max() == DEEP - 2


def test_subtree_preorder_starts_at_given_node() -> None:
    tree = _tree("DBACGHJK")
    root = tree.root_node
    assert root is not None and root.value == "D"
    assert "".join(tree.subtree_preorder(root.left)) == "BAC"
    assert "".join(tree.subtree_preorder(root.right)) == "GHJK"
    assert list(tree.subtree_preorder(None)) == []
