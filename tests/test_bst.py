import pytest

from dstextbook.bst import (
    BinarySearchTree,
    BSTNode,
    DuplicateKeyError,
    search_with_count,
)

INITIAL = ["G", "I", "H", "D", "B", "M", "N", "A", "J", "E", "Q"]


@pytest.fixture
def tree():
    return BinarySearchTree(INITIAL)


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(INITIAL)
    assert list(tree) == sorted(INITIAL)


def test_first_key_is_root(tree):
    assert tree.root.key == INITIAL[0]


def test_duplicate_insert_raises(tree):
    with pytest.raises(DuplicateKeyError):
        tree.insert("H")
    assert tree.inorder() == sorted(INITIAL)


def test_search_found_and_missing(tree):
    node = tree.search("J")
    assert node.key == "J"
    assert tree.search("Z") is None
    assert "M" in tree
    assert "C" not in tree


@pytest.mark.parametrize("key", ["A", "N", "D", "G"])
def test_delete_keeps_order(tree, key):
    tree.delete(key)
    expected = sorted(k for k in INITIAL if k != key)
    assert tree.inorder() == expected
    assert key not in tree


def test_delete_two_children_uses_left_maximum(tree):
    tree.delete("G")
    assert tree.root.key == max(k for k in INITIAL if k < "G")


def test_delete_missing_raises(tree):
    with pytest.raises(KeyError):
        tree.delete("Z")


def test_delete_only_node_empties_tree():
    tree = BinarySearchTree(["X"])
    tree.delete("X")
    assert tree.root is None
    assert tree.inorder() == []


def test_delete_root_with_one_child():
    tree = BinarySearchTree([5, 8, 9])
    tree.delete(5)
    assert tree.root.key == 8
    assert tree.inorder() == [8, 9]


@pytest.mark.parametrize("n", [1, 4, 9])
def test_search_count_along_chain(n):
    tree = BinarySearchTree(range(1, n + 1))
    for k in range(1, n + 1):
        node, count = tree.search_with_count(k)
        assert node.key == k
        assert count == k
    node, count = tree.search_with_count(n + 1)
    assert node is None
    assert count == n + 1


def test_module_search_with_count_on_node():
    root = BSTNode(10, left=BSTNode(5))
    node, count = search_with_count(root, 5)
    assert node is root.left
    assert count == 2