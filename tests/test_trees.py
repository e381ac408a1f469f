import pytest

from algobox.trees import (
    NaryNode,
    TreeNode,
    are_identical,
    has_path_sum,
    is_balanced,
    read_tree_level_wise,
)


def _path_tree():
    return TreeNode(
        5,
        TreeNode(4, TreeNode(11, TreeNode(7), TreeNode(2))),
        TreeNode(8, TreeNode(13), TreeNode(4, None, TreeNode(1))),
    )


def _serialize(root):
    tokens = [root.data]
    queue = [root]
    while queue:
        node = queue.pop(0)
        tokens.append(len(node.children))
        for child in node.children:
            tokens.append(child.data)
            queue.append(child)
    return tokens


def test_path_sum_found():
    assert has_path_sum(_path_tree(), 5 + 4 + 11 + 2)


def test_path_sum_must_end_at_leaf():
    assert not has_path_sum(_path_tree(), 5 + 4)


def test_path_sum_empty_tree():
    assert not has_path_sum(None, 0)


def test_path_sum_single_node():
    assert has_path_sum(TreeNode(3), 3)
    assert not has_path_sum(TreeNode(3), 4)


def test_balanced_tree():
    assert is_balanced(_path_tree().left.left)
    assert is_balanced(TreeNode(1, TreeNode(2), TreeNode(3, TreeNode(4))))


def test_empty_tree_is_balanced():
    assert is_balanced(None)


def test_chain_is_not_balanced():
    chain = TreeNode(1, TreeNode(2, TreeNode(3)))
    assert not is_balanced(chain)


def test_deep_imbalance_detected():
    subtree = TreeNode(2, TreeNode(3, TreeNode(4)))
    assert not is_balanced(TreeNode(1, subtree, TreeNode(5, TreeNode(6), TreeNode(7))))


def test_read_tree_level_wise():
    root = read_tree_level_wise([1, 2, 2, 3, 1, 4, 0, 0])
    assert root.data == 1
    assert [child.data for child in root.children] == [2, 3]
    assert [child.data for child in root.children[0].children] == [4]
    assert root.children[1].children == []


def test_read_tree_accepts_string_tokens():
    root = read_tree_level_wise("10 1 20 0".split())
    assert root.data == 10
    assert root.children[0].data == 20


def test_read_tree_round_trip():
    tokens = [1, 3, 2, 3, 4, 2, 5, 6, 0, 1, 7, 0, 0, 0]
    assert _serialize(read_tree_level_wise(tokens)) == tokens


def test_read_tree_truncated():
    with pytest.raises(ValueError):
        read_tree_level_wise([1, 2, 5])


def test_identical_trees():
    tokens = [1, 2, 2, 3, 1, 4, 0, 0]
    assert are_identical(read_tree_level_wise(tokens), read_tree_level_wise(tokens))


def test_different_data():
    first = read_tree_level_wise([1, 2, 2, 3, 0, 0, 0])
    second = read_tree_level_wise([1, 2, 2, 9, 0, 0, 0])
    assert not are_identical(first, second)


def test_different_shape():
    first = read_tree_level_wise([1, 1, 2, 0])
    second = read_tree_level_wise([1, 2, 2, 3, 0, 0])
    assert not are_identical(first, second)


def test_identical_with_none():
    assert are_identical(None, None)
    assert not are_identical(NaryNode(1), None)