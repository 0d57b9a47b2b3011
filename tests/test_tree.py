from collections import Counter

import pytest

from goolzip.tree import MAX_FREQUENCY, TreeNode, build_huffman_tree


def _leaves(node, depth=0):
    if node.is_leaf():
        yield node, depth
        return
    for child in (node.left, node.right):
        if child is not None:
            yield from _leaves(child, depth + 1)


SAMPLE_TEXTS = [
    b"abracadabra",
    b"aaaaaaaaab",
    b"the quick brown fox jumps over the lazy dog",
    bytes(range(256)),
    b"\x00\x00\xff\xff\xff\x10",
]


def test_leaf_frequency_saturates():
    node = TreeNode.leaf(1, MAX_FREQUENCY + 5)
    assert node.frequency == MAX_FREQUENCY
    assert node.is_leaf()


def test_join_sums_frequencies():
    left = TreeNode.leaf(1, 4)
    right = TreeNode.leaf(2, 6)
    parent = TreeNode.join(left, right)
    assert parent.frequency == left.frequency + right.frequency
    assert parent.left is left and parent.right is right
    assert not parent.is_leaf()


def test_join_saturates():
    parent = TreeNode.join(TreeNode.leaf(1, MAX_FREQUENCY), TreeNode.leaf(2, MAX_FREQUENCY))
    assert parent.frequency == MAX_FREQUENCY


@pytest.mark.parametrize("symbol", [-1, 256])
def test_leaf_rejects_non_byte_symbol(symbol):
    with pytest.raises(ValueError):
        TreeNode.leaf(symbol, 1)


def test_leaf_rejects_negative_frequency():
    with pytest.raises(ValueError):
        TreeNode.leaf(3, -1)


@pytest.mark.parametrize("text", SAMPLE_TEXTS)
def test_root_frequency_is_total(text):
    root = build_huffman_tree(Counter(text))
    assert root.frequency == len(text)


@pytest.mark.parametrize("text", SAMPLE_TEXTS)
def test_each_symbol_is_one_leaf(text):
    root = build_huffman_tree(Counter(text))
    symbols = [leaf.symbol for leaf, _ in _leaves(root)]
    assert sorted(symbols) == sorted(set(text))


@pytest.mark.parametrize("text", SAMPLE_TEXTS)
def test_frequent_symbols_are_not_deeper(text):
    root = build_huffman_tree(Counter(text))
    leaves = list(_leaves(root))
    for a, depth_a in leaves:
        for b, depth_b in leaves:
            if a.frequency > b.frequency:
                assert depth_a <= depth_b


def test_single_symbol_tree_is_a_leaf():
    root = build_huffman_tree({42: 10})
    assert root.is_leaf()
    assert root.symbol == 42


def test_sequence_and_mapping_agree():
    text = b"mississippi"
    counts = Counter(text)
    table = [counts.get(i, 0) for i in range(256)]
    from_map = sorted((l.symbol, d) for l, d in _leaves(build_huffman_tree(counts)))
    from_seq = sorted((l.symbol, d) for l, d in _leaves(build_huffman_tree(table)))
    assert from_map == from_seq


@pytest.mark.parametrize("frequencies", [{}, {5: 0, 9: 0}, [0] * 256])
def test_no_symbols_raises(frequencies):
    with pytest.raises(ValueError):
        build_huffman_tree(frequencies)