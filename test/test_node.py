import pytest

from treeviz.node import TreeNode
from treeviz.samples import Sample
from treeviz.splits import Split


def make_node(id, samples, depth=0):
  return TreeNode(id=id, samples=samples, depth=depth, prediction='A', impurity=0.5)


def test_leaf_once():
  node = make_node(1, [Sample((0.0,), 'A'), Sample((1.0,), 'B')])
  assert not node.finalized
  assert not node.is_leaf and not node.is_split

  node.make_leaf()
  assert node.is_leaf
  assert not node.is_split

  with pytest.raises(AssertionError):
    node.make_leaf()
  with pytest.raises(AssertionError):
    node.make_split(Split(0, 0.5, 0.5, 0.0, 0.0), make_node(2, [], 1), make_node(3, [], 1))
  assert node.left is None and node.right is None


def test_split_once():
  a, b = Sample((0.0,), 'A'), Sample((1.0,), 'B')
  node = make_node(1, [a, b])
  left, right = make_node(2, [a], 1), make_node(3, [b], 1)

  node.make_split(Split(0, 0.5, 0.5, 0.0, 0.0), left, right)
  assert node.is_split
  assert not node.is_leaf
  assert (node.feature_index, node.threshold, node.info_gain) == (0, 0.5, 0.5)
  assert node.children() == [left, right]

  with pytest.raises(AssertionError):
    node.make_leaf()
  with pytest.raises(AssertionError):
    node.make_split(Split(0, 0.5, 0.5, 0.0, 0.0), left, right)
  assert node.left is left


def test_split_needs_both_children():
  a, b = Sample((0.0,), 'A'), Sample((1.0,), 'B')
  node = make_node(1, [a, b])
  with pytest.raises(AssertionError):
    node.make_split(Split(0, 0.5, 0.5, 0.0, 0.0), make_node(2, [a], 1), None)
  assert not node.finalized


def test_split_children_cover_samples():
  a, b = Sample((0.0,), 'A'), Sample((1.0,), 'B')
  node = make_node(1, [a, b])
  with pytest.raises(AssertionError):
    node.make_split(Split(0, 0.5, 0.5, 0.0, 0.0), make_node(2, [a], 1), make_node(3, [], 1))
