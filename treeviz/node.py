from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from treeviz.samples import Sample
from treeviz.splits import Split


@dataclass
class TreeNode:
  # unique within one build, assigned in creation order from 1
  id: int

  # the samples routed here; shared with the caller, never copied or mutated
  samples: List[Sample] = field(repr=False)
  depth: int

  # set for every node, including split nodes
  prediction: str
  impurity: float

  # stay None for leaves
  feature_index: Optional[int] = None
  threshold: Optional[float] = None
  info_gain: Optional[float] = None
  left: Optional['TreeNode'] = None
  right: Optional['TreeNode'] = None

  # false until the builder decides leaf or split
  finalized: bool = False

  @property
  def is_leaf(self) -> bool:
    return self.finalized and self.left is None and self.right is None

  @property
  def is_split(self) -> bool:
    return self.finalized and self.left is not None and self.right is not None

  def make_leaf(self) -> None:
    assert not self.finalized, f'node {self.id} already finalized'
    self.left = None
    self.right = None
    self.finalized = True

  def make_split(self, split: Split, left: 'TreeNode', right: 'TreeNode') -> None:
    assert not self.finalized, f'node {self.id} already finalized'
    assert left is not None and right is not None, 'a split node needs both children'
    assert len(left.samples) + len(right.samples) == len(self.samples)
    self.feature_index = split.feature_index
    self.threshold = split.threshold
    self.info_gain = split.info_gain
    self.left = left
    self.right = right
    self.finalized = True

  def children(self) -> List['TreeNode']:
    return [c for c in (self.left, self.right) if c is not None]

  def __str__(self, level = 0):
    ''' recursively print the tree '''
    indent = '    ' * level
    if self.left is None or self.right is None:
      # leaf, or not expanded yet while stepping
      pending = '' if self.finalized else ' (pending)'
      return (f'{indent}#{self.id}{pending} predict: {self.prediction}, '
        + f'count: {len(self.samples)}, impurity: {self.impurity:.3f}\n')
    else:
      return (f'{indent}#{self.id} f{self.feature_index} <= {self.threshold} '
        + f'(gain {self.info_gain:.4f}):\n'
        + self.left.__str__(level + 1)
        + self.right.__str__(level + 1))


def iter_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
  ''' breadth-first, left before right; matches creation order for built trees '''
  if root is None:
    return
  queue = deque([root])
  while queue:
    node = queue.popleft()
    yield node
    queue.extend(node.children())


def node_count(root: Optional[TreeNode]) -> int:
  return sum(1 for _ in iter_nodes(root))


def leaf_count(root: Optional[TreeNode]) -> int:
  ''' finalized leaves only; nodes still pending in a partial tree are not counted '''
  return sum(1 for n in iter_nodes(root) if n.is_leaf)


def tree_depth(root: Optional[TreeNode]) -> int:
  ''' depth of the deepest node, or -1 for no tree '''
  return max((n.depth for n in iter_nodes(root)), default=-1)
