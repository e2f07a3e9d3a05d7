from collections import deque
from typing import Any, Deque, Iterable, List, Optional, Sequence

import numpy as np

from treeviz.params import Params, DEBUG_STATS, check_params
from treeviz.samples import Sample, as_samples, check_samples, feature_matrix
from treeviz.splits import best_split, gini_impurity, majority_label, partition
from treeviz.node import TreeNode
from treeviz.events import Event, LeafEvent, SplitEvent, DoneEvent, describe_event


class ShortFeatureVector(IndexError):
  pass


# A binary tree that grows breadth-first, one node decision per step.
#
# The caller owns the builder and pulls events from it:
#   - one LeafEvent or SplitEvent per node taken off the queue
#   - one DoneEvent once the queue is empty
# after which the builder is finished and yields nothing more.
#
# A split is announced before either child is expanded, and both children
# go to the back of the queue together, so every depth-d node is decided
# before any depth-(d+1) node.
class TreeBuilder:

  def __init__(self, samples: Sequence[Sample], params: Params):
    check_params(params)
    self.feature_count = check_samples(samples)
    self.params = params

    # per-build, so ids restart at 1 for every builder
    self._next_id = 1
    self._queue: Deque[TreeNode] = deque()

    self.root = self._create_node(list(samples), 0)
    self._queue.append(self.root)
    self.finished = False

  def _create_node(self, samples: List[Sample], depth: int) -> TreeNode:
    node = TreeNode(
      id=self._next_id,
      samples=samples,
      depth=depth,
      prediction=majority_label(samples),
      impurity=gini_impurity(samples),
    )
    self._next_id += 1
    return node

  def _expand(self, node: TreeNode) -> Event:
    params = self.params
    if (node.depth >= params.max_depth
        or len(node.samples) < params.min_samples_split
        or node.impurity == 0):
      node.make_leaf()
      return LeafEvent(node)

    split = best_split(feature_matrix(node.samples), [s.label for s in node.samples])
    if split is None or split.info_gain <= 0:
      node.make_leaf()
      return LeafEvent(node)

    left_samples, right_samples = partition(node.samples, split.feature_index, split.threshold)
    left = self._create_node(left_samples, node.depth + 1)
    right = self._create_node(right_samples, node.depth + 1)
    node.make_split(split, left, right)

    # the queue is only read on the next call, so the event still
    # reaches the caller before either child is expanded
    self._queue.append(left)
    self._queue.append(right)
    return SplitEvent(node, left, right, split)

  def next_event(self) -> Optional[Event]:
    ''' decide one node, or None once the build is finished '''
    if self.finished:
      return None

    event: Event
    if self._queue:
      event = self._expand(self._queue.popleft())
    else:
      event = DoneEvent(self.root)
      self.finished = True

    if DEBUG_STATS:
      print(f'{event.type}: {describe_event(event)}')
    return event

  def __iter__(self):
    return self

  def __next__(self) -> Event:
    event = self.next_event()
    if event is None:
      raise StopIteration
    return event

  def take(self, n: int) -> List[Event]:
    ''' at most n more events '''
    if n < 0:
      raise ValueError(f'take expects n >= 0, got {n}')
    events = []
    while len(events) < n:
      event = self.next_event()
      if event is None:
        break
      events.append(event)
    return events

  def drain(self) -> List[Event]:
    ''' all remaining events, ending with the DoneEvent '''
    return list(self)


def build_tree_stepwise(
    samples: Iterable[Any],
    max_depth: int = 3,
    min_samples_split: int = 2
) -> TreeBuilder:
  return TreeBuilder(as_samples(samples), Params(max_depth, min_samples_split))


def build_tree(samples: Iterable[Any], params: Optional[Params] = None) -> TreeNode:
  ''' build to completion and return the root '''
  builder = TreeBuilder(as_samples(samples), params or Params())
  events = builder.drain()
  assert isinstance(events[-1], DoneEvent)
  return events[-1].root


def decision_path(root: Optional[TreeNode], features: Sequence[float]) -> List[TreeNode]:
  '''
  nodes visited from the root to the node that decides the prediction;
  feature <= threshold goes left, > goes right
  '''
  if root is None:
    return []

  node = root
  path = [node]
  while (node.left is not None and node.right is not None
      and node.feature_index is not None and node.threshold is not None):
    if node.feature_index >= len(features):
      raise ShortFeatureVector(
        f'node #{node.id} splits on feature {node.feature_index} '
        + f'but the point has {len(features)} features')

    if features[node.feature_index] <= node.threshold:
      node = node.left
    else:
      node = node.right
    path.append(node)

  return path


def classify(root: Optional[TreeNode], features: Sequence[float]) -> Optional[str]:
  ''' predicted label, or None if there is no tree yet '''
  path = decision_path(root, features)
  if not path:
    return None
  return path[-1].prediction


def predict(root: TreeNode, X: np.ndarray) -> np.ndarray:
  X = np.asarray(X, dtype=np.float64)
  assert X.ndim == 2
  preds = np.empty(len(X), dtype=object)
  for i in range(X.shape[0]):
    preds[i] = classify(root, X[i])
  return preds
