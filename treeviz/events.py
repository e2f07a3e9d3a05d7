from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Union

from treeviz.node import TreeNode, node_count, leaf_count
from treeviz.splits import Split
from treeviz.utils import format_number, label_color


@dataclass
class LeafEvent:
  type: ClassVar[str] = 'leaf'
  node: TreeNode


@dataclass
class SplitEvent:
  type: ClassVar[str] = 'split'
  node: TreeNode
  left_child: TreeNode
  right_child: TreeNode
  split: Split


@dataclass
class DoneEvent:
  type: ClassVar[str] = 'done'
  root: TreeNode


Event = Union[LeafEvent, SplitEvent, DoneEvent]


def describe_event(event: Event) -> str:
  ''' one line for the event log '''
  if isinstance(event, SplitEvent):
    split = event.split
    return (f'Split node #{event.node.id} on f{split.feature_index} '
      + f'<= {format_number(split.threshold, 3)} (gain {format_number(split.info_gain, 4)})')
  elif isinstance(event, LeafEvent):
    node = event.node
    return (f'Node #{node.id} leaf (pred: {node.prediction}, '
      + f'impurity: {format_number(node.impurity, 3)})')
  elif isinstance(event, DoneEvent):
    return f'Done: {node_count(event.root)} nodes, {leaf_count(event.root)} leaves'
  raise TypeError(f'not a build event: {event!r}')


def to_hierarchy(
    node: Optional[TreeNode],
    highlight_id: Optional[int] = None,
    labels: Optional[List[str]] = None
) -> Optional[Dict[str, Any]]:
  '''
  nested dicts with a 'children' list, the shape tidy-tree layouts consume;
  None when there is no tree yet

  labels fixes the label => color assignment; by default labels are colored
  in the order they first appear in the root's samples
  '''
  if node is None:
    return None

  if labels is None:
    labels = list(dict.fromkeys(s.label for s in node.samples))

  if node.feature_index is not None and node.left is not None:
    text = f'f{node.feature_index} <= {node.threshold}'
  else:
    text = 'leaf'

  return {
    'id': node.id,
    'depth': node.depth,
    'prediction': node.prediction,
    'impurity': node.impurity,
    'samples': len(node.samples),
    'feature_index': node.feature_index,
    'threshold': node.threshold,
    'info_gain': node.info_gain,
    'label': text,
    'color': label_color(node.prediction, labels),
    'highlight': node.id == highlight_id,
    'children': [to_hierarchy(c, highlight_id, labels) for c in node.children()],
  }


def event_log(events: List[Event]) -> List[str]:
  return [f'{e.type}: {describe_event(e)}' for e in events]


@dataclass
class Region:
  # axis-aligned box, one (min, max) per feature
  mins: Tuple[float, ...]
  maxs: Tuple[float, ...]
  prediction: str
  node_id: int

  def center(self) -> List[float]:
    return [(lo + hi) / 2 for lo, hi in zip(self.mins, self.maxs)]


@dataclass
class Segment:
  # a split threshold clipped to the box its ancestors leave it
  node_id: int
  feature_index: int
  threshold: float
  mins: Tuple[float, ...]
  maxs: Tuple[float, ...]


def _walk_regions(
    root: Optional[TreeNode],
    bounds: Sequence[Tuple[float, float]]
) -> Tuple[List[Region], List[Segment]]:
  regions: List[Region] = []
  segments: List[Segment] = []
  if root is None:
    return regions, segments

  mins = tuple(float(lo) for lo, _ in bounds)
  maxs = tuple(float(hi) for _, hi in bounds)
  assert all(lo <= hi for lo, hi in zip(mins, maxs)), 'bounds must be (min, max) pairs'

  stack = [(root, mins, maxs)]
  while stack:
    node, lo, hi = stack.pop()

    # boxes squeezed to nothing by an out-of-range threshold are dropped
    if any(l >= h for l, h in zip(lo, hi)):
      continue

    if node.left is None or node.right is None or node.feature_index is None:
      regions.append(Region(lo, hi, node.prediction, node.id))
      continue

    f = node.feature_index
    assert f < len(bounds), f'node #{node.id} splits on feature {f} but bounds has {len(bounds)}'
    t = node.threshold
    if lo[f] < t < hi[f]:
      segments.append(Segment(node.id, f, t, lo[:f] + (t,) + lo[f+1:], hi[:f] + (t,) + hi[f+1:]))

    left_hi = hi[:f] + (min(hi[f], t),) + hi[f+1:]
    right_lo = lo[:f] + (max(lo[f], t),) + lo[f+1:]
    # right pushed first so regions come out left to right
    stack.append((node.right, right_lo, hi))
    stack.append((node.left, lo, left_hi))

  return regions, segments


def decision_regions(
    root: Optional[TreeNode],
    bounds: Sequence[Tuple[float, float]]
) -> List[Region]:
  '''
  the box each leaf owns inside bounds, e.g. bounds=[(0, 10), (0, 10)] for
  a 2-d scatter plot; together the boxes tile bounds
  '''
  return _walk_regions(root, bounds)[0]


def boundary_segments(
    root: Optional[TreeNode],
    bounds: Sequence[Tuple[float, float]]
) -> List[Segment]:
  '''
  one segment per split whose threshold falls inside its box: in 2-d,
  the line from mins to maxs is the decision boundary to draw
  '''
  return _walk_regions(root, bounds)[1]
