from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from treeviz.samples import Sample, InvalidSamples, check_samples, feature_matrix


@dataclass
class Split:
  feature_index: int
  threshold: float
  info_gain: float
  impurity_left: float
  impurity_right: float

  def __str__(self):
    return (f'f{self.feature_index} <= {self.threshold}, gain: {self.info_gain:.4f}, '
      + f'impurity left: {self.impurity_left:.4f}, right: {self.impurity_right:.4f}')


def _gini(labels: Sequence[str]) -> float:
  n = len(labels)
  score = 1.0
  # label counts in first-seen order, so the subtraction order is fixed
  for count in Counter(labels).values():
    p = count / n
    score -= p * p
  return score


def gini_impurity(samples: Sequence[Sample]) -> float:
  '''
  gini impurity over the labels:
    1 - sum_k p_k^2
  0 for a single label, approaching 1 as labels become many and even
  '''
  if len(samples) == 0:
    raise InvalidSamples('impurity of an empty sample set is undefined')
  return _gini([s.label for s in samples])


def majority_label(samples: Sequence[Sample]) -> str:
  '''
  most common label; ties go to the label seen first in sample order
  '''
  if len(samples) == 0:
    raise InvalidSamples('majority label of an empty sample set is undefined')
  counts = Counter(s.label for s in samples)
  # max returns the first maximal key, and Counter keeps insertion order
  return max(counts, key=counts.__getitem__)


def partition(
    samples: Sequence[Sample],
    feature_index: int,
    threshold: float
) -> Tuple[List[Sample], List[Sample]]:
  ''' (samples with feature <= threshold, the rest), both in input order '''
  left = [s for s in samples if s.features[feature_index] <= threshold]
  right = [s for s in samples if s.features[feature_index] > threshold]
  return left, right


def best_split(X: np.ndarray, labels: Sequence[str]) -> Optional[Split]:
  '''
  exhaustive search over every feature and every midpoint between adjacent
  sorted values; returns the split with the highest positive gain, or None

  features are scanned in order and thresholds in ascending order,
  and only a strictly greater gain replaces the current best,
  so on ties the first candidate found wins
  '''
  assert X.ndim == 2
  rows, cols = X.shape
  assert len(labels) == rows
  assert rows > 0

  parent_impurity = _gini(labels)

  best: Optional[Split] = None
  best_gain = 0.0

  for col in range(cols):
    values = X[:, col]
    sorted_values = np.sort(values)

    # one midpoint per adjacent pair, duplicates included
    thresholds = (sorted_values[:-1] + sorted_values[1:]) / 2

    for threshold in thresholds:
      is_left = (values <= threshold)
      left_count = int(np.count_nonzero(is_left))
      right_count = rows - left_count

      if left_count == 0 or right_count == 0:
        continue

      impurity_left = _gini([labels[i] for i in np.flatnonzero(is_left)])
      impurity_right = _gini([labels[i] for i in np.flatnonzero(~is_left)])
      weighted = (left_count / rows) * impurity_left + (right_count / rows) * impurity_right
      gain = parent_impurity - weighted

      if gain > best_gain:
        best_gain = gain
        best = Split(col, float(threshold), gain, impurity_left, impurity_right)

  return best


def find_best_split(samples: Sequence[Sample]) -> Optional[Split]:
  ''' standalone split search over a list of samples '''
  check_samples(samples)
  return best_split(feature_matrix(samples), [s.label for s in samples])
