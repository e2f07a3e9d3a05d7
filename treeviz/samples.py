from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence, Tuple

import numpy as np


class InvalidSamples(ValueError):
  pass


@dataclass(frozen=True)
class Sample:
  features: Tuple[float, ...]
  label: str

  @staticmethod
  def of(features: Iterable[float], label: Any) -> 'Sample':
    return Sample(tuple(float(f) for f in features), str(label))


def as_samples(rows: Iterable[Any]) -> List[Sample]:
  '''
  accepts Samples, (features, label) pairs, or {'features': [...], 'label': ...}
  mappings, which is the shape the UI hands over
  '''
  samples = []
  for i, row in enumerate(rows):
    if isinstance(row, Sample):
      samples.append(row)
      continue

    try:
      if isinstance(row, Mapping):
        features, label = row['features'], row['label']
      else:
        features, label = row
      samples.append(Sample.of(features, label))
    except KeyError as e:
      raise InvalidSamples(f'sample {i} is missing {e}') from e
    except (TypeError, ValueError) as e:
      raise InvalidSamples(f'sample {i} is malformed: {e}') from e
  return samples


def check_samples(samples: Sequence[Sample]) -> int:
  '''
  returns the shared feature count, or raises InvalidSamples if the set is empty,
  has zero features, has ragged or non-numeric feature vectors, or contains NaN
  '''
  if len(samples) == 0:
    raise InvalidSamples('cannot build a tree from zero samples')

  feature_count = None
  for i, sample in enumerate(samples):
    try:
      values = np.asarray(sample.features, dtype=np.float64)
    except (TypeError, ValueError) as e:
      raise InvalidSamples(f'sample {i} has non-numeric features: {e}') from e

    if values.ndim != 1:
      raise InvalidSamples(f'sample {i} features must be a flat sequence of numbers')
    if feature_count is None:
      feature_count = len(values)
      if feature_count == 0:
        raise InvalidSamples('samples must have at least one feature')
    if len(values) != feature_count:
      raise InvalidSamples(
        f'sample {i} has {len(values)} features, expected {feature_count}')
    if np.isnan(values).any():
      raise InvalidSamples(f'sample {i} has a NaN feature')

  return feature_count


def feature_matrix(samples: Sequence[Sample]) -> np.ndarray:
  ''' rows are samples, columns are features '''
  X = np.array([s.features for s in samples], dtype=np.float64)
  assert X.ndim == 2
  return X
