from collections import Counter
from typing import List, Optional, Sequence

import numpy as np

from treeviz.samples import Sample

# iris-like toy set: 3 classes, 4 features
# (sepal length, sepal width, petal length, petal width)
TOY_IRIS = [
  Sample((5.1, 3.5, 1.4, 0.2), 'setosa'),
  Sample((4.9, 3.0, 1.4, 0.2), 'setosa'),
  Sample((6.2, 3.4, 5.4, 2.3), 'virginica'),
  Sample((5.9, 3.0, 5.1, 1.8), 'virginica'),
  Sample((6.0, 2.2, 4.0, 1.0), 'versicolor'),
  Sample((5.5, 2.3, 4.0, 1.3), 'versicolor'),
  Sample((5.7, 2.8, 4.1, 1.3), 'versicolor'),
  Sample((5.4, 3.9, 1.7, 0.4), 'setosa'),
]


def quadrant_dataset(count: int = 100, seed: Optional[int] = None) -> List[Sample]:
  '''
  two classes in an XOR layout over (x, y):

    B | A
    --+--
    A | B

  each point falls in a 4x4 square starting at 1 or 6 on each axis;
  the first half of the points are A, the rest B
  '''
  assert count >= 0
  rng = np.random.default_rng(seed)
  samples = []
  for i in range(count):
    label = 'A' if i < count // 2 else 'B'
    low_x = rng.random() > 0.5
    if label == 'A':
      low_y = low_x
    else:
      low_y = not low_x
    x = rng.random() * 4 + (1 if low_x else 6)
    y = rng.random() * 4 + (1 if low_y else 6)
    samples.append(Sample((float(x), float(y)), label))
  return samples


def label_summary(samples: Sequence[Sample]) -> str:
  ''' label counts in first-seen order, e.g. "setosa: 3 | virginica: 2" '''
  counts = Counter(s.label for s in samples)
  return ' | '.join(f'{label}: {n}' for label, n in counts.items())


def parse_point(text: str) -> List[float]:
  ''' "5.8, 3.0, 4.3, 1.3" => [5.8, 3.0, 4.3, 1.3] '''
  parts = [p.strip() for p in text.split(',')]
  if not parts or any(p == '' for p in parts):
    raise ValueError(f'expected comma-separated numbers, got {text!r}')
  return [float(p) for p in parts]
