from time import time
from contextlib import contextmanager
from typing import Sequence

import numpy as np

CATEGORICAL_COLORS = [
  '#667eea', '#764ba2', '#ff6b6b', '#4ecdc4',
  '#feca57', '#45b7d1', '#96ceb4', '#ff9ff3',
]


@contextmanager
def timed(msg: str):
  print(msg)
  start = time()
  yield
  stop = time()
  print(f'({stop - start:.1f}s)')


def percent(num: int, denom: int) -> str:
  denom = max(1, denom)
  return f'{100.0 * num / denom:.2f}%'


def format_number(value: float, decimals: int = 2) -> str:
  return f'{value:.{decimals}f}'


def accuracy(preds: np.ndarray, trues: np.ndarray) -> str:
  preds = np.asarray(preds)
  trues = np.asarray(trues)
  assert preds.shape == trues.shape
  assert trues.ndim == 1
  return f'accuracy = {percent(np.count_nonzero(preds == trues), len(trues))}'


def label_color(label: str, labels: Sequence[str]) -> str:
  '''
  stable color per label, by the label's position in labels;
  the palette wraps around past 8 labels
  '''
  if label not in labels:
    return '#f8f9fa'
  return CATEGORICAL_COLORS[list(labels).index(label) % len(CATEGORICAL_COLORS)]
