from typing import List, Tuple

import numpy as np
from sklearn.datasets import load_iris
from sklearn.tree import DecisionTreeClassifier

from treeviz.datasets import quadrant_dataset
from treeviz.params import Params
from treeviz.samples import Sample, feature_matrix
from treeviz.tree import build_tree, predict
from treeviz.node import node_count
from treeviz.utils import timed, accuracy


def split(samples: List[Sample]) -> Tuple[List[Sample], List[Sample]]:
  ''' random 80% train, 20% valid '''
  valid_count = len(samples) // 5
  valid_idx = set(np.random.choice(len(samples), size=valid_count, replace=False).tolist())
  train = [s for i, s in enumerate(samples) if i not in valid_idx]
  valid = [s for i, s in enumerate(samples) if i in valid_idx]
  return train, valid


def load_quadrants() -> List[Sample]:
  return quadrant_dataset(400, seed=0)


def load_sklearn_iris() -> List[Sample]:
  data = load_iris()
  return [Sample.of(x, data.target_names[t]) for x, t in zip(data.data, data.target)]


if __name__ == '__main__':
  np.random.seed(0)

  # name => function that returns samples
  benchmarks = {
    'Quadrants': load_quadrants,
    'Iris':      load_sklearn_iris,
  }
  params = Params(max_depth=4, min_samples_split=2)

  for name, load_fn in benchmarks.items():
    print(f'\n\n{name}:\n')
    train, valid = split(load_fn())
    train_X, train_y = feature_matrix(train), np.array([s.label for s in train], dtype=object)
    valid_X, valid_y = feature_matrix(valid), np.array([s.label for s in valid], dtype=object)
    print(f'X.shape: train {train_X.shape}, valid {valid_X.shape}')

    with timed(f'train stepwise tree with {params}...'):
      root = build_tree(train, params)
    print(f'  {node_count(root)} nodes')
    print(f'''
      train: {accuracy(predict(root, train_X), train_y)}
      valid: {accuracy(predict(root, valid_X), valid_y)}
    ''')

    with timed('train sklearn DecisionTreeClassifier...'):
      model = DecisionTreeClassifier(
        criterion='gini',
        max_depth=params.max_depth,
        min_samples_split=max(2, params.min_samples_split))
      model.fit(train_X, train_y)
    print(f'  {model.tree_.node_count} nodes')
    print(f'''
      train: {accuracy(model.predict(train_X), train_y)}
      valid: {accuracy(model.predict(valid_X), valid_y)}
    ''')
