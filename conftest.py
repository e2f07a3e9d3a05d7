import pytest

from treeviz.datasets import quadrant_dataset
from treeviz.samples import Sample


@pytest.fixture
def two_clusters():
  # one feature, perfectly separable at 5.5
  return [
    Sample((0.0,), 'A'),
    Sample((1.0,), 'A'),
    Sample((10.0,), 'B'),
    Sample((11.0,), 'B'),
  ]


@pytest.fixture
def quadrants():
  return quadrant_dataset(100, seed=0)
