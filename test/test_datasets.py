import pytest

from treeviz.datasets import TOY_IRIS, quadrant_dataset, label_summary, parse_point
from treeviz.params import Params, check_params
from treeviz.samples import Sample, as_samples
from treeviz.utils import format_number, percent, label_color, CATEGORICAL_COLORS


def test_toy_iris():
  assert len(TOY_IRIS) == 8
  assert all(len(s.features) == 4 for s in TOY_IRIS)
  assert label_summary(TOY_IRIS) == 'setosa: 3 | virginica: 2 | versicolor: 3'


def test_quadrant_dataset():
  samples = quadrant_dataset(100, seed=0)
  assert len(samples) == 100
  assert [s.label for s in samples] == ['A'] * 50 + ['B'] * 50

  for s in samples:
    x, y = s.features
    assert 1 <= x < 10 and 1 <= y < 10
    assert not (5 <= x < 6) and not (5 <= y < 6)
    if s.label == 'A':
      assert (x < 5) == (y < 5)
    else:
      assert (x < 5) != (y < 5)

  assert quadrant_dataset(100, seed=0) == samples
  assert quadrant_dataset(0) == []


def test_parse_point():
  assert parse_point('5.8,3.0,4.3,1.3') == [5.8, 3.0, 4.3, 1.3]
  assert parse_point(' 1 , -2.5 ') == [1.0, -2.5]
  with pytest.raises(ValueError):
    parse_point('')
  with pytest.raises(ValueError):
    parse_point('1,,2')
  with pytest.raises(ValueError):
    parse_point('1,x')


def test_as_samples():
  samples = as_samples([
    {'features': [1, 2], 'label': 'A'},
    ((3, 4), 'B'),
    Sample((5.0, 6.0), 'C'),
  ])
  assert samples == [
    Sample((1.0, 2.0), 'A'),
    Sample((3.0, 4.0), 'B'),
    Sample((5.0, 6.0), 'C'),
  ]


def test_default_params():
  params = Params()
  assert (params.max_depth, params.min_samples_split) == (3, 2)
  check_params(params)
  check_params(Params(max_depth=0, min_samples_split=1))


def test_utils():
  assert format_number(0.5) == '0.50'
  assert format_number(5.5, 3) == '5.500'
  assert percent(1, 4) == '25.00%'
  assert percent(0, 0) == '0.00%'
  assert label_color('b', ['a', 'b']) == CATEGORICAL_COLORS[1]
  assert label_color('i', list('abcdefghi')) == CATEGORICAL_COLORS[0]
  assert label_color('z', ['a']) == '#f8f9fa'
