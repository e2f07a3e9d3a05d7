from dataclasses import dataclass
from numbers import Integral

# print every build event as it is produced
DEBUG_STATS = False


class InvalidParams(ValueError):
  pass


@dataclass
class Params:
  # nodes at this depth are always leaves; the root is depth 0
  max_depth: int = 3

  # nodes with fewer samples than this are always leaves
  min_samples_split: int = 2


def check_params(params: Params) -> None:
  ''' reject configurations before any node is built '''
  for name in ('max_depth', 'min_samples_split'):
    value = getattr(params, name)
    if isinstance(value, bool) or not isinstance(value, Integral):
      raise InvalidParams(f'{name} must be an int, got {value!r}')

  if params.max_depth < 0:
    raise InvalidParams(f'max_depth must be >= 0, got {params.max_depth}')
  if params.min_samples_split < 1:
    raise InvalidParams(f'min_samples_split must be >= 1, got {params.min_samples_split}')
