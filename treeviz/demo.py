import os

from treeviz.datasets import TOY_IRIS, quadrant_dataset, label_summary, parse_point
from treeviz.events import describe_event
from treeviz.tree import build_tree_stepwise, decision_path


if __name__ == '__main__':
  dataset = os.environ.get('DATASET', 'iris')
  max_depth = int(os.environ.get('MAX_DEPTH', '3'))
  min_samples_split = int(os.environ.get('MIN_SAMPLES_SPLIT', '2'))

  if dataset == 'iris':
    samples = TOY_IRIS
    point = parse_point(os.environ.get('POINT', '5.8,3.0,4.3,1.3'))
  elif dataset == 'quadrants':
    samples = quadrant_dataset(100, seed=0)
    point = parse_point(os.environ.get('POINT', '2.0,8.0'))
  else:
    raise ValueError(f'Unknown DATASET {dataset}, expected iris or quadrants')

  print(f'\n{dataset}: {label_summary(samples)}')
  print(f'max_depth={max_depth}, min_samples_split={min_samples_split}\n')

  builder = build_tree_stepwise(samples, max_depth, min_samples_split)
  for step, event in enumerate(builder, start=1):
    print(f'{step:3d} {event.type:5s} {describe_event(event)}')

  print(f'\n{builder.root}')

  path = decision_path(builder.root, point)
  route = ' -> '.join(f'#{n.id}' for n in path)
  print(f'{point} => {path[-1].prediction} via {route}')
