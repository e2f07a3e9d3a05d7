from setuptools import setup

setup(
  name='treeviz',
  version='0.1.0',
  description='Stepwise CART decision tree builder for interactive visualizations',
  packages=['treeviz'],
  python_requires='>=3.8',
  install_requires=[
    'numpy',
    'scikit-learn',
  ],
  extras_require={
    'test': ['pytest'],
  },
)
