# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='descend',
  version='0.0.1',
  description='Descend is a small query engine for matching and descending labeled document trees.',
  python_requires='>=3.10',

  packages=['descend', 'utest'],
)
