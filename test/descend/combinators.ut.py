# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from random import Random

from descend.combinators import *
from utest import utest


utest(None, first_present)
utest(None, first_present, None, None)
utest(0, first_present, None, 0, 1) # Falsy results are still present.
utest('a', first_present, 'a', 'b')

utest([], all_present)
utest([0, 'b'], all_present, None, 0, None, 'b')

utest(None, random_present)
utest(None, random_present, None, None)
utest('b', random_present, None, 'b', None)
utest(True, lambda: random_present(1, 2, 3, rng=Random(0)) in (1, 2, 3))
utest(random_present(1, 2, 3, rng=Random(7)), random_present, 1, 2, 3, rng=Random(7)) # Deterministic given the generator.
