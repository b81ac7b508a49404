# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Combinators for branch steps.
Each takes the per-candidate results positionally, in candidate order.
'''

import random
from typing import Any, Optional


def first_present(*results:Any) -> Any:
  'Return the first result that is not None.'
  for r in results:
    if r is not None: return r
  return None


def all_present(*results:Any) -> list[Any]:
  'Return the results that are not None, in order.'
  return [r for r in results if r is not None]


def random_present(*results:Any, rng:Optional[random.Random]=None) -> Any:
  'Return a random result that is not None, or None if there are none.'
  present = [r for r in results if r is not None]
  if not present: return None
  return (rng or random).choice(present)
