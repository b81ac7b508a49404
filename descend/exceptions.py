# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes.
Matchers and composed queries signal absence by returning None; these are only raised by the strict APIs.
'''

from typing import Any


class NoMatchError(KeyError):
  '''
  Raised by `Descent.require` when a query matches nothing.
  Like a failed dict lookup, it subclasses KeyError.
  '''
  def __init__(self, root:Any, query:str) -> None:
    self.root = root
    self.query = query
    super().__init__(root, query)
