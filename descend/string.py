# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
String primitives used by the attribute matchers.
'''

from re import Pattern, search
from typing import Any


def trim(string:str) -> str:
  'Remove leading and trailing whitespace.'
  return string.strip()


def matches(pattern:str|Pattern, string:str) -> bool:
  '''
  Return True if `pattern` matches anywhere in `string`.
  Compilation errors (`re.error`) propagate to the caller.
  '''
  return search(pattern, string) is not None


def repr_lim(obj:Any, limit=64) -> str:
  'Return a repr of `obj` that is at most `limit` characters long.'
  r = repr(obj)
  if limit > 2 and len(r) > limit:
    q = r[0]
    if q in '\'"': return f'{r[:limit-2]}{q}…'
    else: return f'{r[:limit-1]}…'
  return r
