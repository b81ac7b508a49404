# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import sys
from os import environ
from typing import Any


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=sys.stderr, flush=flush) # Looked up per call so that redirection applies.


def env_flag(key:str) -> bool:
  'Return True if the environment variable `key` is set to a nonempty value other than "0".'
  return environ.get(key, '') not in ('', '0')
