#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from pathlib import Path
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  paths = sorted(p for arg in args.paths for p in ([Path(arg)] if Path(arg).is_file() else Path(arg).rglob('*.ut.py')))
  ok = True
  for path in paths:
    print(path)
    if run([executable, str(path)]).returncode != 0:
      ok = False
      print()

  exit(0 if ok else 1)


if __name__ == '__main__': main()
