#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs, pathsep, walk
from os.path import isfile, join as path_join, relpath as path_rel
from subprocess import run
from sys import executable
from typing import Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  work_dir = getcwd()
  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', work_dir)
  # Test scripts import the project packages from the working directory.
  env['PYTHONPATH'] = pathsep.join(p for p in (work_dir, environ.get('PYTHONPATH')) if p)

  utest_cwd = '_build/_utest'
  makedirs(utest_cwd, exist_ok=True)
  ok = True
  count = 0
  for path in walk_ut_files(args.paths):
    print(path)
    count += 1
    exe_path = path_rel(path, utest_cwd)
    c = run([executable, exe_path], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  if not count: exit(f'no ".ut.py" files found in: {" ".join(args.paths)}')
  exit(0 if ok else 1)


def walk_ut_files(paths:list[str]) -> Iterator[str]:
  'Yield the ".ut.py" files found in `paths`, in sorted order within each directory.'
  for path in paths:
    if isfile(path):
      if path.endswith('.ut.py'): yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'): yield path_join(dir_path, name)


if __name__ == '__main__': main()
