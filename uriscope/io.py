# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Printing helpers for the command line front end.
The L suffix means the output ends with a newline.
'''

from sys import stderr, stdout
from typing import Any, Iterable, TextIO

from .variants import TransformStep, VariantResult


def writeL(file:TextIO, *items:Any, sep='', flush=False) -> None:
  "Write `items` to file; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=file, flush=flush)


def outL(*items:Any, sep='', flush=False) -> None:
  "Write `items` to std out; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stdout, flush=flush)


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)


def fmt_step(step:TransformStep) -> str:
  'Format a trace step like a call: `name(key=val, ...)`.'
  args = ', '.join(f'{k}={v!r}' for k, v in step.params.items())
  return f'{step.name}({args})'


def fmt_trace(trace:Iterable[TransformStep]) -> str:
  return ' -> '.join(fmt_step(s) for s in trace)


def write_variants(file:TextIO, results:Iterable[VariantResult], show_trace=True) -> None:
  'Write a variant report: one line per variant with its id, label and value, optionally followed by its trace.'
  results = list(results)
  label_width = max((len(r.label) for r in results), default=0)
  for r in results:
    writeL(file, f'{r.id:>2}  {r.label:<{label_width}}  {r.value}')
    if show_trace: writeL(file, f'    {"":<{label_width}}  # {fmt_trace(r.trace)}')


def out_variants(results:Iterable[VariantResult], show_trace=True) -> None:
  write_variants(stdout, results, show_trace=show_trace)
