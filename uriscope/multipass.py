# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Drivers that apply a single-pass string transform repeatedly.
'''

from typing import Callable

from .charsets import is_percent_triplet


StrTransform = Callable[[str], str]


def apply_n_times(input:str, n:int, fn:StrTransform) -> str:
  'Apply `fn` to `input` exactly `n` times.'
  if n < 0: raise ValueError(f'pass count must be non-negative: {n!r}')
  result = input
  for _ in range(n):
    result = fn(result)
  return result


def apply_until_stable(input:str, fn:StrTransform, max_iterations:int=10) -> str:
  '''
  Apply `fn` until a pass returns its argument unchanged, or until `max_iterations` passes have run.
  Hitting the limit is not an error: the output of the last pass is returned.
  '''
  if max_iterations < 1: raise ValueError(f'max_iterations must be at least 1: {max_iterations!r}')
  result = input
  for _ in range(max_iterations):
    next_ = fn(result)
    if next_ == result: return result
    result = next_
  return result


def encode_n_times(input:str, n:int, encode_fn:StrTransform) -> str:
  'Double-encode, triple-encode, etc.'
  return apply_n_times(input, n, encode_fn)


def decode_n_times(input:str, n:int, decode_fn:StrTransform) -> str:
  return apply_n_times(input, n, decode_fn)


def decode_until_stable(input:str, decode_fn:StrTransform, max_iterations:int=10) -> str:
  return apply_until_stable(input, decode_fn, max_iterations)


def mixed_case_percent(input:str) -> str:
  '''
  Vary the case of the hex digits in each existing percent triplet, without changing what it decodes to.
  Triplets are counted from zero: even triplets get a lowercase first digit and uppercase second digit;
  odd triplets get the reverse. All other characters are left untouched.
  '''
  out:list[str] = []
  i = 0
  k = 0
  n = len(input)
  while i < n:
    if is_percent_triplet(input, i):
      h1 = input[i+1]
      h2 = input[i+2]
      if k % 2 == 0: out.append(f'%{h1.lower()}{h2.upper()}')
      else: out.append(f'%{h1.upper()}{h2.lower()}')
      k += 1
      i += 3
    else:
      out.append(input[i])
      i += 1
  return ''.join(out)
