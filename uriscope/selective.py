# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Encoders driven by explicit character choices rather than URI component rules.
'''

from dataclasses import dataclass, replace
from typing import Any

from .charsets import ALNUM, RESERVED
from .utf8 import code_point_at, iter_code_points, pct_encode_code


@dataclass(frozen=True)
class SelectiveOptions:
  chars_to_encode:str = ''
  keep_reserved:bool = False # Reserved characters are left alone even if listed in `chars_to_encode`.


@dataclass(frozen=True)
class NonAlnumOptions:
  keep_reserved:bool = False


@dataclass(frozen=True)
class SafeSetOptions:
  safe_set:str = ''


def _code_point_strs(chars:str) -> frozenset[str]:
  'The set of code points in `chars`, keeping surrogate pairs together.'
  return frozenset(chars[i:i+w] for i, _, w in iter_code_points(chars))


def selective_encode(input:str, opts:SelectiveOptions=SelectiveOptions(), **overrides:Any) -> str:
  'Percent-encode only the code points listed in `chars_to_encode`; everything else passes through.'
  if overrides: opts = replace(opts, **overrides)
  encode_set = _code_point_strs(opts.chars_to_encode)
  out:list[str] = []
  i = 0
  n = len(input)
  while i < n:
    code, width = code_point_at(input, i)
    c = input[i:i+width]
    if c in encode_set and not (opts.keep_reserved and c in RESERVED):
      out.append(pct_encode_code(code))
    else:
      out.append(c)
    i += width
  return ''.join(out)


def encode_non_alnum(input:str, opts:NonAlnumOptions=NonAlnumOptions(), **overrides:Any) -> str:
  'Percent-encode everything except ASCII letters and digits (and reserved characters, if `keep_reserved`).'
  if overrides: opts = replace(opts, **overrides)
  out:list[str] = []
  i = 0
  n = len(input)
  while i < n:
    code, width = code_point_at(input, i)
    c = input[i:i+width]
    if c in ALNUM or (opts.keep_reserved and c in RESERVED): out.append(c)
    else: out.append(pct_encode_code(code))
    i += width
  return ''.join(out)


def encode_except_safe_set(input:str, opts:SafeSetOptions=SafeSetOptions(), **overrides:Any) -> str:
  'Percent-encode everything except ASCII characters in `safe_set`. An empty safe set encodes every character.'
  if overrides: opts = replace(opts, **overrides)
  safe = frozenset(opts.safe_set)
  out:list[str] = []
  i = 0
  n = len(input)
  while i < n:
    code, width = code_point_at(input, i)
    c = input[i:i+width]
    if code < 0x80 and c in safe: out.append(c)
    else: out.append(pct_encode_code(code))
    i += width
  return ''.join(out)
