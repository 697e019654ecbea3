# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
application/x-www-form-urlencoded encoding and decoding.
'''

from dataclasses import dataclass, replace
from typing import Any

from .charsets import FORM_SAFE, is_percent_triplet, PCT_TABLE
from .exceptions import InvalidPercentSequence
from .multipass import apply_n_times, apply_until_stable
from .percent import DecodeOptions
from .utf8 import code_point_at, decode_utf8_lenient, utf8_bytes


@dataclass(frozen=True)
class FormOptions:
  safe_set:str = '' # Extra characters to leave unencoded.
  strict:bool = False


def encode_form(input:str, opts:FormOptions=FormOptions(), **overrides:Any) -> str:
  'Spaces become "+"; characters outside the form-safe set are percent-encoded byte by byte.'
  if overrides: opts = replace(opts, **overrides)
  safe = FORM_SAFE.union(opts.safe_set) if opts.safe_set else FORM_SAFE
  out:list[str] = []
  i = 0
  n = len(input)
  while i < n:
    code, width = code_point_at(input, i)
    c = input[i:i+width]
    if c == ' ': out.append('+')
    elif code < 0x80 and c in safe: out.append(c)
    else: out.extend(PCT_TABLE[b] for b in utf8_bytes(code))
    i += width
  return ''.join(out)


def decode_form_once(input:str, strict:bool=False) -> str:
  '''
  A single decoding pass.
  Each run of consecutive triplets is decoded as one UTF-8 byte sequence,
  falling back to one character per byte if the run is not valid UTF-8.
  '''
  out:list[str] = []
  i = 0
  n = len(input)
  while i < n:
    c = input[i]
    if c == '+':
      out.append(' ')
      i += 1
    elif c == '%':
      if is_percent_triplet(input, i):
        run = bytearray()
        while is_percent_triplet(input, i):
          run.append(int(input[i+1:i+3], 16))
          i += 3
        out.append(decode_utf8_lenient(bytes(run)))
        continue
      if strict: raise InvalidPercentSequence(input, i)
      out.append('%')
      i += 1
    else:
      out.append(c)
      i += 1
  return ''.join(out)


def decode_form(input:str, opts:DecodeOptions=DecodeOptions(), **overrides:Any) -> str:
  '''
  Decode form-encoded text, either `times` passes or until the output is stable.
  Every pass converts '+' to a space, so a '+' revealed by one pass becomes a space in the next.
  '''
  if overrides: opts = replace(opts, **overrides)
  strict = opts.strict
  def decode_pass(s:str) -> str: return decode_form_once(s, strict=strict)
  if opts.until_stable: return apply_until_stable(input, decode_pass, opts.max_iterations)
  return apply_n_times(input, opts.times, decode_pass)
