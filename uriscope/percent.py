# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
RFC 3986 percent-encoding, decoding and normalization.

Encoding walks the input by code point. Each code point is copied literally if it is ASCII and in the safe set
(unreserved characters, plus the extras of the encoding context, plus caller-supplied extras),
or if `keep_reserved` is set and it is an ASCII reserved character.
Otherwise every byte of its UTF-8 encoding is written as an uppercase "%XX" triplet.

Decoding turns each valid triplet into the single character with that byte value;
unlike form decoding, multibyte UTF-8 sequences are not reassembled.
'''

from dataclasses import dataclass, replace
from typing import Any

from .charsets import EncodingContext, encoding_contexts, is_percent_triplet, PCT_TABLE, RESERVED, safe_set_for, UNRESERVED
from .exceptions import InvalidPercentSequence
from .multipass import apply_n_times, apply_until_stable
from .utf8 import code_point_at, utf8_bytes


@dataclass(frozen=True)
class RFC3986Options:
  context:EncodingContext = 'full'
  keep_reserved:bool = False # Leave gen-delims and sub-delims unencoded.
  safe_set:str = '' # Extra characters to leave unencoded.
  reencode_percent:bool = False # Encode '%' even when it begins a valid triplet.
  strict:bool = False # Raise on invalid percent sequences instead of encoding the bare '%'.

  def __post_init__(self) -> None:
    if self.context not in encoding_contexts: raise ValueError(f'invalid encoding context: {self.context!r}')


@dataclass(frozen=True)
class DecodeOptions:
  '''
  `times`: number of decode passes.
  `until_stable`: decode until the output stops changing, up to `max_iterations` passes; overrides `times`.
  `strict`: raise on invalid percent sequences instead of passing the '%' through.
  '''
  times:int = 1
  until_stable:bool = False
  max_iterations:int = 10
  strict:bool = False

  def __post_init__(self) -> None:
    if self.times < 1: raise ValueError(f'times must be at least 1: {self.times!r}')
    if self.max_iterations < 1: raise ValueError(f'max_iterations must be at least 1: {self.max_iterations!r}')


@dataclass(frozen=True)
class NormalizeOptions:
  uppercase_hex:bool = True
  strict:bool = False


def encode_rfc3986(input:str, opts:RFC3986Options=RFC3986Options(), **overrides:Any) -> str:
  '''
  Percent-encode `input` per RFC 3986.
  Existing valid triplets are copied verbatim unless `reencode_percent` is set, so encoding is idempotent by default.
  '''
  if overrides: opts = replace(opts, **overrides)
  safe = safe_set_for(opts.context, opts.safe_set)
  keep_reserved = opts.keep_reserved
  out:list[str] = []
  i = 0
  n = len(input)
  while i < n:
    code, width = code_point_at(input, i)
    c = input[i:i+width]
    if c == '%' and not opts.reencode_percent:
      if is_percent_triplet(input, i):
        out.append(input[i:i+3])
        i += 3
        continue
      if opts.strict: raise InvalidPercentSequence(input, i)
      out.append('%25')
    elif code < 0x80 and (c in safe or (keep_reserved and c in RESERVED)):
      out.append(c)
    else:
      out.extend(PCT_TABLE[b] for b in utf8_bytes(code))
    i += width
  return ''.join(out)


def decode_percent_once(input:str, strict:bool=False) -> str:
  'A single decoding pass.'
  out:list[str] = []
  i = 0
  n = len(input)
  while i < n:
    c = input[i]
    if c == '%':
      if is_percent_triplet(input, i):
        out.append(chr(int(input[i+1:i+3], 16)))
        i += 3
        continue
      if strict: raise InvalidPercentSequence(input, i)
    out.append(c)
    i += 1
  return ''.join(out)


def decode_percent(input:str, opts:DecodeOptions=DecodeOptions(), **overrides:Any) -> str:
  'Decode percent triplets, either `times` passes or until the output is stable.'
  if overrides: opts = replace(opts, **overrides)
  strict = opts.strict
  def decode_pass(s:str) -> str: return decode_percent_once(s, strict=strict)
  if opts.until_stable: return apply_until_stable(input, decode_pass, opts.max_iterations)
  return apply_n_times(input, opts.times, decode_pass)


def normalize_percent(input:str, opts:NormalizeOptions=NormalizeOptions(), **overrides:Any) -> str:
  '''
  Normalize percent-encoding per RFC 3986 §6.2.2:
  triplets that encode unreserved characters are decoded, and the hex digits of all other triplets are uppercased.
  Bytes outside the unreserved set (reserved or non-ASCII) remain encoded.
  '''
  if overrides: opts = replace(opts, **overrides)
  out:list[str] = []
  i = 0
  n = len(input)
  while i < n:
    c = input[i]
    if c == '%':
      if is_percent_triplet(input, i):
        hex_digits = input[i+1:i+3]
        decoded = chr(int(hex_digits, 16))
        if decoded in UNRESERVED: out.append(decoded)
        elif opts.uppercase_hex: out.append('%' + hex_digits.upper())
        else: out.append('%' + hex_digits)
        i += 3
        continue
      if opts.strict: raise InvalidPercentSequence(input, i)
    out.append(c)
    i += 1
  return ''.join(out)
