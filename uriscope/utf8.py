# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
UTF-8 byte layout and code point walking.
'''

from typing import Iterator

from .charsets import PCT_TABLE


def utf8_bytes(code:int) -> bytes:
  '''
  Return the UTF-8 byte sequence for a code point.
  Surrogates are laid out like any other three-byte code point; unlike `str.encode` this never fails.
  '''
  if code < 0x80: return bytes((code,))
  if code < 0x800: return bytes((0xc0 | (code >> 6), 0x80 | (code & 0x3f)))
  if code < 0x10000:
    return bytes((
      0xe0 | (code >> 12),
      0x80 | ((code >> 6) & 0x3f),
      0x80 | (code & 0x3f)))
  return bytes((
    0xf0 | (code >> 18),
    0x80 | ((code >> 12) & 0x3f),
    0x80 | ((code >> 6) & 0x3f),
    0x80 | (code & 0x3f)))


def pct_encode_code(code:int) -> str:
  'Percent-encode every UTF-8 byte of `code`.'
  return ''.join(PCT_TABLE[b] for b in utf8_bytes(code))


def code_point_at(s:str, i:int) -> tuple[int, int]:
  '''
  Return the code point at index `i` of `s` and the number of string positions it occupies.
  A high surrogate followed by a low surrogate (as produced by 'surrogatepass' decoding of UTF-16 data)
  is combined into a single scalar value with width 2.
  '''
  code = ord(s[i])
  if 0xd800 <= code < 0xdc00 and i + 1 < len(s):
    low = ord(s[i+1])
    if 0xdc00 <= low < 0xe000:
      return 0x10000 + ((code - 0xd800) << 10) + (low - 0xdc00), 2
  return code, 1


def iter_code_points(s:str) -> Iterator[tuple[int, int, int]]:
  'Walk `s` by code point, yielding (index, code, width) triples.'
  i = 0
  n = len(s)
  while i < n:
    code, width = code_point_at(s, i)
    yield i, code, width
    i += width


def decode_utf8_strict(b:bytes) -> str|None:
  'Decode `b` as UTF-8, returning None if the bytes are not valid UTF-8.'
  try: return b.decode('utf-8')
  except UnicodeDecodeError: return None


def decode_utf8_lenient(b:bytes) -> str:
  'Decode `b` as UTF-8; if invalid, reinterpret each raw byte as one character.'
  text = decode_utf8_strict(b)
  if text is None: return b.decode('latin-1')
  return text
