# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Character sets of RFC 3986 and the application/x-www-form-urlencoded format.
All sets are ASCII-only frozensets; the matching `*_CHARS` strings give the canonical order for display.
'''

from typing import Literal, get_args


EncodingContext = Literal['path', 'pathSegment', 'query', 'fragment', 'full']

encoding_contexts:tuple[EncodingContext, ...] = get_args(EncodingContext)


ALPHA_CHARS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
DIGIT_CHARS = '0123456789'
ALNUM_CHARS = ALPHA_CHARS + DIGIT_CHARS

# RFC 3986 §2.3.
UNRESERVED_CHARS = ALNUM_CHARS + '-._~'

# RFC 3986 §2.2.
GEN_DELIMS_CHARS = ':/?#[]@'
SUB_DELIMS_CHARS = "!$&'()*+,;="
RESERVED_CHARS = GEN_DELIMS_CHARS + SUB_DELIMS_CHARS

# Spaces are translated to '+' separately.
FORM_SAFE_CHARS = ALNUM_CHARS + '*-._'

ALNUM = frozenset(ALNUM_CHARS)
UNRESERVED = frozenset(UNRESERVED_CHARS)
GEN_DELIMS = frozenset(GEN_DELIMS_CHARS)
SUB_DELIMS = frozenset(SUB_DELIMS_CHARS)
RESERVED = GEN_DELIMS | SUB_DELIMS
FORM_SAFE = frozenset(FORM_SAFE_CHARS)


# Characters allowed unencoded in each component, in addition to the unreserved set.
PATH_SEGMENT_EXTRA = SUB_DELIMS | frozenset(':@') # pchar; no '/'.
PATH_EXTRA = PATH_SEGMENT_EXTRA | frozenset('/')
QUERY_EXTRA = PATH_SEGMENT_EXTRA | frozenset('/?')
FRAGMENT_EXTRA = QUERY_EXTRA

context_extras:dict[EncodingContext, frozenset[str]] = {
  'path': PATH_EXTRA,
  'pathSegment': PATH_SEGMENT_EXTRA,
  'query': QUERY_EXTRA,
  'fragment': FRAGMENT_EXTRA,
  'full': frozenset(),
}

context_safe_sets:dict[EncodingContext, frozenset[str]] = { c: UNRESERVED | e for c, e in context_extras.items() }

assert set(context_extras) == set(encoding_contexts)


def safe_set_for(context:str, extra:str='') -> frozenset[str]:
  'Compose the safe set for `context`: unreserved, plus the context extras, plus the caller `extra` characters.'
  try: base = context_safe_sets[context] # type: ignore[index]
  except KeyError: raise ValueError(f'invalid encoding context: {context!r}') from None
  return base.union(extra) if extra else base


# Percent triplet for every byte value, with uppercase hex digits.
PCT_TABLE:tuple[str, ...] = tuple(f'%{b:02X}' for b in range(0x100))


HEX_DIGITS = frozenset('0123456789ABCDEFabcdef')


def is_hex_digit(c:str) -> bool: return c in HEX_DIGITS


def is_percent_triplet(s:str, i:int) -> bool:
  'True if `s[i:i+3]` is a percent sign followed by two hex digits.'
  return s[i:i+1] == '%' and i + 2 < len(s) and s[i+1] in HEX_DIGITS and s[i+2] in HEX_DIGITS
