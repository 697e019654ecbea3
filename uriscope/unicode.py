# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
IRI/URI conversion and Unicode domain (punycode) conversion.
IDNA label conversion is delegated to the `idna` package.
'''

import re
from dataclasses import dataclass

import idna

from .charsets import is_percent_triplet
from .exceptions import DomainConversionFailure
from .utf8 import code_point_at, decode_utf8_strict, pct_encode_code


def iri_to_uri(input:str) -> str:
  'Percent-encode the UTF-8 bytes of every non-ASCII code point; ASCII is copied as is.'
  out:list[str] = []
  i = 0
  n = len(input)
  while i < n:
    code, width = code_point_at(input, i)
    if code < 0x80: out.append(input[i])
    else: out.append(pct_encode_code(code))
    i += width
  return ''.join(out)


def uri_to_iri(input:str) -> str:
  '''
  Convert percent-encoded UTF-8 back to literal characters, best effort.
  At each '%', the maximal run of valid triplets is decoded as UTF-8.
  The run is replaced only if it decodes and yields at least one non-ASCII character;
  otherwise the '%' is kept and scanning resumes at the next character.
  Encoded ASCII such as '%2F' is never decoded because it may be structurally significant.
  '''
  out:list[str] = []
  i = 0
  n = len(input)
  while i < n:
    c = input[i]
    if c == '%' and is_percent_triplet(input, i):
      j = i
      run = bytearray()
      while is_percent_triplet(input, j):
        run.append(int(input[j+1:j+3], 16))
        j += 3
      text = decode_utf8_strict(bytes(run))
      if text is not None and not text.isascii():
        out.append(text)
        i = j
        continue
    out.append(c)
    i += 1
  return ''.join(out)


# Domain conversion.

_scheme_re = re.compile(r'[A-Za-z][A-Za-z0-9+.\-]*://')

# Label separators recognized by IDNA: full stop, ideographic full stop, fullwidth full stop, halfwidth ideographic full stop.
_label_sep_re = re.compile('[.。．｡]')


@dataclass(frozen=True)
class HostSpan:
  host:str
  start:int
  end:int


def find_host_span(text:str) -> HostSpan|None:
  '''
  Locate the raw host of a URL with a `scheme://` prefix, without any normalization.
  Userinfo ending in '@' is skipped; the host ends at the first '/', '?', '#', or a ':' that introduces a port number.
  A bracketed IP literal is kept whole.
  Returns None if `text` does not start with a scheme prefix.
  '''
  m = _scheme_re.match(text)
  if not m: return None
  start = m.end()
  authority_end = len(text)
  for k in range(start, len(text)):
    if text[k] in '/?#':
      authority_end = k
      break
  at = text.rfind('@', start, authority_end)
  if at != -1: start = at + 1
  end = authority_end
  port_search = start
  if text.startswith('[', start): # IP literal; colons inside the brackets are part of the host.
    close = text.find(']', start, authority_end)
    if close != -1: port_search = close + 1
  for k in range(port_search, authority_end):
    if text[k] == ':' and k > start and text[k+1:k+2].isdigit():
      end = k
      break
  return HostSpan(host=text[start:end], start=start, end=end)


def domain_label_to_ascii(label:str, host:str='') -> str:
  'Convert a single Unicode label to its ASCII ("xn--") form. ASCII labels are returned unchanged.'
  if label.isascii(): return label
  try: return idna.encode(label, uts46=True).decode('ascii')
  except UnicodeError as e: # idna.IDNAError is a UnicodeError.
    raise DomainConversionFailure(host or label, label, str(e)) from e


def domain_label_to_unicode(label:str, host:str='') -> str:
  'Convert a single "xn--" label to Unicode. Other labels are returned unchanged.'
  if not label[:4].lower() == 'xn--': return label
  try: return idna.decode(label)
  except UnicodeError as e:
    raise DomainConversionFailure(host or label, label, str(e)) from e


def domain_to_ascii(domain:str) -> str:
  return '.'.join(domain_label_to_ascii(label, domain) for label in _label_sep_re.split(domain))


def domain_to_unicode(domain:str) -> str:
  return '.'.join(domain_label_to_unicode(label, domain) for label in domain.split('.'))


def domain_to_punycode(url_or_domain:str) -> str:
  '''
  Convert a Unicode domain to punycode, e.g. 'münchen.de' -> 'xn--mnchen-3ya.de'.
  If the input is a URL, only its host is converted and the rest of the URL is preserved.
  '''
  span = find_host_span(url_or_domain)
  if span is None: return domain_to_ascii(url_or_domain)
  return url_or_domain[:span.start] + domain_to_ascii(span.host) + url_or_domain[span.end:]


def punycode_to_domain(url_or_domain:str) -> str:
  'The inverse of `domain_to_punycode`.'
  span = find_host_span(url_or_domain)
  if span is None: return domain_to_unicode(url_or_domain)
  return url_or_domain[:span.start] + domain_to_unicode(span.host) + url_or_domain[span.end:]


def is_bare_domain(text:str) -> bool:
  '''
  True if `text` looks like a domain name without a scheme: two or more labels joined by label separators,
  each label non-empty and made only of letters, digits and '-'.
  '''
  labels = _label_sep_re.split(text)
  return len(labels) > 1 and all(label and all(c.isalnum() or c == '-' for c in label) for label in labels)


def has_unicode_host(text:str) -> bool:
  '''
  True if `text` is a URL whose host contains a non-ASCII character,
  or a bare domain (see `is_bare_domain`) that contains one.
  Other text, such as a single word or a phrase with punctuation, has no host to convert.
  '''
  span = find_host_span(text)
  if span is not None: return bool(span.host) and not span.host.isascii()
  return not text.isascii() and is_bare_domain(text)
