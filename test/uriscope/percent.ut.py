# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from uriscope.exceptions import InvalidPercentSequence
from uriscope.multipass import apply_n_times
from uriscope.percent import (decode_percent, decode_percent_once, DecodeOptions, encode_rfc3986, normalize_percent,
  NormalizeOptions, RFC3986Options)
from utest import utest, utest_exc, utest_val


# encode_rfc3986.

utest('', encode_rfc3986, '')
utest('hello%20world', encode_rfc3986, 'hello world')
utest('a%3Db%26c%3Dd', encode_rfc3986, 'a=b&c=d')
utest('AZaz09-._~', encode_rfc3986, 'AZaz09-._~')
utest('%3A%2F%3F%23%5B%5D%40', encode_rfc3986, ':/?#[]@')
utest('%C4%9F', encode_rfc3986, 'ğ')
utest('caf%C3%A9', encode_rfc3986, 'café')
utest('%E2%82%AC', encode_rfc3986, '€')
utest('%F0%9F%98%80', encode_rfc3986, '😀')
utest('%F0%9F%98%80', encode_rfc3986, '\ud83d\ude00') # Surrogate pair is one code point.
utest('%ED%A0%BD', encode_rfc3986, '\ud83d') # Lone surrogate.

# Existing triplets.
utest('hello%20world', encode_rfc3986, 'hello%20world')
utest('%2f', encode_rfc3986, '%2f') # Case is preserved.
utest('%2520', encode_rfc3986, '%20', reencode_percent=True)
utest('%25', encode_rfc3986, '%')
utest('%25GG', encode_rfc3986, '%GG')
utest('a%25', encode_rfc3986, 'a%')
utest('a%252', encode_rfc3986, 'a%2')
utest_exc(InvalidPercentSequence('%GG', 0), encode_rfc3986, '%GG', strict=True)
utest_exc(InvalidPercentSequence('ab%2', 2), encode_rfc3986, 'ab%2', strict=True)
utest('%2520', encode_rfc3986, '%20', reencode_percent=True, strict=True) # Reencoding never fails.

# Contexts.
utest("a%2Fb:c@d!e'f", encode_rfc3986, "a/b:c@d!e'f", context='pathSegment')
utest('a/b/c', encode_rfc3986, 'a/b/c', context='path')
utest('a/b%3Fc', encode_rfc3986, 'a/b?c', context='path')
utest('key=val&a=b?q/', encode_rfc3986, 'key=val&a=b?q/', context='query')
utest('frag%23extra', encode_rfc3986, 'frag#extra', context='fragment')
utest('a%2Fb', encode_rfc3986, 'a/b', context='full')
utest('a/b', encode_rfc3986, 'a/b', RFC3986Options(context='path'))
utest_exc(ValueError("invalid encoding context: 'nope'"), encode_rfc3986, 'x', context='nope')
utest_exc(ValueError("invalid encoding context: 'nope'"), RFC3986Options, context='nope')

# Keep reserved and safe set.
utest(':/?#[]@!$&\'()*+,;=', encode_rfc3986, ':/?#[]@!$&\'()*+,;=', keep_reserved=True)
utest('a%20b/c', encode_rfc3986, 'a b/c', keep_reserved=True)
utest('a%20b!c', encode_rfc3986, 'a b!c', safe_set='!')
utest('%C3%BC', encode_rfc3986, 'ü', safe_set='ü') # Only ASCII characters can be safe.

# Idempotence.
for s in ['', 'hello world', 'a%20b c', '100%', '%zz', 'münchen/ğ?x=1#f', '😀 %41']:
  once = encode_rfc3986(s)
  utest(once, encode_rfc3986, once)
  utest(True, lambda: all(c.isascii() for c in once))


# decode_percent.

utest('', decode_percent, '')
utest('hello world', decode_percent, 'hello%20world')
utest('/', decode_percent, '%2f')
utest('/', decode_percent, '%2F')
utest('%20', decode_percent, '%2520')
utest(' ', decode_percent, '%2520', times=2)
utest(' ', decode_percent, '%2520', DecodeOptions(times=2))
utest(' ', decode_percent, '%25252520', until_stable=True)
utest('%2520', decode_percent, '%25252520', until_stable=True, max_iterations=2)
utest('\xc3\xbc', decode_percent, '%C3%BC') # One character per byte.
utest('hello+world', decode_percent, 'hello+world')
utest('%GG', decode_percent, '%GG')
utest('abc%', decode_percent, 'abc%')
utest('100% sure', decode_percent, '100%25%20sure')
utest_exc(InvalidPercentSequence('%GG', 0), decode_percent, '%GG', strict=True)
utest_exc(InvalidPercentSequence('abc%', 3), decode_percent_once, 'abc%', strict=True)
utest_exc(ValueError('times must be at least 1: 0'), DecodeOptions, times=0)
utest_exc(ValueError('max_iterations must be at least 1: 0'), decode_percent, 'x', until_stable=True, max_iterations=0)

exc = InvalidPercentSequence('ab%zz', 2)
utest_val('%zz', exc.sequence)
utest_val(2, exc.index)
utest_val("Invalid percent sequence at index 2: '%zz'", str(exc))

# Round trips for ASCII text; percent decoding does not reassemble UTF-8.
ascii_samples = ['', 'hello world', 'a=b&c=d', ':/?#[]@', '~!*()\'', 'tab\tnewline\n', '%', '50%', '%zz']
for s in ascii_samples:
  utest(s, decode_percent, encode_rfc3986(s, reencode_percent=True))
  if '%' not in s: utest(s, decode_percent, encode_rfc3986(s))
  for n in range(1, 4):
    encoded = apply_n_times(s, n, lambda t: encode_rfc3986(t, reencode_percent=True))
    utest(s, decode_percent, encoded, times=n)


# normalize_percent.

utest('%2F%3A', normalize_percent, '%2f%3a')
utest('A', normalize_percent, '%41')
utest('~', normalize_percent, '%7e')
utest('hello', normalize_percent, 'hello')
utest('%C3%BC', normalize_percent, '%c3%bc')
utest('%20', normalize_percent, '%20')
utest('%2f', normalize_percent, '%2f', uppercase_hex=False)
utest('A%2f', normalize_percent, '%41%2f', NormalizeOptions(uppercase_hex=False))
utest('%ZZ', normalize_percent, '%ZZ')
utest_exc(InvalidPercentSequence('%ZZ', 0), normalize_percent, '%ZZ', strict=True)

for s in ['%2f%3a%41%7e', 'a%c3%bcb', '%zz%', 'plain', '%25%2541']:
  once = normalize_percent(s)
  utest(once, normalize_percent, once)
  utest(decode_percent(s), decode_percent, once)
