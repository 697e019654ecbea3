# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import re

from uriscope.variants import generate_variants, TransformStep, VariantConfig, VariantResult, variant_labels
from utest import utest, utest_call, utest_exc, utest_seq, utest_val


def values(line:str, **overrides) -> list[str]:
  return [r.value for r in generate_variants(line, **overrides)]


utest_seq(range(1, 13), lambda: [r.id for r in generate_variants('anything')])
utest_seq(range(1, 13), lambda: [r.id for r in generate_variants('')])
utest_val(12, len(variant_labels))

utest_seq([
  'hello%20world',
  'hello%20world',
  'hello+world',
  'hello world',
  'hello%20world',
  'hello%20world',
  'hello%2520world',
  'hello%20world',
  'hello world',
  'hello world',
  'hello%20world',
  'hello world',
], values, 'hello world')

utest_seq([
  'a%2Fb%3Fq%3D1',
  'a/b?q=1',
  'a%2Fb%3Fq%3D1',
  'a/b?q=1',
  'a%2Fb%3Fq%3D1',
  'a%2Fb%3Fq%3D1',
  'a%252Fb%253Fq%253D1',
  'a%2Fb%3fq%3D1',
  'a/b?q=1',
  'a/b?q=1',
  'a%2Fb%3Fq%3D1',
  'a/b?q=1',
], values, 'a/b?q=1')


@utest_call
def test_hello_world_path() -> None:
  results = generate_variants('hello world/path?q=1')
  v = {r.id: r.value for r in results}
  utest_val(True, ' ' not in v[1], 'canonical has no spaces')
  utest_val(True, '/' in v[2] and '?' in v[2], 'keep-reserved keeps delimiters')
  utest_val(True, '+' in v[3], 'form encodes spaces as plus')
  utest_val(True, re.fullmatch(r'[A-Za-z0-9%]+', v[5]) is not None, 'non-alnum output')
  utest_val(True, '%25' in v[7], 'multi-encode re-encodes percent')
  utest_val('hello world/path?q=1', v[12], 'no unicode domain')


@utest_call
def test_labels() -> None:
  labels = {r.id: r.label for r in generate_variants('x')}
  utest_val('RFC3986 canonical', labels[1])
  utest_val('Form encode (space -> +)', labels[3])
  utest_val('Selective encode [(none)]', labels[4])
  utest_val('Multi-encode (N=2)', labels[7])
  utest_val('Decode until stable (max 10)', labels[10])
  utest_val('Domain -> Punycode (no Unicode domain detected)', labels[12])
  labels = {r.id: r.label for r in generate_variants('https://münchen.de', selective_chars='!', encode_n=3, max_decode_iterations=4)}
  utest_val('Selective encode [!]', labels[4])
  utest_val('Multi-encode (N=3)', labels[7])
  utest_val('Decode until stable (max 4)', labels[10])
  utest_val('Domain -> Punycode', labels[12])


@utest_call
def test_traces() -> None:
  results = generate_variants('a b')
  utest_val((TransformStep('encode_rfc3986', dict(context='full', keep_reserved=False)),), results[0].trace)
  utest_val((TransformStep('encode_form'),), results[2].trace)
  utest_val((TransformStep('encode_rfc3986', dict(context='full', keep_reserved=False)), TransformStep('mixed_case_percent')),
    results[7].trace)
  utest_val((TransformStep('decode_percent', dict(until_stable=True, max_iterations=10)),), results[9].trace)
  utest_val((TransformStep('domain_to_punycode', dict(skipped=True)),), results[11].trace)
  utest_val(True, all(r.trace for r in results), 'every variant has a trace')


# Configuration.

utest('hello%21world', lambda: generate_variants('hello!world', selective_chars='!')[3].value)
utest('a%252520b', lambda: generate_variants('a b', encode_n=3)[6].value)
utest('%2520', lambda: generate_variants('%25252520', max_decode_iterations=2)[9].value)
utest(' ', lambda: generate_variants('%25252520')[9].value)
utest('%252520', lambda: generate_variants('%25252520')[8].value)
utest('a/b', lambda: generate_variants('a/b', context='path')[0].value)
utest('a/b%20c', lambda: generate_variants('a/b c', keep_reserved=True)[4].value)
utest('a%2Fb%20c', lambda: generate_variants('a/b c')[4].value)
utest('%61%20%62', lambda: generate_variants('a b', safe_set='')[5].value)
utest('a%20b', lambda: generate_variants('a b', VariantConfig(encode_n=1))[6].value)
utest_exc(ValueError('encode_n must be at least 1: 0'), VariantConfig, encode_n=0)
utest_exc(ValueError('max_decode_iterations must be at least 1: 0'), generate_variants, 'x', max_decode_iterations=0)
utest_exc(ValueError("invalid encoding context: 'nope'"), generate_variants, 'x', context='nope')


# Unicode domains.

utest('https://xn--mnchen-3ya.de/path', lambda: generate_variants('https://münchen.de/path')[11].value)
utest('xn--mnchen-3ya.de', lambda: generate_variants('münchen.de')[11].value)
utest((TransformStep('domain_to_punycode'),), lambda: generate_variants('münchen.de')[11].trace)
utest('https://example.com/ü', lambda: generate_variants('https://example.com/ü')[11].value)

utest(VariantResult(id=9, label='Decode once', value='ü', trace=(TransformStep('decode_percent', dict(times=1)),)),
  lambda: generate_variants('ü')[8])


# Text without a recognizable domain is passed through by the punycode variant.

for text in ['€100', 'ü!', 'café', 'naïve;', 'Grüße!', '™']:
  utest(VariantResult(id=12, label='Domain -> Punycode (no Unicode domain detected)', value=text,
    trace=(TransformStep('domain_to_punycode', dict(skipped=True)),)),
    lambda: generate_variants(text)[11])
  utest_seq(range(1, 13), lambda: [r.id for r in generate_variants(text)])
