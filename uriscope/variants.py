# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Generate the fixed, ordered set of twelve transformation variants of a single input line.
Each variant records a trace of the operations and effective parameters that produced it;
traces are for display only and are not re-executable.
'''

from dataclasses import dataclass, field, replace
from typing import Any

from .charsets import EncodingContext, encoding_contexts, UNRESERVED_CHARS
from .form import encode_form
from .multipass import encode_n_times, mixed_case_percent
from .percent import decode_percent, encode_rfc3986, normalize_percent
from .selective import encode_except_safe_set, encode_non_alnum, selective_encode
from .unicode import domain_to_punycode, has_unicode_host


@dataclass(frozen=True)
class TransformStep:
  name:str
  params:dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class VariantResult:
  id:int
  label:str
  value:str
  trace:tuple[TransformStep, ...]


@dataclass(frozen=True)
class VariantConfig:
  selective_chars:str = '' # Characters to encode for the selective variant (#4).
  safe_set:str = UNRESERVED_CHARS # Safe set for the encode-except-safe-set variant (#6).
  encode_n:int = 2 # Number of passes for the multi-encode variant (#7).
  max_decode_iterations:int = 10 # Cap for the decode-until-stable variant (#10).
  context:EncodingContext = 'full'
  keep_reserved:bool = False

  def __post_init__(self) -> None:
    if self.context not in encoding_contexts: raise ValueError(f'invalid encoding context: {self.context!r}')
    if self.encode_n < 1: raise ValueError(f'encode_n must be at least 1: {self.encode_n!r}')
    if self.max_decode_iterations < 1:
      raise ValueError(f'max_decode_iterations must be at least 1: {self.max_decode_iterations!r}')


variant_labels:dict[int, str] = {
  1: 'RFC3986 canonical',
  2: 'RFC3986 keep-reserved',
  3: 'Form encode (space -> +)',
  4: 'Selective encode',
  5: 'Encode non-alphanumeric',
  6: 'Encode except safe set',
  7: 'Multi-encode',
  8: 'Mixed-case percent',
  9: 'Decode once',
  10: 'Decode until stable',
  11: 'Normalize -> encode',
  12: 'Domain -> Punycode',
}


def generate_variants(line:str, config:VariantConfig=VariantConfig(), **overrides:Any) -> list[VariantResult]:
  '''
  Return the twelve variants of `line`, with ids 1 through 12 in order.
  Raises DomainConversionFailure if `line` contains a Unicode host that the IDNA converter rejects.
  '''
  if overrides: config = replace(config, **overrides)
  ctx = config.context
  kr = config.keep_reserved
  n = config.encode_n
  max_iter = config.max_decode_iterations
  results:list[VariantResult] = []

  def add(value:str, *trace:TransformStep, label:str='') -> None:
    id = len(results) + 1
    results.append(VariantResult(id=id, label=label or variant_labels[id], value=value, trace=trace))

  add(encode_rfc3986(line, context=ctx, keep_reserved=False),
    TransformStep('encode_rfc3986', dict(context=ctx, keep_reserved=False)))

  add(encode_rfc3986(line, context=ctx, keep_reserved=True),
    TransformStep('encode_rfc3986', dict(context=ctx, keep_reserved=True)))

  add(encode_form(line),
    TransformStep('encode_form'))

  add(selective_encode(line, chars_to_encode=config.selective_chars, keep_reserved=kr),
    TransformStep('selective_encode', dict(chars_to_encode=config.selective_chars, keep_reserved=kr)),
    label=f'{variant_labels[4]} [{config.selective_chars or "(none)"}]')

  add(encode_non_alnum(line, keep_reserved=kr),
    TransformStep('encode_non_alnum', dict(keep_reserved=kr)))

  add(encode_except_safe_set(line, safe_set=config.safe_set),
    TransformStep('encode_except_safe_set', dict(safe_set=f'[{len(config.safe_set)} chars]')))

  def reencode(s:str) -> str: return encode_rfc3986(s, context=ctx, reencode_percent=True)
  add(encode_n_times(line, n, reencode),
    TransformStep('encode_n_times', dict(n=n, encoder='encode_rfc3986', context=ctx, reencode_percent=True)),
    label=f'{variant_labels[7]} (N={n})')

  add(mixed_case_percent(encode_rfc3986(line, context=ctx, keep_reserved=False)),
    TransformStep('encode_rfc3986', dict(context=ctx, keep_reserved=False)),
    TransformStep('mixed_case_percent'))

  add(decode_percent(line, times=1),
    TransformStep('decode_percent', dict(times=1)))

  add(decode_percent(line, until_stable=True, max_iterations=max_iter),
    TransformStep('decode_percent', dict(until_stable=True, max_iterations=max_iter)),
    label=f'{variant_labels[10]} (max {max_iter})')

  add(encode_rfc3986(normalize_percent(line), context=ctx, keep_reserved=kr),
    TransformStep('normalize_percent', dict(uppercase_hex=True)),
    TransformStep('encode_rfc3986', dict(context=ctx, keep_reserved=kr)))

  if has_unicode_host(line):
    add(domain_to_punycode(line), TransformStep('domain_to_punycode'))
  else:
    add(line, TransformStep('domain_to_punycode', dict(skipped=True)),
      label=f'{variant_labels[12]} (no Unicode domain detected)')

  assert [r.id for r in results] == list(range(1, 13))
  return results
