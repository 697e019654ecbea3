# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Query string parsing and building, with either percent or form encoding of keys and values.
'''

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Iterable, Literal, Mapping, get_args

from .form import decode_form_once, encode_form, FormOptions
from .percent import decode_percent_once, encode_rfc3986, RFC3986Options


QueryMode = Literal['percent', 'form']

query_modes:tuple[QueryMode, ...] = get_args(QueryMode)


@dataclass(frozen=True)
class KV:
  key:str
  value:str


@dataclass(frozen=True)
class ParseQueryOptions:
  mode:QueryMode = 'percent' # 'form' additionally decodes '+' as a space.

  def __post_init__(self) -> None:
    if self.mode not in query_modes: raise ValueError(f'invalid query mode: {self.mode!r}')


default_query_policy = RFC3986Options(context='query', reencode_percent=True)


@dataclass(frozen=True)
class BuildQueryOptions:
  '''
  `policy` holds option overrides merged onto the base options of each encode call:
  `RFC3986Options` fields in percent mode, `FormOptions` fields in form mode.
  The percent mode base uses the query context and re-encodes '%',
  so that decoded values containing percent triplets survive a parse/build/parse cycle.
  '''
  mode:QueryMode = 'percent'
  sort:bool = False
  policy:Mapping[str, Any] = field(default_factory=dict)

  def __post_init__(self) -> None:
    if self.mode not in query_modes: raise ValueError(f'invalid query mode: {self.mode!r}')
    base = self.base_policy()
    unknown = set(self.policy).difference(f.name for f in fields(base))
    if unknown:
      raise ValueError(f'{self.mode} mode policy has fields not in {type(base).__name__}: {sorted(unknown)}')

  def base_policy(self) -> RFC3986Options|FormOptions:
    return FormOptions() if self.mode == 'form' else default_query_policy


def parse_query(input:str, opts:ParseQueryOptions=ParseQueryOptions(), **overrides:Any) -> list[KV]:
  '''
  Parse a query string (with or without the leading '?') into key/value pairs, in order.
  Repeated keys are kept as separate pairs; a segment without '=' has an empty value.
  '''
  if overrides: opts = replace(opts, **overrides)
  qs = input.removeprefix('?')
  if not qs: return []
  decode:Callable[[str], str] = decode_form_once if opts.mode == 'form' else decode_percent_once
  pairs:list[KV] = []
  for segment in qs.split('&'):
    if not segment: continue
    key, _eq, value = segment.partition('=')
    pairs.append(KV(decode(key), decode(value)))
  return pairs


def build_query(pairs:Iterable[KV|tuple[str, str]], opts:BuildQueryOptions=BuildQueryOptions(), **overrides:Any) -> str:
  'Build a query string (without the leading "?") from key/value pairs.'
  if overrides: opts = replace(opts, **overrides)
  kvs = [p if isinstance(p, KV) else KV(*p) for p in pairs]
  if opts.sort: kvs.sort(key=lambda kv: kv.key) # list.sort is stable.

  encode:Callable[[str], str]
  policy = replace(opts.base_policy(), **opts.policy)
  if isinstance(policy, FormOptions):
    form_policy = policy
    def encode(s:str) -> str: return encode_form(s, form_policy)
  else:
    pct_policy = policy
    def encode(s:str) -> str:
      # The query context leaves sub-delims unencoded; the pair delimiters must still be escaped.
      return encode_rfc3986(s, pct_policy).replace('&', '%26').replace('=', '%3D')

  return '&'.join(f'{encode(kv.key)}={encode(kv.value)}' for kv in kvs)


def query_from_url(url:str) -> str:
  'Return the query component of `url`: the text after the first "?" and before any "#".'
  before_fragment = url.partition('#')[0]
  _, q, query = before_fragment.partition('?')
  return query if q else ''
