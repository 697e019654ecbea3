# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Encode, decode and inspect URI/IRI text.'

from argparse import Namespace
from sys import stdin
from typing import Iterator, Sequence

from ..argparse import CommandParser
from ..charsets import UNRESERVED_CHARS
from ..form import decode_form, encode_form, FormOptions
from ..io import errL, out_variants, outL
from ..json import out_json, variant_report
from ..percent import decode_percent, DecodeOptions, encode_rfc3986, normalize_percent, RFC3986Options
from ..query import build_query, KV, parse_query, query_from_url
from ..unicode import domain_to_punycode, iri_to_uri, punycode_to_domain, uri_to_iri
from ..variants import generate_variants, VariantConfig


def main(argv:Sequence[str]|None=None) -> None:
  parser = CommandParser(prog='uriscope', description='Encode, decode and inspect URI/IRI text.')

  encode_cmd = parser.add_command(main_encode, help='Percent-encode (RFC 3986) or form-encode.')
  encode_cmd.add_context_arg()
  encode_cmd.add_argument('-keep-reserved', action='store_true', help='Leave reserved characters unencoded.')
  encode_cmd.add_argument('-safe', default='', help='Extra characters to leave unencoded.')
  encode_cmd.add_argument('-reencode-percent', action='store_true', help='Encode "%%" even when it begins a valid triplet.')
  encode_cmd.add_argument('-passes', type=int, default=1, help='Number of encoding passes; passes after the first re-encode "%%".')
  encode_cmd.add_argument('-form', action='store_true', help='Use application/x-www-form-urlencoded encoding.')
  encode_cmd.add_strict_arg()
  encode_cmd.add_input_args()

  decode_cmd = parser.add_command(main_decode, help='Decode percent or form encoding.')
  decode_cmd.add_argument('-passes', type=int, default=1, help='Number of decoding passes.')
  decode_cmd.add_argument('-until-stable', action='store_true', help='Decode until the output stops changing.')
  decode_cmd.add_argument('-max-iterations', type=int, default=10, help='Pass limit for -until-stable.')
  decode_cmd.add_argument('-form', action='store_true', help='Use application/x-www-form-urlencoded decoding.')
  decode_cmd.add_strict_arg()
  decode_cmd.add_input_args()

  normalize_cmd = parser.add_command(main_normalize, help='Normalize percent-encoding (RFC 3986 §6.2.2).')
  normalize_cmd.add_argument('-lower-hex', action='store_true', help='Do not uppercase the hex digits of kept triplets.')
  normalize_cmd.add_strict_arg()
  normalize_cmd.add_input_args()

  parser.add_command(main_iri, help='Convert an IRI to a URI.').add_input_args()
  parser.add_command(main_uri, help='Convert a URI to an IRI.').add_input_args()
  parser.add_command(main_punycode, help='Convert a Unicode domain or URL host to punycode.').add_input_args()
  parser.add_command(main_unpunycode, help='Convert a punycode domain or URL host to Unicode.').add_input_args()

  query_parse_cmd = parser.add_command(main_query_parse, help='Parse a query string or the query of a URL.')
  query_parse_cmd.add_argument('-form', action='store_true', help='Decode "+" as a space.')
  query_parse_cmd.add_argument('-json', action='store_true', help='Output pairs as JSON.')
  query_parse_cmd.add_input_args()

  query_build_cmd = parser.add_command(main_query_build, help='Build a query string from key=value arguments.')
  query_build_cmd.add_argument('-form', action='store_true', help='Use form encoding.')
  query_build_cmd.add_argument('-sort', action='store_true', help='Sort pairs by key.')
  query_build_cmd.add_argument('pairs', nargs='*', help='key=value pairs; if omitted, each line of stdin is a pair.')

  variants_cmd = parser.add_command(main_variants, help='Show all twelve transformation variants of each input.')
  variants_cmd.add_argument('-selective', default='', help='Characters to encode for the selective variant.')
  variants_cmd.add_argument('-safe', default=UNRESERVED_CHARS, help='Safe set for the encode-except-safe-set variant.')
  variants_cmd.add_argument('-encode-n', type=int, default=2, help='Number of passes for the multi-encode variant.')
  variants_cmd.add_argument('-max-decode', type=int, default=10, help='Pass limit for the decode-until-stable variant.')
  variants_cmd.add_context_arg()
  variants_cmd.add_argument('-keep-reserved', action='store_true', help='Leave reserved characters unencoded where applicable.')
  variants_cmd.add_argument('-no-trace', action='store_true', help='Omit the trace lines.')
  variants_cmd.add_argument('-json', action='store_true', help='Output the report as JSON.')
  variants_cmd.add_input_args()

  try: parser.parse_and_run_command(argv)
  except ValueError as e: # Includes UriscopeError.
    errL(f'uriscope: error: {e}')
    exit(1)


def iter_inputs(inputs:list[str]) -> Iterator[str]:
  'Yield the command line inputs, or each line of stdin if there are none.'
  if inputs:
    yield from inputs
  else:
    for line in stdin:
      yield line.rstrip('\n')


def main_encode(args:Namespace) -> None:
  if args.passes < 1: raise ValueError(f'-passes must be at least 1: {args.passes}')
  if args.form:
    form_opts = FormOptions(safe_set=args.safe, strict=args.strict)
    for text in iter_inputs(args.inputs):
      for _ in range(args.passes):
        text = encode_form(text, form_opts)
      outL(text)
    return
  opts = RFC3986Options(context=args.context, keep_reserved=args.keep_reserved, safe_set=args.safe,
    reencode_percent=args.reencode_percent, strict=args.strict)
  for text in iter_inputs(args.inputs):
    for i in range(args.passes):
      text = encode_rfc3986(text, opts, reencode_percent=(i > 0 or opts.reencode_percent))
    outL(text)


def main_decode(args:Namespace) -> None:
  opts = DecodeOptions(times=args.passes, until_stable=args.until_stable, max_iterations=args.max_iterations, strict=args.strict)
  decode = decode_form if args.form else decode_percent
  for text in iter_inputs(args.inputs):
    outL(decode(text, opts))


def main_normalize(args:Namespace) -> None:
  for text in iter_inputs(args.inputs):
    outL(normalize_percent(text, uppercase_hex=not args.lower_hex, strict=args.strict))


def main_iri(args:Namespace) -> None:
  for text in iter_inputs(args.inputs): outL(iri_to_uri(text))


def main_uri(args:Namespace) -> None:
  for text in iter_inputs(args.inputs): outL(uri_to_iri(text))


def main_punycode(args:Namespace) -> None:
  for text in iter_inputs(args.inputs): outL(domain_to_punycode(text))


def main_unpunycode(args:Namespace) -> None:
  for text in iter_inputs(args.inputs): outL(punycode_to_domain(text))


def main_query_parse(args:Namespace) -> None:
  mode = 'form' if args.form else 'percent'
  for text in iter_inputs(args.inputs):
    query = query_from_url(text) if '://' in text else text
    pairs = parse_query(query, mode=mode)
    if args.json:
      out_json(pairs)
    else:
      for kv in pairs: outL(f'{kv.key} = {kv.value}')


def main_query_build(args:Namespace) -> None:
  pairs = [KV(k, v) for k, _eq, v in (p.partition('=') for p in iter_inputs(args.pairs))]
  outL(build_query(pairs, mode=('form' if args.form else 'percent'), sort=args.sort))


def main_variants(args:Namespace) -> None:
  config = VariantConfig(selective_chars=args.selective, safe_set=args.safe, encode_n=args.encode_n,
    max_decode_iterations=args.max_decode, context=args.context, keep_reserved=args.keep_reserved)
  for text in iter_inputs(args.inputs):
    results = generate_variants(text, config)
    if args.json: out_json(variant_report(text, results))
    else:
      outL(text)
      out_variants(results, show_trace=not args.no_trace)
      outL()


if __name__ == '__main__': main()
