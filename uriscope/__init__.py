# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
uriscope is a URI/IRI text transformation engine:
RFC 3986 percent-encoding, form encoding, selective encoding, multi-pass decoding,
IRI and punycode conversion, query strings, and a twelve-variant diagnostic report.
'''

from .charsets import (EncodingContext, FORM_SAFE, FORM_SAFE_CHARS, GEN_DELIMS, GEN_DELIMS_CHARS, RESERVED, RESERVED_CHARS,
  SUB_DELIMS, SUB_DELIMS_CHARS, UNRESERVED, UNRESERVED_CHARS)
from .exceptions import DomainConversionFailure, InvalidPercentSequence, UriscopeError
from .form import decode_form, encode_form, FormOptions
from .multipass import (apply_n_times, apply_until_stable, decode_n_times, decode_until_stable, encode_n_times,
  mixed_case_percent)
from .percent import decode_percent, DecodeOptions, encode_rfc3986, normalize_percent, NormalizeOptions, RFC3986Options
from .query import build_query, BuildQueryOptions, KV, parse_query, ParseQueryOptions, QueryMode
from .selective import (encode_except_safe_set, encode_non_alnum, NonAlnumOptions, SafeSetOptions, selective_encode,
  SelectiveOptions)
from .unicode import domain_to_punycode, iri_to_uri, punycode_to_domain, uri_to_iri
from .variants import generate_variants, TransformStep, VariantConfig, VariantResult
