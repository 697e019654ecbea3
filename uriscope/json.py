# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
JSON output for the command line: query pairs and variant reports.
'''

import json as _json
from sys import stdout
from typing import Any, Iterable, TextIO

from .encode import EncodeObj, encode_obj
from .variants import VariantResult


def render_json(item:Any, default:EncodeObj=encode_obj, sort=True, indent:int|None=2) -> str:
  'Render `item` as JSON. Non-ASCII text is written literally; `indent=None` gives compact output.'
  separators = (',', ': ') if indent else (',', ':')
  return _json.dumps(item, default=default, sort_keys=sort, indent=indent, separators=separators, ensure_ascii=False)


def write_json(file:TextIO, *items:Any, default:EncodeObj=encode_obj, sort=True, indent:int|None=2, end='\n') -> None:
  'Write each of `items` to `file` as JSON, each followed by `end`.'
  for item in items:
    file.write(render_json(item, default=default, sort=sort, indent=indent))
    if end: file.write(end)


def out_json(*items:Any, default:EncodeObj=encode_obj, sort=True, indent:int|None=2, end='\n') -> None:
  write_json(stdout, *items, default=default, sort=sort, indent=indent, end=end)


def variant_report(line:str, results:Iterable[VariantResult]) -> dict[str, Any]:
  'The JSON form of a variant report: the input line and its variants in id order.'
  return {'input': line, 'variants': [encode_obj(r) for r in results]}
