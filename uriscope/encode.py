# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import asdict, is_dataclass
from functools import singledispatch
from typing import Any, Callable


EncodeObj = Callable[[Any],Any]


@singledispatch
def encode_obj(obj:Any) -> Any:
  '''
  Convert a value that `json` cannot encode natively; the `default` hook of `render_json`.
  Result records (variants, trace steps, key/value pairs) are dataclasses and become dicts;
  other iterables become lists; anything else is rendered with `str`.
  '''
  if is_dataclass(obj) and not isinstance(obj, type): return asdict(obj)
  try: it = iter(obj)
  except TypeError: return str(obj)
  return list(it)


@encode_obj.register
def _(obj:frozenset) -> Any: return sorted(obj) # Character sets; sorted for stable output.

@encode_obj.register
def _(obj:type) -> Any: return obj.__name__
