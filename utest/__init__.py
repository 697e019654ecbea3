# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
utest is a tiny unit testing library.
Each test script calls the `utest*` functions at module level.
Failures are reported to stderr as they occur; at exit, a script with any failures prints a summary and exits with status 1.
'''

import atexit as _atexit
import inspect as _inspect
from os import environ as _environ, getcwd as _getcwd
from os.path import relpath as _rel_path
from sys import stderr as _stderr
from traceback import format_exception as _format_exception
from typing import Any, Callable, Iterable, TypeVar


__all__ = [
  'utest',
  'utest_call',
  'utest_exc',
  'utest_seq',
  'utest_val',
  'utest_val_ne',
]


_test_count = 0
_failure_count = 0

# The runner executes scripts from a build directory; report paths relative to the directory it was invoked from.
_work_dir = _environ.get('UTEST_WORK_DIR') or _getcwd()


_C = TypeVar('_C', bound=Callable)
def utest_call(callable:_C) -> _C:
  'A function decorator to call the defined function immediately. Useful for wrapping test state in a local function scope.'
  callable()
  return callable


def utest(exp:Any, fn:Callable, *args:Any, _exit=False, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value does not equal `exp`.
  '''
  global _test_count
  _test_count += 1
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    _failure(_utest_depth, 'value', exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
    if _exit: raise
    return
  if exp != ret:
    _failure(_utest_depth, 'value', exp, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_exc(exp_exc:Any, fn:Callable, *args:Any, _exit=False, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if no exception is raised, or if the raised exception does not match `exp_exc`.
  `exp_exc` may be an exception type (matched with isinstance), a string (matched against the repr),
  or an exception instance (matched by type and args).
  '''
  global _test_count
  _test_count += 1
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    if not _exc_matches(exp_exc, exc):
      _failure(_utest_depth, 'exception', exp_exc, exc=exc, subj=fn, args=args, kwargs=kwargs)
      if _exit: raise
    return
  _failure(_utest_depth, 'exception', exp_exc, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_seq(exp_seq:Iterable[Any], fn:Callable, *args:Any, _exit=False, _utest_depth=0, _sort=False, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`, and convert the resulting iterable into a list.
  Log a test failure if an exception is raised, or if the items do not equal the items of `exp_seq`.
  '''
  global _test_count
  _test_count += 1
  exp = list(exp_seq)
  try:
    ret = list(fn(*args, **kwargs))
    if _sort: ret.sort()
  except BaseException as exc:
    _failure(_utest_depth, 'sequence', exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
    if _exit: raise
    return
  if exp != ret:
    _failure(_utest_depth, 'sequence', exp, ret_label='sequence', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_val(exp_val:Any, act_val:Any, desc='<value>') -> None:
  'Log a test failure if `exp_val` does not equal `act_val`. Describe the test with the optional `desc`.'
  global _test_count
  _test_count += 1
  if exp_val != act_val:
    _failure(0, 'value', exp_val, ret_label='value', ret=act_val, subj=repr(desc))


def utest_val_ne(exp_val:Any, act_val:Any, desc='<value>') -> None:
  'Log a test failure if `exp_val` equals `act_val`.'
  global _test_count
  _test_count += 1
  if exp_val == act_val:
    _failure(0, 'value', exp_val, ret_label='value', ret=act_val, subj=repr(desc))


def _exc_matches(exp:Any, act:BaseException) -> bool:
  if isinstance(exp, str): return exp == repr(act)
  if isinstance(exp, type): return isinstance(act, exp)
  return type(exp) == type(act) and exp.args == act.args


def _failure(depth:int, exp_label:str, exp:Any, ret_label:str='', ret:Any=None, exc:BaseException|None=None, subj:Any=None,
 args:tuple[Any,...]=(), kwargs:dict[str,Any]={}) -> None:

  global _failure_count
  _failure_count += 1

  info = _inspect.getframeinfo(_inspect.stack()[2 + depth][0]) # The test script line that called the utest function.
  try: name = subj.__qualname__
  except AttributeError: name = str(subj)
  _errL(f'\n{_display_path(info.filename)}:{info.lineno}: utest failure: {name}')

  for i, el in enumerate(args):
    _errL(f'  arg {i} = {el!r}')
  for key, val in kwargs.items():
    _errL(f'  arg {key} = {val!r}')

  exp_label_colon = f'expected {exp_label}:'
  if exc is None:
    res_label_colon = f'returned {ret_label}:'
    res = ret
  else:
    res_label_colon = 'raised exception:'
    res = exc
  width = max(len(exp_label_colon), len(res_label_colon))
  _errL(f'  {exp_label_colon:{width}} {exp!r}')
  _errL(f'  {res_label_colon:{width}} {res!r}')

  if exc is not None:
    _errL()
    for msg in _format_exception(type(exc), exc, exc.__traceback__):
      _stderr.write(msg)
  _errL()


def _display_path(path:str) -> str:
  rel = _rel_path(path, _work_dir)
  return rel if '/' in rel else f'./{rel}'


def _errL(*items:Any) -> None: print(*items, sep='', file=_stderr)


@_atexit.register
def _report() -> None:
  'At process exit, if any test failures occurred, print a summary and force the process to exit with status 1.'
  from os import _exit
  if _failure_count > 0:
    _errL(f'\nutest ran: {_test_count}; failed: {_failure_count}')
    _stderr.flush()
    _exit(1) # Raising SystemExit has no effect in an atexit handler.
