# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Subcommand parsing for the uriscope command line.
Each command is a `main_*` function that receives the parsed Namespace.
'''

from argparse import _SubParsersAction, ArgumentParser, Namespace
from typing import Any, Callable, Sequence

from .charsets import encoding_contexts


MainFn = Callable[[Namespace], None]


class CommandParser(ArgumentParser):
  '''
  An ArgumentParser whose commands are added with `add_command`.
  Command parsers are themselves CommandParsers, so the option group helpers are available on every command.
  '''

  def __init__(self, *args:Any, **kwargs:Any) -> None:
    super().__init__(*args, **kwargs)
    self._command_parsers:_SubParsersAction|None = None


  def add_command(self, main_fn:MainFn, name:str='', **kwargs:Any) -> 'CommandParser':
    'Add a command that runs `main_fn`. The default name drops the "main_" prefix and hyphenates: `main_query_parse` -> "query-parse".'
    if self._command_parsers is None:
      self._command_parsers = self.add_subparsers(dest='command', required=True, help='Available commands.')
      self.epilog = "For help with a specific command, pass '-h' to that command."
    name = name or main_fn.__name__.removeprefix('main_').replace('_', '-')
    command = self._command_parsers.add_parser(name, **kwargs)
    assert isinstance(command, CommandParser)
    command.set_defaults(main_fn=main_fn)
    return command


  def parse_and_run_command(self, args:Sequence[str]|None=None) -> Namespace:
    'Parse `args` (or sys.argv) and call the selected command function.'
    ns = self.parse_args(args)
    ns.main_fn(ns)
    return ns


  # Option groups shared by several commands.

  def add_context_arg(self, default:str='full') -> None:
    self.add_argument('-context', default=default, choices=encoding_contexts, help='URI component context.')

  def add_strict_arg(self) -> None:
    self.add_argument('-strict', action='store_true', help='Fail on invalid percent sequences.')

  def add_input_args(self) -> None:
    self.add_argument('inputs', nargs='*', help='Input strings; if omitted, each line of stdin is an input.')
