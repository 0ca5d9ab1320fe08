##-- imports
from __future__ import annotations

import collections
import logging as logmod
import pathlib as pl
import sys
from copy import deepcopy
from typing import Any, Final, Iterable, Sequence, TextIO

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import schemargs.errors
from schemargs._interface import DASH
from schemargs.structs import ArgumentSpec, ParseResult, Schema
from schemargs.utils.usage import UsageFormatter

DEFAULT_PROG : Final[str] = "program"

class ArgumentParser:
    """
    Match a command line against a schema of arguments:

    # {prog} [positional | --option value... | -alias value... | --flag]*

    tokens[0] is the program name, and is never matched.
    Options are found by a dash prefixed name or alias,
    positionals fill in declaration order as bare tokens arrive.
    Each argument takes the run of following non-dash tokens, up to its max arity.
    """

    def __init__(self, arguments:Iterable[ArgumentSpec]|Schema=()):
        match arguments:
            case Schema():
                self._schema = arguments
            case _:
                self._schema = Schema(arguments)

    @classmethod
    def from_toml(cls, path:pl.Path|str) -> ArgumentParser:
        """ Build a parser from a toml declaration of [[arguments]] """
        from schemargs.loaders.toml_loader import TomlSchemaLoader
        return cls(TomlSchemaLoader().load(path))

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def positionals(self) -> tuple[ArgumentSpec, ...]:
        return self._schema.positionals

    @property
    def options(self) -> tuple[ArgumentSpec, ...]:
        return self._schema.options

    def parse(self, tokens:Sequence[str]) -> ParseResult:
        """
          Parses the list of tokens against the schema.
          Raises a schemargs.errors.ParseError subclass on the first problem found.
        """
        logging.debug("Parsing args: %s", tokens)
        tokens = list(tokens)
        if not bool(tokens):
            raise schemargs.errors.EmptyCommandLine()

        missing = {x.name : x for x in self._schema.required()}
        if len(tokens) == 1 and bool(missing):
            raise schemargs.errors.MissingArguments(list(missing.values()))

        ##-- loop state
        pending = collections.deque(self._schema.positionals)
        result  = {}
        index   = 1
        ##-- end loop state

        while index < len(tokens):
            arg, index      = self._select(tokens, index, pending)
            consumed, value = arg.consume(tokens, index)
            logging.debug("Setting: arg(%s) = %s", arg.name, value)
            missing.pop(arg.name, None)
            result[arg.name] = value
            index           += consumed

        if bool(missing):
            raise schemargs.errors.MissingArguments(list(missing.values()))

        for name, default in self._schema.defaults().items():
            if name in result:
                continue

            logging.debug("Defaulting: arg(%s) = %s", name, default)
            result[name] = self._copy_default(default)

        return ParseResult(result)

    def _select(self, tokens:list[str], index:int, pending:collections.deque) -> tuple[ArgumentSpec, int]:
        """
          Pick the argument the token at index starts.
          returns it and the index its values start from.
          An option's own name token is not one of its values, a positional's is.
        """
        match tokens[index]:
            case str() as token if token.startswith(DASH):
                name = token.lstrip(DASH)
                match self._schema.lookup(name):
                    case None:
                        raise schemargs.errors.UnexpectedArgument(name)
                    case found:
                        logging.debug("Matched option: %s -> %s", token, found.name)
                        return found, index + 1
            case token if bool(pending):
                found = pending.popleft()
                logging.debug("Matched positional: %s -> %s", token, found.name)
                return found, index
            case token:
                raise schemargs.errors.UnexpectedArgument(token)

    @staticmethod
    def _copy_default(val:Any) -> Any:
        match val:
            case list() | dict() | set():
                return deepcopy(val)
            case _:
                return val

    def usage(self, prog:str=DEFAULT_PROG) -> str:
        return UsageFormatter().format(prog, self._schema)

    def print_usage(self, prog:str=DEFAULT_PROG, *, file:None|TextIO=None) -> None:
        print(self.usage(prog), file=file or sys.stdout)

    def __repr__(self):
        return f"<ArgumentParser: {self._schema!r}>"
