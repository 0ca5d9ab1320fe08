#!/usr/bin/env python3
"""
The whole declared set of arguments for a parser.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import itertools as itz
import logging as logmod
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
from schemargs._errors.schema import SchemaError
from schemargs._structs.argument_spec import ArgumentSpec

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Schema:
    """
      Partitions argument specs into ordered positionals and keyed options.
      Names are unique across the schema,
      and option aliases are unique across both option names and aliases.

      Read only once built, so a single schema can back any number of parses.
    """

    def __init__(self, arguments:Iterable[ArgumentSpec]=()):
        self._positionals : tuple[ArgumentSpec, ...]
        self._options     : dict[str, ArgumentSpec] = {}
        self._aliases     : dict[str, ArgumentSpec] = {}
        self._names       : dict[str, ArgumentSpec] = {}
        positionals       : list[ArgumentSpec]      = []

        for arg in arguments:
            if not isinstance(arg, ArgumentSpec):
                raise SchemaError("Schemas are built from ArgumentSpecs", arg)
            if arg.name in self._names:
                raise SchemaError("Duplicate argument: '%s'", arg.name)

            self._names[arg.name] = arg
            if arg.is_positional:
                positionals.append(arg)
                continue

            self._options[arg.name] = arg

        for arg in self._options.values():
            match arg.alias:
                case None:
                    pass
                case str() as alias if alias in self._aliases or self._options.get(alias, arg) is not arg:
                    raise SchemaError("Duplicate alias for '%s': '%s'", arg.name, alias)
                case str() as alias:
                    self._aliases[alias] = arg

        self._positionals = tuple(positionals)
        logging.debug("Built Schema: positionals=%s, options=%s", self._positionals, list(self._options.values()))

    @property
    def positionals(self) -> tuple[ArgumentSpec, ...]:
        return self._positionals

    @property
    def options(self) -> tuple[ArgumentSpec, ...]:
        return tuple(self._options.values())

    def lookup(self, name:str) -> None|ArgumentSpec:
        """ find an option by full name, falling back to its alias """
        match self._options.get(name, None):
            case None:
                return self._aliases.get(name, None)
            case found:
                return found

    def required(self) -> list[ArgumentSpec]:
        return [x for x in self if x.required]

    def defaults(self) -> dict[str, object]:
        return {x.name : x.default for x in self if x.default is not None}

    def __iter__(self) -> Iterator[ArgumentSpec]:
        return itz.chain(self._positionals, self._options.values())

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name:object) -> bool:
        return name in self._names

    def __getitem__(self, name:str) -> ArgumentSpec:
        return self._names[name]

    def __bool__(self) -> bool:
        return bool(self._names)

    def __repr__(self):
        return f"<Schema: {list(self._names.keys())}>"
