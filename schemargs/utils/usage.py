#!/usr/bin/env python3
"""
Render a schema as usage text.

  usage: prog [options] <inputs> ...

  Positional Arguments:
    <inputs> ...        The input files (required)

  Options:
    -o, --output        The output file
    -O, --optimized     Enable optimizations [default: False]

Only reads the schema, through the SchemaSource_p protocol.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Final

# ##-- end stdlib imports

if TYPE_CHECKING:
    from schemargs._interface import ArgumentSpec_p, SchemaSource_p

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

INDENT           : Final[str] = "  "
POSITIONAL_TITLE : Final[str] = "Positional Arguments:"
OPTION_TITLE     : Final[str] = "Options:"

class UsageFormatter:
    """ Builds usage text from the positionals and options of a schema """

    def synopsis(self, prog:str, source:SchemaSource_p) -> str:
        parts = [f"usage: {prog}"]
        optional_opts = [x for x in source.options if not x.required]
        if bool(optional_opts):
            parts.append("[options]")

        parts += [self._option_synopsis(x) for x in source.options if x.required]
        parts += [self._positional_synopsis(x) for x in source.positionals]
        return " ".join(parts)

    def _positional_synopsis(self, arg:ArgumentSpec_p) -> str:
        text = f"<{arg.name}>"
        if arg.is_variadic:
            text += " ..."
        if not arg.required:
            text = f"[{text}]"
        return text

    def _option_synopsis(self, arg:ArgumentSpec_p) -> str:
        text = f"--{arg.name}"
        match arg.arity:
            case None:
                text += " <value>"
            case (0, 0):
                pass
            case _:
                text += " <value> ..."
        return text

    def section(self, title:str, args:tuple[ArgumentSpec_p, ...]) -> list[str]:
        if not bool(args):
            return []

        lines = ["", title]
        lines += [f"{INDENT}{x}" for x in args]
        return lines

    def format(self, prog:str, source:SchemaSource_p) -> str:
        lines  = [self.synopsis(prog, source)]
        lines += self.section(POSITIONAL_TITLE, source.positionals)
        lines += self.section(OPTION_TITLE, source.options)
        return "\n".join(lines)
