#!/usr/bin/env python3
"""
schemargs : Declare a schema of positionals, options and flags,
then parse command lines against it.

    parser = ArgumentParser([
        ArgumentSpec.variadic("inputs", required=True),
        ArgumentSpec.option("output", alias="o"),
        ArgumentSpec.flag("optimized", alias="O"),
    ])
    result = parser.parse(["prog", "-o", "c", "-O", "a", "b"])
    result.result("inputs", list[str])  # ["a", "b"]

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__, UNBOUNDED, ArgKind_e
from .structs import ArgumentSpec, ParseResult, Schema
from .parsers.parser import ArgumentParser
from . import errors

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging
