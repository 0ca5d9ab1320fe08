#!/usr/bin/env python3
"""
Load argument schemas from toml declarations:

[[arguments]]
name     = "inputs"
kind     = "variadic"
required = true

[[arguments]]
name  = "jobs"
kind  = "option"
alias = "j"
type  = "int"

An optional [logging] table is applied as a LoggerSpec.
In a pyproject.toml, the same tables are read from [tool.schemargs].
"""
##-- imports
from __future__ import annotations

import logging as logmod
import pathlib as pl
from typing import Final

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

import tomlguard
from pydantic import ValidationError
from tomlguard import TomlGuard

from schemargs._errors.schema import LoadError
from schemargs.structs import ArgumentSpec, Schema
from schemargs.utils.log_config import LoggerSpec

PYPROJ_TOML   : Final[str] = "pyproject.toml"

class TomlSchemaLoader:
    """ Turns toml text or files into a Schema """

    def load(self, path:pl.Path|str) -> Schema:
        path = pl.Path(path)
        logging.debug("Loading Schema from: %s", path)
        if not path.is_file():
            raise LoadError("Schema declaration not found: %s", path)

        return self.read(path.read_text(), pyproject=path.name == PYPROJ_TOML)

    def read(self, text:str, *, pyproject:bool=False) -> Schema:
        try:
            data = tomlguard.read(text)
        except ValueError as err:
            raise LoadError("Schema declaration is not valid toml: %s", err) from err

        if pyproject:
            data = data.on_fail({}).tool.schemargs()

        return self.build(data)

    def build(self, data:TomlGuard|dict) -> Schema:
        if not isinstance(data, TomlGuard):
            data = TomlGuard(data)

        match data.on_fail(None).logging():
            case None:
                pass
            case table:
                try:
                    LoggerSpec.build(table).apply()
                except ValidationError as err:
                    raise LoadError("Bad logging declaration: %s", err) from err

        declared = data.on_fail([], list).arguments()
        logging.debug("Building %s Argument Specs", len(declared))
        return Schema(ArgumentSpec.build(x) for x in declared)
