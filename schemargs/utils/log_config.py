#!/usr/bin/env python3
"""
Toml controlled logging setup for programs using schemargs.

The library itself only creates loggers, it never installs handlers.
A [logging] table in a schema declaration is turned into a LoggerSpec,
and applied, eg:

[logging]
name   = "schemargs"
level  = "DEBUG"
target = "stderr"
format = "{levelname:<8} : {name} : {message}"

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from collections.abc import Mapping
from sys import stderr, stdout
from typing import Any, ClassVar, Final

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, field_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

TARGETS       : Final[list[str]] = ["file", "stdout", "stderr", "pass"]
DEFAULT_FILE  : Final[str]       = "schemargs.log"

class _AnyFilter:
    """
      A Simple filter to reject records from loggers named in a rejection list.
    """

    def __init__(self, reject:None|list[str]=None):
        self.rejections = reject or []

    def __call__(self, record):
        if record.name in ["root", "__main__"]:
            return True

        return not any(x in record.name for x in self.rejections)

class HandlerBuilder_m:
    """
    Loggerspec Mixin for building handlers
    """

    def _build_streamhandler(self) -> logmod.Handler:
        return logmod.StreamHandler(stdout)

    def _build_errorhandler(self) -> logmod.Handler:
        return logmod.StreamHandler(stderr)

    def _build_filehandler(self, path:pl.Path) -> logmod.Handler:
        return logmod.FileHandler(path, mode='w')

    def _discriminate_handler(self, target:None|str) -> None|logmod.Handler:
        match target:
            case "pass" | None:
                return None
            case "file":
                return self._build_filehandler(pl.Path(self.filename))
            case "stdout":
                return self._build_streamhandler()
            case "stderr":
                return self._build_errorhandler()
            case _:
                raise ValueError("Unknown logger spec target", target)

class LoggerSpec(BaseModel, HandlerBuilder_m):
    """
      A Spec for toml defined logging control.
      Allows user to name a logger, set its level, format,
      filters, and where it logs to.

      When 'apply' is called, it gets the logger,
      and sets any relevant settings on it.
    """

    name                       : str                         = "schemargs"
    disabled                   : bool                        = False
    level                      : int                         = logmod.WARNING
    format                     : str                         = "{levelname:<8} : {message}"
    filter                     : list[str]                   = []
    target                     : str                         = "stdout"
    filename                   : str                         = DEFAULT_FILE
    propagate                  : bool                        = False

    RootName                   : ClassVar[str]               = "root"

    @staticmethod
    def build(data:TomlGuard|dict, **kwargs:Any) -> LoggerSpec:
        match data:
            case TomlGuard():
                as_dict = dict(data._table())
            case Mapping():
                as_dict = dict(data)
            case x:
                raise TypeError("LoggerSpecs are built from tables", x)

        as_dict.update(kwargs)
        return LoggerSpec.model_validate(as_dict)

    @field_validator("level", mode="before")
    def _validate_level(cls, val):
        match val:
            case int():
                return val
            case str() if val.upper() in logmod.getLevelNamesMapping():
                return logmod.getLevelNamesMapping()[val.upper()]
            case _:
                raise ValueError("Unknown logging level", val)

    @field_validator("target")
    def _validate_target(cls, val):
        if val not in TARGETS:
            raise ValueError("Unknown target value for LoggerSpec", val)
        return val

    def get(self) -> logmod.Logger:
        if self.name == LoggerSpec.RootName:
            return logmod.getLogger()
        return logmod.getLogger(self.name)

    def apply(self) -> logmod.Logger:
        """ Apply this spec to the relevant logger """
        logger           = self.get()
        self.clear()
        logger.propagate = self.propagate
        if self.disabled:
            logger.disabled = True
            return logger

        logger.disabled = False
        logger.setLevel(self.level)
        match self._discriminate_handler(self.target):
            case None:
                logger.propagate = True
            case handler:
                handler.setLevel(self.level)
                handler.setFormatter(logmod.Formatter(fmt=self.format, style="{"))
                if bool(self.filter):
                    handler.addFilter(_AnyFilter(reject=self.filter))
                logger.addHandler(handler)

        logging.debug("Applied LoggerSpec: %s", self.name)
        return logger

    def clear(self) -> None:
        """ Clear the handlers for the logger referenced """
        logger = self.get()
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

    def set_level(self, level:int|str) -> None:
        match level:
            case str():
                level = logmod.getLevelNamesMapping().get(level.upper(), 0)
            case int():
                pass
        logger = self.get()
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
