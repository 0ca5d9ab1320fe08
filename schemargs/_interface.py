#!/usr/bin/env python3
"""
Shared constants, type aliases, enums and protocols for schemargs.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
import sys
from importlib.metadata import PackageNotFoundError, version

# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING
# Protocols:
from typing import Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Final, Any
    from collections.abc import Callable, Iterator, Sequence

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
try:
    __version__ : Final[str] = version("schemargs")
except PackageNotFoundError:
    __version__ = "0.0.0"

DASH             : Final[str]             = "-"
LONG_PREFIX      : Final[str]             = "--"
SHORT_PREFIX     : Final[str]             = "-"
UNBOUNDED        : Final[int]             = sys.maxsize
DEFAULT_ARITY    : Final[tuple[int, int]] = (1, UNBOUNDED)
FLAG_ARITY       : Final[tuple[int, int]] = (0, 0)

TRUE_STRS        : Final[frozenset[str]]  = frozenset(["1", "yes", "true", "on"])
FALSE_STRS       : Final[frozenset[str]]  = frozenset(["0", "no", "false", "off"])

type Arity       = tuple[int, int]
type RawValue    = str | list[str]
type Converter   = Callable[[Any], Any]

# Body:

class ArgKind_e(enum.StrEnum):
    """ How an argument is matched against the command line """
    positional = enum.auto()
    option     = enum.auto()
    flag       = enum.auto()

##--|

@runtime_checkable
class ArgumentSpec_p(Protocol):
    """ The read-only view of an argument that usage rendering relies on """
    name     : str
    alias    : None|str
    desc     : None|str
    required : bool
    arity    : None|Arity

    @property
    def is_positional(self) -> bool: ...

    @property
    def is_variadic(self) -> bool: ...

@runtime_checkable
class SchemaSource_p(Protocol):
    """ Anything that can hand over its argument declarations in order """

    @property
    def positionals(self) -> Sequence[ArgumentSpec_p]: ...

    @property
    def options(self) -> Sequence[ArgumentSpec_p]: ...
