#!/usr/bin/env python3
"""
The product of a parse: an immutable mapping of argument names to values,
with type checked retrieval.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import types
import typing
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, overload

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

if TYPE_CHECKING:
    from collections.abc import Iterator

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

T = TypeVar("T")

def _matches_type(value:Any, target:Any) -> bool:
    """ isinstance, extended to list[T] / tuple[T, ...] style aliases.
      bools are not accepted as ints, despite being a subclass.
    """
    match typing.get_origin(target), typing.get_args(target):
        case None, _ if target is Any:
            return True
        case None, _ if target is int and isinstance(value, bool):
            return False
        case None, _:
            return isinstance(value, target)
        case (types.UnionType | typing.Union), options:
            return any(_matches_type(value, x) for x in options)
        case origin, _ if not isinstance(value, origin):
            return False
        case _, ():
            return True
        case origin, (elem, rest) if origin is tuple and rest is Ellipsis:
            return all(_matches_type(x, elem) for x in value)
        case origin, elems if origin is tuple:
            return len(value) == len(elems) and all(_matches_type(x, y) for x, y in zip(value, elems))
        case origin, (key_t, val_t) if issubclass(origin, Mapping):
            return all(_matches_type(k, key_t) and _matches_type(v, val_t) for k, v in value.items())
        case _, (elem,):
            return all(_matches_type(x, elem) for x in value)
        case _:
            return False

class ParseResult(Mapping):
    """
      The values produced by parsing one command line.
      Keys are only present for arguments that were given, or have a default.
    """

    def __init__(self, data:None|Mapping[str, Any]=None):
        self._data : dict[str, Any] = dict(data or {})

    @overload
    def result(self, name:str) -> Any: ...

    @overload
    def result(self, name:str, type:type[T]) -> None|T: ...

    def result(self, name:str, type:Any=Any) -> Any:
        """ Get a value, or None if it is absent or not of the requested type """
        match self._data.get(name, None):
            case None:
                return None
            case x if _matches_type(x, type):
                return x
            case x:
                logging.debug("Result type mismatch: %s : %s is not a %s", name, x, type)
                return None

    def guard(self) -> TomlGuard:
        """ An attribute access view of the results, eg: result.guard().on_fail(1).jobs() """
        return TomlGuard(self._data)

    def __getitem__(self, name:str) -> Any:
        return self._data[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other:object) -> bool:
        match other:
            case ParseResult():
                return self._data == other._data
            case Mapping():
                return self._data == dict(other)
            case _:
                return NotImplemented

    def __repr__(self):
        return f"<ParseResult: {self._data}>"
