#!/usr/bin/env python3
"""
Conversion strategies attached to ArgumentSpecs.

A converter is any callable taking the raw value of a match,
a single token for scalar arguments and the list of tokens for variadic ones.
The classes here build them from a target type, or from a per-token function.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from typing import TYPE_CHECKING, Any, Callable, Final

# ##-- end stdlib imports

# ##-- 1st party imports
from schemargs._errors.parse import ConversionError
from schemargs._errors.schema import SchemaError
from schemargs._interface import FALSE_STRS, TRUE_STRS

# ##-- end 1st party imports

if TYPE_CHECKING:
    from schemargs._interface import Converter

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

TYPE_NAMES : Final[dict[str, type]] = {
    "str"   : str,
    "int"   : int,
    "float" : float,
    "bool"  : bool,
    "path"  : pl.Path,
}

def str_to_bool(val:str) -> bool:
    """convert string to boolean"""
    match val.lower():
        case x if x in TRUE_STRS:
            return True
        case x if x in FALSE_STRS:
            return False
        case _:
            raise ValueError("Not a boolean", val)

def flag_true(_:Any) -> bool:
    """ Flags ignore their (empty) window, being present is enough """
    return True

def infer_type(type_:None|type, default:Any, *, variadic:bool=False) -> type:
    """ Pick the target type of an argument: explicit, else from its default, else str """
    match type_, default:
        case type(), _:
            return type_
        case None, None:
            return str
        case None, [x, *_] if variadic:
            return type(x)
        case None, _ if variadic:
            return str
        case None, list() | tuple() | dict() | set():
            return str
        case None, x:
            return type(x)
        case _:
            raise SchemaError("Argument types must be classes, use convert for functions", type_)

class TokenConverter:
    """
      Converts a single token using a type's own "parse from string" constructor.
      str is the identity, bool uses a truth table rather than bool(),
      which would treat any non-empty string as true.
    """

    def __init__(self, target:type|Callable, *, func:None|Callable=None):
        self.target = target
        self._func  = func or self._select(target)

    @staticmethod
    def _select(target:type) -> Callable:
        match target:
            case x if x is str:
                return str
            case x if x is bool:
                return str_to_bool
            case _:
                return target

    def __call__(self, token:str) -> Any:
        try:
            return self._func(token)
        except ConversionError:
            raise
        except (ValueError, TypeError) as err:
            raise ConversionError(token, self.target) from err

    def __repr__(self):
        return f"<TokenConverter: {getattr(self.target, '__name__', self.target)}>"

class ElementwiseConverter:
    """ Applies a TokenConverter to each token of a variadic window, then collects them """

    def __init__(self, element:TokenConverter, *, collect:Callable=list):
        self.element = element
        self.collect = collect

    @property
    def target(self) -> type|Callable:
        return self.element.target

    def __call__(self, tokens:list[str]) -> Any:
        return self.collect(self.element(x) for x in tokens)

    def __repr__(self):
        return f"<ElementwiseConverter: {self.element!r}>"

def build_converter(type_:type, *, convert:None|Callable=None, variadic:bool=False, collect:Callable=list) -> Converter:
    """ Build the converter for an argument from its type and an optional per-token function """
    scalar = TokenConverter(type_, func=convert)
    if not variadic:
        return scalar

    return ElementwiseConverter(scalar, collect=collect)
