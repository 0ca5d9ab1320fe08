#!/usr/bin/env python3
"""
Errors raised while matching a command line against a schema.
Each of them aborts the whole parse.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

from .base import SchemargsError

if TYPE_CHECKING:
    from schemargs._structs.argument_spec import ArgumentSpec

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParseError(SchemargsError):
    """ In the course of parsing CLI input, a failure occurred. """
    general_msg = "CLI Parsing Failure:"
    pass

class EmptyCommandLine(ParseError):
    """ The command line did not even contain the program name """

    def __init__(self):
        super().__init__("Command line is empty, expected at least a program name")

class MissingArguments(ParseError):
    """ Required arguments were not provided """

    def __init__(self, arguments:list[ArgumentSpec]):
        self.arguments = list(arguments)
        super().__init__("Missing required arguments: %s", [x.name for x in self.arguments])

class UnexpectedArgument(ParseError):
    """ A token matched no option, or arrived with no positional left to fill """

    def __init__(self, token:str):
        self.token = token
        super().__init__("Unexpected argument: %s", token)

class InvalidArity(ParseError):
    """ The number of values given to an argument is outside its declared bounds """

    def __init__(self, argument:ArgumentSpec, provided:int):
        self.argument = argument
        self.provided = provided
        super().__init__("Invalid number of values for '%s': expected %s, got %s",
                         argument.name, argument.arity_str, provided)

class ConversionError(ParseError):
    """ A value could not be converted to its argument's type """

    def __init__(self, token:Any, target:Any):
        self.token  = token
        self.target = target
        super().__init__("Could not convert %r to %s", token, getattr(target, "__name__", target))
