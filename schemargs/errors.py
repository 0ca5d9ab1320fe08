#!/usr/bin/env python3
"""
These are the schemargs specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from schemargs._errors.base import SchemargsError
from schemargs._errors.parse import (ConversionError, EmptyCommandLine,
                                     InvalidArity, MissingArguments,
                                     ParseError, UnexpectedArgument)
from schemargs._errors.schema import LoadError, SchemaError

# ##-- end 1st party imports
