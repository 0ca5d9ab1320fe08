#!/usr/bin/env python3
"""
Errors in the declaration of a schema, rather than in the input being parsed.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import SchemargsError

class SchemaError(SchemargsError):
    """ An invalid argument declaration. A programmer error, not a user one """
    general_msg = "Invalid Argument Schema:"
    pass

class LoadError(SchemaError):
    """ An error indicating a schema could not be loaded correctly from its TOML declaration """
    general_msg = "Schema Load Failure:"
    pass
