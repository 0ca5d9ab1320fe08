#!/usr/bin/env python3
"""
Public Access point for schemargs Structures
"""
from __future__ import annotations

from schemargs._structs.argument_spec import ArgumentSpec
from schemargs._structs.converters import (ElementwiseConverter,
                                           TokenConverter)
from schemargs._structs.parse_result import ParseResult
from schemargs._structs.schema import Schema
