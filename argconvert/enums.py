#!/usr/bin/env python3
"""
The core enums used to classify parameters and tokens.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum

# ##-- end stdlib imports

class ParamCategory_e(enum.Enum):
    """ The closed set of parameter kinds a registry understands """

    positional = enum.auto()
    keyword    = enum.auto()
    flag       = enum.auto()

class TokenKind_e(enum.Enum):
    """ How the scanner classified a single argv token """

    KEYWORD = enum.auto()
    FLAG    = enum.auto()
    BUNDLE  = enum.auto()
    VALUE   = enum.auto()
