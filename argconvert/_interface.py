#!/usr/bin/env python3
"""
Constants shared across argconvert.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
from typing import Final

# ##-- end stdlib imports

__version__ : Final[str]               = "0.1.0"

# Scanning
FLAG_PREFIX         : Final[str]       = "-"
FLAG_SENTINEL       : Final[str]       = "true"
DEFAULT_MIN_ARGS    : Final[int]       = 0
DEFAULT_MAX_ARGS    : Final[int]       = 1
DEFAULT_PLACEHOLDER : Final[str]       = "<ARG>"

# Config files
COMMENT_PREFIX      : Final[str]       = "#"
ASSIGN_SEP          : Final[str]       = "="
VALUE_SEP           : Final[str]       = " "
TRUE_WORDS          : Final[frozenset] = frozenset(["true", "True", "TRUE", "1"])
FALSE_WORDS         : Final[frozenset] = frozenset(["false", "False", "FALSE", "0"])

# Help strings
HELP_WIDTH          : Final[int]       = 40
HELP_PARAM_INDENT   : Final[int]       = 4
HELP_DESC_INDENT    : Final[int]       = 8
NAME_JOIN           : Final[str]       = " | "
POSITIONAL_HEADING  : Final[str]       = "Positional Arguments:"
KEYWORD_HEADING     : Final[str]       = "Keyword Arguments:"
FLAG_HEADING        : Final[str]       = "Flags:"
