#!/usr/bin/env python3
"""
Errors raised while scanning argv or configuration files
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import ArgConvertError, UserError

class ParseError(UserError):
    """ In the course of scanning input, a failure occurred. """
    general_msg = "ArgConvert Parsing Failure:"
    pass

class UnknownFlagOrKeyword(ParseError):
    """ A '-' prefixed token is neither a keyword, a flag, nor a bundle of known flags """
    pass

class ConfigParseError(ParseError):
    """ A configuration file line could not be understood """
    general_msg = "ArgConvert Config Parsing Failure:"
    pass
