#!/usr/bin/env python3
"""
Errors raised when retrieving typed values after a scan
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

class ConversionError(UserError):
    """ Collected arguments could not be handed back as requested """
    general_msg = "ArgConvert Conversion Failure:"
    pass

class MismatchedParameterType(ConversionError):
    """ The type asked for is not the type the parameter was registered with """
    pass

class InvalidFlagConversion(ConversionError):
    """ Typed retrieval was attempted on a flag. Use is_set instead. """
    pass

class NoFlagWithName(ConversionError):
    """ is_set was called with the name of a parameter that is not a flag """
    pass

class UnfilledParameter(ConversionError):
    """ A single value was requested from an empty argument list """
    pass

class UnconvertibleValue(ConversionError):
    """ A collected argument could not be converted to the parameter's type """
    pass
