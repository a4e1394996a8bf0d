#!/usr/bin/env python3
"""
Errors raised while registering or looking up parameters
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

class RegistrationError(UserError):
    """ A parameter could not be registered. Nothing was inserted. """
    general_msg = "Parameter Registration Failure:"
    pass

class DuplicateParameterName(RegistrationError):
    """ A declared name collides with an already registered name """
    pass

class DuplicateParameterPosition(RegistrationError):
    """ Two positional parameters were declared at the same position """
    pass

class ParamSpecError(RegistrationError):
    """ A parameter spec is malformed, eg: it has no names, or no resolvable type """
    pass

class UnknownParameterName(UserError):
    """ A name was looked up that was never registered """
    general_msg = "Unknown Parameter:"
    pass
