#!/usr/bin/env python3
"""



"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class ArgConvertError(Exception):
    """
      The base class for all argconvert Errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific ArgConvert Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)


class UserError(ArgConvertError):
    """ The caller used the library incorrectly """
    pass

class UnexpectedCase(ArgConvertError):
    """ A state that should be impossible was reached. Not recoverable. """
    general_msg = "ArgConvert Internal Failure:"
    pass
