#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import UserError

class InvalidFormattingParameters(UserError):
    """ Help string widths or indents are negative, or leave no room for text """
    general_msg = "Help Format Failure:"
    pass
