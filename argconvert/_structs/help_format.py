#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, model_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
from argconvert import errors
from argconvert._interface import (HELP_DESC_INDENT, HELP_PARAM_INDENT,
                                   HELP_WIDTH)

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class HelpFormat(BaseModel):
    """ Layout settings for help strings.
      width        : total characters per description line
      param_indent : spaces before parameter names
      desc_indent  : spaces before each description line
    """

    width        : int = HELP_WIDTH
    param_indent : int = HELP_PARAM_INDENT
    desc_indent  : int = HELP_DESC_INDENT
    header       : str = ""
    footer       : str = ""

    @staticmethod
    def check(width:int, param_indent:int, desc_indent:int) -> None:
        if width < 0 or param_indent < 0 or desc_indent < 0:
            raise errors.InvalidFormattingParameters("Formatting parameters must not be negative: (width=%s, param_indent=%s, desc_indent=%s)",
                                                     width, param_indent, desc_indent)
        if width <= param_indent + 1 or width <= desc_indent + 1:
            raise errors.InvalidFormattingParameters("Indents must leave at least 2 characters of the line: (width=%s, param_indent=%s, desc_indent=%s)",
                                                     width, param_indent, desc_indent)

    @model_validator(mode="after")
    def _validate_layout(self):
        HelpFormat.check(self.width, self.param_indent, self.desc_indent)
        return self

    def update(self, **kwargs:Any) -> HelpFormat:
        """ Change settings in place, checking the combined layout before anything is changed """
        merged = self.model_dump() | kwargs
        HelpFormat.check(merged['width'], merged['param_indent'], merged['desc_indent'])
        for key, val in kwargs.items():
            setattr(self, key, val)

        return self
