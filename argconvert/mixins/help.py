#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
from argconvert._interface import (FLAG_HEADING, KEYWORD_HEADING,
                                   POSITIONAL_HEADING)
from argconvert._structs.help_format import HelpFormat

# ##-- end 1st party imports

if TYPE_CHECKING:
    from argconvert._structs.param_spec import ParamSpec

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class HelpString_m:
    """ Mixed into ParamRegistry. Renders the registered parameters' metadata """

    _specs       : list[ParamSpec]
    _help_format : HelpFormat

    @property
    def help_format(self) -> HelpFormat:
        return self._help_format

    def set_help_format(self, fmt:HelpFormat) -> None:
        self._help_format = fmt

    def set_help_header(self, header:str) -> None:
        self._help_format.header = header

    def set_help_footer(self, footer:str) -> None:
        self._help_format.footer = footer

    def set_help_layout(self, *, width:None|int=None, param_indent:None|int=None, desc_indent:None|int=None) -> None:
        changes = {"width": width, "param_indent": param_indent, "desc_indent": desc_indent}
        self._help_format.update(**{x:y for x,y in changes.items() if y is not None})

    def help_string(self) -> str:
        """ Header, then positionals, keywords and flags, then footer """
        fmt      = self._help_format
        sections = [(POSITIONAL_HEADING, self.positional_ids()),
                    (KEYWORD_HEADING, self.keyword_ids()),
                    (FLAG_HEADING, self.flag_ids())]
        parts    = []
        if bool(fmt.header):
            parts.append(f"{fmt.header}\n")

        for heading, idents in sections:
            if not bool(idents):
                continue
            parts.append(f"\n{heading}\n")
            parts += [self._specs[x].help_string(fmt) for x in idents]

        if bool(fmt.footer):
            parts.append(f"{fmt.footer}\n")

        return "".join(parts)
