#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass, field

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass
class ScanResult:
    """ What a scan could not place.
      Neither list is an error by itself, the caller decides how to report them.

      additional_arguments : value tokens no parameter would take, in encounter order.
      unfilled_parameters  : primary names of parameters with fewer arguments than their minimum.
                             positionals in position order, then keywords in registration order.
    """

    additional_arguments : list[str] = field(default_factory=list)
    unfilled_parameters  : list[str] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not (bool(self.additional_arguments) or bool(self.unfilled_parameters))
