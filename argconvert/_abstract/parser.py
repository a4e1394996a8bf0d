#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

if TYPE_CHECKING:
    from argconvert._abstract.protocols import Registry_p
    from argconvert._structs.scan_result import ScanResult

class ArgScanner_i:
    """
    A single standard process point for turning some textual input
    into the collected argument lists of a registry's parameters.
    """

    @abstractmethod
    def scan(self, source:Iterable[str], registry:Registry_p) -> ScanResult:
        pass
