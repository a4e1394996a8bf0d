#!/usr/bin/env python3
"""
argconvert : Typed command line parameter registration, scanning and help strings.

Declare positional parameters, keyword parameters and flags,
scan argv (or a config file) into them,
then ask for the collected arguments as the types they were declared with.

"""
# Imports:
from __future__ import annotations

import logging as logmod

from ._interface import __version__
from .enums import ParamCategory_e
from .registry import ParamRegistry
from .structs import ParamSpec, HelpFormat, ScanResult, ConverterBinding

##-- logging
logging = logmod.getLogger(__name__)
logging.addHandler(logmod.NullHandler())
##-- end logging
