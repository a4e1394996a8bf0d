#!/usr/bin/env python3
"""
The Parameter Registry.

Owns every registered ParamSpec, maps names to dense integer identifiers,
keeps the positional/keyword/flag indices, and stores the raw tokens the
last scan collected for each parameter.

A registry is filled once, then scanned and queried.
Scanning replaces the collected arguments in place, so one registry must
not be scanned from several threads at once.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import bisect
import logging as logmod
import pathlib as pl
import sys
from typing import Iterable

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from argconvert import errors
from argconvert._structs.help_format import HelpFormat
from argconvert._structs.param_spec import ParamSpec
from argconvert._structs.scan_result import ScanResult
from argconvert.enums import ParamCategory_e
from argconvert.mixins.help import HelpString_m
from argconvert.mixins.retrieval import TypedRetrieval_m
from argconvert.parsers.config import ConfigScanner
from argconvert.parsers.scanner import ArgScanner

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParamRegistry(TypedRetrieval_m, HelpString_m):
    """
    Register parameters, then scan argv or a config file into them:

    >>> registry = ParamRegistry()(ParamSpec.positional("FILE", 0).set_min(1))(ParamSpec.keyword(["--count", "-n"], int))(ParamSpec.flag("v"))
    >>> result = registry.scan(["prog", "a.txt", "-n", "3", "-v"])
    >>> registry.get_one("-n", int), registry.is_set("v"), result.empty
    (3, True, True)
    """

    def __init__(self, help_format:None|HelpFormat=None):
        self._name_to_id      : dict[str, int]    = {}
        self._specs           : list[ParamSpec]   = []
        self._collected       : list[list[str]]   = []
        # position -> id, with the positions kept sorted
        self._positions       : dict[int, int]    = {}
        self._position_order  : list[int]         = []
        # dicts as insertion ordered sets of ids
        self._keywords        : dict[int, None]   = {}
        self._flags           : dict[int, None]   = {}
        self._help_format     : HelpFormat        = help_format or HelpFormat()
        self._arg_scanner                         = ArgScanner()
        self._config_scanner                      = ConfigScanner()

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name:str) -> bool:
        return name in self._name_to_id

    def __call__(self, spec:ParamSpec) -> ParamRegistry:
        """ Register, returning self to allow chaining """
        self.register(spec)
        return self

    ##--| registration

    def register(self, spec:ParamSpec) -> int:
        """ Store a copy of the spec, returning its identifier.
          Nothing is stored if any name or position is already taken.
        """
        match [x for x in spec.names if x in self._name_to_id]:
            case []:
                pass
            case [*xs]:
                raise errors.DuplicateParameterName("Parameter names already registered: %s", xs)

        match spec.category:
            case ParamCategory_e.positional if spec.position in self._positions:
                taken = self._specs[self._positions[spec.position]].primary
                raise errors.DuplicateParameterPosition("Position %s of '%s' is already used by '%s'",
                                                        spec.position, spec.primary, taken)
            case ParamCategory_e():
                pass
            case x:
                raise errors.UnexpectedCase("Unable to determine parameter's category", x)

        spec  = spec.model_copy(update={"names": list(spec.names), "defaults": list(spec.defaults)})
        ident = len(self._specs)
        self._specs.append(spec)
        self._collected.append([])
        self._name_to_id.update((x, ident) for x in spec.names)
        match spec.category:
            case ParamCategory_e.positional:
                self._positions[spec.position] = ident
                bisect.insort(self._position_order, spec.position)
            case ParamCategory_e.keyword:
                self._keywords[ident] = None
            case ParamCategory_e.flag:
                self._flags[ident] = None

        logging.debug("Registered %s as %s", spec, ident)
        return ident

    ##--| lookup

    def lookup(self, name:str) -> int:
        try:
            return self._name_to_id[name]
        except KeyError:
            raise errors.UnknownParameterName("Parameter '%s' was never registered", name) from None

    def descriptor(self, ident:int|str) -> ParamSpec:
        """ A copy of the registered spec. Changing it does not change the registry """
        match ident:
            case str():
                spec = self._specs[self.lookup(ident)]
            case int() if 0 <= ident < len(self._specs):
                spec = self._specs[ident]
            case int():
                raise errors.UnknownParameterName("No parameter has the identifier %s", ident)
            case x:
                raise TypeError("Descriptors are accessed by name or identifier", x)

        return spec.model_copy(update={"names": list(spec.names), "defaults": list(spec.defaults)})

    def names(self) -> list[str]:
        return list(self._name_to_id.keys())

    def positional_ids(self) -> list[int]:
        """ Positional identifiers, in position order """
        return [self._positions[x] for x in self._position_order]

    def keyword_ids(self) -> list[int]:
        """ Keyword identifiers, in registration order """
        return list(self._keywords)

    def flag_ids(self) -> list[int]:
        """ Flag identifiers, in registration order """
        return list(self._flags)

    def is_keyword(self, name:str) -> bool:
        return name in self._name_to_id and self._name_to_id[name] in self._keywords

    def is_flag(self, name:str) -> bool:
        return name in self._name_to_id and self._name_to_id[name] in self._flags

    ##--| scanning

    def reset_collected(self) -> list[list[str]]:
        """ Drop everything a previous scan collected """
        self._collected = [[] for _ in self._specs]
        return self._collected

    def scan(self, argv:None|Iterable[str]=None) -> ScanResult:
        """ Scan argv (default: sys.argv), skipping the program name """
        return self._arg_scanner.scan(sys.argv if argv is None else argv, self)

    def scan_config(self, source:pl.Path|str|Iterable[str]) -> ScanResult:
        """ Scan 'name=value' lines, from a path, a string or an iterable of lines """
        match source:
            case pl.Path():
                source = source.read_text()
            case _:
                pass

        return self._config_scanner.scan(source, self)

    def scan_toml(self, source:pl.Path|str) -> ScanResult:
        match source:
            case pl.Path():
                source = source.read_text()
            case _:
                pass

        return self._config_scanner.scan_toml(source, self)

    def as_guard(self) -> TomlGuard:
        """ The collected raw arguments by primary name. Flags are bools """
        data = {}
        for spec, vals in zip(self._specs, self._collected):
            match spec.category:
                case ParamCategory_e.flag:
                    data[spec.primary] = bool(vals)
                case _:
                    data[spec.primary] = list(vals)

        return TomlGuard(data)
