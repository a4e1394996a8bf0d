#!/usr/bin/env python3
"""
Scanning of configuration files into a registry.

Two formats are understood:
 - plain 'name=value' lines, with '#' comment lines,
 - a toml table of name -> value, read with tomlguard.

Both gather values per parameter, then assign them the same way:
values beyond a parameter's max become additional arguments.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from collections import defaultdict
from typing import TYPE_CHECKING, Iterable

# ##-- end stdlib imports

# ##-- 3rd party imports
import tomlguard

# ##-- end 3rd party imports

# ##-- 1st party imports
from argconvert import errors
from argconvert._abstract import ArgScanner_i
from argconvert._interface import (ASSIGN_SEP, COMMENT_PREFIX, FALSE_WORDS,
                                   TRUE_WORDS, VALUE_SEP)
from argconvert._structs.scan_result import ScanResult
from argconvert.parsers.scanner import ScanFinish_m

# ##-- end 1st party imports

if TYPE_CHECKING:
    from argconvert._abstract.protocols import Registry_p

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ConfigScanner(ScanFinish_m, ArgScanner_i):
    """ Scan 'name=value' lines into a registry's collected arguments """

    def scan(self, source:str|Iterable[str], registry:Registry_p) -> ScanResult:
        match source:
            case str():
                lines = source.splitlines()
            case _:
                lines = list(source)

        collected = registry.reset_collected()
        gathered  = defaultdict(list)
        for row, line in enumerate(lines, start=1):
            line = line.rstrip("\r\n")
            if not bool(line) or line.startswith(COMMENT_PREFIX):
                continue

            name, sep, value = line.partition(ASSIGN_SEP)
            if not bool(sep):
                raise errors.ConfigParseError("Non-empty, non-comment lines must contain '%s'. Row %s: '%s'", ASSIGN_SEP, row, line)
            if name not in registry:
                raise errors.ConfigParseError("Unknown parameter name. Row %s: '%s'", row, name)
            if not bool(value):
                raise errors.ConfigParseError("Empty argument list. Row %s: '%s'", row, line)

            ident = registry.lookup(name)
            if registry.is_flag(name):
                self._flag_value(collected, ident, value, name=name, row=row)
            else:
                gathered[ident] += self._split_values(value)

        return self._assign(gathered, collected, registry)

    def scan_toml(self, text:str, registry:Registry_p) -> ScanResult:
        """ Scan a toml table, eg: '"--count" = 3', '"-v" = true', 'FILES = ["a", "b"]' """
        data      = tomlguard.read(text)
        collected = registry.reset_collected()
        gathered  = defaultdict(list)
        for name in data.keys():
            if name not in registry:
                raise errors.ConfigParseError("Unknown parameter name in toml: '%s'", name)

            ident = registry.lookup(name)
            value = data[name]
            match registry.is_flag(name), value:
                case True, bool():
                    self._flag_value(collected, ident, str(value).lower(), name=name)
                case True, _:
                    self._flag_value(collected, ident, str(value), name=name)
                case False, str():
                    gathered[ident] += self._split_values(value)
                case False, list():
                    gathered[ident] += [str(x) for x in value]
                case False, int() | float():
                    gathered[ident].append(str(value))
                case False, _:
                    raise errors.ConfigParseError("Unusable toml value for parameter '%s': %s", name, value)

        return self._assign(gathered, collected, registry)

    def _split_values(self, value:str) -> list[str]:
        return [x for x in value.split(VALUE_SEP) if bool(x)]

    def _flag_value(self, collected:list[list[str]], ident:int, value:str, *, name:str, row:None|int=None) -> None:
        if value in TRUE_WORDS:
            self._set_flag(collected, ident)
        elif value not in FALSE_WORDS:
            raise errors.ConfigParseError("Invalid argument '%s' for flag '%s'. Row: %s", value, name, row)

    def _assign(self, gathered:dict[int, list[str]], collected:list[list[str]], registry:Registry_p) -> ScanResult:
        result = ScanResult()
        for ident, vals in gathered.items():
            spec = registry.descriptor(ident)
            if spec.unbounded or len(vals) <= spec.max_args:
                collected[ident] = vals
                continue

            logging.debug("Too many config values for %s: %s", spec.primary, vals)
            collected[ident] = vals[:spec.max_args]
            result.additional_arguments += vals[spec.max_args:]

        return self._finish(registry, collected, result)
