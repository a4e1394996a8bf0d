#!/usr/bin/env python3
"""
Typed access to the arguments a scan collected.

Tokens are stored as raw strings, and converted only when asked for,
with the type the caller expects checked against the registered type.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Callable, TypeVar

# ##-- end stdlib imports

# ##-- 1st party imports
from argconvert import errors
from argconvert._interface import FLAG_PREFIX
from argconvert.enums import ParamCategory_e

# ##-- end 1st party imports

if TYPE_CHECKING:
    from argconvert._structs.param_spec import ParamSpec

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

T = TypeVar("T")

class TypedRetrieval_m:
    """ Mixed into ParamRegistry. Needs `lookup`, `_specs` and `_collected` """

    _specs     : list[ParamSpec]
    _collected : list[list[str]]

    def _converter_for(self, name:str, type_:type[T]) -> tuple[int, Callable[[str], T]]:
        ident = self.lookup(name)
        spec  = self._specs[ident]
        if spec.category is ParamCategory_e.flag:
            raise errors.InvalidFlagConversion("'%s' is a flag. Use is_set to check if it was set", name)

        return ident, spec.converter.recover(type_, name=name)

    def get_one(self, name:str, type_:type[T]=str) -> T:
        """ Convert the first collected argument of `name` """
        ident, fn = self._converter_for(name, type_)
        if not bool(self._collected[ident]):
            raise errors.UnfilledParameter("No argument was collected for '%s'", name)

        return fn(self._collected[ident][0])

    def get_all(self, name:str, type_:type[T]=str) -> list[T]:
        """ Convert every collected argument of `name`. Empty if none were collected """
        ident, fn = self._converter_for(name, type_)
        return [fn(x) for x in self._collected[ident]]

    def is_set(self, name:str) -> bool:
        """ Whether the flag `name` was set. A single character 'c' means '-c' """
        if len(name) == 1:
            name = f"{FLAG_PREFIX}{name}"

        ident = self.lookup(name)
        if self._specs[ident].category is not ParamCategory_e.flag:
            raise errors.NoFlagWithName("'%s' is not a flag. Only use is_set to check flags", name)

        return bool(self._collected[ident])

    def has_argument(self, name:str) -> bool:
        """ Whether anything at all was collected for `name` """
        return bool(self._collected[self.lookup(name)])

    def arguments(self, name:str) -> list[str]:
        """ A copy of the raw tokens collected for `name` """
        return list(self._collected[self.lookup(name)])
