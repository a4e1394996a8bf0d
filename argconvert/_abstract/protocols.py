#!/usr/bin/env python3
"""
The protocols the scanners and help rendering rely on.
Anything providing them can be scanned into.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
from typing import TYPE_CHECKING, Protocol, runtime_checkable

# ##-- end stdlib imports

if TYPE_CHECKING:
    from argconvert._structs.converter import ConverterBinding
    from argconvert.enums import ParamCategory_e

@runtime_checkable
class ParamStruct_p(Protocol):
    """ The read-only metadata of a declared parameter """

    names       : list[str]
    category    : ParamCategory_e
    position    : int
    min_args    : int
    max_args    : int
    defaults    : list[str]
    desc        : str
    placeholder : str
    converter   : ConverterBinding

    @property
    def primary(self) -> str: ...

    @property
    def unbounded(self) -> bool: ...

    def is_full(self, count:int) -> bool: ...

@runtime_checkable
class Registry_p(Protocol):
    """ What a scanner needs from a registry """

    def __contains__(self, name:str) -> bool: ...

    def lookup(self, name:str) -> int: ...

    def descriptor(self, ident:int|str) -> ParamStruct_p: ...

    def positional_ids(self) -> list[int]: ...

    def keyword_ids(self) -> list[int]: ...

    def flag_ids(self) -> list[int]: ...

    def is_keyword(self, name:str) -> bool: ...

    def is_flag(self, name:str) -> bool: ...

    def reset_collected(self) -> list[list[str]]: ...
