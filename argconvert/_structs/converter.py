#!/usr/bin/env python3
"""
Type-erased storage of a parameter's string -> value conversion function.

The registry keeps every parameter's converter in one list, regardless of
the type it produces. A ConverterBinding remembers the type it was declared
with, so retrieval can check the caller asked for the same type, and fail
with MismatchedParameterType instead of silently returning something else.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import typing
from dataclasses import dataclass
from typing import Any, Callable, Final

# ##-- end stdlib imports

# ##-- 1st party imports
from argconvert import errors
from argconvert._interface import FALSE_WORDS, FLAG_SENTINEL, TRUE_WORDS

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

FROM_STRING : Final[str] = "from_string"

def flag_converter(val:str) -> bool:
    """ A flag is set if it has any collected argument at all """
    return val == FLAG_SENTINEL

def bool_converter(val:str) -> bool:
    """ bool("false") is True, so bool parameters only accept the true and false words """
    if val in TRUE_WORDS:
        return True
    if val in FALSE_WORDS:
        return False

    raise errors.UnconvertibleValue("Not a boolean value: '%s'. Use one of: %s", val, sorted(TRUE_WORDS | FALSE_WORDS))

@dataclass(frozen=True)
class ConverterBinding:
    """ A conversion function paired with the type it produces """

    type_ : type
    fn    : Callable[[str], Any]

    @staticmethod
    def resolve(converter:None|Callable=None, type_:None|type=None) -> ConverterBinding:
        """ Work out the (type, function) pair from whatever the caller supplied.

          - explicit type_ wins,
          - a converter that is a class is its own type,
          - otherwise the converter's return annotation,
          - with only a type, use its `from_string` if it has one, else the type itself,
          - with nothing, parameters are str's,
          - bool parameters read the true and false words, not bool(val).
        """
        match converter, type_:
            case None, None:
                return ConverterBinding(str, str)
            case None, type() if type_ is bool:
                return ConverterBinding(bool, bool_converter)
            case x, _ if x is bool and type_ in (None, bool):
                return ConverterBinding(bool, bool_converter)
            case None, type():
                fn = getattr(type_, FROM_STRING, type_)
                return ConverterBinding(type_, fn)
            case x, None if isinstance(x, type):
                return ConverterBinding(x, x)
            case x, None if callable(x):
                return ConverterBinding(ConverterBinding._annotated_return(x), x)
            case x, type() if callable(x):
                return ConverterBinding(type_, x)
            case _:
                raise errors.ParamSpecError("Converter must be callable, and type a class: %s : %s", converter, type_)

    @staticmethod
    def _annotated_return(fn:Callable) -> type:
        try:
            hints = typing.get_type_hints(fn)
        except (NameError, TypeError) as err:
            raise errors.ParamSpecError("Could not read the converter's annotations, pass type= explicitly", fn) from err

        match hints.get("return", None):
            case type() as ret:
                return ret
            case _:
                raise errors.ParamSpecError("Converter has no return type annotation, pass type= explicitly", fn)

    @staticmethod
    def for_flag() -> ConverterBinding:
        return ConverterBinding(bool, flag_converter)

    def recover(self, type_:type, *, name:str="") -> Callable[[str], Any]:
        """ Get the conversion function back, if the caller asked for the right type """
        if type_ is not self.type_:
            raise errors.MismatchedParameterType("Parameter %s has type %s, but was accessed as %s",
                                                 name, self.type_.__name__, getattr(type_, "__name__", type_))
        return self.fn

    def __repr__(self):
        return f"<ConverterBinding: {self.type_.__name__}>"
