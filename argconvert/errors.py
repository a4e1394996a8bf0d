#!/usr/bin/env python3
"""
These are the argconvert specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from argconvert._errors.base import ArgConvertError, UserError, UnexpectedCase
from argconvert._errors.registry import (RegistrationError, DuplicateParameterName,
                                         DuplicateParameterPosition, ParamSpecError,
                                         UnknownParameterName)
from argconvert._errors.parse import ParseError, UnknownFlagOrKeyword, ConfigParseError
from argconvert._errors.convert import (ConversionError, MismatchedParameterType,
                                        InvalidFlagConversion, NoFlagWithName,
                                        UnfilledParameter, UnconvertibleValue)
from argconvert._errors.format import InvalidFormattingParameters

# ##-- end 1st party imports
