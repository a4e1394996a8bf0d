#!/usr/bin/env python3
"""
Public Access point for argconvert Structures
"""
from __future__ import annotations

from argconvert._structs.converter import ConverterBinding, bool_converter, flag_converter
from argconvert._structs.help_format import HelpFormat
from argconvert._structs.param_spec import ParamSpec
from argconvert._structs.scan_result import ScanResult
