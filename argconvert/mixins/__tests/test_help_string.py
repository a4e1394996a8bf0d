#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports
logging = logmod.root

import pytest

from argconvert import errors
from argconvert.registry import ParamRegistry
from argconvert.structs import HelpFormat, ParamSpec

class TestRegistryHelpString:

    @pytest.fixture(scope="function")
    def registry(self):
        return (ParamRegistry()
                (ParamSpec.flag("v").set_desc("Verbose"))
                (ParamSpec.keyword(["--count", "-n"], int).set_placeholder("<N>").add_default("3").set_desc("Repeat count"))
                (ParamSpec.positional("FILE", 0).set_desc("Input file")))

    def test_empty(self):
        assert(ParamRegistry().help_string() == "")

    def test_sections_in_category_order(self, registry):
        expect = "".join(["\nPositional Arguments:\n",
                          "    FILE <ARG>\n        Input file\n",
                          "\nKeyword Arguments:\n",
                          "    --count | -n <N> ( = 3)\n        Repeat count\n",
                          "\nFlags:\n",
                          "    -v\n        Verbose\n",
                          ])
        assert(registry.help_string() == expect)

    def test_header_and_footer(self, registry):
        registry.set_help_header("usage: prog [FILE]")
        registry.set_help_footer("see the docs")
        text = registry.help_string()
        assert(text.startswith("usage: prog [FILE]\n\nPositional Arguments:\n"))
        assert(text.endswith("        Verbose\nsee the docs\n"))

    def test_empty_sections_skipped(self):
        registry = ParamRegistry()(ParamSpec.flag("v"))
        assert(registry.help_string() == "\nFlags:\n    -v\n")

    def test_positionals_by_position(self):
        registry = (ParamRegistry()
                    (ParamSpec.positional("SECOND", 2))
                    (ParamSpec.positional("FIRST", 1)))
        text     = registry.help_string()
        assert(text.index("FIRST") < text.index("SECOND"))

    def test_custom_format(self):
        registry = ParamRegistry(HelpFormat(param_indent=0, desc_indent=2))(ParamSpec.flag("v").set_desc("Verbose"))
        assert(registry.help_string() == "\nFlags:\n-v\n  Verbose\n")

    def test_set_layout(self, registry):
        registry.set_help_layout(param_indent=1)
        assert(registry.help_format.param_indent == 1)
        assert("\n FILE <ARG>\n" in registry.help_string())

    def test_bad_layout(self, registry):
        with pytest.raises(errors.InvalidFormattingParameters):
            registry.set_help_layout(width=5)
        assert(registry.help_format.width == 40)
