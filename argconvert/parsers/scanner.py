##-- imports
from __future__ import annotations

import logging as logmod
from typing import TYPE_CHECKING, Iterable

##-- end imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from argconvert import errors
from argconvert._abstract import ArgScanner_i
from argconvert._interface import FLAG_PREFIX, FLAG_SENTINEL
from argconvert._structs.scan_result import ScanResult
from argconvert.enums import TokenKind_e

if TYPE_CHECKING:
    from argconvert._abstract.protocols import ParamStruct_p, Registry_p

class ScanFinish_m:
    """ Shared end of every scan: defaults, then unfilled reporting """

    def _finish(self, registry:Registry_p, collected:list[list[str]], result:ScanResult) -> ScanResult:
        for ident in registry.positional_ids() + registry.keyword_ids():
            spec = registry.descriptor(ident)
            if not bool(collected[ident]) and bool(spec.defaults):
                logging.debug("Using defaults for %s: %s", spec.primary, spec.defaults)
                collected[ident] = list(spec.defaults)

            if len(collected[ident]) < spec.min_args:
                result.unfilled_parameters.append(spec.primary)

        return result

    def _set_flag(self, collected:list[list[str]], ident:int) -> None:
        if not bool(collected[ident]):
            collected[ident].append(FLAG_SENTINEL)

class ArgScanner(ScanFinish_m, ArgScanner_i):
    """
    Assign argv tokens to a registry's parameters, left to right.

    A keyword's name opens its argument list, which takes following values until
    its max is reached, or another keyword or flag appears.
    Values outside a keyword's list fill positionals in position order.
    Once a positional has a value, a keyword appearing moves on to the next positional.
    '-abc' sets flags -a, -b, and -c.
    Values nothing will take are reported as additional arguments.
    """

    def scan(self, tokens:Iterable[str], registry:Registry_p) -> ScanResult:
        """ Scan tokens[1:], token 0 being the program name.
          The registry's collected arguments are replaced.
        """
        tokens      = list(tokens)
        logging.debug("Scanning args: %s", tokens)
        collected   = registry.reset_collected()
        positionals = registry.positional_ids()
        result      = ScanResult()
        keyword     = None
        cursor      = 0

        for token in tokens[1:]:
            kind = self._classify(token, registry)
            logging.debug("Token: %s : %s", token, kind.name)
            match kind:
                case TokenKind_e.KEYWORD:
                    keyword = registry.lookup(token)
                    if cursor < len(positionals) and bool(collected[positionals[cursor]]):
                        cursor += 1
                case TokenKind_e.FLAG:
                    keyword = None
                    self._set_flag(collected, registry.lookup(token))
                case TokenKind_e.BUNDLE:
                    keyword = None
                    for ident in self._unbundle(token, registry):
                        self._set_flag(collected, ident)
                case TokenKind_e.VALUE if keyword is not None:
                    if self._add_value(collected, registry.descriptor(keyword), keyword, token):
                        keyword = None
                case TokenKind_e.VALUE if cursor < len(positionals):
                    ident = positionals[cursor]
                    if self._add_value(collected, registry.descriptor(ident), ident, token):
                        cursor += 1
                case TokenKind_e.VALUE:
                    result.additional_arguments.append(token)
                case x:
                    raise errors.UnexpectedCase("Unclassifiable token", token, x)

        return self._finish(registry, collected, result)

    def _classify(self, token:str, registry:Registry_p) -> TokenKind_e:
        if registry.is_keyword(token):
            return TokenKind_e.KEYWORD
        if registry.is_flag(token):
            return TokenKind_e.FLAG
        if token.startswith(FLAG_PREFIX):
            return TokenKind_e.BUNDLE

        return TokenKind_e.VALUE

    def _unbundle(self, token:str, registry:Registry_p) -> list[int]:
        """ Every character after the prefix must name a flag, or nothing is set """
        idents = []
        for char in token.removeprefix(FLAG_PREFIX):
            name = f"{FLAG_PREFIX}{char}"
            if not registry.is_flag(name):
                raise errors.UnknownFlagOrKeyword("Unknown flag: '%s' in '%s', or unknown keyword", name, token)
            idents.append(registry.lookup(name))

        return idents

    def _add_value(self, collected:list[list[str]], spec:ParamStruct_p, ident:int, token:str) -> bool:
        """ Append the token, returning True if the list is now full """
        collected[ident].append(token)
        return spec.is_full(len(collected[ident]))
