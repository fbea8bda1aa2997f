"""Iota: a single-combinator calculus, scanned, parsed and reduced step by step."""

from iota.common.syntax import DEFAULT_SYNTAX, Syntax
from iota.core.ast import App, Iota, K, S, Term
from iota.core.pretty import unparse
from iota.core.reduce import Trace, normalize, step, steps, trace
from iota.errors import IotaError, ParseError, ReductionLimitExceeded, ScanError
from iota.interpret import Failure, Result, Success, interpret
from iota.surface.lex import Token, scan
from iota.surface.parse import parse, parse_term

__all__ = [
    "App",
    "DEFAULT_SYNTAX",
    "Failure",
    "Iota",
    "IotaError",
    "K",
    "ParseError",
    "ReductionLimitExceeded",
    "Result",
    "S",
    "ScanError",
    "Success",
    "Syntax",
    "Term",
    "Token",
    "Trace",
    "interpret",
    "normalize",
    "parse",
    "parse_term",
    "scan",
    "step",
    "steps",
    "trace",
    "unparse",
]
