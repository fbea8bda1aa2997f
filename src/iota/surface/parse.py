"""Parser for the surface language.

The grammar is the whole of Iota's concrete syntax::

    term : IDENTITY
         | STAR term term

Exactly one top-level term is accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from iota.common.span import Span
from iota.common.syntax import DEFAULT_SYNTAX, Syntax
from iota.core.ast import App, Iota, Term
from iota.errors import ParseError
from iota.surface.lex import Token, scan, tokens  # noqa: F401

logger = logging.getLogger(__name__)

_TOKEN_COUNT: int = 0


def p_term_identity(p: yacc.YaccProduction) -> None:
    "term : IDENTITY"
    p[0] = Iota()


def p_term_app(p: yacc.YaccProduction) -> None:
    "term : STAR term term"
    p[0] = App(p[2], p[3])


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(_TOKEN_COUNT, _TOKEN_COUNT)
        raise ParseError("incomplete application", span)
    span = Span(p.lexpos, _TOKEN_COUNT)
    raise ParseError("trailing tokens", span)


class _TokenFeed:
    """Adapts a token sequence to the ``token()`` protocol ply expects of a lexer."""

    def __init__(self, toks: Iterable[Token]) -> None:
        self._toks = enumerate(toks)

    def token(self) -> lex.LexToken | None:
        item = next(self._toks, None)
        if item is None:
            return None
        index, kind = item
        tok = lex.LexToken()
        tok.type = kind.value
        tok.value = kind
        tok.lineno = 1
        tok.lexpos = index
        return tok


_PARSER = None


def parse(toks: Sequence[Token]) -> Term:
    """Build the single term spelled by ``toks``.

    Raises ``ParseError`` for an empty sequence, an application missing
    a subterm, or tokens left over after one complete term.
    """
    global _TOKEN_COUNT, _PARSER
    if not toks:
        raise ParseError("empty program", Span(0, 0))
    _TOKEN_COUNT = len(toks)
    if _PARSER is None:
        _PARSER = yacc.yacc(start="term", debug=False, write_tables=False)
    feed = _TokenFeed(toks)
    term = cast(Term, _PARSER.parse(lexer=feed, tokenfunc=feed.token))
    logger.debug("parsed %d tokens", len(toks))
    return term


def parse_term(source: str, syntax: Syntax = DEFAULT_SYNTAX) -> Term:
    """Scan and parse ``source`` in one go."""
    return parse(scan(source, syntax))


__all__ = ["parse", "parse_term"]
