"""Lexer for the two-symbol surface syntax."""

from __future__ import annotations

import re
from enum import Enum
from functools import cache

import ply.lex as lex  # type: ignore[import-untyped]

from iota.common.span import Span
from iota.common.syntax import DEFAULT_SYNTAX, Syntax
from iota.errors import ScanError


class Token(Enum):
    STAR = "STAR"
    IDENTITY = "IDENTITY"


tokens = tuple(token.value for token in Token)


class _Rules:
    """ply rule set for one ``Syntax``; symbols are matched literally."""

    tokens = tokens

    t_ignore_WHITESPACE = r"\s+"

    def __init__(self, syntax: Syntax) -> None:
        self.t_STAR = re.escape(syntax.apply)
        self.t_IDENTITY = re.escape(syntax.base)

    def t_error(self, t: lex.LexToken) -> None:
        raise ScanError(
            f"[{t.value[0]}] is an invalid symbol in the syntax",
            Span.at(t.lexpos),
            t.lexer.lexdata,
            character=t.value[0],
        )


@cache
def _build_lexer(syntax: Syntax) -> lex.Lexer:
    return lex.lex(object=_Rules(syntax))


def scan(text: str, syntax: Syntax = DEFAULT_SYNTAX) -> list[Token]:
    """Tokenize ``text``, skipping whitespace.

    Raises ``ScanError`` at the first character that is not part of a symbol.
    """
    lexer = _build_lexer(syntax).clone()
    lexer.input(text)
    return [Token(tok.type) for tok in lexer]


__all__ = ["Token", "scan", "tokens"]
