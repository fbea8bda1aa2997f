"""Rendering of Iota terms back into concrete syntax."""

from __future__ import annotations

from iota.common.syntax import DEFAULT_SYNTAX, Syntax

from .ast import App, Iota, K, S, Term

# S and K have no surface spelling; these are display-only.
S_SYMBOL = "S"
K_SYMBOL = "K"


def unparse(term: Term, syntax: Syntax = DEFAULT_SYNTAX) -> str:
    """Return the prefix rendering of ``term``, each symbol followed by a space."""

    parts: list[str] = []
    pending: list[Term] = [term]
    while pending:
        t = pending.pop()
        match t:
            case App(left, right):
                parts.append(syntax.apply)
                pending.append(right)
                pending.append(left)
            case Iota():
                parts.append(syntax.base)
            case S():
                parts.append(S_SYMBOL)
            case K():
                parts.append(K_SYMBOL)
            case _:
                raise TypeError(f"Unexpected term in unparse: {t!r}")

    return "".join(f"{part} " for part in parts)


__all__ = ["K_SYMBOL", "S_SYMBOL", "unparse"]
