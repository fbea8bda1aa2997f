"""Classical combinators spelled with ``Iota`` alone.

From ``i = \\x. x S K``: ``I = *ii``, ``K = *i*i*ii`` and ``S = *i*i*i*ii``.
"""

from __future__ import annotations

from iota.core.ast import App, Iota, Term


def _nest(n: int) -> Term:
    """``i (i (... (i i)))`` with ``n`` applications."""

    term: Term = Iota()
    for _ in range(n):
        term = App(Iota(), term)
    return term


I_TERM = _nest(1)
K_TERM = _nest(3)
S_TERM = _nest(4)

SOURCES = {
    "I": "*ii",
    "K": "*i*i*ii",
    "S": "*i*i*i*ii",
}

__all__ = ["I_TERM", "K_TERM", "SOURCES", "S_TERM"]
