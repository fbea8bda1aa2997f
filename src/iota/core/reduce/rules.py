"""Computation rules applied at the root of a term."""

from __future__ import annotations

from ..ast import App, Iota, K, S, Term


def head_step(t: Term) -> Term | None:
    """Rewrite the root of ``t`` by the first matching rule, if any.

    The rules are tried in order:

    1. ``i X``     -> ``X S K``
    2. ``K X Y``   -> ``X``
    3. ``S X Y Z`` -> ``X Z (Y Z)``
    """
    match t:
        case App(Iota(), x):
            return App(App(x, S()), K())
        case App(App(K(), x), _):
            return x
        case App(App(App(S(), x), y), z):
            return App(App(x, z), App(y, z))
        case _:
            return None


__all__ = ["head_step"]
