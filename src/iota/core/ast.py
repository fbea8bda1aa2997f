"""Immutable abstract syntax tree nodes for Iota terms.

A term is a finite binary tree over three leaves and one binary node:

* ``Iota`` is the primitive combinator, the only leaf the surface syntax can
  spell;
* ``S`` and ``K`` are intermediates that appear only as results of reduction;
* ``App(left, right)`` applies ``left`` to ``right``.

Nodes are frozen dataclasses, so reduction always builds new trees and equality
is structural.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """Base class for all Iota terms."""

    def __str__(self) -> str:
        from iota.core.pretty import unparse

        return unparse(self).rstrip()


@dataclass(frozen=True)
class Iota(Term):
    """The primitive combinator ``i = \\x. x S K``."""


@dataclass(frozen=True)
class S(Term):
    """The distributing combinator, produced by expanding ``Iota``."""


@dataclass(frozen=True)
class K(Term):
    """The constant combinator, produced by expanding ``Iota``."""


@dataclass(frozen=True)
class App(Term):
    left: Term
    right: Term


def mk_app(head: Term, *args: Term) -> Term:
    """Build the left-nested application ``head args[0] ... args[-1]``."""

    term = head
    for arg in args:
        term = App(term, arg)
    return term


def size(term: Term) -> int:
    """Number of nodes in ``term``."""

    count = 0
    pending = [term]
    while pending:
        match pending.pop():
            case App(left, right):
                pending.append(left)
                pending.append(right)
            case Iota() | S() | K():
                pass
            case t:
                raise TypeError(f"Unexpected term in size: {t!r}")
        count += 1
    return count


def depth(term: Term) -> int:
    """Height of ``term``; a lone leaf has depth 1."""

    height = 0
    pending = [(term, 1)]
    while pending:
        t, level = pending.pop()
        height = max(height, level)
        match t:
            case App(left, right):
                pending.append((left, level + 1))
                pending.append((right, level + 1))
            case Iota() | S() | K():
                pass
            case _:
                raise TypeError(f"Unexpected term in depth: {t!r}")
    return height


__all__ = ["App", "Iota", "K", "S", "Term", "depth", "mk_app", "size"]
