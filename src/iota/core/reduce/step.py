"""Single-step outermost-leftmost reduction."""

from __future__ import annotations

from ..ast import App, Iota, K, S, Term
from .rules import head_step

# (ancestor, True if the walk went into its left child)
_Path = list[tuple[App, bool]]


def _rebuild(path: _Path, reduced: Term) -> Term:
    for parent, went_left in reversed(path):
        if went_left:
            reduced = App(reduced, parent.right)
        else:
            reduced = App(parent.left, reduced)
    return reduced


def _next_right(path: _Path) -> Term | None:
    """Unwind ``path`` to the nearest ancestor whose right child is unvisited."""
    while path:
        parent, went_left = path.pop()
        if went_left:
            path.append((parent, False))
            return parent.right
    return None


def step(term: Term) -> Term | None:
    """One reduction step anywhere in the term, or ``None`` in normal form.

    Root rules win; otherwise the left subterm is reduced before the right.
    The redex is the first node in pre-order that a root rule rewrites. The
    walk keeps its own path so arbitrarily deep terms do not exhaust the stack.
    """

    path: _Path = []
    node: Term | None = term
    while node is not None:
        reduced = head_step(node)
        if reduced is not None:
            return _rebuild(path, reduced)

        match node:
            case App(left, _):
                path.append((node, True))
                node = left
            case Iota() | S() | K():
                node = _next_right(path)
            case _:
                raise TypeError(f"Unexpected term in step: {node!r}")
    return None


def is_normal(term: Term) -> bool:
    """Return ``True`` if no rule applies anywhere in ``term``."""

    return step(term) is None


__all__ = ["is_normal", "step"]
