"""Lazy reduction sequences built from repeated single steps."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice

from ...errors import ReductionLimitExceeded
from ..ast import Term
from .step import step

logger = logging.getLogger(__name__)


def steps(term: Term) -> Iterator[Term]:
    """Yield ``term`` and each successor until a normal form is reached.

    The generator holds only the current term. It never ends for a term
    without a normal form, so callers bound it by how much they consume.
    """

    current: Term | None = term
    count = 0
    while current is not None:
        yield current
        current = step(current)
        count += 1
        if current is not None:
            logger.debug("step %d", count)


@dataclass(frozen=True)
class Trace:
    """A prefix of a reduction sequence.

    ``complete`` is ``True`` when the last term is a normal form.
    """

    terms: tuple[Term, ...]
    complete: bool

    @property
    def last(self) -> Term:
        return self.terms[-1]

    def __len__(self) -> int:
        return len(self.terms)


def trace(term: Term, max_steps: int | None = None) -> Trace:
    """Collect the sequence from ``term``, performing at most ``max_steps`` reductions.

    With no bound this only returns if ``term`` has a normal form.
    """

    if max_steps is not None and max_steps < 0:
        raise ValueError("max_steps must be non-negative")
    limit = None if max_steps is None else max_steps + 1
    terms = tuple(islice(steps(term), limit))
    complete = len(terms) != limit or step(terms[-1]) is None
    return Trace(terms, complete)


def normalize(term: Term, max_steps: int | None = None) -> Term:
    """Return the normal form of ``term``.

    Raises ``ReductionLimitExceeded`` if ``max_steps`` reductions do not reach it.
    """

    result = trace(term, max_steps)
    if not result.complete:
        raise ReductionLimitExceeded(
            f"no normal form within {max_steps} steps", steps=len(result) - 1
        )
    return result.last


__all__ = ["Trace", "normalize", "steps", "trace"]
