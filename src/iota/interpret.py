"""Source-to-trace entry point for surrounding programs.

``interpret`` never raises for bad input: scan and parse failures come back as
a ``Failure`` naming the phase, so the caller only has to branch on the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from iota.common.syntax import DEFAULT_SYNTAX, Syntax
from iota.core.ast import Term
from iota.core.pretty import unparse
from iota.core.reduce import trace
from iota.errors import IotaError
from iota.surface.lex import scan
from iota.surface.parse import parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    lines: tuple[str, ...]
    complete: bool = True
    last: Term | None = field(default=None, compare=False, repr=False)

    def render(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class Failure:
    phase: str
    message: str
    error: IotaError

    def render(self) -> str:
        return str(self.error)


Result = Success | Failure


def interpret(
    source: str, *, max_steps: int | None = None, syntax: Syntax = DEFAULT_SYNTAX
) -> Result:
    """Reduce ``source`` and render each term of its step sequence.

    With ``max_steps`` at most that many reductions are rendered and
    ``complete`` reports whether a normal form was reached. Without it the
    call does not return for a term that has no normal form.
    """
    try:
        toks = scan(source, syntax)
        term = parse(toks)
    except IotaError as e:
        logger.debug("%s phase failed: %s", e.phase, e.message)
        return Failure(e.phase, e.message, e)

    result = trace(term, max_steps)
    lines = tuple(unparse(t, syntax) for t in result.terms)
    return Success(lines, result.complete, result.last)


__all__ = ["Failure", "Result", "Success", "interpret"]
