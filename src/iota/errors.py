"""Phase-tagged error types for scanning, parsing and bounded reduction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from iota.common.span import Span


@dataclass
class IotaError(Exception):
    message: str
    span: Span | None = None
    source: str | None = None

    phase: ClassVar[str] = "internal"

    def __str__(self) -> str:
        text = f"{self.phase} error: {self.message}"
        if self.span is None:
            return text
        text = f"{text} @ {self.span.start}:{self.span.end}"
        if self.source is None:
            return text
        return f"{text}: {self.span.extract(self.source)!r}"


@dataclass
class ScanError(IotaError):
    """A character that is neither a symbol of the syntax nor whitespace."""

    character: str = ""

    phase: ClassVar[str] = "scan"


@dataclass
class ParseError(IotaError):
    """A token sequence that is not exactly one term.

    Spans are measured in token indices, since tokens carry no source position.
    """

    phase: ClassVar[str] = "parse"


@dataclass
class ReductionLimitExceeded(IotaError):
    """Raised by bounded normalization when no normal form was reached in time."""

    steps: int = 0

    phase: ClassVar[str] = "reduce"


__all__ = ["IotaError", "ParseError", "ReductionLimitExceeded", "ScanError"]
