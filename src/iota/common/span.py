"""Source span type shared across layers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    @classmethod
    def at(cls, pos: int) -> Span:
        """Span covering the single position ``pos``."""
        return cls(pos, pos + 1)

    def extract(self, source: str) -> str:
        return source[self.start : self.end]
