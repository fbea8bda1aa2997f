"""Concrete symbol table shared by the lexer and the renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Syntax:
    """The two surface symbols: ``apply`` marks an application, ``base`` is ``Iota``.

    Any two distinct, non-empty, whitespace-free strings will do; whitespace is
    always the separator.
    """

    apply: str = "*"
    base: str = "i"

    def __post_init__(self) -> None:
        for name, symbol in (("apply", self.apply), ("base", self.base)):
            if not symbol:
                raise ValueError(f"Symbol for {name} must be non-empty")
            if any(c.isspace() for c in symbol):
                raise ValueError(f"Symbol for {name} must not contain whitespace")
        if self.apply == self.base:
            raise ValueError("Apply and base symbols must differ")


DEFAULT_SYNTAX = Syntax()

__all__ = ["DEFAULT_SYNTAX", "Syntax"]
