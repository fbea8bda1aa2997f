"""Reduction split into root rules, single steps and step sequences."""

from .rules import head_step
from .sequence import Trace, normalize, steps, trace
from .step import is_normal, step

__all__ = [
    "Trace",
    "head_step",
    "is_normal",
    "normalize",
    "step",
    "steps",
    "trace",
]
