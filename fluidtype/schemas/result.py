"""
Rendered value schema: what the transformer hands back to callers.

A rendered value is either plain (a unit string such as ``"1.25rem"``, or
the bare ``0``) or a FluidValue made of a fixed term and a viewport term
joined by an operator, ready to be written as ``calc(a + b)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class TermKind(str, Enum):
    """Role of a term inside a fluid value."""

    FIXED = "fixed"
    VIEWPORT = "viewport"


class Operator(str, Enum):
    """Operator joining the fixed and viewport terms."""

    PLUS = "+"
    MINUS = "-"


@dataclass(frozen=True)
class FluidTerm:
    """One term of a fluid value: a number in a named CSS unit."""

    kind: TermKind
    unit: str
    value: float


@dataclass(frozen=True)
class FluidValue:
    """
    A value that grows with the viewport.

    Attributes:
        fixed: Minimum size, in the configured output unit. Negative for
            negative input lengths.
        viewport: Viewport coefficient in ``vw`` or ``vmin``. Always
            non-negative; the sign lives in ``operator``.
        operator: ``+`` for positive lengths, ``-`` for negative ones.
    """

    fixed: FluidTerm
    viewport: FluidTerm
    operator: Operator

    def __post_init__(self) -> None:
        if self.fixed.kind is not TermKind.FIXED:
            raise ValueError(f"fixed term must have kind FIXED, got {self.fixed.kind}")
        if self.viewport.kind is not TermKind.VIEWPORT:
            raise ValueError(f"viewport term must have kind VIEWPORT, got {self.viewport.kind}")

    def as_dict(self) -> dict[str, Any]:
        """Keyed form, e.g. ``{"rem": 1.325, "vw": 0.9, "operator": "+"}``."""
        return {
            self.fixed.unit: self.fixed.value,
            self.viewport.unit: self.viewport.value,
            "operator": self.operator.value,
        }


PlainValue = Union[str, int]
RenderedValue = Union[PlainValue, FluidValue]
