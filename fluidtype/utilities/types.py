"""
Core type definitions for the shared utilities layer.

Lengths are parsed once at the boundary into a tagged ``Length`` value so
nothing downstream has to sniff unit suffixes at runtime.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_LENGTH_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(px|rem|em)\s*$")


class LengthUnit(str, Enum):
    """CSS length units accepted for option values."""

    PX = "px"
    REM = "rem"
    EM = "em"


@dataclass(frozen=True)
class Length:
    """
    A CSS length: a signed magnitude tagged with its unit.

    ``em`` is resolved against the root font size, the same as ``rem``;
    there is no parent element to inherit from.
    """

    magnitude: float
    unit: LengthUnit

    @classmethod
    def parse(cls, text: str) -> Length:
        """Parse ``"<number><unit>"`` such as ``"20px"`` or ``"1.25rem"``.

        Raises:
            ValueError: If the unit is not px/rem/em or the number is malformed.
        """
        match = _LENGTH_RE.match(text)
        if match is None:
            raise ValueError(f"not a px, rem or em length: {text!r}")
        return cls(magnitude=float(match.group(1)), unit=LengthUnit(match.group(2)))

    def to_px(self, rem_value: float) -> float:
        """Resolve to pixels using *rem_value* px per rem."""
        if self.unit is LengthUnit.PX:
            return self.magnitude
        return self.magnitude * rem_value
