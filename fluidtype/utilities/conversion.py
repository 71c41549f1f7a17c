"""
Unit conversion between px and rem, and numeric parsing of raw declarations.

All functions are pure and keep no state.
"""

from __future__ import annotations

import math
import re

_NUMERIC_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class InvalidValueError(ValueError):
    """Raised when a raw declaration value has no leading number."""


def rem_to_px(rem: float, rem_value: float) -> float:
    """Convert rem to px at *rem_value* px per rem."""
    return rem * rem_value


def px_to_rem(px: float, rem_value: float) -> float:
    """Convert px to rem at *rem_value* px per rem."""
    return px / rem_value


def parse_numeric_prefix(raw: str | float) -> float:
    """
    Return the number a declaration value starts with.

    Only the leading number is read: ``"32px"``, ``"32rem"`` and ``"32"``
    all give ``32.0``. Numbers are passed through unchanged.

    Raises:
        InvalidValueError: If *raw* does not start with a number, or the
            number is not finite (``"1e400px"``, ``float("nan")``).
    """
    if isinstance(raw, bool):
        raise InvalidValueError(f"value must be a number or a string, got {raw!r}")
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            raise InvalidValueError(f"value must be a finite number, got {raw!r}") from None
    else:
        match = _NUMERIC_PREFIX_RE.match(raw)
        if match is None:
            raise InvalidValueError(f"value must start with a number, got {raw!r}")
        value = float(match.group(1))
    if not math.isfinite(value):
        raise InvalidValueError(f"value must be a finite number, got {raw!r}")
    return value
