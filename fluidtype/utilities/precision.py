"""
Controlled rounding for rendered CSS numbers.

A plain ``round(x * 10**p) / 10**p`` inherits binary representation error:
``0.9`` computed as ``0.8999999999999999`` can land on the wrong side of a
digit. ``to_fixed`` truncates at one extra digit first and only then rounds,
so that representation noise below the extra digit never leaks into output.
"""

from __future__ import annotations

import math

from .conversion import InvalidValueError


def _round_half_up(number: float) -> int:
    # Ties go towards +inf, the way browsers round.
    return math.floor(number + 0.5)


def to_fixed(number: float, precision: int) -> float:
    """
    Round *number* to *precision* fractional digits.

    Args:
        number: Value to round.
        precision: Digits to keep after the decimal point (>= 0).

    Returns:
        The rounded value. Integral results are still returned as float.

    Raises:
        InvalidValueError: If *number* is not finite once scaled, e.g.
            ``1e303`` at precision 5.
    """
    multiplier = 10 ** (precision + 1)
    scaled = number * multiplier
    if not math.isfinite(scaled):
        raise InvalidValueError(f"{number!r} cannot be rounded to {precision} digits")
    whole_number = math.floor(scaled)
    return _round_half_up(whole_number / 10) * 10 / multiplier


def format_number(number: float, precision: int) -> str:
    """Format an already-rounded number without trailing zeros or exponent.

    ``2.0`` becomes ``"2"``, ``1.325`` stays ``"1.325"`` and ``0.00001``
    is never written as ``1e-05``.
    """
    text = f"{number:.{max(precision, 0)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text
