"""
Unit renderer: a pixel magnitude → its display string in the output unit.
"""

from __future__ import annotations

from fluidtype.schemas.options import OutputUnit, RfsOptions
from fluidtype.schemas.result import PlainValue
from fluidtype.utilities.conversion import px_to_rem
from fluidtype.utilities.precision import format_number, to_fixed


def render_value(value: float, options: RfsOptions) -> PlainValue:
    """
    Render *value* (px) in ``options.unit`` at ``options.unit_precision``.

    Zero is returned as the bare int ``0``: a zero length needs no unit.

    >>> render_value(20.0, RfsOptions())
    '1.25rem'
    """
    if value == 0:
        return 0

    precision = options.unit_precision
    if options.unit is OutputUnit.REM:
        rounded = to_fixed(px_to_rem(value, options.rem_value), precision)
        return f"{format_number(rounded, precision)}rem"
    return f"{format_number(to_fixed(value, precision), precision)}px"
