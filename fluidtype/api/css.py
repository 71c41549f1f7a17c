"""
CSS output for rendered values.

    to_css(rfs.value("0.25"))        # "0.25rem"
    to_css(rfs.fluid_value("2"))     # "calc(1.325rem + 0.9vw)"
    to_css(rfs.fluid_value("-2"))    # "calc(-1.325rem - 0.9vw)"
"""

from __future__ import annotations

from fluidtype.engine.engine import ResponsiveFontSize
from fluidtype.schemas.result import FluidValue, RenderedValue
from fluidtype.utilities.precision import format_number


def to_css(result: RenderedValue, precision: int = 5) -> str:
    """Write *result* as a CSS value; fluid values become a ``calc()`` expression."""
    if not isinstance(result, FluidValue):
        return str(result)

    fixed = format_number(result.fixed.value, precision)
    coefficient = format_number(result.viewport.value, precision)
    return (
        f"calc({fixed}{result.fixed.unit} {result.operator.value} "
        f"{coefficient}{result.viewport.unit})"
    )


def fluid_css(engine: ResponsiveFontSize, raw: str | float) -> str:
    """Shorthand for ``to_css(engine.fluid_value(raw))`` at the engine's precision."""
    return to_css(engine.fluid_value(raw), engine.get_options().unit_precision)
