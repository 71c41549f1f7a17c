"""
Reverse evaluator: the size a rendered value takes at a given screen width.

Used by previews. The fixed term goes back through the same renderer the
transformer uses, so the preview sees exactly the rounding that ends up in
the stylesheet.
"""

from __future__ import annotations

from fluidtype.engine.transformer import process
from fluidtype.schemas.options import OutputUnit, RfsOptions
from fluidtype.schemas.result import FluidValue, Operator, RenderedValue
from fluidtype.utilities.conversion import parse_numeric_prefix, rem_to_px


def pixel_value_at_screen_width(
    result: RenderedValue,
    screen_width: float,
    options: RfsOptions,
) -> float:
    """
    Evaluate *result* for a viewport *screen_width* px wide.

    Plain values come back as the number they render to, in the output
    unit (``"1.25rem"`` gives ``1.25``); they do not depend on the width.
    Fluid values come back in px.

    Raises:
        ValueError: If a fluid value was rendered in a different unit
            than ``options.unit``.
    """
    if not isinstance(result, FluidValue):
        return parse_numeric_prefix(process(result, False, options))

    if result.fixed.unit != options.unit.value:
        raise ValueError(
            f"fluid value is in {result.fixed.unit!r} but options render {options.unit.value!r}"
        )

    fixed_px = parse_numeric_prefix(process(result.fixed.value, False, options))
    if options.unit is OutputUnit.REM:
        fixed_px = rem_to_px(fixed_px, options.rem_value)

    viewport_px = result.viewport.value * screen_width / 100
    if result.operator is Operator.PLUS:
        return fixed_px + viewport_px
    return fixed_px - viewport_px
