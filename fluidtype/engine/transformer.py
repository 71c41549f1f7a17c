"""
Fluid transformer: one raw declaration value → a plain or fluid value.

A value larger than the base value is split into a minimum size and a
viewport-relative part:

    min_size    = base + (|value| - base) / factor
    coefficient = (|value| - min_size) * 100 / breakpoint

so ``min_size + coefficient * breakpoint / 100 == |value|``: the value is
reached exactly when the viewport is ``breakpoint`` px wide. Below the
base, with ``factor <= 1``, or with ``enable_rfs`` off, the value is
rendered as is.
"""

from __future__ import annotations

from fluidtype.config.logging import get_logger
from fluidtype.engine.rendering import render_value
from fluidtype.schemas.options import OutputUnit, RfsOptions
from fluidtype.schemas.result import FluidTerm, FluidValue, Operator, RenderedValue, TermKind
from fluidtype.utilities.conversion import parse_numeric_prefix, px_to_rem, rem_to_px
from fluidtype.utilities.precision import to_fixed

logger = get_logger(__name__)


def _is_fluid(value: float, options: RfsOptions) -> bool:
    return options.enable_rfs and options.factor > 1 and options.base_value < abs(value)


def process(raw: str | float, fluid: bool, options: RfsOptions) -> RenderedValue:
    """
    Transform *raw* under *options*.

    Args:
        raw: Declaration value such as ``"32px"``. Only its leading number
            is read, and it is read in ``options.unit``.
        fluid: Whether a fluid value may be produced.
        options: Engine configuration.

    Returns:
        A plain value, or a FluidValue when *fluid* is set and the value
        qualifies for scaling.

    Raises:
        InvalidValueError: If *raw* does not start with a number.
    """
    value = parse_numeric_prefix(raw)
    if options.unit is OutputUnit.REM:
        value = rem_to_px(value, options.rem_value)

    if not fluid:
        return render_value(value, options)
    if not _is_fluid(value, options):
        logger.debug("%r stays fixed (base_value=%s, factor=%s)", raw, options.base_value, options.factor)
        return render_value(value, options)

    magnitude = abs(value)
    min_size = options.base_value + (magnitude - options.base_value) / options.factor
    diff = magnitude - min_size

    if options.unit is OutputUnit.REM:
        min_size = px_to_rem(min_size, options.rem_value)

    precision = options.unit_precision
    fixed = to_fixed(min_size, precision)
    coefficient = to_fixed(diff * 100 / options.breakpoint, precision)

    if value > 0:
        operator = Operator.PLUS
    else:
        fixed = -fixed
        operator = Operator.MINUS

    return FluidValue(
        fixed=FluidTerm(kind=TermKind.FIXED, unit=options.unit.value, value=fixed),
        viewport=FluidTerm(kind=TermKind.VIEWPORT, unit=options.viewport_unit.value, value=coefficient),
        operator=operator,
    )
