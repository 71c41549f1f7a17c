"""
Size preview: what a set of named sizes renders at for one screen width.

preview_sizes() runs every size through the fluid transformer, evaluates
the result at the given width and rounds up to whole pixels, which is
what a type-scale preview shows next to each heading.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from fluidtype.engine.engine import ResponsiveFontSize
from fluidtype.schemas.options import OutputUnit
from fluidtype.schemas.result import FluidValue
from fluidtype.utilities.conversion import rem_to_px
from fluidtype.utilities.precision import to_fixed


def preview_sizes(
    engine: ResponsiveFontSize,
    sizes: Mapping[str, str],
    screen_width: float,
) -> dict[str, int]:
    """
    Pixel size of each entry of *sizes* on a *screen_width* px wide screen.

    Parameters
    ----------
    engine:
        Engine whose options drive the transformation.
    sizes:
        Mapping of a name (``"h1"``, ``"body"``) to a declaration value.
        Entries with an empty value are left out of the result.
    screen_width:
        Viewport width in px.

    Returns
    -------
    dict[str, int]
        Name → size in px, rounded up after rounding to ``unit_precision``
        digits so float noise never adds a pixel. Insertion order of *sizes* is kept.

    Raises
    ------
    ValueError
        If *screen_width* is not a positive number.
    """
    if isinstance(screen_width, bool) or not isinstance(screen_width, (int, float)):
        raise ValueError(f"screen_width must be a number, got {screen_width!r}")
    if screen_width <= 0:
        raise ValueError(f"screen_width must be positive, got {screen_width}")

    options = engine.get_options()
    preview: dict[str, int] = {}
    for name, raw in sizes.items():
        if not raw:
            continue
        result = engine.fluid_value(raw)
        size = engine.get_pixel_value_at_screen_width(result, screen_width)
        # Plain values evaluate in the output unit.
        if not isinstance(result, FluidValue) and options.unit is OutputUnit.REM:
            size = rem_to_px(size, options.rem_value)
        preview[name] = math.ceil(to_fixed(size, options.unit_precision))
    return preview
