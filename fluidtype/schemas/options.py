"""
Engine configuration schema.

RfsOptions is the normalized, purely numeric form of the engine options.
Lengths are already resolved to pixels; build instances through
``fluidtype.config.normalize_options`` when starting from unit strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fluidtype.utilities.types import LengthUnit


class OutputUnit(str, Enum):
    """Unit that rendered values are written in."""

    PX = "px"
    REM = "rem"


class ViewportUnit(str, Enum):
    """Viewport-relative unit carrying the fluid part of a value."""

    VW = "vw"
    VMIN = "vmin"


@dataclass(frozen=True)
class RfsOptions:
    """
    Complete configuration of a ResponsiveFontSize engine.

    Attributes:
        base_value: Size in px below which values are never scaled.
        unit: Output unit; raw input numbers are read in this unit as well.
        breakpoint: Viewport width in px at which a fluid value reaches
            its full size.
        breakpoint_unit: Unit the breakpoint is declared in. Informational
            only, ``breakpoint`` is always stored in px.
        factor: Divisor controlling how far the minimum size sits above
            ``base_value``. Values <= 1 disable fluid scaling.
        two_dimensional: Use ``vmin`` instead of ``vw`` for the fluid part.
        unit_precision: Fractional digits kept in rendered numbers.
        rem_value: Root font size in px, used for every rem/em conversion.
        function_name: Name of the CSS function callers wrap values in.
        enable_rfs: Global switch; False turns every value into a plain one.
        mode: Media query mode callers generate rules for.
    """

    base_value: float = 20.0
    unit: OutputUnit = OutputUnit.REM
    breakpoint: float = 1200.0
    breakpoint_unit: LengthUnit = LengthUnit.PX
    factor: float = 10.0
    two_dimensional: bool = False
    unit_precision: int = 5
    rem_value: float = 16.0
    function_name: str = "rfs"
    enable_rfs: bool = True
    mode: str = "min-media-query"

    @property
    def viewport_unit(self) -> ViewportUnit:
        """``vmin`` for two-dimensional scaling, ``vw`` otherwise."""
        return ViewportUnit.VMIN if self.two_dimensional else ViewportUnit.VW
