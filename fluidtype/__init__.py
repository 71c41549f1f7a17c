"""
fluidtype: responsive font sizes for build tooling.

Turns CSS length declarations into fixed values or fluid ``calc()`` values
that grow with the viewport up to a breakpoint, following RFS v9.
"""

from .api import fluid_css, preview_sizes, to_css
from .config import OptionsError, configure_logging, load_options, normalize_options
from .engine import ResponsiveFontSize
from .schemas import (
    FluidTerm,
    FluidValue,
    Operator,
    OutputUnit,
    PlainValue,
    RenderedValue,
    RfsOptions,
    TermKind,
    ViewportUnit,
)
from .utilities import InvalidValueError, Length, LengthUnit, to_fixed

__all__ = [
    # engine
    "ResponsiveFontSize",
    # schemas
    "FluidTerm",
    "FluidValue",
    "Operator",
    "OutputUnit",
    "PlainValue",
    "RenderedValue",
    "RfsOptions",
    "TermKind",
    "ViewportUnit",
    # config
    "OptionsError",
    "configure_logging",
    "load_options",
    "normalize_options",
    # utilities
    "InvalidValueError",
    "Length",
    "LengthUnit",
    "to_fixed",
    # api
    "fluid_css",
    "preview_sizes",
    "to_css",
]
