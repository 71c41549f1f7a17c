from .options import OutputUnit, RfsOptions, ViewportUnit
from .result import FluidTerm, FluidValue, Operator, PlainValue, RenderedValue, TermKind

__all__ = [
    "FluidTerm",
    "FluidValue",
    "Operator",
    "OutputUnit",
    "PlainValue",
    "RenderedValue",
    "RfsOptions",
    "TermKind",
    "ViewportUnit",
]
