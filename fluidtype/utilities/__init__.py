"""
Shared utilities for the fluidtype engine.

Provides deterministic helpers used identically by the renderer and the
reverse evaluator: length parsing, px/rem conversion, and controlled
rounding.
"""

from .conversion import InvalidValueError, parse_numeric_prefix, px_to_rem, rem_to_px
from .precision import format_number, to_fixed
from .types import Length, LengthUnit

__all__ = [
    # types
    "Length",
    "LengthUnit",
    # conversion
    "InvalidValueError",
    "parse_numeric_prefix",
    "px_to_rem",
    "rem_to_px",
    # precision
    "format_number",
    "to_fixed",
]
