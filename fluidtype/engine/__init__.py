"""
The transformation engine: rendering, fluid transformation and reverse
evaluation, wrapped by the ResponsiveFontSize facade.
"""

from .engine import ResponsiveFontSize
from .rendering import render_value
from .reverse import pixel_value_at_screen_width
from .transformer import process

__all__ = [
    "ResponsiveFontSize",
    "pixel_value_at_screen_width",
    "process",
    "render_value",
]
