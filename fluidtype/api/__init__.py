"""
Public helpers built on the engine: CSS output and size previews.
"""

from .css import fluid_css, to_css
from .preview import preview_sizes

__all__ = [
    "fluid_css",
    "preview_sizes",
    "to_css",
]
