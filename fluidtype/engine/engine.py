"""
ResponsiveFontSize: the engine callers hold on to.

Options are normalized once at construction and never change afterwards.
To use different options (another breakpoint for one page, say), call
``reconfigure()``: it returns a new engine and leaves this one as it was.

    rfs = ResponsiveFontSize()
    rfs.value("0.25rem")      # "0.25rem"
    rfs.fluid_value("2rem")   # 1.325rem + 0.9vw as a FluidValue
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from fluidtype.config.loader import load_options
from fluidtype.config.normalize import normalize_options
from fluidtype.engine.reverse import pixel_value_at_screen_width
from fluidtype.engine.transformer import process
from fluidtype.schemas.options import RfsOptions
from fluidtype.schemas.result import PlainValue, RenderedValue


class ResponsiveFontSize:
    """Turns declaration values into fixed or fluid CSS values.

    Args:
        options: Normalized RfsOptions, or a mapping of overrides applied
            on top of the defaults. None means the defaults.

    Raises:
        OptionsError: If *options* cannot be normalized.
    """

    def __init__(self, options: RfsOptions | Mapping[str, Any] | None = None) -> None:
        if isinstance(options, RfsOptions):
            self._options = options
        else:
            self._options = normalize_options(options)

    @classmethod
    def from_file(cls, path: str | Path) -> ResponsiveFontSize:
        """Build an engine from a YAML options file."""
        return cls(load_options(path))

    def reconfigure(self, **overrides: Any) -> ResponsiveFontSize:
        """Return a new engine with *overrides* applied on top of this engine's options."""
        return ResponsiveFontSize(normalize_options(overrides, base=self._options))

    def value(self, raw: str | float) -> PlainValue:
        """Render *raw* without fluid scaling. *raw* is read in the output unit."""
        return cast(PlainValue, process(raw, False, self._options))

    def fluid_value(self, raw: str | float) -> RenderedValue:
        """Render *raw* as a fluid value when it is large enough to scale."""
        return process(raw, True, self._options)

    def get_options(self) -> RfsOptions:
        """Frozen snapshot of this engine's options; it never changes."""
        return self._options

    def get_pixel_value_at_screen_width(self, result: RenderedValue, screen_width: float) -> float:
        """Size *result* takes on a *screen_width* px wide viewport."""
        return pixel_value_at_screen_width(result, screen_width, self._options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._options!r})"
