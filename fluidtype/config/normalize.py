"""
Option normalization: raw option mappings → validated RfsOptions.

Defaults (or an existing RfsOptions) are overlaid with caller overrides,
then every length is resolved to pixels exactly once. Anything invalid
raises OptionsError before an engine is built, so no half-configured
engine ever exists.

Option names may be given in snake_case (``base_value``) or in the
camelCase used by RFS itself (``baseValue``).
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import fields
from enum import Enum
from typing import Any, TypeVar

from fluidtype.config.logging import get_logger
from fluidtype.schemas.options import OutputUnit, RfsOptions
from fluidtype.utilities.types import Length, LengthUnit

logger = get_logger(__name__)

_E = TypeVar("_E", bound=Enum)

_CAMEL_CASE_ALIASES: dict[str, str] = {
    "baseValue": "base_value",
    "breakpointUnit": "breakpoint_unit",
    "twoDimensional": "two_dimensional",
    "unitPrecision": "unit_precision",
    "remValue": "rem_value",
    "functionName": "function_name",
    "enableRfs": "enable_rfs",
}

_OPTION_NAMES: frozenset[str] = frozenset(f.name for f in fields(RfsOptions))

_BASE_VALUE_UNITS = (LengthUnit.PX, LengthUnit.REM)
_BREAKPOINT_UNITS = (LengthUnit.PX, LengthUnit.REM, LengthUnit.EM)


class OptionsError(ValueError):
    """Raised when engine options cannot be normalized."""


def _describe_units(allowed: tuple[LengthUnit, ...]) -> str:
    names = [f"`{u.value}`" for u in allowed]
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " or " + names[-1]


def _finite(name: str, px: float) -> float:
    if not math.isfinite(px):
        raise OptionsError(f"`{name}` option must be a finite length, got {px!r}")
    return px


def _resolve_length(
    name: str,
    value: Any,
    rem_value: float,
    allowed: tuple[LengthUnit, ...],
) -> float:
    """Resolve a number, Length or unit string to pixels."""
    message = f"`{name}` option is invalid, it should be set in {_describe_units(allowed)}, got {value!r}"

    if isinstance(value, bool):
        raise OptionsError(message)
    if isinstance(value, (int, float)):
        return _finite(name, float(value))

    if isinstance(value, str):
        try:
            value = Length.parse(value)
        except ValueError as exc:
            raise OptionsError(message) from exc

    if not isinstance(value, Length) or value.unit not in allowed:
        raise OptionsError(message)
    return _finite(name, value.to_px(rem_value))


def _coerce_enum(name: str, enum_cls: type[_E], value: Any) -> _E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = " or ".join(f"`{m.value}`" for m in enum_cls)
        raise OptionsError(f"`{name}` option is invalid, it should be {allowed}, got {value!r}") from None


def normalize_options(
    overrides: Mapping[str, Any] | None = None,
    base: RfsOptions | None = None,
) -> RfsOptions:
    """
    Build a validated RfsOptions from *base* (or the defaults) plus *overrides*.

    Args:
        overrides: Option values replacing those of *base*. Lengths may be
            numbers (px), ``Length`` values, or strings such as ``"20px"``.
        base: Options to start from. Defaults to ``RfsOptions()``.

    Returns:
        A new RfsOptions with every length in px.

    Raises:
        OptionsError: On an unknown option name, an invalid length unit, a
            malformed or non-finite length, or an invalid ``unit``/``breakpoint_unit``.
    """
    start = base if base is not None else RfsOptions()
    raw: dict[str, Any] = {name: getattr(start, name) for name in _OPTION_NAMES}

    for key, value in (overrides or {}).items():
        name = _CAMEL_CASE_ALIASES.get(key, key)
        if name not in _OPTION_NAMES:
            raise OptionsError(f"unknown option {key!r}")
        raw[name] = value

    rem_value = raw["rem_value"]
    raw["base_value"] = _resolve_length("base_value", raw["base_value"], rem_value, _BASE_VALUE_UNITS)
    raw["breakpoint"] = _resolve_length("breakpoint", raw["breakpoint"], rem_value, _BREAKPOINT_UNITS)
    raw["breakpoint_unit"] = _coerce_enum("breakpoint_unit", LengthUnit, raw["breakpoint_unit"])
    raw["unit"] = _coerce_enum("unit", OutputUnit, raw["unit"])

    options = RfsOptions(**raw)
    logger.debug("Resolved options: %s", options)
    return options
