"""
YAML option files.

A file holds option overrides either at the top level or under an ``rfs:``
key, so the options can live in a larger build configuration::

    rfs:
      baseValue: 1.25rem
      breakpoint: 75em
      breakpointUnit: em
      factor: 8
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from fluidtype.config.logging import get_logger
from fluidtype.config.normalize import OptionsError, normalize_options
from fluidtype.schemas.options import RfsOptions

logger = get_logger(__name__)

_SECTION_KEY = "rfs"


def _load_yaml(path: Path) -> Any:
    try:
        with open(path) as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Options file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise OptionsError(f"Failed to parse options file {path}: {exc}") from exc


def load_options(path: str | Path) -> RfsOptions:
    """
    Read option overrides from a YAML file and normalize them.

    An empty file yields the default options.

    Raises:
        FileNotFoundError: If *path* does not exist.
        OptionsError: If the file is not valid YAML, is not a mapping, or
            holds invalid options.
    """
    path = Path(path)
    data = _load_yaml(path)
    if data is None:
        data = {}
    if isinstance(data, dict) and _SECTION_KEY in data:
        data = data[_SECTION_KEY] or {}
    if not isinstance(data, dict):
        raise OptionsError(f"Options file {path} must contain a mapping, got {type(data).__name__}")

    options = normalize_options(data)
    logger.info("Loaded options from %s", path)
    return options
