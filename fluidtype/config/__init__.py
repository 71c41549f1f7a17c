"""
Engine configuration: option normalization, YAML option files and logging.
"""

from .loader import load_options
from .logging import configure_logging, get_logger
from .normalize import OptionsError, normalize_options

__all__ = [
    "OptionsError",
    "configure_logging",
    "get_logger",
    "load_options",
    "normalize_options",
]
