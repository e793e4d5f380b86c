"""Core constants, errors, options and config for size-cli."""

from .constants import (
    HOME,
    CONFIG_PATHS,
    MAX_AMOUNT,
    UNIT_TIERS,
    HEX_PREFIX,
)
from .errors import SizeError, AmountOverflowError, InvalidFormatOptionsError, PathNotFoundError
from .options import FormatOptions
from . import config

__all__ = [
    "HOME",
    "CONFIG_PATHS",
    "MAX_AMOUNT",
    "UNIT_TIERS",
    "HEX_PREFIX",
    "SizeError",
    "AmountOverflowError",
    "InvalidFormatOptionsError",
    "PathNotFoundError",
    "FormatOptions",
    "config",
]
