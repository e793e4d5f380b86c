"""size-cli package: total the size of paths and print it in human units."""

from . import core
from . import utils
from . import services
from .core import config
from .core.options import FormatOptions
from .services.format_service import format_size
from .services.path_service import expand_paths
from .services.collect_service import collect, SizeStats

__version__ = "0.1.0"

__all__ = [
    "cli",
    "config",
    "core",
    "utils",
    "services",
    "FormatOptions",
    "format_size",
    "expand_paths",
    "collect",
    "SizeStats",
]
