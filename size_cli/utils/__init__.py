"""Unit scaling and filesystem helpers for size-cli."""

from . import disk
from . import units

__all__ = ["disk", "units"]
