"""Services (business logic) for size-cli."""

from . import format_service
from . import path_service
from . import collect_service

__all__ = ["format_service", "path_service", "collect_service"]
