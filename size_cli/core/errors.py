"""Error taxonomy for size-cli."""


class SizeError(Exception):
    """Base class for errors raised by size-cli."""


class AmountOverflowError(SizeError, OverflowError):
    """Byte amount outside the range the formatter can represent."""

    def __init__(self, amount, reason: str = "amount too large to format"):
        self.amount = amount
        super().__init__(f"{reason}: {amount!r}")


class InvalidFormatOptionsError(SizeError, ValueError):
    """Contradictory or out-of-range formatting options."""


class PathNotFoundError(SizeError, FileNotFoundError):
    """A path spec that names nothing on disk."""

    def __init__(self, spec: str):
        self.spec = spec
        super().__init__(f"Path not found: {spec}")
