"""Immutable formatting options shared by the collector, formatter and CLI."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Optional

from .constants import HEX_FORMATS, HEX_PREFIX, NUMBER_FORMATS
from .errors import InvalidFormatOptionsError


@dataclass(frozen=True)
class FormatOptions:
    """How a byte amount is rendered.

    ``prefix_text`` of None means "use the mode default": empty for numeric
    formats, ``0x`` for hexadecimal ones. ``upper_case`` wins over
    ``title_case`` when both are set.
    """

    decimals: int = 2
    round_down: bool = False
    bytes_text: bool = False
    upper_case: bool = False
    title_case: bool = False
    long: bool = False
    no_space: bool = False
    extra_byte_digits: bool = False
    format_string: str = "N"
    prefix_text: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise InvalidFormatOptionsError(f"decimals must be an integer, got {self.decimals!r}")
        if self.decimals < 0:
            raise InvalidFormatOptionsError(f"decimals must be >= 0, got {self.decimals}")
        if self.format_string not in NUMBER_FORMATS:
            valid = ", ".join(sorted(NUMBER_FORMATS))
            raise InvalidFormatOptionsError(
                f"unsupported format string {self.format_string!r} (expected one of {valid})"
            )
        if self.prefix_text is not None and not isinstance(self.prefix_text, str):
            raise InvalidFormatOptionsError(f"prefix_text must be a string, got {self.prefix_text!r}")

    @property
    def hex_mode(self) -> bool:
        return self.format_string in HEX_FORMATS

    @property
    def prefix(self) -> str:
        if self.prefix_text is not None:
            return self.prefix_text
        return HEX_PREFIX if self.hex_mode else ""

    def decimals_for(self, divisor: int) -> int:
        """Decimal places used for a value shown in the tier with ``divisor``."""
        if self.hex_mode:
            return 0
        if divisor == 1 and not self.extra_byte_digits:
            return 0
        return self.decimals

    def merged(self, **overrides: Any) -> "FormatOptions":
        """Copy with every non-None override applied."""
        names = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - names)
        if unknown:
            raise InvalidFormatOptionsError(f"unknown format option(s): {', '.join(unknown)}")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
