#!/usr/bin/env python3
"""Render byte amounts as human-readable, unit-scaled text."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Integral, Real
from typing import Iterable, List, Optional, Union

from ..core.options import FormatOptions
from ..utils.units import UnitDescriptor, check_amount, scale

Amounts = Union[Real, Iterable[Real]]


def unit_label(unit: UnitDescriptor, options: FormatOptions) -> str:
    """Display label for a tier: "kb", "Kilobytes", "B", "" ..."""
    if options.long:
        label = unit.word + "bytes"
    elif unit.is_bytes:
        label = "b" if options.bytes_text else ""
    else:
        label = unit.word[0] + "b"
    if options.upper_case:
        return label.upper()
    if options.title_case:
        return label[:1].upper() + label[1:]
    return label


def _number(amount: Real, divisor: int, decimals: int, options: FormatOptions) -> str:
    value = Decimal(int(amount)) if isinstance(amount, Integral) else Decimal(float(amount))
    with localcontext() as ctx:
        ctx.prec = 48 + decimals
        value = value / divisor
        if options.hex_mode:
            return format(int(value), options.format_string)
        value = value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
        if options.format_string == "N":
            return format(value, ",f")
        return format(value, "f")


def format_one(amount: Real, options: FormatOptions) -> str:
    unit, _ = scale(amount, options.round_down)
    number = _number(amount, unit.divisor, options.decimals_for(unit.divisor), options)
    label = unit_label(unit, options)
    sep = "" if options.no_space or not label else " "
    return f"{options.prefix}{number}{sep}{label}"


def format_size(amounts: Amounts, options: Optional[FormatOptions] = None,
                **overrides) -> Union[str, List[str]]:
    """Format one or more byte amounts.

    A single number, or a sequence holding exactly one, gives back a plain
    string; any other sequence gives back a list of strings in the same
    order. Keyword overrides (``decimals=4, long=True`` ...) are applied on
    top of ``options``. Every amount is range-checked before anything is
    formatted, so a bad amount never yields partial output.
    """
    opts = options or FormatOptions()
    if overrides:
        opts = opts.merged(**overrides)
    if isinstance(amounts, Real):
        return format_one(check_amount(amounts), opts)
    if isinstance(amounts, (str, bytes)):
        check_amount(amounts)
    values = [check_amount(a) for a in amounts]
    out = [format_one(v, opts) for v in values]
    if len(out) == 1:
        return out[0]
    return out
