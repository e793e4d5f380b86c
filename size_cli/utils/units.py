"""Unit selection for byte amounts (base 1024)."""
import math
from numbers import Real
from typing import NamedTuple, Tuple

from ..core.constants import MAX_AMOUNT, PB, UNIT_TIERS
from ..core.errors import AmountOverflowError


class UnitDescriptor(NamedTuple):
    divisor: int
    label: str
    word: str

    @property
    def is_bytes(self) -> bool:
        return self.divisor == 1


TIERS = [UnitDescriptor(*t) for t in UNIT_TIERS]
EXA = TIERS[-1]


def check_amount(amount):
    """Return ``amount`` if it is a representable byte amount, else raise."""
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise AmountOverflowError(amount, "amount is not a number")
    if isinstance(amount, float) and math.isnan(amount):
        raise AmountOverflowError(amount, "amount is not a number")
    if amount < 0:
        raise AmountOverflowError(amount, "amount must not be negative")
    if amount > MAX_AMOUNT:
        raise AmountOverflowError(amount)
    return amount


def scale(amount, round_down: bool = False) -> Tuple[UnitDescriptor, Real]:
    """Pick the unit tier for ``amount``.

    The tier is the largest one whose divisor does not exceed the tested
    amount; anything at or above a petabyte goes to the exa tier. With
    ``round_down`` one byte is taken off before testing, so amounts sitting
    exactly on a boundary (1024, 1048576, ...) stay in the lower tier.

    Returns the tier and the amount that was tested against the thresholds.
    """
    check_amount(amount)
    tested = amount - 1 if round_down else amount
    if tested >= PB:
        return EXA, tested
    unit = TIERS[0]
    for tier in TIERS[1:-1]:
        if tested < tier.divisor:
            break
        unit = tier
    return unit, tested
