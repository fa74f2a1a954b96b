# storefront/domain/money.py
from decimal import Decimal, ROUND_HALF_UP

_HUNDRED = Decimal(100)


def to_minor(amount: float | int | Decimal | None) -> int | None:
    """Major units (dolary) z klienta -> integer minor units (centy)."""
    if amount is None:
        return None
    value = Decimal(str(amount)) * _HUNDRED
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_major(minor: int) -> str:
    return f"{Decimal(minor) / _HUNDRED:.2f}"


def percent_of(amount: int, percent: int) -> int:
    """round half up z amount * percent / 100, na liczbach calkowitych"""
    value = Decimal(amount) * Decimal(percent) / _HUNDRED
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
