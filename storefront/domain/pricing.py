# storefront/domain/pricing.py
from dataclasses import dataclass

from storefront.domain.money import percent_of
from storefront.utils.settings import (
    TAX_RATE_PERCENT,
    FREE_SHIPPING_THRESHOLD,
    FLAT_SHIPPING_FEE,
)

PERCENTAGE = "percentage"
FIXED = "fixed"


@dataclass(frozen=True)
class OrderTotals:
    subtotal: int
    tax: int
    shipping: int
    discount: int

    @property
    def total(self) -> int:
        return self.subtotal + self.tax + self.shipping - self.discount


def compute_discount(subtotal: int, discount_type: str, discount_value: int) -> int:
    if discount_type == PERCENTAGE:
        discount = percent_of(subtotal, discount_value)
    elif discount_type == FIXED:
        discount = discount_value
    else:
        raise ValueError(f"Unknown discount type: {discount_type}")

    # rabat nie moze przekroczyc subtotal
    return max(0, min(discount, subtotal))


def compute_tax(subtotal: int, rate_percent: int = TAX_RATE_PERCENT) -> int:
    return percent_of(subtotal, rate_percent)


def compute_shipping(
    subtotal: int,
    threshold: int = FREE_SHIPPING_THRESHOLD,
    fee: int = FLAT_SHIPPING_FEE,
) -> int:
    return 0 if subtotal > threshold else fee


def compute_totals(subtotal: int, discount: int = 0) -> OrderTotals:
    return OrderTotals(
        subtotal=subtotal,
        tax=compute_tax(subtotal),
        shipping=compute_shipping(subtotal),
        discount=discount,
    )
