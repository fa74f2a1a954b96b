import pytest

from storefront.domain.money import to_minor, format_major, percent_of
from storefront.domain.pricing import compute_discount, compute_shipping, compute_tax, compute_totals


@pytest.mark.parametrize(
    "major, minor",
    [(19.99, 1999), (100, 10000), (0.1, 10), (12.345, 1235), (None, None)],
)
def test_to_minor(major, minor):
    assert to_minor(major) == minor


def test_format_major():
    assert format_major(5000) == "50.00"
    assert format_major(1999) == "19.99"


def test_percent_of_rounds_half_up():
    assert percent_of(5, 10) == 1  # 0.5 -> 1
    assert percent_of(14, 10) == 1


def test_percentage_discount_save10():
    assert compute_discount(10000, "percentage", 10) == 1000


def test_fixed_discount_is_minor_units_and_capped_at_subtotal():
    assert compute_discount(10000, "fixed", 1500) == 1500
    assert compute_discount(1000, "fixed", 1500) == 1000


def test_unknown_discount_type():
    with pytest.raises(ValueError):
        compute_discount(1000, "bogo", 1)


def test_tax_and_shipping():
    assert compute_tax(10000) == 1000
    assert compute_shipping(5000) == 500
    assert compute_shipping(5001) == 0


@pytest.mark.parametrize("subtotal, discount", [(0, 0), (4999, 100), (10000, 1000), (123457, 12346)])
def test_total_invariant(subtotal, discount):
    totals = compute_totals(subtotal, discount)
    assert totals.total == totals.subtotal + totals.tax + totals.shipping - totals.discount
