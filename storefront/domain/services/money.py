from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import CheckoutInputError


MINOR_UNITS_PER_MAJOR = Decimal("100")

# Stripe caps unit_amount at eight digits.
MAX_UNIT_AMOUNT = 99_999_999


def to_minor_units(price: Decimal | int | float | str) -> int:
    """Convert a major-unit price (dollars) into integer minor units (cents).

    Rounds half up: 0.005 becomes 1 and 2.675 becomes 268.
    """
    try:
        value = Decimal(str(price))
    except (InvalidOperation, ValueError) as exc:
        raise CheckoutInputError("price must be a number.") from exc

    if not value.is_finite():
        raise CheckoutInputError("price must be a finite number.")
    if value < 0:
        raise CheckoutInputError("price must be greater than or equal to 0.")

    try:
        cents = (value * MINOR_UNITS_PER_MAJOR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise CheckoutInputError("price is too large.") from exc
    if cents > MAX_UNIT_AMOUNT:
        raise CheckoutInputError("price is too large.")
    return int(cents)
