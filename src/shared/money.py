"""Money helpers: Decimal arithmetic with two-decimal precision.

Monetary values never pass through binary floating point on their way to
storage: floats are converted via their string form before rounding.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

MONEY_PRECISION = Decimal("0.01")

ZERO = Decimal("0.00")


def to_money(value) -> Decimal:
    """Convert a str/int/float/Decimal to a Decimal rounded half-up to cents.

    Raises:
        ValueError: if the value is not a finite number.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Invalid monetary value: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid monetary value: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid monetary value: {value!r}")
    return amount.quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_money(value) -> str:
    """Render a monetary value as a fixed two-decimal string, e.g. ``"12.30"``."""
    return f"{to_money(value):.2f}"
