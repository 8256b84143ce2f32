"""Amount formatting utilities."""

from decimal import Decimal, ROUND_HALF_EVEN, localcontext


def format_amount(amount: int | float | Decimal) -> str:
    """Format a numeric amount with at most two fraction digits.

    Mirrors the "#.##" decimal pattern used by PayMe clients:
    - 3.0 -> "3"
    - 3.1 -> "3.1"
    - 3.14159 -> "3.14"
    - 2.675 -> "2.67" (the stored double is 2.67499...)
    - 1234.5 -> "1234.5" (no grouping separator)

    Rounding is half-even on the exact value of the number. Floats that
    already have at most two decimals in their shortest repr keep those
    digits, so 1e30 prints as a one followed by thirty zeros.

    Args:
        amount: Numeric amount

    Returns:
        Formatted amount string

    Raises:
        ValueError: If amount is not a finite number
    """
    if isinstance(amount, float):
        value = Decimal(repr(amount))
        if value.is_finite() and value.as_tuple().exponent < -2:
            value = Decimal(amount)
    else:
        value = Decimal(amount)

    if not value.is_finite():
        raise ValueError(f"Cannot format non-finite amount '{amount}'")

    # Fixed-point formatting ignores the context precision, so huge values work
    with localcontext() as ctx:
        ctx.rounding = ROUND_HALF_EVEN
        text = format(value, ".2f")

    # Trim trailing zeros, then a dangling decimal point
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    return text
