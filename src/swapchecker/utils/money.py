"""Monetary value coercion."""

from decimal import Decimal, InvalidOperation


def to_decimal(value) -> Decimal:
    """Coerce an int, float, str or Decimal amount to Decimal.

    Floats go through str() so 1.001 becomes Decimal("1.001"), not its
    binary expansion.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise ValueError(f"Not an amount: {value!r}")
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Not an amount: {value!r}")
    else:
        raise ValueError(f"Not an amount: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return result
