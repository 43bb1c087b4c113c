"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout. Prices are in
rupees with paise precision.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Amount = Union[str, int, float, Decimal]

MONEY_PRECISION = Decimal("0.01")

CURRENCY_SYMBOL = "₹"


def to_decimal(value: Union[Amount, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Go through str so 212.4 stays 212.4 and not 212.400000000000005...
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def parse_amount(value: object) -> Decimal:
    """
    Strictly parse an amount read from untrusted storage.

    Unlike to_decimal(), invalid input is an error rather than zero.

    Raises:
        ValueError: If value is not a finite number or numeric string
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValueError(f"not a numeric amount: {value!r}")
    try:
        result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"not a numeric amount: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"not a finite amount: {value!r}")
    return result


def round_money(value: Amount) -> Decimal:
    """
    Round monetary value to paise, half-up.

    Args:
        value: Value to round

    Returns:
        Rounded Decimal value
    """
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_money(value: Amount) -> str:
    """Format an amount for display, e.g. ``₹1,234.50``."""
    return f"{CURRENCY_SYMBOL}{round_money(value):,.2f}"


def to_float(value: Amount) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def multiply(value: Amount, factor: Amount) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)
