"""
Fixed-precision decimal helpers.

Amounts and quantities are stored as decimal strings and handled as
Decimal in Python. Floats only appear at the JSON boundary.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from ranch_shared.config.constants import Limits

ZERO = Decimal("0")


def scale_exponent(scale: int) -> Decimal:
    return Decimal(1).scaleb(-scale)


def to_decimal(value: Decimal | int | float | str | None, scale: int | None = None) -> Decimal | None:
    """
    Convert a value to Decimal, optionally quantized to `scale` places.

    Floats go through str() so 0.1 becomes Decimal("0.1"), not its binary
    expansion.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("Boolean is not a valid decimal value")
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            result = Decimal(str(value))
        else:
            result = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid decimal value: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Invalid decimal value: {value!r}")

    if scale is not None:
        result = result.quantize(scale_exponent(scale), rounding=ROUND_HALF_UP)
    return result


def money(value: Decimal | int | float | str | None) -> Decimal:
    """Quantize to cents. None counts as zero."""
    if value is None:
        return ZERO.quantize(scale_exponent(Limits.MONEY_SCALE))
    return to_decimal(value, Limits.MONEY_SCALE)


def to_json_number(value: Decimal | None) -> float | None:
    """Render a Decimal as a JSON number at the API boundary."""
    if value is None:
        return None
    return float(value)
