"""
Commission calculation service
Computes the fixed Pago Móvil P2P commission and formats amounts as bolívares
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Union

from utils.validators import sanitize

Numeric = Union[int, float, str, Decimal]

# Fixed P2P commission rate (0.30%)
COMMISSION_RATE: Decimal = Decimal("0.003")

CENTS = Decimal("0.01")
CURRENCY_SUFFIX = " Bs."
THOUSANDS_SEP = "."
DECIMAL_SEP = ","

def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to Decimal (floats go through str)"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)

def _precision_for(value: Decimal) -> int:
    # Wide enough to multiply and quantize without losing digits
    return max(28, len(value.as_tuple().digits) + 8, value.adjusted() + 8)

def round_cents(value: Numeric) -> Decimal:
    """Round to 2 decimal places, half up"""
    value = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _precision_for(value)
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)

def parse_amount(text: str) -> Decimal:
    """
    Parse amount text into a non-negative Decimal

    Args:
        text: Amount text, sanitized or raw

    Returns:
        Parsed amount, Decimal("0") when the text holds no number
    """
    cleaned = sanitize(text)
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
    return amount

def commission(amount: Numeric) -> Decimal:
    """
    Calculate the commission for an amount

    Args:
        amount: Transfer amount

    Returns:
        Commission amount rounded to 2 decimal places
    """
    amount = to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = _precision_for(amount)
        return round_cents(amount * COMMISSION_RATE)

def total(amount: Numeric) -> Decimal:
    """Amount plus its commission"""
    amount = to_decimal(amount)
    fee = commission(amount)
    with localcontext() as ctx:
        ctx.prec = _precision_for(amount)
        return amount + fee

def _group_thousands(digits: str) -> str:
    # Grouped on the digit string, no int conversion
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return THOUSANDS_SEP.join(groups)

def format_currency(amount: Numeric) -> str:
    """
    Format an amount as Venezuelan currency

    Integer digits are grouped with dots, cents follow a comma and are
    omitted when zero: 27000 -> "27.000 Bs.", 1234.5 -> "1.234,5 Bs.".

    Args:
        amount: Amount to format

    Returns:
        Formatted string with the " Bs." suffix
    """
    rounded = round_cents(amount)
    if rounded.is_zero():
        return "0" + CURRENCY_SUFFIX

    sign, digits, _ = rounded.as_tuple()
    cents_digits = "".join(str(d) for d in digits).rjust(3, "0")
    integer_digits = cents_digits[:-2].lstrip("0") or "0"
    fraction = cents_digits[-2:].rstrip("0")

    text = _group_thousands(integer_digits)
    if fraction:
        text += DECIMAL_SEP + fraction
    if sign:
        text = "-" + text
    return text + CURRENCY_SUFFIX
